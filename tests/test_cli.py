"""Tests for the hamlbars command line."""

from hamlbars.cli import logical_path, main


def test_logical_path(tmp_path):
    path = tmp_path / "posts" / "_item.html"
    assert logical_path(str(path), str(tmp_path)) == "posts/_item"
    assert logical_path(str(path), None) is None


def test_main_writes_output_file(tmp_path):
    views = tmp_path / "views"
    views.mkdir()
    (views / "_item.html").write_text("<li>X</li>\n", encoding="utf-8")
    (views / "index.html").write_text('<p class="a">Hi</p>\n', encoding="utf-8")
    out = tmp_path / "templates.js"

    code = main([
        str(views / "_item.html"),
        str(views / "index.html"),
        "--root", str(tmp_path),
        "--profile", "ember",
        "-o", str(out),
    ])

    assert code == 0
    assert out.read_text(encoding="utf-8") == (
        "Ember.Handlebars.registerPartial('views.item', '<li>X</li>');\n"
        'Ember.TEMPLATES["views/index"] = Ember.Handlebars.compile("<p class=\\"a\\">Hi</p>");\n'
    )


def test_main_writes_stdout(tmp_path, capsys):
    path = tmp_path / "page.html"
    path.write_text("ok", encoding="utf-8")

    assert main([str(path), "--templates-root", "app", "--closures"]) == 0

    assert capsys.readouterr().out == (
        '(function() {\nHandlebars.templates["app/page_html"] = Handlebars.compile("ok");\n}).call(this);\n'
    )

from __future__ import annotations

from typing import Any, Callable, Mapping

from jinja2 import pass_eval_context
from jinja2.nodes import EvalContext
from markupsafe import Markup

ESCAPED = ("{{", "}}")
UNESCAPED = ("{{{", "}}}")


def _make(expression: str, options: Mapping[str, Any] | None) -> str:
    if options:
        return expression + " " + " ".join(f'{key}="{value}"' for key, value in options.items())
    return expression


def express(
    demarcation: tuple[str, str],
    expression: str,
    options: Mapping[str, Any] | None = None,
    content: Callable[[], str] | None = None,
) -> str:
    """Build a Handlebars expression, or a block helper when 'content' is given.

    Attributes only appear in the opening tag; the closing tag repeats the
    first word of the expression.
    """
    open_, close = demarcation
    if content is not None:
        body = str(content()).strip()
        words = expression.split()
        closing = words[0] if words else ""
        return f"{open_}#{_make(expression, options)}{close}{body}{open_}/{closing}{close}"
    return f"{open_}{_make(expression, options)}{close}"


def handlebars(expression: str, options: Mapping[str, Any] | None = None,
               content: Callable[[], str] | None = None) -> str:
    """{{expression}}, or {{#expression}}...{{/expression}} with content."""
    return express(ESCAPED, expression, options, content)


def handlebars_unescaped(expression: str, options: Mapping[str, Any] | None = None,
                         content: Callable[[], str] | None = None) -> str:
    """Triple-stash variant: Handlebars won't escape the output."""
    return express(UNESCAPED, expression, options, content)


hb = handlebars
hb_ = handlebars_unescaped


def _bind(helper: Callable[..., str]) -> Callable[..., str]:
    """Expose a helper to templates.

    Keyword arguments become attributes and '{% call %}' supplies the block
    content. Output is marked safe when the template autoescapes.
    """
    @pass_eval_context
    def jinja_helper(eval_ctx: EvalContext, expression: str, options: Mapping[str, Any] | None = None,
                     caller: Callable[[], str] | None = None, **attrs: Any) -> str:
        merged = {**(options or {}), **attrs}
        output = helper(expression, merged, caller)
        if eval_ctx.autoescape:
            return Markup(output)
        return output

    jinja_helper.__name__ = helper.__name__
    jinja_helper.__doc__ = helper.__doc__
    return jinja_helper


JINJA_HELPERS: dict[str, Callable[..., str]] = {
    "handlebars": _bind(handlebars),
    "hb": _bind(handlebars),
    "handlebars_unescaped": _bind(handlebars_unescaped),
    "hb_": _bind(handlebars_unescaped),
}

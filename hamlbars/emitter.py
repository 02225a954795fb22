from __future__ import annotations

import logging
import re
from types import MappingProxyType

from .config import CompilerConfig, get_config
from .types import TemplateDescriptor

"""Turn rendered HTML into JavaScript that registers it as a client-side template.

Templates whose filename starts with '_' are partials: they are registered
raw through the partial method under a dot-joined name. Everything else is
compiled into the destination object under a slash-joined name.
"""

logger = logging.getLogger(__name__)

JS_ESCAPE_MAP = MappingProxyType({
    "\r\n": "\\n",
    "\n": "\\n",
    "\r": "\\n",
    '"': '\\"',
    "'": "\\'",
})

# CRLF comes first so it wins over a lone CR at the same position
_JS_ESCAPE_RE = re.compile(r"(\r\n|[\n\r\"'])")
_UNSAFE_NAME_RE = re.compile(r"[^a-z0-9/]")


def escape_javascript(html: str) -> str:
    """Strip surrounding whitespace and escape 'html' for a JS string literal."""
    return _JS_ESCAPE_RE.sub(lambda m: JS_ESCAPE_MAP[m.group(1)], html.strip())


def path_translator(path: str) -> str:
    """Change an asset path into a string safe to use as a JavaScript property."""
    return _UNSAFE_NAME_RE.sub("_", path.lower())


def with_templates_root(path: str, templates_root: str = "") -> str:
    return f"{templates_root}/{path}" if templates_root else path


def remove_underscore_from_partial_path(path: str) -> str:
    """Drop the single leading underscore of the final path segment."""
    head, sep, last = path.rpartition("/")
    if last.startswith("_") and len(last) > 1:
        return head + sep + last[1:]
    return path


def partial_path_translator(path: str) -> str:
    """Like path_translator, for partials: no leading underscore, dot-joined."""
    return path_translator(remove_underscore_from_partial_path(path)).replace("/", ".")


def template_name(descriptor: TemplateDescriptor, config: CompilerConfig | None = None) -> str:
    """Registered name of the template described by 'descriptor'."""
    config = config or get_config()
    path = with_templates_root(descriptor.identity, config.templates_root)
    if descriptor.is_partial:
        return partial_path_translator(path)
    return path_translator(path)


def emit(descriptor: TemplateDescriptor, config: CompilerConfig | None = None) -> str:
    """Return the JavaScript statement registering the descriptor's HTML."""
    config = config or get_config()
    name = template_name(descriptor, config)
    html = escape_javascript(descriptor.rendered_html)
    if descriptor.is_partial:
        logger.debug("Registering partial %r from %s", name, descriptor.identity)
        statement = f"{config.template_partial_method}('{name}', '{html}');\n"
    else:
        logger.debug("Registering template %r from %s", name, descriptor.identity)
        statement = f"{config.template_destination}[\"{name}\"] = {config.template_compiler}(\"{html}\");\n"
    if config.closures:
        return f"(function() {{\n{statement}}}).call(this);\n"
    return statement

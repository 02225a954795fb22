from __future__ import annotations

from typing import Sequence

from jinja2 import BaseLoader, Environment, StrictUndefined

from .config import CompilerConfig, get_config
from .helpers import JINJA_HELPERS

"""Jinja2 environment used to render hamlbars sources.

Haml-style indentation syntax comes from the Hamlish extension, which
preprocesses any template whose name ends in one of the configured
extensions. The Handlebars helpers are registered as globals.
"""

HAMLISH_EXTENSION = "hamlish_jinja.HamlishExtension"


def create_environment(
    config: CompilerConfig | None = None,
    extensions: Sequence[str] | None = None,
    loader: BaseLoader | None = None,
) -> Environment:
    """Create a Jinja2 environment configured for hamlbars templates."""
    config = config or get_config()
    env = Environment(
        undefined=StrictUndefined,
        autoescape=False,
        loader=loader,
        extensions=list(extensions) if extensions is not None else [HAMLISH_EXTENSION],
    )
    env.hamlish_mode = "compact"
    env.hamlish_file_extensions = tuple(config.file_extensions)
    env.globals.update(JINJA_HELPERS)
    return env

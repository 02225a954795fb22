from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import Environment, Template

from .config import CompilerConfig, get_config
from .emitter import emit
from .jinja import create_environment
from .types import TemplateDescriptor, logical_path_of

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/javascript"


@dataclass
class HamlbarsTemplate:
    """A hamlbars source file compiled once and evaluated to JavaScript.

    Rendering is delegated to Jinja2; errors raised while compiling or
    rendering the source propagate to the caller untouched.
    """
    source: str
    filename: str
    line: int = 1
    environment: Environment | None = None
    config: CompilerConfig | None = None
    _template: Template = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.config is None:
            self.config = get_config()
        if self.environment is None:
            self.environment = create_environment(self.config)
        self._template = self._prepare()

    def _prepare(self) -> Template:
        # The name drives the Haml preprocessor, the filename shows up in tracebacks.
        # Leading newlines shift Jinja line numbers to the source offset.
        env = self.environment
        source = "\n" * max(self.line - 1, 0) + self.source
        code = env.compile(source, name=self.basename, filename=self.filename)
        return env.template_class.from_code(env, code, env.make_globals(None))

    @property
    def basename(self) -> str:
        return os.path.basename(self.filename)

    def render(self, scope: Any = None, **locals: Any) -> str:
        """Render the source to an HTML string."""
        if scope is not None:
            locals.setdefault("scope", scope)
        return self._template.render(**locals)

    def evaluate(self, scope: Any = None, **locals: Any) -> str:
        """Render the source and wrap it in the JavaScript that registers it."""
        descriptor = TemplateDescriptor(
            basename=self.basename,
            rendered_html=self.render(scope, **locals),
            logical_path=logical_path_of(scope),
        )
        return emit(descriptor, self.config)


@dataclass(frozen=True)
class Scope:
    """Minimal host scope carrying a logical path."""
    logical_path: str


def compile_file(
    path: str | Path,
    logical_path: str | None = None,
    config: CompilerConfig | None = None,
    environment: Environment | None = None,
    **locals: Any,
) -> str:
    """Read a UTF-8 source file and return its JavaScript registration."""
    with open(path, "r", encoding="utf-8") as f:
        source = f.read()
    logger.info("Compiling %s", path)
    template = HamlbarsTemplate(source=source, filename=str(path), config=config, environment=environment)
    scope = Scope(logical_path) if logical_path is not None else None
    return template.evaluate(scope, **locals)

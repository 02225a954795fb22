from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HostScope(Protocol):
    """Host context that knows the logical (asset pipeline) path of a template.

    The capability is optional: scopes without a 'logical_path' attribute are
    accepted everywhere and the template basename is used instead.
    """
    logical_path: str


def logical_path_of(scope: Any) -> str | None:
    """Return the scope's logical path, or None when it does not expose one."""
    if not isinstance(scope, HostScope):
        return None
    path = scope.logical_path
    if callable(path):
        path = path()
    return path


@dataclass(frozen=True)
class TemplateDescriptor:
    """A rendered template and the identity it will be registered under.

    - logical_path: slash-separated virtual path supplied by the host, if any
    - basename: filename component of the source file
    - rendered_html: HTML produced by the renderer, not yet escaped
    """
    basename: str
    rendered_html: str
    logical_path: str | None = None

    @property
    def identity(self) -> str:
        return self.logical_path if self.logical_path is not None else self.basename

    @property
    def is_partial(self) -> bool:
        return self.basename.startswith("_")

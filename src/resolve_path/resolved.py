"""Copy-on-write path results.

A resolution that changes nothing hands back the caller's own input
(borrowed). One that builds a new path hands back that new path (owned).
Both variants behave like a read-only path. They compare equal to other
results and to Path objects, and hash like the Path they hold; plain
strings never compare equal.
"""

import os
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Any

from resolve_path.utils.paths import PathInput, as_path, as_text


@dataclass(frozen=True, eq=False)
class ResolvedPath:
    """An absolute path produced by resolution.

    Attributes:
        path: The absolute path.
        source: The value that was passed in for resolution.
        is_owned: True if ``path`` was newly built, False if it aliases ``source``.
    """

    path: Path
    source: Any
    is_owned: bool

    @classmethod
    def borrowed(cls, source: PathInput) -> "ResolvedPath":
        """Wrap an input that needed no change.

        A Path input is reused as is; the result's ``path`` is the same object.
        """
        if isinstance(source, ResolvedPath):
            return cls(path=source.path, source=source, is_owned=False)
        return cls(path=as_path(source), source=source, is_owned=False)

    @classmethod
    def owned(cls, path: Path, source: PathInput) -> "ResolvedPath":
        """Wrap a path built during resolution."""
        return cls(path=path, source=source, is_owned=True)

    @property
    def is_borrowed(self) -> bool:
        return not self.is_owned

    def into_owned(self) -> Path:
        """Return the resolved path as a plain Path."""
        return self.path

    def __fspath__(self) -> str:
        return os.fspath(self.path)

    def __str__(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        kind = "owned" if self.is_owned else "borrowed"
        return f"ResolvedPath({str(self.path)!r}, {kind})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResolvedPath):
            return self.path == other.path
        if isinstance(other, PurePath):
            return self.path == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.path)

    def __truediv__(self, other: PathInput) -> Path:
        return self.path / as_text(other)

    def __getattr__(self, name: str) -> Any:
        # Delegate read-only Path API (name, parent, parts, ...) to the path
        if name in ("path", "source", "is_owned"):
            raise AttributeError(name)
        return getattr(self.path, name)

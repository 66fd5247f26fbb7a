"""Path inspection utilities."""

import os
from pathlib import Path
from typing import Union

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]

TILDE = "~"

# Separators that may follow a leading ~
SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


def as_text(path: PathInput) -> str:
    """Return the filesystem text of a path-like value.

    Bytes are decoded with the filesystem encoding using surrogateescape,
    so undecodable input passes through unchanged.

    Args:
        path: A str, bytes, or os.PathLike value.

    Returns:
        The path as a str.
    """
    return os.fsdecode(os.fspath(path))


def as_path(path: PathInput) -> Path:
    """Return ``path`` as a Path, reusing it when it already is one."""
    if isinstance(path, Path):
        return path
    return Path(as_text(path))


def is_tilde_path(text: str) -> bool:
    """Check whether a path refers to the current user's home directory.

    Only ``~`` on its own or ``~`` followed by a separator counts.
    ``~user/x`` and ``a~b`` are ordinary relative paths.
    """
    if not text.startswith(TILDE):
        return False
    rest = text[len(TILDE):]
    return not rest or rest.startswith(SEPARATORS)


def tilde_remainder(text: str) -> str:
    """Return what follows the leading ``~``, without leading separators.

    Args:
        text: A path for which is_tilde_path() is true.

    Returns:
        The remainder, e.g. ".config" for "~/////.config" and "" for "~/".
    """
    rest = text[len(TILDE):]
    return rest.lstrip("".join(SEPARATORS))

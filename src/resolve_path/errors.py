"""Exceptions raised while resolving paths."""


class ResolveError(Exception):
    """Raised when a path cannot be made absolute."""

    pass


class HomeDirectoryUnavailable(ResolveError):
    """Raised when a ``~`` path needs expanding but no home directory is known."""

    pass


class CurrentDirectoryUnavailable(ResolveError):
    """Raised when a relative path needs anchoring but the CWD cannot be read."""

    pass


class BaseDirectoryUnavailable(ResolveError):
    """Raised when a base path names a file that has no parent directory."""

    pass


class ResolutionAborted(RuntimeError):
    """Raised by the ``*_or_abort`` helpers when resolution fails.

    Not a ``ResolveError`` subclass, so handlers for recoverable failures
    do not catch it.
    """

    pass

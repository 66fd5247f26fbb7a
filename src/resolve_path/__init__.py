"""Resolve relative (``./``) and tilde (``~/``) paths to absolute paths.

Paths are anchored, not canonicalized: ``..`` segments are kept and
symbolic links are not followed.
"""

import logging

from resolve_path.environment import Environment, StaticEnvironment, SystemEnvironment
from resolve_path.errors import (
    BaseDirectoryUnavailable,
    CurrentDirectoryUnavailable,
    HomeDirectoryUnavailable,
    ResolutionAborted,
    ResolveError,
)
from resolve_path.resolved import ResolvedPath
from resolve_path.resolver import (
    PathResolver,
    resolve,
    resolve_in,
    resolve_in_or_abort,
    resolve_or_abort,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BaseDirectoryUnavailable",
    "CurrentDirectoryUnavailable",
    "Environment",
    "HomeDirectoryUnavailable",
    "PathResolver",
    "ResolutionAborted",
    "ResolveError",
    "ResolvedPath",
    "StaticEnvironment",
    "SystemEnvironment",
    "resolve",
    "resolve_in",
    "resolve_in_or_abort",
    "resolve_or_abort",
]

"""Resolution of relative and tilde paths to absolute paths.

Resolution anchors paths; it does not canonicalize them. ``..`` segments
are kept and symbolic links are never followed.

Assuming a home directory of /home/user and a CWD of /home/user/Documents:

    resolve("~/.vimrc")                      -> /home/user/.vimrc
    resolve("./notes.txt")                   -> /home/user/Documents/notes.txt
    resolve_in("~/.vimrc", "~/.config/alacritty/")
                                             -> /home/user/.vimrc
    resolve_in("./alacritty.yml", "~/.config/alacritty/")
                                             -> /home/user/.config/alacritty/alacritty.yml
    resolve("/already/absolute")             -> /already/absolute (borrowed)
"""

import logging
import stat
from pathlib import Path
from typing import Callable, Optional

from resolve_path.config.settings import Settings, get_settings
from resolve_path.environment import Environment, SystemEnvironment
from resolve_path.errors import BaseDirectoryUnavailable, ResolutionAborted, ResolveError
from resolve_path.resolved import ResolvedPath
from resolve_path.utils.paths import PathInput, as_path, as_text, is_tilde_path, tilde_remainder


class PathResolver:
    """Resolves paths against an environment.

    The resolver keeps no state between calls; the home and working
    directories are looked up each time they are needed.
    """

    def __init__(
        self,
        environment: Optional[Environment] = None,
        settings: Optional[Settings] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the resolver.

        Args:
            environment: Provider of the home and working directories.
                Defaults to the running process.
            settings: Settings to use. Defaults to the global settings.
            logger: Optional logger for debug output.
        """
        self.settings = settings or get_settings()
        self.environment = environment or SystemEnvironment()
        self.logger = logger or logging.getLogger(__name__)

    def resolve(self, path: PathInput) -> ResolvedPath:
        """Resolve a path in the current working directory.

        Args:
            path: A relative, tilde, or absolute path.

        Returns:
            The absolute path. Borrowed if ``path`` was already absolute.

        Raises:
            HomeDirectoryUnavailable: If ``path`` starts with ~ and the home
                directory cannot be determined.
            CurrentDirectoryUnavailable: If ``path`` is relative and the
                working directory cannot be read.
        """
        return self._resolve(path, self.environment.current_dir)

    def resolve_in(
        self,
        path: PathInput,
        base: PathInput,
        file_base: Optional[bool] = None,
    ) -> ResolvedPath:
        """Resolve a path against a base directory.

        Tilde and absolute paths resolve exactly as in resolve(). A relative
        path is joined to ``base``, which is itself resolved first and so may
        be relative, tilde, or absolute.

        Args:
            path: The path to resolve.
            base: The directory to anchor relative paths to.
            file_base: If True and ``base`` names an existing file, anchor to
                the file's parent directory. Defaults to settings.file_base.

        Returns:
            The absolute path. Borrowed if ``path`` was already absolute.

        Raises:
            ResolveError: Whatever resolving ``path`` or ``base`` raised.
        """
        if file_base is None:
            file_base = self.settings.file_base

        def anchor() -> Path:
            resolved_base = self.resolve(base).path
            if file_base:
                return self._directory_of(resolved_base)
            return resolved_base

        return self._resolve(path, anchor)

    def resolve_or_abort(self, path: PathInput) -> ResolvedPath:
        """Resolve a path, raising ResolutionAborted on failure."""
        try:
            return self.resolve(path)
        except ResolveError as e:
            raise ResolutionAborted(
                f"should resolve path in current directory: {e}"
            ) from e

    def resolve_in_or_abort(
        self,
        path: PathInput,
        base: PathInput,
        file_base: Optional[bool] = None,
    ) -> ResolvedPath:
        """Resolve a path against a base, raising ResolutionAborted on failure."""
        try:
            return self.resolve_in(path, base, file_base=file_base)
        except ResolveError as e:
            raise ResolutionAborted(f"should resolve path: {e}") from e

    def _resolve(self, path: PathInput, anchor: Callable[[], Path]) -> ResolvedPath:
        text = as_text(path)

        if is_tilde_path(text):
            home = self.environment.home_dir()
            rest = tilde_remainder(text)
            resolved = home / rest if rest else home
            self.logger.debug(f"Expanded {text!r} to {resolved}")
            return ResolvedPath.owned(resolved, path)

        candidate = path.path if isinstance(path, ResolvedPath) else as_path(path)
        if candidate.is_absolute():
            return ResolvedPath.borrowed(path)

        base = anchor()
        resolved = base / candidate
        self.logger.debug(f"Anchored {text!r} in {base}")
        return ResolvedPath.owned(resolved, path)

    def _directory_of(self, base: Path) -> Path:
        """Return the parent of ``base`` if it is a file, else ``base``."""
        try:
            mode = base.stat().st_mode
        except OSError:
            # Missing or unreadable: use the base as given
            return base

        if not stat.S_ISREG(mode):
            return base

        parent = base.parent
        if parent == base:
            raise BaseDirectoryUnavailable(
                f"base path {base} is a file with no parent directory"
            )
        self.logger.debug(f"Base {base} is a file, using {parent}")
        return parent


def resolve(path: PathInput) -> ResolvedPath:
    """Resolve ``path`` in the process's current working directory."""
    return PathResolver().resolve(path)


def resolve_in(
    path: PathInput, base: PathInput, file_base: Optional[bool] = None
) -> ResolvedPath:
    """Resolve ``path`` against ``base``."""
    return PathResolver().resolve_in(path, base, file_base=file_base)


def resolve_or_abort(path: PathInput) -> ResolvedPath:
    """Like resolve(), but raises ResolutionAborted instead of ResolveError."""
    return PathResolver().resolve_or_abort(path)


def resolve_in_or_abort(
    path: PathInput, base: PathInput, file_base: Optional[bool] = None
) -> ResolvedPath:
    """Like resolve_in(), but raises ResolutionAborted instead of ResolveError."""
    return PathResolver().resolve_in_or_abort(path, base, file_base=file_base)

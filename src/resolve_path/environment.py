"""Environment providers for home and working directory lookups.

The resolver never reads process state directly. It asks an environment
for the home directory and the current working directory on every call,
so tests can swap in fixed values.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from resolve_path.errors import CurrentDirectoryUnavailable, HomeDirectoryUnavailable


class Environment:
    """Source of the home and current working directories."""

    def home_dir(self) -> Path:
        """Return the active user's home directory.

        Raises:
            HomeDirectoryUnavailable: If no home directory can be determined.
        """
        raise NotImplementedError

    def current_dir(self) -> Path:
        """Return the process's current working directory.

        Raises:
            CurrentDirectoryUnavailable: If the directory cannot be read.
        """
        raise NotImplementedError


def _checked_home(home: Optional[Path]) -> Path:
    """Validate a home directory candidate."""
    if home is None or not home.is_absolute():
        raise HomeDirectoryUnavailable(f"home directory not found (got {home!r})")
    return home


class SystemEnvironment(Environment):
    """Environment backed by the running process."""

    def home_dir(self) -> Path:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as e:
            # No HOME and no password database entry for the user
            raise HomeDirectoryUnavailable(f"home directory not found: {e}") from e

        return _checked_home(home)

    def current_dir(self) -> Path:
        try:
            return Path.cwd()
        except OSError as e:
            raise CurrentDirectoryUnavailable(
                f"current directory cannot be read: {e}"
            ) from e


@dataclass(frozen=True)
class StaticEnvironment(Environment):
    """Environment with fixed directories.

    A directory left as None is reported as unavailable.
    """

    home: Optional[Union[str, Path]] = None
    cwd: Optional[Union[str, Path]] = None

    def home_dir(self) -> Path:
        home = Path(self.home) if self.home is not None else None
        return _checked_home(home)

    def current_dir(self) -> Path:
        if self.cwd is None:
            raise CurrentDirectoryUnavailable("current directory not set")
        return Path(self.cwd)

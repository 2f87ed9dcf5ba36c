"""
Unix-style to Windows-style path conversion.
"""

import os
from collections.abc import Callable
from typing import Optional

HOME_ENV_VAR = "USERPROFILE"
WINDOWS_SEPARATOR = "\\"


def read_home_directory() -> Optional[str]:
    """Return the Windows home directory, or None when it is not set."""
    return os.environ.get(HOME_ENV_VAR)


def to_windows_path(
    path: str, home_lookup: Callable[[], Optional[str]] = read_home_directory
) -> str:
    """
    Convert a Unix-style path into the form the Windows shells expect.

    Forward slashes become backslashes and a leading '~' is replaced by the
    home directory when one is known. Nothing is checked on disk.

    Args:
        path: Path as typed on the 'ls' command line
        home_lookup: Callable returning the home directory (or None)

    Returns:
        The converted path
    """
    result = path.replace("/", WINDOWS_SEPARATOR)
    if result.startswith("~"):
        home = home_lookup()
        if home is not None:
            result = result.replace("~", home, 1)
    return result


def quote_path(path: str) -> str:
    """Wrap a path in double quotes when it contains a space."""
    if " " in path:
        return f'"{path}"'
    return path

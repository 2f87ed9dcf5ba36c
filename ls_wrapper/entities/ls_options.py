"""
LsOptions domain entity.
"""

from dataclasses import dataclass
from enum import Enum

DEFAULT_PATH = "."


class ColorMode(Enum):
    """When to colorize output (--color[=WHEN])."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


@dataclass(frozen=True)
class LsOptions:
    """
    Parsed 'ls' command line.

    Built once per invocation by the option parser and only read afterwards.
    Sort flags are not mutually exclusive here; the translation engine decides
    which one wins.
    """

    # Display flags
    long_format: bool = False  # -l
    all: bool = False  # -a, includes . and ..
    almost_all: bool = False  # -A, hidden files without . and ..
    human_readable: bool = False  # -h
    one_per_line: bool = False  # -1
    recursive: bool = False  # -R
    directory: bool = False  # -d
    classify: bool = False  # -F
    show_size: bool = False  # -s

    # Sorting flags
    sort_by_time: bool = False  # -t
    sort_by_size: bool = False  # -S
    reverse: bool = False  # -r
    no_sort: bool = False  # -U

    color: ColorMode = ColorMode.AUTO

    # Mode flags
    explain: bool = False
    teach: bool = False
    native: bool = False
    use_powershell: bool = False
    use_cmd: bool = False
    help: bool = False
    version: bool = False
    rosetta: bool = False
    tree: bool = False

    paths: tuple[str, ...] = (DEFAULT_PATH,)

    @property
    def shows_hidden(self) -> bool:
        """True when either -a or -A was given."""
        return self.all or self.almost_all

    def first_path(self) -> str:
        """Return the first target path; the parser never leaves paths empty."""
        return self.paths[0]

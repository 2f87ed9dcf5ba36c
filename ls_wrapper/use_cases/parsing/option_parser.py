"""
Parser turning an 'ls' argument vector into an LsOptions entity.
"""

from collections.abc import Iterable
from typing import Any, Optional

from ls_wrapper.entities.ls_options import DEFAULT_PATH, ColorMode, LsOptions
from ls_wrapper.exceptions import ArgumentParseError

# Long option name -> LsOptions field
LONG_OPTIONS: dict[str, str] = {
    "all": "all",
    "almost-all": "almost_all",
    "human-readable": "human_readable",
    "recursive": "recursive",
    "directory": "directory",
    "classify": "classify",
    "reverse": "reverse",
    "explain": "explain",
    "teach": "teach",
    "native": "native",
    "powershell": "use_powershell",
    "ps": "use_powershell",
    "cmd": "use_cmd",
    "help": "help",
    "version": "version",
    "rosetta": "rosetta",
    "cheatsheet": "rosetta",
    "tree": "tree",
}

# Short option character -> LsOptions field; every short option is a toggle
SHORT_OPTIONS: dict[str, str] = {
    "l": "long_format",
    "a": "all",
    "A": "almost_all",
    "h": "human_readable",
    "1": "one_per_line",
    "R": "recursive",
    "d": "directory",
    "F": "classify",
    "s": "show_size",
    "t": "sort_by_time",
    "S": "sort_by_size",
    "r": "reverse",
    "U": "no_sort",
    "?": "help",
}

COLOR_VALUES: dict[Optional[str], ColorMode] = {
    "always": ColorMode.ALWAYS,
    "yes": ColorMode.ALWAYS,
    "force": ColorMode.ALWAYS,
    "never": ColorMode.NEVER,
    "no": ColorMode.NEVER,
    "none": ColorMode.NEVER,
    "auto": ColorMode.AUTO,
    "tty": ColorMode.AUTO,
    "if-tty": ColorMode.AUTO,
    None: ColorMode.AUTO,
}


class OptionParser:
    """Parser for the 'ls' flag vocabulary understood by the translator."""

    def parse(self, argv: Iterable[str]) -> LsOptions:
        """
        Parse an argument vector.

        Args:
            argv: Raw arguments, program name first (it is discarded)

        Returns:
            The parsed LsOptions

        Raises:
            ArgumentParseError: On the first unknown option or color value
        """
        fields: dict[str, Any] = {}
        paths: list[str] = []

        tokens = iter(argv)
        next(tokens, None)

        for token in tokens:
            if token == "--":
                paths.extend(tokens)
                break
            if token.startswith("--"):
                self._parse_long_option(token, fields)
            elif token.startswith("-") and len(token) > 1:
                self._parse_short_options(token, fields)
            else:
                paths.append(token)

        if not paths:
            paths.append(DEFAULT_PATH)

        return LsOptions(paths=tuple(paths), **fields)

    def _parse_long_option(self, token: str, fields: dict[str, Any]) -> None:
        name, sep, value = token[2:].partition("=")
        inline_value = value if sep else None

        if name == "color":
            if inline_value not in COLOR_VALUES:
                raise ArgumentParseError(f"Unknown color option: {inline_value}")
            fields["color"] = COLOR_VALUES[inline_value]
            return

        field = LONG_OPTIONS.get(name)
        if field is None:
            raise ArgumentParseError(f"Unknown option: --{name}")
        fields[field] = True

    def _parse_short_options(self, token: str, fields: dict[str, Any]) -> None:
        for char in token[1:]:
            field = SHORT_OPTIONS.get(char)
            if field is None:
                raise ArgumentParseError(f"Unknown option: -{char}")
            fields[field] = True


def parse_args(argv: Iterable[str]) -> LsOptions:
    """Parse an argument vector with the default parser."""
    return OptionParser().parse(argv)

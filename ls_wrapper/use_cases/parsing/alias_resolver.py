"""
Alias detection from the invoked program name (ll, la, l).
"""

import logging
from pathlib import PureWindowsPath
from typing import Optional

ALIASES: dict[str, str] = {
    "ll": "-l",
    "la": "-la",
    "l": "-F",
}

logger = logging.getLogger(__name__)


def alias_flags(program_name: str) -> Optional[str]:
    """
    Return the flags implied by the program name, if it is a known alias.

    The extension is ignored so that 'll.exe' behaves like 'll'.
    """
    # PureWindowsPath splits on both separators
    stem = PureWindowsPath(program_name).stem
    return ALIASES.get(stem)


def resolve_alias(argv: list[str]) -> list[str]:
    """
    Insert alias flags right after the program name.

    Args:
        argv: Raw argument vector, program name first

    Returns:
        A new argument vector; unchanged copy when no alias matches
    """
    if not argv:
        return []
    flags = alias_flags(argv[0])
    if flags is None:
        return list(argv)
    logger.debug(f"Program name {argv[0]!r} is an alias for 'ls {flags}'")
    return [argv[0], flags, *argv[1:]]

"""
Translation engine: 'ls' options to cmd.exe and PowerShell commands.

Each target grammar has its own builder so that its quirks stay local. All
builders are pure; the only environment access happens inside the path
normalizer, which callers may replace.
"""

from collections.abc import Callable
from typing import Optional

from ls_wrapper.entities.ls_options import LsOptions
from ls_wrapper.entities.translation import Translation
from ls_wrapper.use_cases.translation.paths import quote_path, to_windows_path

PathNormalizer = Callable[[str], str]

BASE_DESCRIPTION = "list directory contents"

DESCRIPTION_CLAUSES: tuple[tuple[str, str], ...] = (
    ("all", "show hidden files"),
    ("long_format", "long format"),
    ("recursive", "recursive"),
    ("sort_by_time", "sort by time"),
    ("sort_by_size", "sort by size"),
    ("reverse", "reverse order"),
    ("human_readable", "human-readable sizes"),
)

LONG_FORMAT_STAGE = "Format-Table Mode, LastWriteTime, Length, Name -AutoSize"
NAME_ONLY_STAGE = "Select-Object -ExpandProperty Name"


def _dir_sort_flag(options: LsOptions) -> Optional[str]:
    # ls lists newest/largest first, dir lists oldest/smallest first, so the
    # plain -t and -S cases invert and -r cancels the inversion.
    if options.no_sort:
        return None
    if options.sort_by_time:
        return "/OD" if options.reverse else "/O-D"
    if options.sort_by_size:
        return "/OS" if options.reverse else "/O-S"
    if options.reverse:
        return "/O-N"
    return None


def _sort_stage(options: LsOptions) -> Optional[str]:
    if options.no_sort:
        return None
    if options.sort_by_time:
        key = "LastWriteTime"
    elif options.sort_by_size:
        key = "Length"
    elif options.reverse:
        return "Sort-Object Name -Descending"
    else:
        return None
    if options.reverse:
        return f"Sort-Object {key}"
    return f"Sort-Object {key} -Descending"


def build_dir_command(
    options: LsOptions, normalize: PathNormalizer = to_windows_path
) -> str:
    """
    Build the cmd.exe 'dir' command for the given options.

    Args:
        options: Parsed 'ls' options
        normalize: Path converter applied to every target path

    Returns:
        The command line, e.g. 'dir /A /O-D C:\\work'
    """
    parts = ["dir"]

    if options.shows_hidden:
        parts.append("/A")
    if options.recursive:
        parts.append("/S")
    if options.directory:
        parts.append("/AD")
    # /B is bare output, which cannot be combined with a long listing
    if options.one_per_line and not options.long_format:
        parts.append("/B")

    sort_flag = _dir_sort_flag(options)
    if sort_flag:
        parts.append(sort_flag)

    parts.extend(quote_path(normalize(path)) for path in options.paths)
    return " ".join(parts)


def build_powershell_command(
    options: LsOptions, normalize: PathNormalizer = to_windows_path
) -> str:
    """
    Build the PowerShell Get-ChildItem pipeline for the given options.

    Args:
        options: Parsed 'ls' options
        normalize: Path converter applied to every target path

    Returns:
        The pipeline, e.g. 'Get-ChildItem -Force -Path . | Sort-Object Length -Descending'
    """
    parts = ["Get-ChildItem"]

    if options.shows_hidden:
        parts.append("-Force")
    if options.recursive:
        parts.append("-Recurse")
    if options.directory:
        parts.append("-Directory")

    for path in options.paths:
        parts.append(f"-Path {quote_path(normalize(path))}")

    stages = [" ".join(parts)]

    sort_stage = _sort_stage(options)
    if sort_stage:
        stages.append(sort_stage)

    if options.long_format:
        stages.append(LONG_FORMAT_STAGE)
    elif options.one_per_line:
        stages.append(NAME_ONLY_STAGE)

    return " | ".join(stages)


def build_description(options: LsOptions) -> str:
    """Summarize the options in plain English."""
    clauses = [text for field, text in DESCRIPTION_CLAUSES if getattr(options, field)]
    if not clauses:
        return BASE_DESCRIPTION
    return f"{BASE_DESCRIPTION} ({', '.join(clauses)})"


def translate(
    options: LsOptions, normalize: PathNormalizer = to_windows_path
) -> Translation:
    """
    Translate parsed 'ls' options into both Windows command forms.

    Args:
        options: Parsed 'ls' options
        normalize: Path converter; inject a pure one in tests

    Returns:
        Translation holding the cmd.exe command, the PowerShell command and a description
    """
    return Translation(
        cmd_command=build_dir_command(options, normalize),
        powershell_command=build_powershell_command(options, normalize),
        description=build_description(options),
    )

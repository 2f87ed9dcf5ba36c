"""
Static help, version and cheat sheet output.
"""

from rich import box
from rich.console import Console
from rich.table import Table

from ls_wrapper import __version__

PROGRAM_NAME = "ls-wrapper"

HELP_TEXT = """\
ls-wrapper - A lightweight ls transpiler for Windows

USAGE:
    ls [OPTIONS] [PATH]...

OPTIONS:
    -l              Long listing format
    -a, --all       Show hidden files (including . and ..)
    -A, --almost-all  Show hidden files (excluding . and ..)
    -h, --human-readable  Human-readable file sizes
    -1              One entry per line
    -R, --recursive  List subdirectories recursively
    -d, --directory  List directories themselves, not contents
    -F, --classify  Append indicator (/ for directories)
    -s              Show file size (compatibility flag)

    -t              Sort by modification time
    -S              Sort by file size
    -r, --reverse   Reverse sort order
    -U              Do not sort

    --color[=WHEN]  Colorize output (always, never, auto)

EDUCATIONAL FLAGS:
    --explain       Show Windows translation without executing
    --teach         Execute AND show what command was run
    --native        Output only the Windows command (for scripting)
    --rosetta       Show Unix -> Windows command cheatsheet
    --tree          Tree view of directory structure
    --powershell    Force PowerShell backend
    --cmd           Force cmd.exe backend

ALIASES:
    ll              Same as ls -l
    la              Same as ls -la
    l               Same as ls -F

EXAMPLES:
    ls              List current directory
    ls -la          Long format, show hidden
    ls -lR ./src    Recursive, long format
    ls --explain -la  See how -la translates to Windows

    ls --native -la   Output: Get-ChildItem -Force -Path . | Format-Table ...

ENVIRONMENT:
    LS_WRAPPER_DEFAULT_BACKEND  cmd or powershell (default: cmd)
    LS_WRAPPER_LOG_LEVEL        Logging level on stderr (default: WARNING)
    LS_WRAPPER_CMD              cmd.exe executable
    LS_WRAPPER_POWERSHELL       PowerShell executable
"""

# Rows of (unix, cmd.exe, PowerShell), one tuple per table section
ROSETTA_SECTIONS: tuple[tuple[tuple[str, str, str], ...], ...] = (
    (
        ("ls", "dir /B", "Get-ChildItem"),
        ("ls -l", "dir", "Get-ChildItem | Format-Table"),
        ("ls -la", "dir /A", "Get-ChildItem -Force"),
        ("ls -lt", "dir /O-D", "gci | Sort LastWriteTime -Desc"),
        ("ls -lS", "dir /O-S", "gci | Sort Length -Desc"),
        ("ls -R", "dir /S", "Get-ChildItem -Recurse"),
        ("ls -1", "dir /B", "(gci).Name"),
    ),
    (
        ("cat file", "type file", "Get-Content file"),
        ("head -n 10 file", "(no equivalent)", "Get-Content file -First 10"),
        ("tail -n 10 file", "(no equivalent)", "Get-Content file -Last 10"),
        ("grep pattern file", "findstr pattern file", "Select-String pattern file"),
        ("grep -r pattern .", "findstr /S pattern *", "Get-ChildItem -Recurse | sls pattern"),
    ),
    (
        ("pwd", "cd", "Get-Location  (or pwd)"),
        ("cd dir", "cd dir", "Set-Location dir  (or cd)"),
        ("cd ~", "cd %USERPROFILE%", "cd ~"),
        ("mkdir dir", "mkdir dir", "New-Item -Type Directory dir"),
        ("rm file", "del file", "Remove-Item file"),
        ("rm -rf dir", "rmdir /S /Q dir", "Remove-Item dir -Recurse -Force"),
        ("cp src dst", "copy src dst", "Copy-Item src dst"),
        ("mv src dst", "move src dst", "Move-Item src dst"),
    ),
    (
        ("touch file", "type nul > file", "New-Item file"),
        ("chmod +x file", "(no equivalent)", "(no equivalent)"),
        ("which cmd", "where cmd", "Get-Command cmd"),
        ("whoami", "whoami", "whoami  (or $env:USERNAME)"),
        ("clear", "cls", "Clear-Host  (or cls)"),
        ("history", "doskey /history", "Get-History"),
    ),
    (
        ("tree", "tree", "tree"),
        ('find . -name "*.py"', "dir /S /B *.py", "gci -Recurse -Filter *.py"),
        ("wc -l file", 'find /c /v "" file', "(Get-Content file).Count"),
        ("diff file1 file2", "fc file1 file2", "Compare-Object (gc f1) (gc f2)"),
        ("echo $VAR", "echo %VAR%", "echo $env:VAR"),
        ("export VAR=val", "set VAR=val", '$env:VAR = "val"'),
    ),
)


def print_help(console: Console) -> None:
    console.print(HELP_TEXT, markup=False, end="")


def print_version(console: Console) -> None:
    console.print(f"{PROGRAM_NAME} {__version__}", markup=False)


def build_rosetta_table() -> Table:
    """Build the Unix -> Windows cheat sheet table."""
    table = Table(
        title="UNIX -> WINDOWS CHEAT SHEET",
        box=box.SQUARE,
        show_lines=False,
        header_style="bold",
    )
    table.add_column("Unix", style="green", no_wrap=True)
    table.add_column("cmd.exe", style="cyan", no_wrap=True)
    table.add_column("PowerShell", style="magenta", no_wrap=True)

    for section in ROSETTA_SECTIONS:
        for index, row in enumerate(section):
            table.add_row(*row, end_section=index == len(section) - 1)
    return table


def print_rosetta(console: Console) -> None:
    console.print(build_rosetta_table())
    console.print()
    console.print("Aliases:  ll = ls -l  |  la = ls -la  |  l = ls -F", markup=False)
    console.print()
    console.print(
        "Tip: Use --explain with any ls command to see its Windows translation!",
        markup=False,
    )
    console.print("     Example: ls --explain -laR", markup=False)

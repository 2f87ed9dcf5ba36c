from __future__ import annotations

from typing import Optional, TextIO

from rich.console import Console

from ls_wrapper.entities.ls_options import ColorMode


def create_console(
    color: ColorMode = ColorMode.AUTO,
    stderr: bool = False,
    file: Optional[TextIO] = None,
) -> Console:
    """Build a rich Console honouring --color; long commands are never wrapped."""
    kwargs: dict[str, object] = {"soft_wrap": True, "highlight": False, "emoji": False}
    if color is ColorMode.ALWAYS:
        kwargs["force_terminal"] = True
    elif color is ColorMode.NEVER:
        kwargs["no_color"] = True
    if file is not None:
        kwargs["file"] = file
    else:
        kwargs["stderr"] = stderr
    return Console(**kwargs)  # type: ignore[arg-type]


def write_raw(console: Console, data: bytes) -> None:
    """
    Relay a child process's output unchanged.

    Bytes go straight to the binary buffer under the console's stream so that
    OEM code page output (tree's box drawing, non-ANSI file names) survives.
    Streams without a buffer, such as io.StringIO, get a lossy text decode.
    """
    if not data:
        return
    stream = console.file
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        stream.flush()
        buffer.write(data)
        buffer.flush()
        return
    encoding = getattr(stream, "encoding", None) or "utf-8"
    stream.write(data.decode(encoding, errors="replace"))
    stream.flush()

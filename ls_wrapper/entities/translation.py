"""
Translation and execution result entities.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Backend(Enum):
    """Windows shell that runs a translated command."""

    CMD = "cmd"
    POWERSHELL = "powershell"


@dataclass(frozen=True)
class Translation:
    """The same 'ls' request expressed for both Windows shells."""

    cmd_command: str
    powershell_command: str
    description: str

    def command_for(self, backend: Backend) -> str:
        if backend is Backend.POWERSHELL:
            return self.powershell_command
        return self.cmd_command


@dataclass(frozen=True)
class ShellOutput:
    """Captured output of a finished shell process, undecoded."""

    stdout: bytes
    stderr: bytes
    exit_code: Optional[int]


@dataclass(frozen=True)
class ExecutionResult:
    success: bool
    exit_code: int

    @classmethod
    def from_output(cls, output: ShellOutput) -> "ExecutionResult":
        """Build a result from captured output; a missing exit code becomes -1."""
        exit_code = output.exit_code if output.exit_code is not None else -1
        return cls(success=exit_code == 0, exit_code=exit_code)

    @classmethod
    def ok(cls) -> "ExecutionResult":
        return cls(success=True, exit_code=0)

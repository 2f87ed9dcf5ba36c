"""
Subprocess adapter implementation for running shell commands.
"""

import logging
import subprocess
from typing import Optional

from typing_extensions import override

from ls_wrapper.entities.translation import ShellOutput
from ls_wrapper.exceptions import ExecutionError
from ls_wrapper.ports.shell.shell_runner_port import ShellRunnerPort


class SubprocessShellRunner(ShellRunnerPort):
    """Run commands with subprocess and capture both output streams."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def run(self, command: list[str]) -> ShellOutput:
        if not command:
            raise ExecutionError("No command to run")
        self._logger.info(f"Running: {command}")
        try:
            completed = subprocess.run(command, capture_output=True, shell=False)
        except OSError as e:
            self._logger.error(f"Failed to start {command[0]}: {e}")
            raise ExecutionError(f"failed to start {command[0]}: {e}")

        self._logger.info(f"{command[0]} exited with code {completed.returncode}")
        return ShellOutput(
            stdout=completed.stdout or b"",
            stderr=completed.stderr or b"",
            exit_code=completed.returncode,
        )

"""
Use case for presenting or running a translated 'ls' command.
"""

import logging
from typing import Optional

from rich.console import Console

from ls_wrapper.entities.ls_options import LsOptions
from ls_wrapper.entities.translation import (
    Backend,
    ExecutionResult,
    ShellOutput,
    Translation,
)
from ls_wrapper.exceptions import ExecutionError
from ls_wrapper.ports.shell.shell_runner_port import ShellRunnerPort
from ls_wrapper.ui.console import write_raw


def select_backend(options: LsOptions, default: Backend = Backend.CMD) -> Backend:
    """
    Pick the shell that should run the command.

    Explicit --powershell/--cmd win; otherwise -h and -l go to PowerShell,
    which formats sizes and long listings better than dir.
    """
    if options.use_powershell:
        return Backend.POWERSHELL
    if options.use_cmd:
        return Backend.CMD
    if options.human_readable or options.long_format:
        return Backend.POWERSHELL
    return default


class ExecuteTranslationUseCase:
    """Explain, print, or run a Translation depending on the mode flags."""

    def __init__(
        self,
        shell_runner: ShellRunnerPort,
        out: Console,
        err: Console,
        default_backend: Backend = Backend.CMD,
        cmd_executable: str = "cmd.exe",
        powershell_executable: str = "powershell.exe",
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            shell_runner: Port used to start the Windows shell
            out: Console for standard output
            err: Console for standard error
            default_backend: Backend used when no flag forces one
            cmd_executable: Program that runs cmd.exe commands
            powershell_executable: Program that runs PowerShell commands
            logger: Logger instance to use for logging
        """
        self._shell_runner = shell_runner
        self._out = out
        self._err = err
        self._default_backend = default_backend
        self._cmd_executable = cmd_executable
        self._powershell_executable = powershell_executable
        self._logger = logger or logging.getLogger(__name__)

    def build_command(self, backend: Backend, translation: Translation) -> list[str]:
        """Return the argument vector that runs the translation in the given shell."""
        if backend is Backend.POWERSHELL:
            return [
                self._powershell_executable,
                "-NoProfile",
                "-Command",
                translation.powershell_command,
            ]
        return [self._cmd_executable, "/C", translation.cmd_command]

    def execute(self, options: LsOptions, translation: Translation) -> ExecutionResult:
        """
        Present or run the translation.

        Args:
            options: Parsed options; only the mode and backend flags are read
            translation: Commands produced by the translation engine

        Returns:
            ExecutionResult of the run, or a successful result for explain/native

        Raises:
            ExecutionError: If the shell cannot be started
        """
        backend = select_backend(options, self._default_backend)
        command_str = translation.command_for(backend)
        self._logger.info(f"Selected backend {backend.value}: {command_str}")

        if options.explain:
            self._explain(translation)
            return ExecutionResult.ok()

        if options.native:
            self._out.print(command_str, markup=False)
            return ExecutionResult.ok()

        if options.teach:
            self._err.print(f"Executing: {command_str}", markup=False)
            self._err.print("---", markup=False)

        try:
            output = self._shell_runner.run(self.build_command(backend, translation))
        except ExecutionError:
            raise
        except Exception as e:
            self._logger.error(f"Error running {backend.value}: {e}")
            raise ExecutionError(f"Failed to run {backend.value} command: {str(e)}")

        self._relay(output)
        return ExecutionResult.from_output(output)

    def _explain(self, translation: Translation) -> None:
        self._out.print(
            f"Command (cmd.exe):    {translation.cmd_command}", markup=False
        )
        self._out.print(
            f"Command (PowerShell): {translation.powershell_command}", markup=False
        )
        self._out.print()
        self._out.print(f"Description: {translation.description}", markup=False)

    def _relay(self, output: ShellOutput) -> None:
        write_raw(self._out, output.stdout)
        write_raw(self._err, output.stderr)

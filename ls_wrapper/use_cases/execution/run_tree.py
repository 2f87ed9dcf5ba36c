"""
Use case for the --tree view, which bypasses the translation engine.
"""

import logging
from typing import Optional

from rich.console import Console

from ls_wrapper.entities.ls_options import LsOptions
from ls_wrapper.entities.translation import ExecutionResult
from ls_wrapper.exceptions import ExecutionError
from ls_wrapper.ports.shell.shell_runner_port import ShellRunnerPort
from ls_wrapper.use_cases.translation.paths import to_windows_path
from ls_wrapper.ui.console import write_raw


class RunTreeUseCase:
    """Run 'tree /F' on the first target path."""

    def __init__(
        self,
        shell_runner: ShellRunnerPort,
        out: Console,
        err: Console,
        cmd_executable: str = "cmd.exe",
        logger: Optional[logging.Logger] = None,
    ):
        self._shell_runner = shell_runner
        self._out = out
        self._err = err
        self._cmd_executable = cmd_executable
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, options: LsOptions) -> ExecutionResult:
        """
        Show the directory tree of the first path.

        Raises:
            ExecutionError: If cmd.exe cannot be started
        """
        path = to_windows_path(options.first_path())
        try:
            self._logger.info(f"Showing tree of: {path}")
            output = self._shell_runner.run(
                [self._cmd_executable, "/C", "tree", "/F", path]
            )
        except ExecutionError:
            raise
        except Exception as e:
            self._logger.error(f"Error running tree: {e}")
            raise ExecutionError(str(e))

        write_raw(self._out, output.stdout)
        write_raw(self._err, output.stderr)
        return ExecutionResult.from_output(output)

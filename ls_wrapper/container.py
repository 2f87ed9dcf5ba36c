"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Any, Optional, TextIO

from rich.console import Console

from ls_wrapper.adapters.shell.subprocess_shell_runner import SubprocessShellRunner
from ls_wrapper.config.settings import Settings
from ls_wrapper.entities.ls_options import ColorMode
from ls_wrapper.ports.shell.shell_runner_port import ShellRunnerPort
from ls_wrapper.ui.console import create_console
from ls_wrapper.use_cases.execution.execute_translation import (
    ExecuteTranslationUseCase,
)
from ls_wrapper.use_cases.execution.run_tree import RunTreeUseCase


_DERIVED_INSTANCES = (
    "stdout_console",
    "stderr_console",
    "execute_translation_use_case",
    "run_tree_use_case",
)


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(
        self,
        color: ColorMode = ColorMode.AUTO,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self._instances: dict[str, Any] = {}
        self._color = color
        self._stdout = stdout
        self._stderr = stderr
        self._logger = logging.getLogger(__name__)

    def configure(
        self,
        color: Optional[ColorMode] = None,
        settings: Optional[Settings] = None,
        shell_runner: Optional[ShellRunnerPort] = None,
    ) -> None:
        """Override pieces of the graph; whatever depends on them is rebuilt lazily."""
        for key in _DERIVED_INSTANCES:
            self._instances.pop(key, None)
        if color is not None:
            self._color = color
        if settings is not None:
            self._instances["settings"] = settings
        if shell_runner is not None:
            self._instances["shell_runner"] = shell_runner

    def get_settings(self) -> Settings:
        """
        Get application settings.

        Returns:
            Settings loaded from the environment

        Raises:
            ConfigurationError: If a setting has an invalid value
        """
        if "settings" not in self._instances:
            self._instances["settings"] = Settings()
        return self._instances["settings"]

    def get_stdout_console(self) -> Console:
        if "stdout_console" not in self._instances:
            self._instances["stdout_console"] = create_console(
                self._color, file=self._stdout
            )
        return self._instances["stdout_console"]

    def get_stderr_console(self) -> Console:
        if "stderr_console" not in self._instances:
            self._instances["stderr_console"] = create_console(
                self._color, stderr=True, file=self._stderr
            )
        return self._instances["stderr_console"]

    def get_shell_runner(self) -> ShellRunnerPort:
        """
        Get shell runner adapter instance.

        Returns:
            ShellRunnerPort implementation
        """
        if "shell_runner" not in self._instances:
            self._instances["shell_runner"] = SubprocessShellRunner(self._logger)
        return self._instances["shell_runner"]

    def get_execute_translation_use_case(self) -> ExecuteTranslationUseCase:
        """
        Get execute translation use case with injected dependencies.

        Returns:
            Configured ExecuteTranslationUseCase
        """
        if "execute_translation_use_case" not in self._instances:
            settings = self.get_settings()
            self._instances["execute_translation_use_case"] = ExecuteTranslationUseCase(
                self.get_shell_runner(),
                self.get_stdout_console(),
                self.get_stderr_console(),
                default_backend=settings.default_backend,
                cmd_executable=settings.cmd_executable,
                powershell_executable=settings.powershell_executable,
                logger=self._logger,
            )
        return self._instances["execute_translation_use_case"]

    def get_run_tree_use_case(self) -> RunTreeUseCase:
        """
        Get run tree use case with injected dependencies.

        Returns:
            Configured RunTreeUseCase
        """
        if "run_tree_use_case" not in self._instances:
            self._instances["run_tree_use_case"] = RunTreeUseCase(
                self.get_shell_runner(),
                self.get_stdout_console(),
                self.get_stderr_console(),
                cmd_executable=self.get_settings().cmd_executable,
                logger=self._logger,
            )
        return self._instances["run_tree_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()

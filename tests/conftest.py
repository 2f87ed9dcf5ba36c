"""
Pytest configuration and shared fixtures.
"""

import io
from typing import Optional
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from ls_wrapper.config.settings import Settings
from ls_wrapper.container import DependencyContainer
from ls_wrapper.entities.translation import ShellOutput
from ls_wrapper.exceptions import ExecutionError
from ls_wrapper.ports.shell.shell_runner_port import ShellRunnerPort


class FakeShellRunner(ShellRunnerPort):
    """Shell runner that records commands instead of starting processes."""

    def __init__(
        self,
        output: Optional[ShellOutput] = None,
        error: Optional[Exception] = None,
    ):
        self.output = output or ShellOutput(stdout=b"", stderr=b"", exit_code=0)
        self.error = error
        self.commands: list[list[str]] = []

    def run(self, command: list[str]) -> ShellOutput:
        self.commands.append(command)
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def fake_runner():
    """Shell runner that succeeds with empty output."""
    return FakeShellRunner()


@pytest.fixture
def failing_runner():
    """Shell runner that cannot start the shell."""
    return FakeShellRunner(error=ExecutionError("failed to start cmd.exe: not found"))


@pytest.fixture
def out_console():
    """Console writing to an in-memory buffer (read it with .file.getvalue())."""
    return Console(
        file=io.StringIO(), width=120, soft_wrap=True, highlight=False, emoji=False
    )


@pytest.fixture
def err_console():
    """Console standing in for stderr."""
    return Console(
        file=io.StringIO(), width=120, soft_wrap=True, highlight=False, emoji=False
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove every LS_WRAPPER_* variable and point the home directory at tmp_path."""
    for key in (
        "LS_WRAPPER_DEFAULT_BACKEND",
        "LS_WRAPPER_LOG_LEVEL",
        "LS_WRAPPER_CMD",
        "LS_WRAPPER_POWERSHELL",
        "LS_WRAPPER_ENV_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return monkeypatch


@pytest.fixture
def dependency_container(clean_env, fake_runner, mock_logger):
    """
    Create a dependency container with captured output and a fake shell runner.

    Returns:
        DependencyContainer instance; read output via container._stdout/_stderr
    """
    container = DependencyContainer(stdout=io.StringIO(), stderr=io.StringIO())
    container._logger = mock_logger
    container.configure(
        settings=Settings(load_env_file=False), shell_runner=fake_runner
    )
    return container

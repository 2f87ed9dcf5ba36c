"""
Tests for the ExecuteTranslationUseCase.
"""

import io
from unittest.mock import MagicMock

import pytest
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
from ls_wrapper.use_cases.execution.execute_translation import (
    ExecuteTranslationUseCase,
    select_backend,
)

TRANSLATION = Translation(
    cmd_command="dir /A .",
    powershell_command="Get-ChildItem -Force -Path .",
    description="list directory contents (show hidden files)",
)


@pytest.fixture
def use_case(fake_runner, out_console, err_console, mock_logger):
    return ExecuteTranslationUseCase(
        fake_runner, out_console, err_console, logger=mock_logger
    )


class TestSelectBackend:
    """Test cases for select_backend."""

    @pytest.mark.parametrize(
        "options, expected",
        [
            (LsOptions(), Backend.CMD),
            (LsOptions(long_format=True), Backend.POWERSHELL),
            (LsOptions(human_readable=True), Backend.POWERSHELL),
            (LsOptions(use_powershell=True), Backend.POWERSHELL),
            (LsOptions(use_cmd=True), Backend.CMD),
            (LsOptions(use_cmd=True, long_format=True), Backend.CMD),
            (LsOptions(use_cmd=True, use_powershell=True), Backend.POWERSHELL),
        ],
    )
    def test_selection(self, options, expected):
        assert select_backend(options) is expected

    def test_configured_default(self):
        assert select_backend(LsOptions(), Backend.POWERSHELL) is Backend.POWERSHELL
        assert select_backend(LsOptions(use_cmd=True), Backend.POWERSHELL) is Backend.CMD


class TestExecuteTranslationUseCase:
    """Test cases for the ExecuteTranslationUseCase."""

    def test_runs_cmd(self, use_case, fake_runner):
        result = use_case.execute(LsOptions(), TRANSLATION)

        assert result == ExecutionResult(success=True, exit_code=0)
        assert fake_runner.commands == [["cmd.exe", "/C", "dir /A ."]]

    def test_runs_powershell(self, use_case, fake_runner):
        use_case.execute(LsOptions(long_format=True), TRANSLATION)

        assert fake_runner.commands == [
            ["powershell.exe", "-NoProfile", "-Command", "Get-ChildItem -Force -Path ."]
        ]

    def test_custom_executables(self, fake_runner, out_console, err_console):
        use_case = ExecuteTranslationUseCase(
            fake_runner,
            out_console,
            err_console,
            default_backend=Backend.POWERSHELL,
            powershell_executable="pwsh",
        )

        use_case.execute(LsOptions(), TRANSLATION)

        assert fake_runner.commands[0][0] == "pwsh"

    def test_relays_output_verbatim(self, use_case, fake_runner, out_console, err_console):
        fake_runner.output = ShellOutput(
            stdout=b" Volume in drive C\r\n[x] file.txt\n", stderr=b"warn\n", exit_code=0
        )

        use_case.execute(LsOptions(), TRANSLATION)

        assert out_console.file.getvalue() == " Volume in drive C\r\n[x] file.txt\n"
        assert err_console.file.getvalue() == "warn\n"

    def test_failed_command(self, use_case, fake_runner):
        fake_runner.output = ShellOutput(
            stdout=b"", stderr=b"File Not Found\n", exit_code=1
        )

        result = use_case.execute(LsOptions(), TRANSLATION)

        assert result == ExecutionResult(success=False, exit_code=1)

    def test_missing_exit_code(self, use_case, fake_runner):
        fake_runner.output = ShellOutput(stdout=b"", stderr=b"", exit_code=None)

        result = use_case.execute(LsOptions(), TRANSLATION)

        assert result == ExecutionResult(success=False, exit_code=-1)

    def test_explain_prints_both_commands(self, use_case, fake_runner, out_console):
        result = use_case.execute(LsOptions(explain=True), TRANSLATION)

        assert result == ExecutionResult.ok()
        assert fake_runner.commands == []
        assert out_console.file.getvalue() == (
            "Command (cmd.exe):    dir /A .\n"
            "Command (PowerShell): Get-ChildItem -Force -Path .\n"
            "\n"
            "Description: list directory contents (show hidden files)\n"
        )

    def test_explain_beats_native(self, use_case, out_console):
        use_case.execute(LsOptions(explain=True, native=True), TRANSLATION)

        assert out_console.file.getvalue().startswith("Command (cmd.exe):")

    @pytest.mark.parametrize(
        "options, expected",
        [
            (LsOptions(native=True), "dir /A .\n"),
            (LsOptions(native=True, long_format=True), "Get-ChildItem -Force -Path .\n"),
            (LsOptions(native=True, teach=True), "dir /A .\n"),
        ],
    )
    def test_native_prints_selected_command(
        self, use_case, fake_runner, out_console, err_console, options, expected
    ):
        result = use_case.execute(options, TRANSLATION)

        assert result.success
        assert fake_runner.commands == []
        assert out_console.file.getvalue() == expected
        assert err_console.file.getvalue() == ""

    def test_teach_prints_then_runs(self, use_case, fake_runner, err_console):
        fake_runner.output = ShellOutput(stdout=b"", stderr=b"err\n", exit_code=0)

        use_case.execute(LsOptions(teach=True), TRANSLATION)

        assert err_console.file.getvalue() == "Executing: dir /A .\n---\nerr\n"
        assert len(fake_runner.commands) == 1

    def test_spawn_failure_propagates(self, failing_runner, out_console, err_console):
        use_case = ExecuteTranslationUseCase(failing_runner, out_console, err_console)

        with pytest.raises(ExecutionError, match="failed to start"):
            use_case.execute(LsOptions(), TRANSLATION)

    def test_unexpected_error_is_wrapped(self, out_console, err_console, mock_logger):
        runner = MagicMock(spec=ShellRunnerPort)
        runner.run.side_effect = RuntimeError("boom")
        use_case = ExecuteTranslationUseCase(
            runner, out_console, err_console, logger=mock_logger
        )

        with pytest.raises(ExecutionError, match="Failed to run cmd command: boom"):
            use_case.execute(LsOptions(), TRANSLATION)

        mock_logger.error.assert_called_once_with("Error running cmd: boom")

    def test_logs_selected_backend(self, use_case, mock_logger):
        use_case.execute(LsOptions(), TRANSLATION)

        mock_logger.info.assert_any_call("Selected backend cmd: dir /A .")

    def test_teach_banner_precedes_raw_output(self, fake_runner, out_console):
        raw = io.BytesIO()
        stderr = io.TextIOWrapper(raw, encoding="cp1252", newline="")
        err = Console(file=stderr, soft_wrap=True, highlight=False, emoji=False)
        fake_runner.output = ShellOutput(
            stdout=b"", stderr="Datei übersprungen\r\n".encode("cp850"), exit_code=0
        )
        use_case = ExecuteTranslationUseCase(fake_runner, out_console, err)

        use_case.execute(LsOptions(teach=True), TRANSLATION)

        assert raw.getvalue() == (
            b"Executing: dir /A .\n---\n" + "Datei übersprungen\r\n".encode("cp850")
        )

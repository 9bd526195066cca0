"""Tests for the ``cli-frames doctor`` command (cli/doctor.py).

Capabilities are passed in explicitly; platform probes are patched.

Coverage:
* Individual check functions return correct tuples.
* ``run_doctor`` exit codes.
* CLI routing dispatches to ``run_doctor``.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from cli_frames.cli import exit_codes
from cli_frames.core.models import TerminalCapabilities


class TestChecks:
    def test_python_version(self) -> None:
        from cli_frames.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status or "FAIL" in status

    def test_rich_installed(self) -> None:
        from cli_frames.cli.doctor import _rich_version_check

        label, value, status = _rich_version_check()
        assert label == "rich"
        assert "OK" in status

    def test_mode_interactive(self) -> None:
        from cli_frames.cli.doctor import _mode_check

        _, value, _ = _mode_check(TerminalCapabilities.INTERACTIVE)
        assert value == "interactive"

    def test_mode_limited_names_ci(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from cli_frames.cli.doctor import _mode_check

        monkeypatch.setenv("CI", "true")
        _, value, _ = _mode_check(TerminalCapabilities.LIMITED)
        assert value == "capability-limited (CI=true)"

    def test_mode_limited_by_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from cli_frames.cli.doctor import _mode_check

        monkeypatch.setenv("CI", "true")
        monkeypatch.setenv("CLI_FRAMES_LIMITED", "yes")
        _, value, _ = _mode_check(TerminalCapabilities.LIMITED)
        assert value == "capability-limited (CLI_FRAMES_LIMITED=yes)"

    def test_mode_names_command_line_flag(self) -> None:
        from cli_frames.cli.doctor import _mode_check

        _, value, _ = _mode_check(TerminalCapabilities.LIMITED, "--ci")
        assert value == "capability-limited (--ci)"

    def test_mode_flag_beats_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from cli_frames.cli.doctor import _mode_check

        monkeypatch.setenv("CI", "true")
        _, value, _ = _mode_check(TerminalCapabilities.INTERACTIVE, "--interactive")
        assert value == "interactive (--interactive)"

    def test_mode_limited_without_any_signal(self) -> None:
        from cli_frames.cli.doctor import _mode_check

        _, value, _ = _mode_check(TerminalCapabilities.LIMITED)
        assert value == "capability-limited (forced)"

    def test_frame_style(self) -> None:
        from cli_frames.cli.doctor import _frame_style_check

        assert _frame_style_check() == ("Frame style", "bracket", "[green]OK[/green]")

    def test_emoji_fallback_warns(self) -> None:
        from cli_frames.cli.doctor import _emoji_check

        _, _, status = _emoji_check(TerminalCapabilities(supports_emoji=False))
        assert "WARN" in status

    @patch("cli_frames.cli.doctor.platform.system", return_value="Darwin")
    def test_os_display_name(self, _mock_sys: object) -> None:
        from cli_frames.cli.doctor import _os_check

        _, value, _ = _os_check()
        assert value.startswith("macOS")

    def test_status_plain(self) -> None:
        from cli_frames.cli.doctor import _status_plain

        assert _status_plain("[red]FAIL (>=3.10 required)[/red]") == "FAIL"
        assert _status_plain("[yellow]WARN[/yellow]") == "WARN"
        assert _status_plain("[green]OK[/green]") == "OK"


class TestRunDoctor:
    def test_success(self) -> None:
        from cli_frames.cli.doctor import run_doctor

        assert run_doctor(TerminalCapabilities.INTERACTIVE) == exit_codes.SUCCESS

    @patch(
        "cli_frames.cli.doctor._python_version_check",
        return_value=("Python", "3.8.0", "[red]FAIL (>=3.10 required)[/red]"),
    )
    def test_failure(self, _mock_py: object) -> None:
        from cli_frames.cli.doctor import run_doctor

        assert run_doctor(TerminalCapabilities.LIMITED) == exit_codes.GENERAL_ERROR

    def test_probes_when_not_given(self) -> None:
        from cli_frames.cli.doctor import run_doctor

        with patch(
            "cli_frames.cli.doctor.detect_capabilities",
            return_value=TerminalCapabilities.INTERACTIVE,
        ) as mock_detect:
            run_doctor()
        mock_detect.assert_called_once_with()


class TestDoctorRouting:
    @patch("cli_frames.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_routes(self, mock_doc: object) -> None:
        from cli_frames.cli.app import main

        assert main(["--ci", "doctor"]) == exit_codes.SUCCESS
        mock_doc.assert_called_once()  # type: ignore[attr-defined]
        (caps,), kwargs = mock_doc.call_args  # type: ignore[attr-defined]
        assert caps.capability_limited is True
        assert kwargs == {"forced_by": "--ci"}

    def test_ci_flag_reported_without_environment(
        self,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from cli_frames.cli.app import main

        assert main(["--ci", "doctor"]) == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "--ci" in err
        assert "CLI_FRAMES_LIMITED" not in err

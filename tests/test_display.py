"""Tests for display module."""

from unittest.mock import patch

from mac_cleanup.display import (
    confirm_action,
    format_size,
    set_color,
    show_dry_run_estimate,
    show_error,
    show_failures,
    show_message,
    show_run_summary,
)
from mac_cleanup.models import (
    DeletionReport,
    PathFailure,
    RunSummary,
    TargetOutcome,
    TargetState,
)


def _printed(mock_console) -> str:
    return "\n".join(str(call.args[0]) for call in mock_console.print.call_args_list if call.args)


class TestFormatSize:
    def test_zero(self):
        assert format_size(0) == "0 B"

    def test_below_one_kib_uses_bytes(self):
        assert format_size(1023) == "1023 B"

    def test_exactly_one_kib(self):
        assert format_size(1024) == "1.00 KiB"

    def test_half_kib(self):
        assert format_size(1536) == "1.50 KiB"

    def test_three_kib(self):
        assert format_size(3072) == "3.00 KiB"

    def test_truncates_instead_of_rounding(self):
        # 2047 bytes is 1.999 KiB
        assert format_size(2047) == "1.99 KiB"

    def test_just_below_one_mib(self):
        assert format_size(1024**2 - 1) == "1023.99 KiB"

    def test_mebibytes(self):
        assert format_size(5 * 1024**2) == "5.00 MiB"

    def test_gibibytes(self):
        assert format_size(int(2.25 * 1024**3)) == "2.25 GiB"

    def test_negative(self):
        assert format_size(-1536) == "-1.50 KiB"

    def test_largest_unit_caps(self):
        assert format_size(2048 * 1024**6).endswith(" EiB")


class TestShowDryRunEstimate:
    @patch("mac_cleanup.display.console")
    def test_prints_estimate(self, mock_console):
        summary = RunSummary(
            dry_run=True,
            outcomes=[
                TargetOutcome(
                    target_id="test",
                    state=TargetState.COMPLETED,
                    report=DeletionReport(dry_run=True, estimated_bytes=3072),
                )
            ],
        )
        show_dry_run_estimate(summary)
        assert "Approx 3.00 KiB of space will be cleaned up" in _printed(mock_console)


class TestShowRunSummary:
    @patch("mac_cleanup.display.console")
    def test_prints_freed_space(self, mock_console):
        summary = RunSummary(free_before=1000, free_after=1000 + 2048)
        show_run_summary(summary)
        printed = _printed(mock_console)
        assert "Success!" in printed
        assert "2.00 KiB of space was cleaned up" in printed

    @patch("mac_cleanup.display.console")
    def test_negative_delta_is_reported(self, mock_console):
        summary = RunSummary(free_before=4096, free_after=2048)
        show_run_summary(summary)
        assert "-2.00 KiB of space was cleaned up" in _printed(mock_console)


class TestShowFailures:
    @patch("mac_cleanup.display.console")
    def test_no_failures_prints_nothing(self, mock_console):
        show_failures(RunSummary())
        mock_console.print.assert_not_called()

    @patch("mac_cleanup.display.console")
    def test_failures_table(self, mock_console):
        summary = RunSummary(
            outcomes=[
                TargetOutcome(
                    target_id="test",
                    state=TargetState.PARTIALLY_FAILED,
                    report=DeletionReport(
                        failures=[PathFailure(path="/x", reason="Permission denied")]
                    ),
                )
            ]
        )
        show_failures(summary)
        assert mock_console.print.call_count == 1


class TestShowMessage:
    @patch("mac_cleanup.display.console")
    def test_message(self, mock_console):
        show_message("Clearing System Cache Files...")
        mock_console.print.assert_called_once_with("Clearing System Cache Files...")

    @patch("mac_cleanup.display.console")
    def test_error(self, mock_console):
        show_error("boom")
        assert "boom" in _printed(mock_console)


class TestSetColor:
    def test_toggle(self):
        from mac_cleanup.display import console

        set_color(False)
        assert console.no_color
        set_color(True)
        assert not console.no_color


class TestConfirmAction:
    @patch("rich.prompt.Confirm.ask", return_value=True)
    def test_answer_passed_through(self, _mock_ask):
        assert confirm_action("Continue?")

    @patch("mac_cleanup.display.console")
    @patch("rich.prompt.Confirm.ask", side_effect=EOFError)
    def test_closed_input_declines(self, _mock_ask, _mock_console):
        assert confirm_action("Continue?") is False

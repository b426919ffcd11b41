"""Tests for console output and the progress display."""

import json
from pathlib import Path

from pyfsync.cli_progress import SyncProgressDisplay
from pyfsync.output import OutputFormatter
from pyfsync.tree.comparator import SyncAction, SyncDecision


def _decision(action: SyncAction, name: str = "f") -> SyncDecision:
    return SyncDecision(action=action, reason="test", destination=Path("/d") / name)


class TestOutputFormatter:
    """Tests for OutputFormatter."""

    def test_info_printed(self, capsys):
        """Test info messages go to stdout."""
        OutputFormatter().info("hello [world]")
        assert "hello [world]" in capsys.readouterr().out

    def test_quiet_suppresses_info(self, capsys):
        """Test quiet mode suppresses non-essential output."""
        out = OutputFormatter(quiet=True)
        out.info("hidden")
        out.success("hidden")
        out.print("hidden")
        assert capsys.readouterr().out == ""

    def test_error_printed_in_quiet_mode(self, capsys):
        """Test errors are always shown on stderr."""
        OutputFormatter(quiet=True).error("boom")
        assert "Error: boom" in capsys.readouterr().err

    def test_summary_as_json(self, capsys):
        """Test print_summary emits JSON in JSON mode."""
        OutputFormatter(json_output=True).print_summary("t", {"files_copied": 3})
        assert json.loads(capsys.readouterr().out) == {"files_copied": 3}

    def test_summary_table(self, capsys):
        """Test print_summary renders a table with formatted sizes."""
        OutputFormatter().print_summary(
            "Sync summary", {"files_copied": 3, "bytes_copied": 2048}
        )
        output = capsys.readouterr().out
        assert "Files copied" in output
        assert "2.0 KB" in output


class TestSyncProgressDisplay:
    """Tests for SyncProgressDisplay."""

    def test_counts_decisions_without_display(self):
        """Test the callback counts decisions even when not started."""
        display = SyncProgressDisplay()
        callback = display.create_callback()

        callback(_decision(SyncAction.CREATE_FILE))
        callback(_decision(SyncAction.SKIP))
        callback(_decision(SyncAction.DESCEND))

        assert display.paths_checked == 3
        assert display.files_copied == 1

    def test_context_manager(self):
        """Test the display can be entered, updated and exited."""
        with SyncProgressDisplay() as display:
            callback = display.create_callback()
            callback(_decision(SyncAction.OVERWRITE_FILE, "[odd] name"))
            callback(_decision(SyncAction.DELETE_EXTRANEOUS))

        assert display.files_copied == 1
        assert display._progress is None

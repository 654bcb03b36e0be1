"""
End-to-end tests for the `warehouse` CLI.

These replay command files through the typer app exactly as a user would and
check the snapshot written to stdout or to the output file.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from warehouse.main import app

EXPECTED_SAMPLE_SNAPSHOT = (
    "[\n"
    "\t[]\n"
    "\t[]\n"
    "\t[]\n"
    "\t[(3: bolt, 50, 2, 2, 1)]\n"
    "\t[]\n"
    "\t[]\n"
    "\t[]\n"
    "\t[(7: widget, 26, 1, 5, 6)]\n"
    "\t[]\n"
    "\t[]\n"
    "]"
)

pytestmark = pytest.mark.usefixtures("quiet_settings")

runner = CliRunner()


class TestRunCommand:
    """Replay command files through `warehouse run`."""

    def test_run_writes_snapshot_to_stdout(self, sample_commands_file: Path):
        result = runner.invoke(app, ["run", str(sample_commands_file), "--output", "-"])

        assert result.exit_code == 0, result.output
        assert EXPECTED_SAMPLE_SNAPSHOT in result.output

    def test_run_writes_snapshot_file(self, sample_commands_file: Path, tmp_path: Path):
        output = tmp_path / "everything.out"

        result = runner.invoke(app, ["run", str(sample_commands_file), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8") == EXPECTED_SAMPLE_SNAPSHOT

    def test_run_with_probing_placement(self, tmp_path: Path):
        source = tmp_path / "spill.in"
        source.write_text(
            "6\n" + "".join(f"add 1 {i * 10} p{i} 5 {i}\n" for i in range(6)), encoding="utf-8"
        )

        result = runner.invoke(app, ["run", str(source), "-o", "-", "-p", "probing"])

        assert result.exit_code == 0, result.output
        assert "\t[(50: p5, 5, 1, 1, 5)]\n" in result.output

    def test_run_lists_placements(self):
        result = runner.invoke(app, ["run", "--placement", "list"])

        assert result.exit_code == 0
        assert "Available placements: probing, standard" in result.output

    def test_run_with_table(self, sample_commands_file: Path):
        result = runner.invoke(app, ["run", str(sample_commands_file), "-o", "-", "--table"])

        assert result.exit_code == 0, result.output
        assert "Warehouse Catalog" in result.output

    def test_malformed_input_exits_with_code_two(self, tmp_path: Path):
        source = tmp_path / "bad.in"
        source.write_text("1\nsell 7 3\n", encoding="utf-8")

        result = runner.invoke(app, ["run", str(source), "-o", "-"])

        assert result.exit_code == 2
        assert "unknown action 'sell'" in result.output

    def test_unknown_placement_exits_with_code_two(self, sample_commands_file: Path):
        result = runner.invoke(app, ["run", str(sample_commands_file), "-p", "nowhere"])

        assert result.exit_code == 2
        assert "Unknown placement" in result.output

    def test_missing_input_exits_with_code_two(self, tmp_path: Path):
        result = runner.invoke(app, ["run", str(tmp_path / "absent.in"), "-o", "-"])

        assert result.exit_code == 2
        assert "cannot read" in result.output


def test_info_shows_settings():
    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0
    assert "placement=standard" in result.output
    assert "log_level=WARNING" in result.output

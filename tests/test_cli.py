"""Tests for the musickit command-line interface."""

from click.testing import CliRunner

from musickit import __version__
from musickit.cli import main


def test_version_option() -> None:
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_name_command_default_spelling() -> None:
    result = CliRunner().invoke(main, ["name", "61"])
    assert result.exit_code == 0
    assert result.output.splitlines()[0] == "D♭4"
    assert "D♭, C♯" in result.output


def test_name_command_with_neighbor() -> None:
    result = CliRunner().invoke(main, ["name", "25", "--neighbor", "d"])
    assert result.exit_code == 0
    assert result.output.splitlines()[0] == "C♯1"


def test_name_command_rejects_negative_number() -> None:
    result = CliRunner().invoke(main, ["name", "--", "-1"])
    assert result.exit_code == 2


def test_scale_command_lists_degrees() -> None:
    result = CliRunner().invoke(main, ["scale", "23"])
    assert result.exit_code == 0
    assert "B0" in result.output
    assert "A♯1" not in result.output
    assert "B♭1" in result.output


def test_scale_command_spelled() -> None:
    result = CliRunner().invoke(main, ["scale", "65", "--scale", "chromatic", "--end", "4", "--spell"])
    assert result.exit_code == 0
    assert "G♭4" in result.output
    assert "F♯4" not in result.output


def test_scale_command_rejects_inverted_range() -> None:
    result = CliRunner().invoke(main, ["scale", "60", "--start", "5", "--end", "1"])
    assert result.exit_code == 2


def test_scale_command_below_midi_zero_fails() -> None:
    result = CliRunner().invoke(main, ["scale", "0", "--start", "-1"])
    assert result.exit_code == 1


def test_scales_command_lists_patterns() -> None:
    result = CliRunner().invoke(main, ["scales"])
    assert result.exit_code == 0
    assert "2-2-1-2-2-2-1" in result.output
    assert "dorian" in result.output

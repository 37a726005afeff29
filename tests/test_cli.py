"""Tests for the command-line entry point."""

import logging
from pathlib import Path

import pytest

from r2_indicator.cli import main, parse_args
from r2_indicator.exceptions import ArgumentError


@pytest.fixture
def front_files(tmp_path: Path) -> tuple[Path, Path]:
    """Two-point approximation and reference fronts written to disk."""
    front = tmp_path / "front.txt"
    front.write_text("1.0 2.0\n2.0 1.0\n")
    reference = tmp_path / "reference.txt"
    reference.write_text("1.0 2.0\n2.0 1.0\n")
    return front, reference


class TestParseArgs:
    """Tests for argument parsing."""

    def test_minimal(self, front_files: tuple[Path, Path]) -> None:
        """Three positional arguments are enough for two objectives."""
        front, reference = front_files
        args = parse_args([str(front), str(reference), "2"])
        assert args.n_obj == 2
        assert args.weights is None
        assert args.indices == [1, 15, 25, 75]

    def test_too_few_arguments(self) -> None:
        """Fewer than three arguments is a usage error."""
        with pytest.raises(ArgumentError) as exc_info:
            parse_args(["front.txt", "reference.txt"])
        assert "Usage:" in str(exc_info.value)

    def test_weights_required_beyond_two_objectives(self) -> None:
        """Three objectives need a weight file."""
        with pytest.raises(ArgumentError, match="weight vector file is required"):
            parse_args(["front.txt", "reference.txt", "3"])

    def test_non_integer_objectives(self) -> None:
        """numberOfObjectives must be an integer."""
        with pytest.raises(ArgumentError):
            parse_args(["front.txt", "reference.txt", "two"])

    def test_custom_indices(self) -> None:
        """--indices overrides the illustrative points."""
        args = parse_args(["front.txt", "reference.txt", "2", "--indices", "0", "1"])
        assert args.indices == [0, 1]


class TestMain:
    """Tests for main."""

    def test_prints_value_and_contributions(
        self, front_files: tuple[Path, Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """R2 value first, then one line per in-range index."""
        front, reference = front_files
        assert main([str(front), str(reference), "2", "--indices", "0", "1"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert float(lines[0]) == pytest.approx(49 / 198)
        assert lines[1].split("\t")[0] == "0"
        assert float(lines[1].split("\t")[1]) == pytest.approx(0.5)
        assert len(lines) == 3

    def test_skips_out_of_range_indices(
        self,
        front_files: tuple[Path, Path],
        capsys: pytest.CaptureFixture[str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Default indices beyond the front print a marker and log a warning."""
        front, reference = front_files
        with caplog.at_level(logging.WARNING, logger="r2_indicator.cli"):
            assert main([str(front), str(reference), "2"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 5  # value + one line per default index
        assert lines[1].startswith("1\t")
        assert lines[2:] == ["15\tout-of-range", "25\tout-of-range", "75\tout-of-range"]
        assert "Skipping index 15" in caplog.text

    def test_weight_file(self, tmp_path: Path, weight_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Three objectives with a weight file."""
        front = tmp_path / "front3.txt"
        front.write_text("0 1 1\n1 0 1\n1 1 0\n")
        assert main([str(front), str(front), "3", str(weight_file), "--indices", "2"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2

    def test_usage_error_exit_code(self, caplog: pytest.LogCaptureFixture) -> None:
        """Too few arguments exits with 2 and computes nothing."""
        assert main(["front.txt"]) == 2
        assert "Usage:" in caplog.text

    def test_missing_weight_file_exit_code(
        self, front_files: tuple[Path, Path], tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Weight loading failures exit with 1."""
        front, reference = front_files
        assert main([str(front), str(reference), "2", str(tmp_path / "missing.txt")]) == 1
        assert "failed to read weight vectors" in caplog.text

    def test_degenerate_reference_exit_code(
        self, tmp_path: Path, front_files: tuple[Path, Path], caplog: pytest.LogCaptureFixture
    ) -> None:
        """A single-point reference front exits with 1."""
        front, _ = front_files
        reference = tmp_path / "single.txt"
        reference.write_text("1.0 2.0\n")
        assert main([str(front), str(reference), "2"]) == 1
        assert "constant" in caplog.text

    def test_missing_front_exit_code(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """An unreadable front file exits with 1."""
        assert main([str(tmp_path / "a.txt"), str(tmp_path / "b.txt"), "2"]) == 1
        assert "failed to read front" in caplog.text

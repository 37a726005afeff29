"""Tests for weight-vector generation and loading.

Test suite covering:
- TestUniformWeights: evenly spaced bi-objective vectors
- TestDefaultWeights: the 100-vector default set
- TestLoadWeights: reading vectors from text files
"""

from pathlib import Path

import numpy as np
import pytest

from r2_indicator.exceptions import ConfigurationError
from r2_indicator.weights import default_weights, load_weights, uniform_weights

# =============================================================================
# TestUniformWeights
# =============================================================================


class TestUniformWeights:
    """Tests for uniform_weights."""

    def test_shape(self) -> None:
        """N vectors with two components each."""
        assert uniform_weights(7).shape == (7, 2)

    def test_follows_formula(self) -> None:
        """Vector n is (n/(N-1), 1 - n/(N-1))."""
        n_vectors = 11
        weights = uniform_weights(n_vectors)
        for n in range(n_vectors):
            a = n / (n_vectors - 1)
            np.testing.assert_allclose(weights[n], [a, 1 - a])

    def test_components_sum_to_one(self) -> None:
        """Every vector sums to 1."""
        weights = uniform_weights(57)
        np.testing.assert_allclose(weights.sum(axis=1), np.ones(57))

    def test_endpoints(self) -> None:
        """First vector is (0, 1) and last is (1, 0)."""
        weights = uniform_weights(5)
        np.testing.assert_array_equal(weights[0], [0.0, 1.0])
        np.testing.assert_array_equal(weights[-1], [1.0, 0.0])

    def test_two_vectors(self) -> None:
        """Smallest valid set is the two axis directions."""
        np.testing.assert_array_equal(uniform_weights(2), [[0.0, 1.0], [1.0, 0.0]])

    def test_rejects_single_vector(self) -> None:
        """N=1 would divide by zero."""
        with pytest.raises(ConfigurationError, match="at least 2"):
            uniform_weights(1)

    def test_rejects_other_objective_counts(self) -> None:
        """Only the bi-objective case can be generated."""
        with pytest.raises(ConfigurationError, match="exactly 2 objectives"):
            uniform_weights(10, n_obj=3)


# =============================================================================
# TestDefaultWeights
# =============================================================================


class TestDefaultWeights:
    """Tests for default_weights."""

    def test_is_100_uniform_vectors(self) -> None:
        """Default set equals uniform_weights(100)."""
        weights = default_weights()
        assert weights.shape == (100, 2)
        np.testing.assert_array_equal(weights, uniform_weights(100))

    def test_second_vector(self) -> None:
        """Second vector is (1/99, 98/99)."""
        np.testing.assert_allclose(default_weights()[1], [1 / 99, 1 - 1 / 99])


# =============================================================================
# TestLoadWeights
# =============================================================================


class TestLoadWeights:
    """Tests for load_weights."""

    def test_reads_vectors(self, weight_file: Path) -> None:
        """One vector per line, in file order."""
        weights = load_weights(weight_file, n_obj=3)
        assert weights.shape == (4, 3)
        np.testing.assert_array_equal(weights[1], [0.0, 1.0, 0.0])
        np.testing.assert_allclose(weights[3], [0.3333, 0.3333, 0.3334])

    def test_uses_first_n_obj_tokens(self, tmp_path: Path) -> None:
        """Extra tokens beyond n_obj are ignored."""
        path = tmp_path / "w.txt"
        path.write_text("0.5 0.5 9.0\n0.2 0.8 7.0 1.0\n")
        np.testing.assert_array_equal(load_weights(path, n_obj=2), [[0.5, 0.5], [0.2, 0.8]])

    def test_accepts_mixed_whitespace(self, tmp_path: Path) -> None:
        """Tabs and repeated spaces separate tokens."""
        path = tmp_path / "w.txt"
        path.write_text("0.25\t 0.75\n  1.0   0.0  \n")
        np.testing.assert_array_equal(load_weights(path, n_obj=2), [[0.25, 0.75], [1.0, 0.0]])

    def test_skips_blank_lines(self, tmp_path: Path) -> None:
        """Blank lines, including a trailing one, are not vectors."""
        path = tmp_path / "w.txt"
        path.write_text("0.5 0.5\n\n1.0 0.0\n\n")
        assert load_weights(path, n_obj=2).shape == (2, 2)

    def test_short_line_is_error(self, tmp_path: Path) -> None:
        """A line with fewer than n_obj tokens is malformed."""
        path = tmp_path / "w.txt"
        path.write_text("0.2 0.3 0.5\n0.5 0.5\n")
        with pytest.raises(ConfigurationError, match="line 2") as exc_info:
            load_weights(path, n_obj=3)
        assert exc_info.value.details["line"] == 2

    def test_missing_file_is_error(self, tmp_path: Path) -> None:
        """Missing file fails with ConfigurationError, not OSError."""
        with pytest.raises(ConfigurationError, match="failed to read"):
            load_weights(tmp_path / "missing.txt", n_obj=2)

    def test_binary_file_is_error(self, tmp_path: Path) -> None:
        """Undecodable bytes fail with ConfigurationError, not UnicodeDecodeError."""
        path = tmp_path / "w.dat"
        path.write_bytes(b"\xff\xfe\x00 0.5 0.5\n")
        with pytest.raises(ConfigurationError, match="not a text file") as exc_info:
            load_weights(path, n_obj=2)
        assert exc_info.value.details["path"] == str(path)

    def test_non_numeric_is_error(self, tmp_path: Path) -> None:
        """Non-numeric tokens fail with the line number."""
        path = tmp_path / "w.txt"
        path.write_text("0.5 abc\n")
        with pytest.raises(ConfigurationError, match="line 1 .* not numeric"):
            load_weights(path, n_obj=2)

    def test_negative_weight_is_error(self, tmp_path: Path) -> None:
        """Weights must be non-negative."""
        path = tmp_path / "w.txt"
        path.write_text("0.5 0.5\n-0.1 1.1\n")
        with pytest.raises(ConfigurationError, match="negative or non-finite"):
            load_weights(path, n_obj=2)

    def test_empty_file_is_error(self, tmp_path: Path) -> None:
        """A file without vectors cannot define a weight set."""
        path = tmp_path / "w.txt"
        path.write_text("\n\n")
        with pytest.raises(ConfigurationError, match="contains no vectors"):
            load_weights(path, n_obj=2)

    def test_rejects_non_positive_n_obj(self, weight_file: Path) -> None:
        """n_obj must be at least 1."""
        with pytest.raises(ConfigurationError, match="n_obj must be positive"):
            load_weights(weight_file, n_obj=0)

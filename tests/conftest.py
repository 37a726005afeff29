"""Shared test fixtures for r2-indicator tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- Small fronts with known indicator values
- Weight files written to a temporary directory
- A minimal population type satisfying ObjectiveSource
"""

from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pytest

from r2_indicator import R2


@dataclass(frozen=True)
class Population:
    """Minimal evaluated population: decision variables plus objectives."""

    x: np.ndarray
    objectives: np.ndarray | None = None


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def indicator() -> R2:
    """R2 indicator with the default 100 bi-objective weight vectors."""
    return R2()


@pytest.fixture
def two_point_front() -> np.ndarray:
    """Two trade-off points that normalize to (0, 1) and (1, 0).

    Used as its own reference, every column minimum of the Tchebycheff
    matrix is min(a, 1 - a), so with 100 uniform vectors R2 = 49/198.
    """
    return np.array([[1.0, 2.0], [2.0, 1.0]])


@pytest.fixture
def three_point_front() -> np.ndarray:
    """Three points with clearly separated leave-one-out values.

    Normalized against itself the points become (0, 1), (0.25, 0.5) and
    (1, 0). Leave-one-out values are roughly 0.21, 0.25 and 0.27 for
    indices 0, 1 and 2.
    """
    return np.array([[1.0, 5.0], [2.0, 3.0], [5.0, 1.0]])


@pytest.fixture
def population(three_point_front) -> Population:
    """Evaluated population whose objectives are the three-point front."""
    return Population(x=np.zeros((3, 4)), objectives=three_point_front)


@pytest.fixture
def weight_file(tmp_path: Path) -> Path:
    """Three-objective weight file with four vectors."""
    path = tmp_path / "weights_3d.txt"
    path.write_text("1.0 0.0 0.0\n0.0 1.0 0.0\n0.0 0.0 1.0\n0.3333 0.3333 0.3334\n")
    return path

"""Front input: validation, text-file reading and population extraction.

- as_front: convert an array-like to a validated (n_points, n_obj) float array
- read_front: read a whitespace-delimited front file
- extract_front: pull the objective matrix out of a population-like object
"""

import logging
import os

import numpy as np

from r2_indicator.exceptions import FrontFileError, InsufficientDataError
from r2_indicator.protocols import ObjectiveSource

logger = logging.getLogger(__name__)


def as_front(front, n_obj: int | None = None, name: str = "front") -> np.ndarray:
    """Convert an array-like to a 2D float front and validate it.

    Args:
        front: Objective vectors, one row per point.
        n_obj: Expected number of objectives (columns). Not checked if None.
        name: Name used in error messages.

    Returns:
        Float array of shape (n_points, n_obj).

    Raises:
        ValueError: If the front is not 2D, has the wrong number of columns,
            or contains non-finite values.

    Examples:
        >>> as_front([[1, 2], [2, 1]]).dtype
        dtype('float64')
    """
    arr = np.asarray(front, dtype=np.float64)
    if arr.ndim != 2:
        raise ValueError(f"{name} must be 2D, got shape {arr.shape}")
    if n_obj is not None and arr.shape[1] != n_obj:
        raise ValueError(f"{name} has {arr.shape[1]} objectives, expected {n_obj}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values")
    return arr


def read_front(path: str | os.PathLike, n_obj: int | None = None) -> np.ndarray:
    """Read a front from a whitespace-delimited text file.

    One point per line, one column per objective, in objective order.

    Args:
        path: Path to the front file.
        n_obj: Expected number of objectives. Not checked if None.

    Returns:
        Float array of shape (n_points, n_obj).

    Raises:
        FrontFileError: If the file cannot be read, is not numeric, is empty,
            or has a column count different from n_obj.
    """
    try:
        data = np.loadtxt(path, dtype=np.float64, ndmin=2)
    except OSError as e:
        raise FrontFileError(
            f"failed to read front from '{path}': {e.strerror or e}",
            details={"path": str(path)},
        ) from e
    except ValueError as e:
        raise FrontFileError(f"front file '{path}' is malformed: {e}", details={"path": str(path)}) from e

    if data.size == 0:
        raise FrontFileError(f"front file '{path}' contains no points", details={"path": str(path)})
    if n_obj is not None and data.shape[1] != n_obj:
        raise FrontFileError(
            f"front file '{path}' has {data.shape[1]} columns, expected {n_obj}",
            details={"path": str(path), "columns": data.shape[1]},
        )

    logger.debug("Read %d points with %d objectives from %s", data.shape[0], data.shape[1], path)
    return data


def extract_front(source) -> np.ndarray:
    """Extract the objective matrix of a population-like object.

    The same extraction is used whether the front is scored as the
    approximation or serves as its own reference.

    Args:
        source: An ObjectiveSource (anything with an ``objectives`` array
            attribute) or an array-like of objective vectors.

    Returns:
        Float array of shape (n_points, n_obj).

    Raises:
        InsufficientDataError: If the source has not been evaluated
            (``objectives`` is None).
        ValueError: If the objective matrix is not a valid front.
    """
    if isinstance(source, ObjectiveSource):
        if source.objectives is None:
            raise InsufficientDataError(
                "population has no objectives to score",
                suggestion="Evaluate the population before computing the indicator.",
            )
        return as_front(source.objectives, name="objectives")
    return as_front(source)

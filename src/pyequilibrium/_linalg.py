"""Shared linear-algebra and validation helpers.

Both solvers reduce to a handful of inversions and solves on n x n data.
These helpers convert inputs to float64 arrays, check shapes and finiteness,
and wrap scipy.linalg so that singular systems surface as
SingularMatrixError and ill-conditioned ones as NumericalInstabilityWarning.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import linalg

from pyequilibrium.core.config import CONDITION_NUMBER_WARNING
from pyequilibrium.core.exceptions import (
    DimensionError,
    NaNInfError,
    NumericalInstabilityWarning,
    SingularMatrixError,
)

# Beyond this condition number a float64 inverse carries no correct digits
_SINGULAR_CONDITION = 1.0 / np.finfo(np.float64).eps


def as_float_array(value: ArrayLike, name: str, ndim: int) -> NDArray[np.float64]:
    """Convert to a finite float64 array with the expected number of dimensions.

    Scalars are promoted when ``ndim`` is 1 or 2, so ``mu = 2.0`` style
    inputs for single-good economies work as ``[2.0]`` or ``[[2.0]]``.

    Raises:
        DimensionError: If the array cannot be read with ``ndim`` dimensions
        NaNInfError: If the array contains NaN or Inf
    """
    arr = np.asarray(value, dtype=np.float64)
    if arr.ndim < ndim and arr.size == 1:
        arr = arr.reshape((1,) * ndim)
    if arr.ndim != ndim:
        raise DimensionError(
            f"{name} must be {ndim}D, got {arr.ndim}D with shape {arr.shape}."
        )
    if not np.all(np.isfinite(arr)):
        invalid_count = int(np.sum(~np.isfinite(arr)))
        raise NaNInfError(
            f"Found {invalid_count} NaN/Inf values in {name}. "
            f"All values must be finite numbers."
        )
    return arr


def check_square(matrix: NDArray[np.float64], name: str) -> int:
    """Return n for an n x n matrix, raise DimensionError otherwise."""
    rows, cols = matrix.shape
    if rows != cols or rows == 0:
        raise DimensionError(
            f"{name} must be a non-empty square matrix, got shape {matrix.shape}."
        )
    return rows


def check_length(vector: NDArray[np.float64], n: int, name: str) -> None:
    """Raise DimensionError unless the vector has n components."""
    if vector.shape[-1] != n:
        raise DimensionError(
            f"{name} has {vector.shape[-1]} components but the economy has "
            f"{n} goods."
        )


def check_conditioning(matrix: NDArray[np.float64], name: str) -> float:
    """Check that a square matrix is safely invertible.

    Returns:
        The 2-norm condition number

    Raises:
        SingularMatrixError: If the matrix is singular to working precision
    """
    cond = float(np.linalg.cond(matrix))
    if not np.isfinite(cond) or cond >= _SINGULAR_CONDITION:
        raise SingularMatrixError(
            f"{name} is singular (condition number {cond:.3e}). "
            f"It must be invertible."
        )
    if cond > CONDITION_NUMBER_WARNING:
        warnings.warn(
            f"{name} is ill-conditioned (condition number {cond:.3e}). "
            f"Equilibrium quantities may be inaccurate.",
            NumericalInstabilityWarning,
            stacklevel=3,
        )
    return cond


def invert(matrix: NDArray[np.float64], name: str) -> NDArray[np.float64]:
    """Invert a square matrix after a conditioning check."""
    check_conditioning(matrix, name)
    try:
        return linalg.inv(matrix)
    except linalg.LinAlgError as e:
        raise SingularMatrixError(f"{name} could not be inverted: {e}") from e


def solve(
    matrix: NDArray[np.float64],
    rhs: NDArray[np.float64],
    name: str,
) -> NDArray[np.float64]:
    """Solve ``matrix @ x = rhs`` after a conditioning check."""
    check_conditioning(matrix, name)
    try:
        return linalg.solve(matrix, rhs)
    except linalg.LinAlgError as e:
        raise SingularMatrixError(f"{name} system could not be solved: {e}") from e


def gram(matrix: NDArray[np.float64]) -> NDArray[np.float64]:
    """Pi^T Pi."""
    return matrix.T @ matrix


def symmetrize(matrix: NDArray[np.float64]) -> NDArray[np.float64]:
    """H = (J + J^T) / 2."""
    return 0.5 * (matrix + matrix.T)

from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from .cache_cell import CacheMatrix
from .runtime import runtime
from .warnings import CacheMatrixInversionError, CacheMatrixTraceWarning


def invert(matrix: Any, b: Any = None, *, tol: float | None = None) -> np.ndarray:
    """Invert a dense square matrix, or solve ``matrix @ x = b`` when ``b`` is given.

    ``tol`` is the smallest accepted reciprocal condition number (1-norm);
    matrices below it are rejected as numerically singular.
    """

    if matrix is None:
        raise CacheMatrixInversionError("no matrix is stored in the cache cell")

    a = np.asarray(matrix)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise CacheMatrixInversionError(f"matrix must be square 2-D, got shape {a.shape}")

    if tol is not None and a.size:
        try:
            with np.errstate(divide="ignore", invalid="ignore"):
                rcond = 1.0 / np.linalg.cond(a, 1)
        except (np.linalg.LinAlgError, ValueError, TypeError) as exc:
            raise CacheMatrixInversionError(str(exc)) from exc
        if not rcond >= tol:
            raise CacheMatrixInversionError(
                f"matrix is numerically singular: reciprocal condition number {rcond:g} < tol {tol:g}"
            )

    try:
        if b is None:
            return np.linalg.inv(a)
        return np.linalg.solve(a, np.asarray(b))
    except (np.linalg.LinAlgError, ValueError, TypeError) as exc:
        raise CacheMatrixInversionError(str(exc)) from exc


def cache_solve(cell: CacheMatrix, *args: Any, **kwargs: Any) -> Any:
    """Return the inverse of the matrix held by ``cell``, computing it at most once.

    Extra arguments are forwarded to :func:`invert` on a cache miss. Inversion
    failures propagate and leave the cell's cached inverse unset.
    """

    inv = cell.get_inverse()
    if inv is not None:
        if runtime.trace_enabled():
            warnings.warn("getting cached data", CacheMatrixTraceWarning, stacklevel=2)
        return inv

    data = cell.get()
    inv = invert(data, *args, **kwargs)
    inv.flags.writeable = False
    cell.set_inverse(inv)
    return inv

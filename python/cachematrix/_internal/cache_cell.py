from __future__ import annotations

from typing import Any

import numpy as np

from .coercion import coerce_matrix, shape_of


def matrices_equal(a: Any, b: Any) -> bool:
    """Value equality used to decide whether a stored matrix has changed.

    Mismatched shapes (including ``None`` against a matrix) are never equal.
    NaN entries in the same positions compare equal, so re-storing a copy of a
    NaN-holding matrix keeps its cached inverse.
    """

    if a is None or b is None:
        return a is None and b is None
    if shape_of(a) != shape_of(b):
        return False
    a = np.asarray(a)
    b = np.asarray(b)
    # isnan is undefined for non-float dtypes
    equal_nan = bool(np.issubdtype(np.result_type(a, b), np.inexact))
    return bool(np.array_equal(a, b, equal_nan=equal_nan))


class CacheMatrix:
    """A matrix bundled with a single cache slot for its inverse.

    The cached inverse is cleared whenever ``set`` replaces the matrix with a
    value-different one; storing an equal matrix keeps the cached inverse.
    ``cache_solve`` is the intended consumer of the accessors.

    The slot holds whatever the first solve on the current matrix produced: the
    inverse, or the solution ``x`` of ``matrix @ x = b`` when a right-hand side
    was forwarded. Later solves return that value until the matrix changes.

    Not thread-safe: callers sharing a cell across threads must serialize
    ``cache_solve`` themselves.
    """

    def __init__(self, matrix: Any = None):
        self._matrix: np.ndarray | None = None
        self._inverse: Any = None
        self.set(matrix)

    def set(self, matrix: Any) -> None:
        if matrices_equal(self._matrix, matrix):
            return
        self._matrix = coerce_matrix(matrix)
        self._inverse = None

    def get(self) -> np.ndarray | None:
        return self._matrix

    def set_inverse(self, inverse: Any) -> None:
        self._inverse = inverse

    def get_inverse(self) -> Any:
        return self._inverse

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    def __repr__(self) -> str:
        state = "cached" if self.has_inverse else "unset"
        return f"CacheMatrix(shape={shape_of(self._matrix)}, inverse={state})"


def make_cache_matrix(matrix: Any = None) -> CacheMatrix:
    return CacheMatrix(matrix)

"""Memoized matrix inversion: a matrix cell with a cached inverse and a caching solver."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _dist_version

try:
    __version__ = _dist_version("cachematrix")
except _PackageNotFoundError:
    __version__ = "unknown"

from ._internal.cache_cell import CacheMatrix, make_cache_matrix, matrices_equal
from ._internal.solver import cache_solve, invert
from ._internal.runtime import runtime as _runtime
from ._internal.warnings import (
    CacheMatrixWarning,
    CacheMatrixTraceWarning,
    CacheMatrixInversionError,
)


def trace_enabled() -> bool:
    """Whether cache hits emit a ``CacheMatrixTraceWarning`` note."""
    return _runtime.trace_enabled()


def set_trace(enabled: bool | None) -> None:
    """Override the ``CACHEMATRIX_TRACE`` environment setting (``None`` restores it)."""
    _runtime.set_trace(enabled)


__all__ = [
    "CacheMatrix",
    "make_cache_matrix",
    "matrices_equal",
    "cache_solve",
    "invert",
    "trace_enabled",
    "set_trace",
    "CacheMatrixWarning",
    "CacheMatrixTraceWarning",
    "CacheMatrixInversionError",
]

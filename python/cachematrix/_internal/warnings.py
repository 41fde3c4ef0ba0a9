"""cachematrix warning and error categories.

These exist so users can filter/suppress cachematrix warnings without
catching all UserWarning.

Keep this module lightweight to avoid import cycles.
"""

import numpy as np


class CacheMatrixWarning(UserWarning):
    """Base warning category for all cachematrix user-facing warnings."""


class CacheMatrixTraceWarning(CacheMatrixWarning):
    """Informational notes about cache use (e.g., a cached inverse was returned)."""


class CacheMatrixInversionError(np.linalg.LinAlgError):
    """Raised when a matrix cannot be inverted (empty, non-square, or singular)."""

from __future__ import annotations

from typing import Any

import numpy as np


def coerce_matrix(candidate: Any) -> np.ndarray | None:
    """Return a private, read-only ndarray copy of a matrix-like value.

    No shape validation happens here; ``None`` passes through as "no matrix".
    """

    if candidate is None:
        return None
    array = np.array(candidate, copy=True)
    array.flags.writeable = False
    return array


def shape_of(value: Any) -> tuple[int, ...] | None:
    if value is None:
        return None
    return tuple(np.shape(value))

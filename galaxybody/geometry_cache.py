from __future__ import annotations
import numpy as np
from typing import Tuple

"""
This module provides the geometric kernel for the pairwise gravity computation. The geometry_buffers function computes, for a block of target bodies against every source body, the displacement vectors pointing from target to source, their lengths, and a mask of pairs that are allowed to interact. A pair interacts only when its separation is strictly greater than the minimum gravity distance and it is not a body paired with itself. The block form lets the force loop evaluate contiguous row ranges independently against one shared position snapshot. It assumes (N,3) position arrays and a non-negative threshold.

"""




__all__ = ["geometry_buffers"]

def geometry_buffers(
    targets: np.ndarray,
    sources: np.ndarray,
    min_distance: float = 0.0,
    offset: int = 0,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    targets = np.asarray(targets, dtype=np.float64)
    sources = np.asarray(sources, dtype=np.float64)

    diff = sources[None, :, :] - targets[:, None, :]
    r = np.sqrt(diff[..., 0] * diff[..., 0] + diff[..., 1] * diff[..., 1] + diff[..., 2] * diff[..., 2])

    mask = r > float(min_distance)
    rows = np.arange(targets.shape[0])
    cols = rows + int(offset)
    inside = cols < sources.shape[0]
    mask[rows[inside], cols[inside]] = False
    return diff, r, mask

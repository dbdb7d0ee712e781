"""
This module projects simulation-space positions into the bounded coordinate range the
renderer places bodies in.

The DisplayMapper class supports two explicitly separate policies selected by the
configuration. The "fixed" policy applies scale = display_extent / galaxy_diameter with a
zero offset, so a body at (D, 0, 0) lands at (display_extent, 0, 0) regardless of where
the rest of the population is. The "autoscale" policy measures the population with
bounding_box, centres it on the box centre and scales its largest extent to
display_extent, falling back to the fixed scale when the box has no extent. Output is
float32, one row per body in index order, and the input array is never modified.
"""

from __future__ import annotations
from typing import Tuple, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from .sim_config import GalaxyConfig




def bounding_box(pos: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
	pos = np.asarray(pos, dtype=np.float64).reshape(-1, 3)
	if pos.shape[0] == 0:
		zero = np.zeros(3, dtype=np.float64)
		return zero, zero.copy()
	return pos.min(axis=0), pos.max(axis=0)


class DisplayMapper:

	def __init__(self, cfg: "GalaxyConfig") -> None:
		self.cfg = cfg
		self.mode = cfg.display_mode

	@property
	def fixed_scale(self) -> float:
		return float(self.cfg.display_scale)

	def scale_and_offset(self, pos: np.ndarray) -> Tuple[float, np.ndarray]:
		if self.mode != "autoscale":
			return self.fixed_scale, np.zeros(3, dtype=np.float64)

		lo, hi = bounding_box(pos)
		max_extent = float(np.max(hi - lo))
		offset = lo + (hi - lo) * 0.5
		if max_extent > 0.0:
			return float(self.cfg.display_extent) / max_extent, offset
		return self.fixed_scale, offset

	def map(self, pos: np.ndarray) -> np.ndarray:
		pos = np.asarray(pos, dtype=np.float64).reshape(-1, 3)
		scale, offset = self.scale_and_offset(pos)
		return ((pos - offset) * scale).astype(np.float32)

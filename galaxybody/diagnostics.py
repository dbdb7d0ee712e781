from __future__ import annotations
import numpy as np
from typing import Dict, TYPE_CHECKING
if TYPE_CHECKING:
    from .simulation import GalaxySimulation

"""
This module computes health metrics for a running galaxy simulation and reports numeric trouble without interrupting the tick. The Diagnostics class provides kinetic energy, linear momentum, the largest distance from the origin, and counts of bodies sitting at each of the three clamp limits, which shows how much of the motion is being shaped by the stability clamps rather than by gravity. check_finite reports non-finite body state, which is how contract violations such as negative masses or elapsed times surface. Reporting goes through a rate-limited printer shared by all instances so a persistent condition prints a few times and then only every diag_print_interval occurrences.

"""




class Diagnostics:
	_GLOBAL_DIAG_COUNTS = {}

	def __init__(self, simulation: "GalaxySimulation"):
		self.sim = simulation
		self._rel_tol = 1e-9


	def kinetic_energy(self) -> float:
		store = self.sim.store
		v2 = np.einsum("ij,ij->i", store.vel, store.vel)
		return float(0.5 * np.sum(store.mass * v2))

	def momentum(self) -> np.ndarray:
		store = self.sim.store
		return np.sum(store.mass[:, None] * store.vel, axis=0)

	def max_radius(self) -> float:
		store = self.sim.store
		if store.n_bodies == 0:
			return 0.0
		return float(np.max(np.linalg.norm(store.pos, axis=1)))

	def clamp_saturation(self) -> Dict[str, int]:
		store = self.sim.store
		cfg = self.sim.cfg

		def _at_limit(vectors: np.ndarray, limit: float) -> int:
			if vectors.shape[0] == 0:
				return 0
			lengths = np.linalg.norm(vectors, axis=1)
			return int(np.count_nonzero(lengths >= limit * (1.0 - self._rel_tol)))

		return {
			"acc_clamped": _at_limit(store.acc, cfg.max_acceleration),
			"vel_clamped": _at_limit(store.vel, cfg.max_velocity),
			"pos_clamped": _at_limit(store.pos, cfg.position_limit),
		}

	def check_finite(self) -> bool:
		store = self.sim.store
		ok = True
		for name, arr in (("pos", store.pos), ("vel", store.vel), ("acc", store.acc)):
			bad = int(np.count_nonzero(~np.all(np.isfinite(arr), axis=1)))
			if bad:
				ok = False
				self._rate_limited_diag_print(
					f"nonfinite_{name}",
					f"[diag] {bad} bodies with non-finite {name} after tick {self.sim.tick_count}",
				)
		return ok

	def report_elapsed(self, elapsed: float) -> None:
		self._rate_limited_diag_print(
			"elapsed",
			f"[warning] elapsed time must be finite and non-negative; got {elapsed}",
		)

	def summary(self) -> Dict[str, float]:
		p = self.momentum()
		out: Dict[str, float] = {
			"tick": self.sim.tick_count,
			"kinetic_energy": self.kinetic_energy(),
			"momentum": float(np.linalg.norm(p)) if p.size else 0.0,
			"max_radius": self.max_radius(),
		}
		out.update(self.clamp_saturation())
		return out


	def _rate_limited_diag_print(self, key: str, msg: str) -> None:
		cfg = getattr(self.sim, "cfg", None)
		if cfg is not None and not cfg.diag_prints:
			return
		limit = max(0, int(getattr(cfg, "diag_print_limit", 3)))
		interval = max(1, int(getattr(cfg, "diag_print_interval", 1000)))

		counts = Diagnostics._GLOBAL_DIAG_COUNTS
		c = counts.get(key, 0) + 1
		counts[key] = c

		if c <= limit:
			print(msg)
		elif c % interval == 0:
			print(f"{msg} (occurrence #{c})")

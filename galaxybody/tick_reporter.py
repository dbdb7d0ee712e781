import numpy as np
import pandas as pd
from typing import Dict, List
from .simulation import GalaxySimulation

"""
This module collects per-tick diagnostic summaries of a galaxy simulation into a pandas DataFrame. The TickReporter class ticks a simulation with a fixed elapsed time, records Diagnostics.summary() after every tick (kinetic energy, momentum magnitude, largest radius and the clamp saturation counts), exposes the rows as a DataFrame and exports them to CSV. Only aggregates are recorded, never the body positions themselves.


"""





class TickReporter:
	def __init__(self, sim: GalaxySimulation) -> None:
		self.sim = sim
		self.results: List[Dict[str, float]] = []

	def run(self, n_ticks: int, elapsed: float, show_progress: bool = False) -> pd.DataFrame:
		if show_progress:
			print(f"Running {n_ticks} ticks over {self.sim.n_bodies} bodies...")
		for i in range(n_ticks):
			self.sim.tick(elapsed)
			row = self.sim.diagnostics.summary()
			row["elapsed"] = float(elapsed)
			self.results.append(row)
			if show_progress and n_ticks >= 10 and i % (n_ticks // 10) == 0:
				print(f"  Progress: {i}/{n_ticks}")
		if show_progress:
			print(f"Completed: {len(self.results)} ticks recorded")
		return self.to_frame()

	def to_frame(self) -> pd.DataFrame:
		return pd.DataFrame(self.results)

	def save_csv(self, filename: str) -> None:
		if not self.results:
			print("[error] No ticks recorded. Run run() first.")
			return
		df = self.to_frame()
		df.to_csv(filename, index=False)
		print(f"Saved {len(df)} ticks to {filename}")

	def saturation_fraction(self) -> Dict[str, float]:
		if not self.results or self.sim.n_bodies == 0:
			return {}
		df = self.to_frame()
		cols = ["acc_clamped", "vel_clamped", "pos_clamped"]
		return {c: float(np.mean(df[c].to_numpy()) / self.sim.n_bodies) for c in cols}

import argparse
from typing import List, Optional

from .sim_config import GalaxyConfig
from .initial_condition_generator import GalaxyGenerator
from .tick_reporter import TickReporter

"""
This module runs the galaxy simulation headless, standing in for a render loop that ticks once per frame with a constant elapsed time. The main function builds a configuration from command-line options, generates a seeded population, runs the requested number of ticks through a TickReporter, prints the final diagnostic summary and optionally writes the per-tick table to CSV.

"""


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Run the galaxy tick loop without a renderer.")
	parser.add_argument("--ticks", type=int, default=100)
	parser.add_argument("--bodies", type=int, default=GalaxyConfig.n_bodies)
	parser.add_argument("--elapsed", type=float, default=1.0 / 60.0,
						help="seconds per tick")
	parser.add_argument("--seed", type=int, default=42)
	parser.add_argument("--workers", type=int, default=1,
						help="threads for the force loop")
	parser.add_argument("--autoscale", action="store_true",
						help="fit the population to the display box instead of the fixed scale")
	parser.add_argument("--csv", default=None, help="write per-tick diagnostics here")
	return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
	args = _parse_args(argv)

	cfg = GalaxyConfig(
		n_bodies=args.bodies,
		force_workers=args.workers,
		display_mode="autoscale" if args.autoscale else "fixed",
	)
	with GalaxyGenerator(cfg, seed=args.seed).create_simulation() as sim:
		reporter = TickReporter(sim)
		df = reporter.run(args.ticks, args.elapsed, show_progress=True)

	if len(df):
		last = df.iloc[-1]
		print(f"tick {int(last['tick'])}: KE = {last['kinetic_energy']:.4e}, "
			  f"|p| = {last['momentum']:.4e}, r_max = {last['max_radius']:.4e}")
		for name, frac in reporter.saturation_fraction().items():
			print(f"  {name}: {frac:.1%} of bodies on average")

	if args.csv:
		reporter.save_csv(args.csv)
	return 0


if __name__ == "__main__":
	raise SystemExit(main())

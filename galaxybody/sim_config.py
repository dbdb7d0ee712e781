from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Tuple

"""
This central configuration module defines every constant of the galaxy simulation through the GalaxyConfig dataclass. Key parameters include the gravitational constant, the body count and anchor mass, the mass range and galaxy diameter used for initial sampling, the time and spin factors, the acceleration, velocity and softening limits applied every tick, and the display projection settings. The class provides copy and with_overrides helpers for configuration inheritance and validates the display mode against the allowed options. It serves as the single source of truth for simulation behavior, with all components referencing this configuration. The module assumes the caller supplies finite, non-negative values.

"""
_ALLOWED_DISPLAY_MODES = {
    "fixed",
    "autoscale",
}

@dataclass
class GalaxyConfig:
    G: float = 6.674e-11
    n_bodies: int = 1000
    anchor_mass: float = 0.0
    mass_range: Tuple[float, float] = (1.0e29, 1.0e32)
    galaxy_diameter: float = 1.0e13
    time_factor: float = 1.0e14
    spin_factor: float = 1e-5
    max_acceleration: float = 1e-2
    max_velocity: float = 1e-1
    min_gravity_distance: float = 1.0e1
    display_extent: float = 1000.0
    display_mode: str = "fixed"
    camera_distance: float = 2500.0
    camera_speed: float = 0.0
    force_workers: int = 1
    diag_prints: bool = True
    diag_print_limit: int = 3
    diag_print_interval: int = 1000

    def __post_init__(self) -> None:
        if self.display_mode not in _ALLOWED_DISPLAY_MODES:
            print(f"[warning] display_mode must be one of {sorted(_ALLOWED_DISPLAY_MODES)}; "
                  f"got {self.display_mode!r}, using 'fixed'")
            self.display_mode = "fixed"
        if self.force_workers < 1:
            self.force_workers = 1

    @property
    def position_limit(self) -> float:
        return 2.0 * self.galaxy_diameter

    @property
    def display_scale(self) -> float:
        return self.display_extent / self.galaxy_diameter

    def copy(self) -> "GalaxyConfig":
        return replace(self)

    def with_overrides(self, **kwargs) -> "GalaxyConfig":
        return replace(self, **kwargs)

"""
This initialization file serves as the main entry point for the galaxy simulation
package, exposing its public API through one namespace.

It re-exports the configuration (GalaxyConfig), the body records and store (Body,
BodyView, BodyStore), the per-tick pipeline (gravitational_acceleration, Integrator,
DisplayMapper, GalaxySimulation), the clamp helpers, initial-condition generation, the
camera orbit value, and the diagnostics and reporting tools, so callers can import any
major component directly from the package root.
"""

from .utils import set_global_seed
from .sim_config import GalaxyConfig
from .simulation_validator import SimulationValidator

from .body import Body
from .body_view import BodyView
from .simulation_state import BodyStore
from .simulation import GalaxySimulation
from .integrator import Integrator
from .physics_utils import limit_length, limit_lengths
from .forces import gravitational_acceleration, pairwise_acceleration
from .geometry_cache import geometry_buffers
from .display import DisplayMapper, bounding_box
from .camera import CameraOrbit, orbit_step

from .diagnostics import Diagnostics
from .initial_condition_generator import GalaxyGenerator
from .tick_reporter import TickReporter


__all__ = [
    "set_global_seed",
    "GalaxyConfig",
    "SimulationValidator",
    "Body",
    "BodyView",
    "BodyStore",
    "GalaxySimulation",
    "Integrator",
    "limit_length",
    "limit_lengths",
    "gravitational_acceleration",
    "pairwise_acceleration",
    "geometry_buffers",
    "DisplayMapper",
    "bounding_box",
    "CameraOrbit",
    "orbit_step",
    "Diagnostics",
    "GalaxyGenerator",
    "TickReporter",
]

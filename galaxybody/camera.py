from __future__ import annotations
import math
from dataclasses import dataclass, replace
import numpy as np

"""
This module keeps the orbiting camera as an explicit value instead of ambient global state. CameraOrbit holds the orbit angle, the orbit distance and the angular speed; orbit_step returns the next value for an elapsed time, wrapping the angle back by one full turn once it passes 2*pi. translation gives the float32 camera position (cos a * d, sin a * d, d), which the renderer points at the origin with +Z as up.

"""

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class CameraOrbit:
	angle: float = 0.0
	distance: float = 2500.0
	speed: float = 0.0

	def translation(self) -> np.ndarray:
		d = self.distance
		return np.array(
			[math.cos(self.angle) * d, math.sin(self.angle) * d, d],
			dtype=np.float32,
		)


def orbit_step(cam: CameraOrbit, elapsed: float) -> CameraOrbit:
	angle = cam.angle + float(elapsed) * cam.speed
	if angle > TWO_PI:
		angle -= TWO_PI
	return replace(cam, angle=angle)

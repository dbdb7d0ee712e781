"""
This module defines the Body class, a simple data container for a single point mass
in the galaxy simulation.

The class stores the fundamental properties (mass, position, velocity, acceleration) with
each vector held as a float64 numpy array of length 3, and provides a clean string
representation for debugging. It is the record handed in by scene setup and handed back
by BodyStore.bodies(); during ticking the same data lives in the store's arrays.
"""

from __future__ import annotations
import numpy as np


class Body:
	def __init__(self, mass: float, position, velocity=(0.0, 0.0, 0.0), acceleration=(0.0, 0.0, 0.0)):
		self.mass = float(mass)
		self.position = np.array(position, dtype=np.float64).reshape(3)
		self.velocity = np.array(velocity, dtype=np.float64).reshape(3)
		self.acceleration = np.array(acceleration, dtype=np.float64).reshape(3)

	def __repr__(self) -> str:
		return (f"Body(mass={self.mass}, position={self.position.tolist()}, "
				f"velocity={self.velocity.tolist()}, acceleration={self.acceleration.tolist()})")

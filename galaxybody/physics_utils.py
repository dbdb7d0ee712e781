import numpy as np

"""
This module provides the length clamps applied by the integrator every tick. limit_length rescales a single vector to a maximum magnitude while preserving its direction, and limit_lengths does the same row-wise for an (N,3) array. Vectors already within the limit, including the zero vector, are returned unchanged so no division by a zero length ever happens. Both functions return new arrays and leave their inputs untouched.


"""

def limit_length(v: np.ndarray, limit: float) -> np.ndarray:
	v = np.asarray(v, dtype=np.float64)
	length = float(np.sqrt(np.dot(v, v)))
	if length > limit:
		return v * (1.0 / length) * limit
	return v.copy()


def limit_lengths(vectors: np.ndarray, limit: float) -> np.ndarray:
	vectors = np.asarray(vectors, dtype=np.float64)
	out = vectors.copy()
	if out.size == 0:
		return out
	lengths = np.sqrt(np.einsum("ij,ij->i", vectors, vectors))
	over = lengths > limit
	if np.any(over):
		out[over] = vectors[over] * (1.0 / lengths[over])[:, None] * limit
	return out

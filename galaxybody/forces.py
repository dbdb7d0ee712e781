"""
This module implements the gravitational acceleration calculation for the galaxy tick.

The gravitational_acceleration function computes, for every body, the sum of the pulls
of all other bodies, using the displacement form d * (G * m_j / r^3) so no unit vector
is formed. Pairs whose separation is at or below the minimum gravity distance contribute
nothing. Each body's sum runs over the other bodies in ascending index order, so two
evaluations of the same snapshot are bit-identical. The outer index is processed in
contiguous row blocks of bounded size, so working memory grows linearly with the body
count, and the blocks can be evaluated on a thread pool; every block reads the same snapshot and
writes a disjoint slice, which leaves the per-body summation order and therefore the
result unchanged. pairwise_acceleration exposes the single-pair term for inspection.
"""

from __future__ import annotations
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Optional
import numpy as np
from numpy.typing import NDArray
from .geometry_cache import geometry_buffers




def _accumulate_rows(
    pos: NDArray[np.floating],
    mass: NDArray[np.floating],
    G: float,
    min_distance: float,
    start: int,
    stop: int,
) -> NDArray[np.floating]:
    diff, r, mask = geometry_buffers(pos[start:stop], pos, min_distance, offset=start)

    r_safe = np.where(mask, r, 1.0)
    r3 = r_safe * r_safe * r_safe
    coeff = np.where(mask, (G * mass[None, :]) / r3, 0.0)

    acc = np.zeros((stop - start, 3), dtype=np.float64)
    for j in range(pos.shape[0]):
        rows = mask[:, j]
        if np.any(rows):
            acc[rows] += diff[rows, j, :] * coeff[rows, j, None]
    return acc



BLOCK_ROWS = 256


def _row_blocks(n: int, size: int):
    size = max(1, int(size))
    return [(s, min(s + size, n)) for s in range(0, n, size)]


def _accumulate_blocks(pos, mass, G, min_distance, blocks, pool):
    out = np.empty_like(pos)
    if pool is None:
        for start, stop in blocks:
            out[start:stop] = _accumulate_rows(pos, mass, G, min_distance, start, stop)
        return out

    futures = [
        pool.submit(_accumulate_rows, pos, mass, G, min_distance, start, stop)
        for start, stop in blocks
    ]
    for (start, stop), fut in zip(blocks, futures):
        out[start:stop] = fut.result()
    return out


def gravitational_acceleration(
    pos: NDArray[np.floating],
    mass: NDArray[np.floating],
    G: float,
    min_distance: float,
    workers: int = 1,
    pool: Optional[Executor] = None,
    block_rows: int = BLOCK_ROWS,
) -> NDArray[np.floating]:

    pos_arr = np.asarray(pos, dtype=np.float64).reshape(-1, 3)
    m_arr = np.asarray(mass, dtype=np.float64).ravel()
    n = pos_arr.shape[0]

    if n == 0:
        return np.zeros((0, 3), dtype=np.float64)
    if m_arr.size != n:
        print(f"[error] mass has {m_arr.size} entries for {n} positions; returning zero acceleration")
        return np.zeros_like(pos_arr)
    if n < 2 or float(G) == 0.0:
        return np.zeros_like(pos_arr)

    G = float(G)
    min_distance = float(min_distance)
    workers = max(1, int(workers))

    # each block holds (rows, n, 3) temporaries, so rows stay bounded
    size = min(max(1, int(block_rows)), -(-n // workers))
    blocks = _row_blocks(n, size)

    if workers == 1 or len(blocks) == 1:
        return _accumulate_blocks(pos_arr, m_arr, G, min_distance, blocks, None)
    if pool is not None:
        return _accumulate_blocks(pos_arr, m_arr, G, min_distance, blocks, pool)
    with ThreadPoolExecutor(max_workers=workers) as tmp_pool:
        return _accumulate_blocks(pos_arr, m_arr, G, min_distance, blocks, tmp_pool)


def pairwise_acceleration(
    pos_i: NDArray[np.floating],
    pos_j: NDArray[np.floating],
    mass_j: float,
    G: float,
    min_distance: float,
) -> NDArray[np.floating]:
    d = np.asarray(pos_j, dtype=np.float64) - np.asarray(pos_i, dtype=np.float64)
    r = float(np.sqrt(d[0] * d[0] + d[1] * d[1] + d[2] * d[2]))
    if r > float(min_distance):
        return d * (float(G) * float(mass_j) / (r * r * r))
    return np.zeros(3, dtype=np.float64)

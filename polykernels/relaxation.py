"""Jacobi 1D/2D and Gauss-Seidel 2D relaxation stencils."""

from __future__ import annotations

import numpy as np

JACOBI_1D_WEIGHT = 0.33333
JACOBI_2D_WEIGHT = 0.2


def _check_steps(tsteps: int) -> int:
    steps = int(tsteps)
    if steps < 0:
        raise ValueError("the number of time steps must not be negative")
    return steps


def init_jacobi_1d(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the starting vectors ``(a, b)`` of length ``n``."""
    i = np.arange(n, dtype=np.float64)
    return (i + 2) / n, (i + 3) / n


def jacobi_1d(a, b, tsteps: int) -> tuple[np.ndarray, np.ndarray]:
    """Run ``tsteps`` three-point Jacobi steps, each updating ``b`` from ``a`` then ``a`` from ``b``.

    Returns new ``(a, b)`` arrays; the inputs are left untouched.
    """
    a_out = np.array(a, dtype=np.float64)
    b_out = np.array(b, dtype=np.float64)
    if a_out.ndim != 1:
        raise ValueError("jacobi_1d expects one-dimensional arrays")
    if b_out.shape != a_out.shape:
        raise ValueError("a and b must have the same shape")
    steps = _check_steps(tsteps)
    if a_out.shape[0] < 3:
        return a_out, b_out
    for _ in range(steps):
        b_out[1:-1] = JACOBI_1D_WEIGHT * (a_out[:-2] + a_out[1:-1] + a_out[2:])
        a_out[1:-1] = JACOBI_1D_WEIGHT * (b_out[:-2] + b_out[1:-1] + b_out[2:])
    return a_out, b_out


def init_jacobi_2d(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the starting n x n grids ``(a, b)``, indexed ``[i, j]``."""
    i = np.arange(n, dtype=np.float64).reshape(-1, 1)
    j = np.arange(n).reshape(1, -1)
    return (i * (j + 2) + 2) / n, (i * (j + 3) + 3) / n


def _jacobi_2d_step(src: np.ndarray, dst: np.ndarray) -> None:
    dst[1:-1, 1:-1] = JACOBI_2D_WEIGHT * (
        src[1:-1, 1:-1]
        + src[1:-1, :-2]
        + src[1:-1, 2:]
        + src[2:, 1:-1]
        + src[:-2, 1:-1]
    )


def jacobi_2d(a, b, tsteps: int) -> tuple[np.ndarray, np.ndarray]:
    """Run ``tsteps`` five-point Jacobi steps, each updating ``b`` from ``a`` then ``a`` from ``b``.

    Returns new ``(a, b)`` arrays; the inputs are left untouched.
    """
    a_out = np.array(a, dtype=np.float64)
    b_out = np.array(b, dtype=np.float64)
    if a_out.ndim != 2 or a_out.shape[0] != a_out.shape[1]:
        raise ValueError("jacobi_2d expects square two-dimensional grids")
    if b_out.shape != a_out.shape:
        raise ValueError("a and b must have the same shape")
    steps = _check_steps(tsteps)
    if a_out.shape[0] < 3:
        return a_out, b_out
    for _ in range(steps):
        _jacobi_2d_step(a_out, b_out)
        _jacobi_2d_step(b_out, a_out)
    return a_out, b_out


def init_seidel_2d(n: int) -> np.ndarray:
    """Return the starting n x n grid, indexed ``[i, j]``."""
    i = np.arange(n, dtype=np.float64).reshape(-1, 1)
    j = np.arange(n).reshape(1, -1)
    return (i * (j + 2) + 2) / n


def seidel_2d(a, tsteps: int) -> np.ndarray:
    """Run ``tsteps`` in-place nine-point Gauss-Seidel sweeps over the interior.

    Points are visited row by row, left to right, each one using the values
    already updated in the same sweep. Returns a new grid.
    """
    grid = np.array(a, dtype=np.float64)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise ValueError("seidel_2d expects a square two-dimensional grid")
    steps = _check_steps(tsteps)
    n = grid.shape[0]
    if n < 3:
        return grid
    for _ in range(steps):
        for i in range(1, n - 1):
            above = grid[i - 1]
            below = grid[i + 1]
            row = grid[i]
            # Everything but the left neighbour is known before the row is swept.
            known = (
                above[:-2] + above[1:-1] + above[2:]
                + row[1:-1] + row[2:]
                + below[:-2] + below[1:-1] + below[2:]
            )
            left = row[0]
            for j, part in enumerate(known, start=1):
                left = (part + left) / 9.0
                row[j] = left
    return grid
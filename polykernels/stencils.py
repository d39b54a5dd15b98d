"""ADI heat diffusion, 2D FDTD electromagnetics and 3D heat stencils."""

from __future__ import annotations

import numpy as np


def _check_steps(tsteps: int) -> int:
    steps = int(tsteps)
    if steps < 0:
        raise ValueError("the number of time steps must not be negative")
    return steps


def init_adi(n: int) -> np.ndarray:
    """Build the n x n starting grid of the ADI solver, indexed ``[i, j]``."""
    i = np.arange(n).reshape(-1, 1)
    j = np.arange(n).reshape(1, -1)
    return (i + n - j).astype(np.float64) / n


def adi(u, tsteps: int) -> np.ndarray:
    """Run ``tsteps`` alternating-direction implicit steps on a square grid.

    Each step solves a tridiagonal system column by column, then row by row.
    Returns a new grid; the input is left untouched.
    """
    grid = np.array(u, dtype=np.float64)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise ValueError("adi expects a square two-dimensional grid")
    steps = _check_steps(tsteps)
    n = grid.shape[0]
    if steps == 0 or n < 3:
        return grid

    dx = 1.0 / n
    dy = 1.0 / n
    dt = 1.0 / steps
    mul1 = 2.0 * dt / (dx * dx)
    mul2 = 1.0 * dt / (dy * dy)
    a = -mul1 / 2.0
    b = 1.0 + mul1
    c = a
    d = -mul2 / 2.0
    e = 1.0 + mul2
    f = d

    inner = slice(1, n - 1)
    rows = n - 2
    v = np.zeros((n, n))
    p = np.zeros((rows, n))
    q = np.zeros((rows, n))

    for _ in range(steps):
        # Column sweep: one tridiagonal system per interior column of ``u``.
        v[0, inner] = 1.0
        p[:, 0] = 0.0
        q[:, 0] = v[0, inner]
        for j in range(1, n - 1):
            denom = a * p[:, j - 1] + b
            p[:, j] = -c / denom
            q[:, j] = (
                -d * grid[j, 0:n - 2]
                + (1.0 + 2.0 * d) * grid[j, 1:n - 1]
                - f * grid[j, 2:n]
                - a * q[:, j - 1]
            ) / denom
        v[n - 1, inner] = 1.0
        for j in range(n - 2, 0, -1):
            v[j, inner] = p[:, j] * v[j + 1, inner] + q[:, j]

        # Row sweep: one tridiagonal system per interior row of ``u``.
        grid[inner, 0] = 1.0
        p[:, 0] = 0.0
        q[:, 0] = grid[inner, 0]
        for j in range(1, n - 1):
            denom = d * p[:, j - 1] + e
            p[:, j] = -f / denom
            q[:, j] = (
                -a * v[0:n - 2, j]
                + (1.0 + 2.0 * a) * v[1:n - 1, j]
                - c * v[2:n, j]
                - d * q[:, j - 1]
            ) / denom
        grid[inner, n - 1] = 1.0
        for j in range(n - 2, 0, -1):
            grid[inner, j] = p[:, j] * grid[inner, j + 1] + q[:, j]

    return grid


def init_fdtd_2d(
    tmax: int, nx: int, ny: int
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Return the starting ``(ex, ey, hz, fict)``; fields have shape (nx, ny)."""
    i = np.arange(nx, dtype=np.float64).reshape(-1, 1)
    j = np.arange(ny).reshape(1, -1)
    ex = i * (j + 1) / nx
    ey = i * (j + 2) / ny
    hz = i * (j + 3) / nx
    fict = np.arange(tmax, dtype=np.float64)
    return ex, ey, hz, fict


def fdtd_2d(ex, ey, hz, fict) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Advance the fields one time step per entry of ``fict``.

    Returns new ``(ex, ey, hz)`` arrays; the inputs are left untouched.
    """
    ex_out = np.array(ex, dtype=np.float64)
    ey_out = np.array(ey, dtype=np.float64)
    hz_out = np.array(hz, dtype=np.float64)
    source = np.asarray(fict, dtype=np.float64)
    if ex_out.ndim != 2:
        raise ValueError("fdtd_2d expects two-dimensional fields")
    if ey_out.shape != ex_out.shape or hz_out.shape != ex_out.shape:
        raise ValueError("ex, ey and hz must have the same shape")
    if source.ndim != 1:
        raise ValueError("fict must be one-dimensional")

    for value in source:
        ey_out[0, :] = value
        ey_out[1:, :] = ey_out[1:, :] - 0.5 * (hz_out[1:, :] - hz_out[:-1, :])
        ex_out[:, 1:] = ex_out[:, 1:] - 0.5 * (hz_out[:, 1:] - hz_out[:, :-1])
        hz_out[:-1, :-1] = hz_out[:-1, :-1] - 0.7 * (
            ex_out[:-1, 1:] - ex_out[:-1, :-1] + ey_out[1:, :-1] - ey_out[:-1, :-1]
        )
    return ex_out, ey_out, hz_out


def init_heat_3d(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return two equal n x n x n starting fields ``(a, b)``."""
    i = np.arange(n).reshape(-1, 1, 1)
    j = np.arange(n).reshape(1, -1, 1)
    k = np.arange(n).reshape(1, 1, -1)
    a = (i + j + (n - k)).astype(np.float64) * 10 / n
    return a, a.copy()


def _heat_step(src: np.ndarray, dst: np.ndarray) -> None:
    centre = src[1:-1, 1:-1, 1:-1]
    dst[1:-1, 1:-1, 1:-1] = (
        0.125 * (src[2:, 1:-1, 1:-1] - 2.0 * centre + src[:-2, 1:-1, 1:-1])
        + 0.125 * (src[1:-1, 2:, 1:-1] - 2.0 * centre + src[1:-1, :-2, 1:-1])
        + 0.125 * (src[1:-1, 1:-1, 2:] - 2.0 * centre + src[1:-1, 1:-1, :-2])
        + centre
    )


def heat_3d(a, b, tsteps: int) -> tuple[np.ndarray, np.ndarray]:
    """Run ``tsteps`` heat-equation steps, each updating ``b`` from ``a`` then ``a`` from ``b``.

    Returns new ``(a, b)`` arrays; the inputs are left untouched.
    """
    a_out = np.array(a, dtype=np.float64)
    b_out = np.array(b, dtype=np.float64)
    if a_out.ndim != 3 or len(set(a_out.shape)) != 1:
        raise ValueError("heat_3d expects cubic three-dimensional fields")
    if b_out.shape != a_out.shape:
        raise ValueError("a and b must have the same shape")
    steps = _check_steps(tsteps)
    if a_out.shape[0] < 3:
        return a_out, b_out
    for _ in range(steps):
        _heat_step(a_out, b_out)
        _heat_step(b_out, a_out)
    return a_out, b_out
"""Durbin's Yule-Walker solver and forward-substitution triangular solve."""

from __future__ import annotations

import numpy as np


def init_durbin(n: int) -> np.ndarray:
    """Return the vector ``r`` with ``r[i] = n + 1 - i``."""
    return (n + 1 - np.arange(n)).astype(np.float64)


def durbin(r) -> np.ndarray:
    """Solve the Yule-Walker equations ``T y = -r``.

    ``T`` is the symmetric unit-diagonal Toeplitz matrix whose first row is
    ``[1, r[0], ..., r[n-2]]``.
    """
    rv = np.asarray(r, dtype=np.float64)
    if rv.ndim != 1 or rv.shape[0] == 0:
        raise ValueError("durbin expects a non-empty one-dimensional vector")
    n = rv.shape[0]
    y = np.zeros(n)
    y[0] = -rv[0]
    beta = 1.0
    alpha = -rv[0]
    for k in range(1, n):
        beta = (1.0 - alpha * alpha) * beta
        total = float(np.dot(rv[k - 1::-1], y[:k]))
        alpha = -(rv[k] + total) / beta
        y[:k] = y[:k] + alpha * y[k - 1::-1]
        y[k] = alpha
    return y


def init_trisolv(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return a lower triangular n x n matrix ``l`` and right-hand side ``b``."""
    i = np.arange(n).reshape(-1, 1)
    j = np.arange(n).reshape(1, -1)
    l = np.where(j <= i, (i + n - j + 1) * 2.0 / n, 0.0)
    b = np.arange(n, dtype=np.float64)
    return l, b


def trisolv(l, b) -> np.ndarray:
    """Solve ``l x = b`` by forward substitution; only the lower triangle of ``l`` is read."""
    lm = np.asarray(l, dtype=np.float64)
    bv = np.asarray(b, dtype=np.float64)
    if lm.ndim != 2 or lm.shape[0] != lm.shape[1]:
        raise ValueError("trisolv expects a square matrix")
    if bv.shape != (lm.shape[0],):
        raise ValueError("b must be a vector matching the matrix size")
    x = np.empty_like(bv)
    for i, row in enumerate(lm):
        x[i] = (bv[i] - np.dot(row[:i], x[:i])) / row[i]
    return x
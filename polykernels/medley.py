"""Deriche edge filter, Floyd-Warshall shortest paths and Nussinov RNA folding."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

DERICHE_ALPHA = 0.25


@dataclass(frozen=True)
class DericheCoefficients:
    """Coefficients of the recursive Deriche filter."""

    a1: float
    a2: float
    a3: float
    a4: float
    a5: float
    a6: float
    a7: float
    a8: float
    b1: float
    b2: float
    c1: float
    c2: float


def deriche_coefficients(alpha: float = DERICHE_ALPHA) -> DericheCoefficients:
    """Compute the filter coefficients for the given ``alpha``."""
    e = math.exp(-alpha)
    k = (1.0 - e) * (1.0 - e) / (1.0 + 2.0 * alpha * e - math.exp(2.0 * alpha))
    a1 = k
    a2 = k * e * (alpha - 1.0)
    a3 = k * e * (alpha + 1.0)
    a4 = -k * math.exp(-2.0 * alpha)
    return DericheCoefficients(
        a1=a1, a2=a2, a3=a3, a4=a4,
        a5=a1, a6=a2, a7=a3, a8=a4,
        b1=math.pow(2.0, -alpha),
        b2=-math.exp(-2.0 * alpha),
        c1=1.0, c2=1.0,
    )


def init_deriche(width: int, height: int) -> np.ndarray:
    """Build the grayscale input image, indexed ``[i, j]`` with shape (width, height)."""
    i = np.arange(width).reshape(-1, 1)
    j = np.arange(height).reshape(1, -1)
    return ((313 * i + 991 * j) % 65536).astype(np.float64) / 65535.0


def _causal(x: np.ndarray, a_cur: float, a_prev: float, b1: float, b2: float) -> np.ndarray:
    out = np.empty_like(x)
    rows = x.shape[0]
    x_prev = np.zeros(rows)
    y_prev = np.zeros(rows)
    y_prev2 = np.zeros(rows)
    for j in range(x.shape[1]):
        cur = a_cur * x[:, j] + a_prev * x_prev + b1 * y_prev + b2 * y_prev2
        out[:, j] = cur
        x_prev = x[:, j]
        y_prev2, y_prev = y_prev, cur
    return out


def _anticausal(x: np.ndarray, a_next: float, a_next2: float, b1: float, b2: float) -> np.ndarray:
    out = np.empty_like(x)
    rows = x.shape[0]
    x_next = np.zeros(rows)
    x_next2 = np.zeros(rows)
    y_next = np.zeros(rows)
    y_next2 = np.zeros(rows)
    for j in reversed(range(x.shape[1])):
        cur = a_next * x_next + a_next2 * x_next2 + b1 * y_next + b2 * y_next2
        out[:, j] = cur
        x_next2, x_next = x_next, x[:, j]
        y_next2, y_next = y_next, cur
    return out


def deriche(img_in, alpha: float = DERICHE_ALPHA) -> np.ndarray:
    """Apply the Deriche filter: a horizontal pass along ``j``, then a vertical pass along ``i``."""
    img = np.asarray(img_in, dtype=np.float64)
    if img.ndim != 2:
        raise ValueError("deriche expects a two-dimensional image")
    c = deriche_coefficients(alpha)
    r = c.c1 * (
        _causal(img, c.a1, c.a2, c.b1, c.b2) + _anticausal(img, c.a3, c.a4, c.b1, c.b2)
    )
    rt = np.ascontiguousarray(r.T)
    out = c.c2 * (
        _causal(rt, c.a5, c.a6, c.b1, c.b2) + _anticausal(rt, c.a7, c.a8, c.b1, c.b2)
    )
    return np.ascontiguousarray(out.T)


def init_floyd_warshall(n: int) -> np.ndarray:
    """Build the n x n edge-cost matrix; 999 marks a missing edge."""
    i = np.arange(n).reshape(-1, 1)
    j = np.arange(n).reshape(1, -1)
    path = (i * j % 7 + 1).astype(np.float64)
    s = i + j
    missing = (s % 13 == 0) | (s % 7 == 0) | (s % 11 == 0)
    path[missing] = 999.0
    return path


def floyd_warshall(paths) -> np.ndarray:
    """Return the matrix of shortest path lengths between every pair of nodes."""
    p = np.array(paths, dtype=np.float64)
    if p.ndim != 2 or p.shape[0] != p.shape[1]:
        raise ValueError("floyd_warshall expects a square matrix")
    for k in range(p.shape[0]):
        np.minimum(p, p[:, k:k + 1] + p[k:k + 1, :], out=p)
    return p


def init_nussinov(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the base sequence (bases coded 0..3) and a zeroed n x n table."""
    seq = ((np.arange(n) + 1) % 4).astype(np.float64)
    return seq, np.zeros((n, n), dtype=np.float64)


def nussinov(seq, table=None) -> np.ndarray:
    """Fill the Nussinov dynamic-programming table for ``seq``; returns a new table."""
    s = np.asarray(seq, dtype=np.float64)
    if s.ndim != 1:
        raise ValueError("nussinov expects a one-dimensional sequence")
    n = s.shape[0]
    t = np.zeros((n, n)) if table is None else np.array(table, dtype=np.float64)
    if t.shape != (n, n):
        raise ValueError("table must be square with the sequence's length")
    for i in reversed(range(n)):
        for j in range(i + 1, n):
            best = max(t[i, j], t[i, j - 1], t[i + 1, j])
            if i < j - 1:
                pair = 1.0 if s[i] + s[j] == 3.0 else 0.0
                best = max(best, t[i + 1, j - 1] + pair)
            else:
                best = max(best, t[i + 1, j - 1])
            if j - i > 1:
                best = max(best, float(np.max(t[i, i + 1:j] + t[i + 2:j + 1, j])))
            t[i, j] = best
    return t
"""Cholesky, LU, LU-based linear solve and modified Gram-Schmidt QR."""

from __future__ import annotations

import math

import numpy as np

GRAMSCHMIDT_EPS = 0.000001


def _square_copy(a, name: str) -> np.ndarray:
    m = np.array(a, dtype=np.float64)
    if m.ndim != 2 or m.shape[0] != m.shape[1]:
        raise ValueError(f"{name} expects a square matrix")
    return m


def init_spd_matrix(n: int) -> np.ndarray:
    """Build an n x n symmetric positive semi-definite matrix ``L @ L.T``.

    ``L`` is unit lower triangular with ``L[i, j] = 1 - j / n`` below the diagonal.
    """
    i = np.arange(n).reshape(-1, 1)
    j = np.arange(n).reshape(1, -1)
    lower = np.where(j <= i, 1.0 - j / n, 0.0) if n else np.zeros((0, 0))
    np.fill_diagonal(lower, 1.0)
    return lower @ lower.T


def cholesky(a) -> np.ndarray:
    """Factor ``a`` as ``L @ L.T``, writing ``L`` over the lower triangle.

    The strict upper triangle of the result is left as it was in ``a``.
    Returns a new matrix; raises ValueError if ``a`` is not positive definite.
    """
    m = _square_copy(a, "cholesky")
    for i, row in enumerate(m):
        for j in range(i):
            row[j] = (row[j] - row[:j] @ m[j, :j]) / m[j, j]
        diag = row[i] - row[:i] @ row[:i]
        if diag <= 0.0:
            raise ValueError("matrix is not positive definite")
        row[i] = math.sqrt(diag)
    return m


def lu(a) -> np.ndarray:
    """Factor ``a`` as ``L @ U`` without pivoting.

    Returns one matrix holding ``U`` on and above the diagonal and the strict
    lower part of the unit lower triangular ``L`` below it.
    """
    m = _square_copy(a, "lu")
    n = m.shape[0]
    for i in range(n):
        row = m[i]
        for j in range(i):
            pivot = m[j, j]
            if pivot == 0.0:
                raise ValueError("zero pivot; the matrix needs pivoting")
            row[j] = (row[j] - row[:j] @ m[:j, j]) / pivot
        row[i:] = row[i:] - row[:i] @ m[:i, i:]
    return m


def init_ludcmp(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the matrix ``a`` and right-hand side ``b`` of the linear system."""
    b = (np.arange(n, dtype=np.float64) + 1) / float(n) / 2.0 + 4
    return init_spd_matrix(n), b


def ludcmp(a, b) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Solve ``a x = b`` by LU factorisation and two triangular substitutions.

    Returns ``(lu_matrix, y, x)`` where ``lu_matrix`` is the combined factor
    as from :func:`lu`, ``y`` solves ``L y = b`` and ``x`` solves ``U x = y``.
    """
    factors = lu(a)
    bv = np.asarray(b, dtype=np.float64)
    n = factors.shape[0]
    if bv.shape != (n,):
        raise ValueError("b must be a vector matching the matrix size")

    y = np.zeros(n)
    for i, row in enumerate(factors):
        y[i] = bv[i] - row[:i] @ y[:i]

    x = np.zeros(n)
    for i in reversed(range(n)):
        row = factors[i]
        if row[i] == 0.0:
            raise ValueError("matrix is singular")
        x[i] = (y[i] - row[i + 1:] @ x[i + 1:]) / row[i]
    return factors, y, x


def init_gramschmidt(m: int, n: int) -> np.ndarray:
    """Return the m x n input matrix with ``a[i, j] = (i*j % m) / m * 100 + 10``."""
    i = np.arange(m).reshape(-1, 1)
    j = np.arange(n).reshape(1, -1)
    return ((i * j) % m).astype(np.float64) / m * 100 + 10


def gramschmidt(a) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """QR decomposition by modified Gram-Schmidt.

    Returns ``(a_out, q, r)``: the residual columns left in the working copy
    of ``a``, the m x n matrix ``q`` and the n x n upper triangular ``r``.
    """
    work = np.array(a, dtype=np.float64)
    if work.ndim != 2:
        raise ValueError("gramschmidt expects a two-dimensional matrix")
    m, n = work.shape
    q = np.zeros((m, n))
    r = np.zeros((n, n))
    for k in range(n):
        column = work[:, k]
        r[k, k] = math.sqrt(GRAMSCHMIDT_EPS + column @ column)
        q[:, k] = column / r[k, k]
        r[k, k + 1:] = q[:, k] @ work[:, k + 1:]
        work[:, k + 1:] -= np.outer(q[:, k], r[k, k + 1:])
    return work, q, r
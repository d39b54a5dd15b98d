import numpy as np
import pytest

from polykernels.solvers import durbin, init_durbin, init_trisolv, trisolv


def _toeplitz(r):
    n = len(r)
    t = np.eye(n)
    for i in range(n):
        for j in range(n):
            if i != j:
                t[i, j] = r[abs(i - j) - 1]
    return t


def test_init_durbin_values():
    r = init_durbin(40)
    assert r.shape == (40,)
    assert r[0] == 41.0
    assert r[-1] == 2.0


def test_durbin_single_entry():
    np.testing.assert_allclose(durbin([0.5]), [-0.5])


@pytest.mark.parametrize(
    "r",
    [
        [0.5, 0.2, 0.1],
        [0.3, -0.1, 0.05, 0.02, -0.01],
        [0.6, 0.3, 0.15, 0.07],
    ],
)
def test_durbin_solves_yule_walker(r):
    y = durbin(r)
    np.testing.assert_allclose(_toeplitz(r) @ y, -np.asarray(r), atol=1e-10)


def test_durbin_does_not_modify_input():
    r = np.array([0.4, 0.2, 0.1])
    copy = r.copy()
    durbin(r)
    np.testing.assert_array_equal(r, copy)


def test_durbin_errors():
    with pytest.raises(ValueError):
        durbin([])
    with pytest.raises(ValueError):
        durbin(np.zeros((2, 2)))


def test_init_trisolv_is_lower_triangular():
    l, b = init_trisolv(10)
    assert l.shape == (10, 10)
    np.testing.assert_array_equal(np.triu(l, 1), 0.0)
    assert np.all(np.diag(l) > 0)
    np.testing.assert_array_equal(b, np.arange(10))


def test_trisolv_solves_system():
    l, b = init_trisolv(40)
    x = trisolv(l, b)
    np.testing.assert_allclose(l @ x, b, atol=1e-9)
    assert x[0] == 0.0


def test_trisolv_ignores_upper_triangle():
    l, b = init_trisolv(6)
    noisy = l + np.triu(np.full((6, 6), 7.0), 1)
    np.testing.assert_allclose(trisolv(noisy, b), trisolv(l, b))


def test_trisolv_identity():
    b = np.array([1.0, -2.0, 3.5])
    np.testing.assert_allclose(trisolv(np.eye(3), b), b)


def test_trisolv_errors():
    with pytest.raises(ValueError):
        trisolv(np.ones((2, 3)), np.ones(2))
    with pytest.raises(ValueError):
        trisolv(np.eye(3), np.ones(4))
import numpy as np
import pytest

from polykernels.relaxation import (
    init_jacobi_1d,
    init_jacobi_2d,
    init_seidel_2d,
    jacobi_1d,
    jacobi_2d,
    seidel_2d,
)


def test_init_jacobi_1d_shapes_and_first_values():
    a, b = init_jacobi_1d(30)
    assert a.shape == (30,) and b.shape == (30,)
    assert a[0] == pytest.approx(2 / 30)
    assert b[0] == pytest.approx(3 / 30)


def test_jacobi_1d_zero_steps_is_identity():
    a, b = init_jacobi_1d(10)
    a2, b2 = jacobi_1d(a, b, 0)
    np.testing.assert_array_equal(a2, a)
    np.testing.assert_array_equal(b2, b)


def test_jacobi_1d_keeps_boundary_and_inputs():
    a, b = init_jacobi_1d(12)
    a_copy, b_copy = a.copy(), b.copy()
    a2, b2 = jacobi_1d(a, b, 5)
    np.testing.assert_array_equal(a, a_copy)
    np.testing.assert_array_equal(b, b_copy)
    assert a2[0] == a[0] and a2[-1] == a[-1]
    assert b2[0] == b[0] and b2[-1] == b[-1]
    assert not np.array_equal(a2, a)


def test_jacobi_1d_is_linear():
    a, b = init_jacobi_1d(15)
    a1, b1 = jacobi_1d(a, b, 4)
    a2, b2 = jacobi_1d(2 * a, 2 * b, 4)
    np.testing.assert_allclose(a2, 2 * a1)
    np.testing.assert_allclose(b2, 2 * b1)


def test_jacobi_1d_commutes_with_reversal():
    a, b = init_jacobi_1d(11)
    a1, b1 = jacobi_1d(a, b, 3)
    a2, b2 = jacobi_1d(a[::-1], b[::-1], 3)
    np.testing.assert_allclose(a2, a1[::-1])
    np.testing.assert_allclose(b2, b1[::-1])


def test_jacobi_1d_errors():
    with pytest.raises(ValueError):
        jacobi_1d(np.zeros(5), np.zeros(4), 1)
    with pytest.raises(ValueError):
        jacobi_1d(np.zeros(5), np.zeros(5), -1)
    with pytest.raises(ValueError):
        jacobi_1d(np.zeros((3, 3)), np.zeros((3, 3)), 1)


def test_init_jacobi_2d_values():
    a, b = init_jacobi_2d(30)
    assert a.shape == (30, 30) and b.shape == (30, 30)
    assert a[0, 0] == pytest.approx(2 / 30)
    assert b[0, 0] == pytest.approx(3 / 30)


def test_jacobi_2d_preserves_constant_field():
    a = np.full((8, 8), 3.0)
    a2, b2 = jacobi_2d(a, a.copy(), 6)
    np.testing.assert_allclose(a2, a)
    np.testing.assert_allclose(b2, a)


def test_jacobi_2d_boundary_fixed_and_transpose_symmetry():
    a, b = init_jacobi_2d(9)
    a1, b1 = jacobi_2d(a, b, 3)
    np.testing.assert_array_equal(a1[0], a[0])
    np.testing.assert_array_equal(a1[:, -1], a[:, -1])
    a2, b2 = jacobi_2d(a.T, b.T, 3)
    np.testing.assert_allclose(a2, a1.T)
    np.testing.assert_allclose(b2, b1.T)


def test_jacobi_2d_errors():
    with pytest.raises(ValueError):
        jacobi_2d(np.zeros((4, 5)), np.zeros((4, 5)), 1)
    with pytest.raises(ValueError):
        jacobi_2d(np.zeros((4, 4)), np.zeros((5, 5)), 1)


def test_init_seidel_2d_matches_jacobi_a():
    a, _ = init_jacobi_2d(12)
    np.testing.assert_array_equal(init_seidel_2d(12), a)


def test_seidel_2d_three_by_three_centre_is_mean():
    a = np.arange(9, dtype=np.float64).reshape(3, 3)
    out = seidel_2d(a, 1)
    assert out[1, 1] == pytest.approx(np.mean(a))
    out[1, 1] = a[1, 1]
    np.testing.assert_array_equal(out, a)


def test_seidel_2d_uses_updated_neighbours():
    a = init_seidel_2d(5)
    out = seidel_2d(a, 1)
    i, j = 2, 2
    expected = (
        out[i - 1, j - 1] + out[i - 1, j] + out[i - 1, j + 1]
        + out[i, j - 1] + a[i, j] + a[i, j + 1]
        + a[i + 1, j - 1] + a[i + 1, j] + a[i + 1, j + 1]
    ) / 9.0
    assert out[i, j] == pytest.approx(expected)


def test_seidel_2d_preserves_constant_and_boundary():
    a = np.full((7, 7), 2.5)
    np.testing.assert_allclose(seidel_2d(a, 4), a)
    b = init_seidel_2d(7)
    out = seidel_2d(b, 4)
    np.testing.assert_array_equal(out[-1], b[-1])
    np.testing.assert_array_equal(out[:, 0], b[:, 0])


def test_seidel_2d_errors():
    with pytest.raises(ValueError):
        seidel_2d(np.zeros((3, 4)), 1)
    with pytest.raises(ValueError):
        seidel_2d(np.zeros((3, 3)), -2)
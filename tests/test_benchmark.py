import csv

import numpy as np
import pytest

from polykernels import relaxation, solvers
from polykernels.benchmark import (
    KERNELS,
    ArrayMismatch,
    BenchmarkResult,
    Kernel,
    compare_arrays,
    main,
    median,
    time_kernel,
)
from polykernels.dataset import Dataset


def test_median_odd_count():
    assert median([3.0, 1.0, 2.0]) == 2.0


def test_median_even_count():
    assert median([4.0, 1.0, 3.0, 2.0]) == 2.5


def test_median_empty_raises():
    with pytest.raises(ValueError):
        median([])


def test_compare_identical_arrays_returns_zero():
    a = np.arange(6.0).reshape(2, 3)
    assert compare_arrays("same", a, a.copy()) == 0.0


def test_compare_within_tolerance_returns_max_difference():
    expected = np.array([1.0, 2.0, 3.0])
    actual = expected + np.array([0.0, 0.00005, 0.0])
    diff = compare_arrays("close", expected, actual, 0.0001)
    assert diff == pytest.approx(0.00005)


def test_compare_beyond_tolerance_raises():
    expected = np.zeros((2, 2))
    actual = expected.copy()
    actual[1, 0] = 1.0
    with pytest.raises(ArrayMismatch, match=r"\(1, 0\)"):
        compare_arrays("grid", expected, actual, 0.00001)


def test_compare_shape_mismatch_raises():
    with pytest.raises(ArrayMismatch):
        compare_arrays("shape", np.zeros(3), np.zeros(4))


def test_registry_covers_every_kernel():
    expected = {
        "deriche", "floyd_warshall", "nussinov", "adi", "fdtd_2d", "heat_3d",
        "jacobi_1d", "jacobi_2d", "seidel_2d", "cholesky", "durbin",
        "gramschmidt", "lu", "ludcmp", "trisolv",
    }
    assert set(KERNELS) == expected
    for name in sorted(expected):
        inputs = KERNELS[name].setup(Dataset.MINI)
        assert sum(np.asarray(x).size for x in inputs) > 0


def test_kernel_setup_uses_dataset_sizes():
    l, b = KERNELS["trisolv"].setup(Dataset.MINI)
    assert l.shape == (40, 40)
    assert b.shape == (40,)


def test_kernel_run_matches_direct_call():
    kernel = KERNELS["trisolv"]
    inputs = kernel.setup("mini")
    result = kernel.run(inputs)
    np.testing.assert_allclose(result, solvers.trisolv(*inputs))


def test_custom_kernel():
    kernel = Kernel("durbin", lambda s: (np.full(s["n"], 0.5),), lambda r: r.sum())
    assert kernel.run(kernel.setup("mini")) == 20.0


def test_time_kernel_records_each_repeat():
    result = time_kernel("jacobi_1d", "mini", 2)
    assert isinstance(result, BenchmarkResult)
    assert len(result.durations) == 2
    assert all(d >= 0.0 for d in result.durations)
    assert result.median_ms == median(result.durations)
    a, b = relaxation.init_jacobi_1d(30)
    expected_a, expected_b = relaxation.jacobi_1d(a, b, 20)
    assert compare_arrays("a", expected_a, result.output[0]) == 0.0
    assert compare_arrays("b", expected_b, result.output[1]) == 0.0


def test_time_kernel_unknown_kernel():
    with pytest.raises(ValueError):
        time_kernel("no_such_kernel", "mini", 1)


def test_time_kernel_unknown_dataset():
    with pytest.raises(ValueError):
        time_kernel("durbin", "gigantic", 1)


def test_time_kernel_rejects_zero_repeats():
    with pytest.raises(ValueError):
        time_kernel("durbin", "mini", 0)


def test_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "performance.csv"
    assert main(["durbin", "--repeats", "1", "--csv", str(out)]) == 0
    with out.open() as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == ["kernel", "dataset", "median_ms"]
    assert rows[1][:2] == ["durbin", "mini"]
    assert float(rows[1][2]) >= 0.0
    assert "durbin mini" in capsys.readouterr().out


def test_main_rejects_unknown_kernel():
    with pytest.raises(SystemExit):
        main(["no_such_kernel"])
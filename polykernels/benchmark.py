"""Timing harness that runs the kernels on their standard datasets."""

from __future__ import annotations

import argparse
import csv
import statistics
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np

from . import factorizations, medley, relaxation, solvers, stencils
from .dataset import KERNELS as KERNEL_NAMES
from .dataset import Dataset, sizes_for

DEFAULT_REPEATS = 3


class ArrayMismatch(ValueError):
    """Raised when two arrays differ by more than the allowed tolerance."""


@dataclass(frozen=True)
class Kernel:
    """A benchmark kernel: how to build its inputs and how to run it."""

    name: str
    build: Callable[[dict[str, int]], tuple[Any, ...]]
    compute: Callable[..., Any]

    def setup(self, dataset: Dataset | str) -> tuple[Any, ...]:
        """Build the kernel's inputs at the given dataset scale."""
        return self.build(sizes_for(self.name, dataset))

    def run(self, inputs: Sequence[Any]) -> Any:
        """Run the kernel on inputs produced by :meth:`setup`."""
        return self.compute(*inputs)


@dataclass(frozen=True)
class BenchmarkResult:
    """Durations, in milliseconds, of repeated runs of one kernel."""

    kernel: str
    dataset: Dataset
    durations: tuple[float, ...]
    output: Any = field(repr=False, compare=False)

    @property
    def median_ms(self) -> float:
        """Median duration in milliseconds."""
        return median(self.durations)


def _kernel_table() -> dict[str, Kernel]:
    builders: dict[str, tuple[Callable[[dict[str, int]], tuple[Any, ...]], Callable[..., Any]]] = {
        "deriche": (lambda s: (medley.init_deriche(s["w"], s["h"]),), medley.deriche),
        "floyd_warshall": (
            lambda s: (medley.init_floyd_warshall(s["n"]),),
            medley.floyd_warshall,
        ),
        "nussinov": (lambda s: medley.init_nussinov(s["n"]), medley.nussinov),
        "adi": (lambda s: (stencils.init_adi(s["n"]), s["tsteps"]), stencils.adi),
        "fdtd_2d": (
            lambda s: stencils.init_fdtd_2d(s["tmax"], s["nx"], s["ny"]),
            stencils.fdtd_2d,
        ),
        "heat_3d": (
            lambda s: (*stencils.init_heat_3d(s["n"]), s["tsteps"]),
            stencils.heat_3d,
        ),
        "jacobi_1d": (
            lambda s: (*relaxation.init_jacobi_1d(s["n"]), s["tsteps"]),
            relaxation.jacobi_1d,
        ),
        "jacobi_2d": (
            lambda s: (*relaxation.init_jacobi_2d(s["n"]), s["tsteps"]),
            relaxation.jacobi_2d,
        ),
        "seidel_2d": (
            lambda s: (relaxation.init_seidel_2d(s["n"]), s["tsteps"]),
            relaxation.seidel_2d,
        ),
        "cholesky": (
            lambda s: (factorizations.init_spd_matrix(s["n"]),),
            factorizations.cholesky,
        ),
        "durbin": (lambda s: (solvers.init_durbin(s["n"]),), solvers.durbin),
        "gramschmidt": (
            lambda s: (factorizations.init_gramschmidt(s["m"], s["n"]),),
            factorizations.gramschmidt,
        ),
        "lu": (lambda s: (factorizations.init_spd_matrix(s["n"]),), factorizations.lu),
        "ludcmp": (lambda s: factorizations.init_ludcmp(s["n"]), factorizations.ludcmp),
        "trisolv": (lambda s: solvers.init_trisolv(s["n"]), solvers.trisolv),
    }
    return {name: Kernel(name, *builders[name]) for name in KERNEL_NAMES}


KERNELS: dict[str, Kernel] = _kernel_table()


def _resolve(kernel: Kernel | str) -> Kernel:
    if isinstance(kernel, Kernel):
        return kernel
    key = str(kernel).lower().replace("-", "_")
    try:
        return KERNELS[key]
    except KeyError:
        raise ValueError(f"unknown kernel: {kernel!r}") from None


def _resolve_dataset(dataset: Dataset | str) -> Dataset:
    if isinstance(dataset, Dataset):
        return dataset
    try:
        return Dataset(str(dataset).lower())
    except ValueError:
        raise ValueError(f"unknown dataset: {dataset!r}") from None


def median(durations: Iterable[float]) -> float:
    """Return the median of the given durations."""
    values = list(durations)
    if not values:
        raise ValueError("no durations to take the median of")
    return float(statistics.median(values))


def time_kernel(
    kernel: Kernel | str, dataset: Dataset | str = Dataset.MINI, repeats: int = DEFAULT_REPEATS
) -> BenchmarkResult:
    """Run ``kernel`` ``repeats`` times on fresh inputs, timing only the computation."""
    if repeats < 1:
        raise ValueError("repeats must be at least 1")
    chosen = _resolve(kernel)
    scale = _resolve_dataset(dataset)
    durations = []
    output: Any = None
    for _ in range(repeats):
        inputs = chosen.setup(scale)
        start = time.perf_counter()
        output = chosen.run(inputs)
        durations.append((time.perf_counter() - start) * 1000.0)
    return BenchmarkResult(chosen.name, scale, tuple(durations), output)


def compare_arrays(name: str, expected, actual, tolerance: float = 0.0) -> float:
    """Check that two arrays agree element-wise within ``tolerance``.

    Returns the largest absolute difference; raises :class:`ArrayMismatch`
    naming the first differing index when the tolerance is exceeded.
    """
    exp = np.asarray(expected, dtype=np.float64)
    act = np.asarray(actual, dtype=np.float64)
    if exp.shape != act.shape:
        raise ArrayMismatch(f"{name}: shape {act.shape} does not match expected {exp.shape}")
    if exp.size == 0:
        return 0.0
    diff = np.abs(exp - act)
    bad = diff > tolerance
    if bad.any():
        index = tuple(int(k) for k in np.argwhere(bad)[0])
        raise ArrayMismatch(
            f"{name}: at {index} expected {exp[index]!r}, got {act[index]!r}"
        )
    return float(diff.max())


def _print_output(output: Any) -> None:
    parts = output if isinstance(output, tuple) else (output,)
    for part in parts:
        print(np.asarray(part))


def _append_csv(path: Path, results: Sequence[BenchmarkResult]) -> None:
    new_file = not path.exists() or path.stat().st_size == 0
    with path.open("a", newline="") as handle:
        writer = csv.writer(handle)
        if new_file:
            writer.writerow(["kernel", "dataset", "median_ms"])
        for result in results:
            writer.writerow([result.kernel, result.dataset.value, f"{result.median_ms:.6f}"])


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: time the chosen kernels and report medians."""
    parser = argparse.ArgumentParser(prog="polykernels", description=__doc__)
    parser.add_argument(
        "kernels", nargs="*", choices=[*KERNELS, []][:-1] or None, metavar="KERNEL",
        help="kernels to run (default: all)",
    )
    parser.add_argument(
        "--dataset", default=Dataset.MINI.value, choices=[d.value for d in Dataset]
    )
    parser.add_argument("--repeats", type=int, default=DEFAULT_REPEATS)
    parser.add_argument("--csv", type=Path, default=None, help="append medians to this file")
    parser.add_argument("--print-output", action="store_true")
    args = parser.parse_args(argv)

    unknown = [k for k in args.kernels if k not in KERNELS]
    if unknown:
        parser.error(f"unknown kernel: {unknown[0]}")
    if args.repeats < 1:
        parser.error("--repeats must be at least 1")

    names = args.kernels or list(KERNELS)
    results = []
    for name in names:
        result = time_kernel(name, args.dataset, args.repeats)
        results.append(result)
        print(f"{result.kernel} {result.dataset.value} {result.median_ms:.3f} ms")
        if args.print_output:
            _print_output(result.output)

    if args.csv is not None:
        _append_csv(args.csv, results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
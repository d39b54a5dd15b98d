"""NumPy benchmark kernels with deterministic inputs, dataset sizes and a timing harness."""

__version__ = "0.1.0"

__all__ = [
    "benchmark",
    "dataset",
    "factorizations",
    "medley",
    "relaxation",
    "solvers",
    "stencils",
]
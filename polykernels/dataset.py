"""Problem sizes for each kernel at each dataset scale."""

from __future__ import annotations

from enum import Enum


class Dataset(Enum):
    """Scale of a benchmark problem."""

    MINI = "mini"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"


_ORDER = (Dataset.MINI, Dataset.SMALL, Dataset.MEDIUM, Dataset.LARGE, Dataset.XLARGE)

# kernel -> (size names, one row of values per dataset in _ORDER)
_TABLE: dict[str, tuple[tuple[str, ...], tuple[tuple[int, ...], ...]]] = {
    "deriche": (
        ("w", "h"),
        ((64, 64), (192, 128), (720, 480), (4096, 2160), (7680, 4320)),
    ),
    "floyd_warshall": (("n",), ((60,), (180,), (500,), (2800,), (5600,))),
    "nussinov": (("n",), ((60,), (180,), (500,), (2500,), (5500,))),
    "adi": (
        ("tsteps", "n"),
        ((20, 20), (40, 60), (100, 200), (500, 1000), (1000, 2000)),
    ),
    "fdtd_2d": (
        ("tmax", "nx", "ny"),
        (
            (20, 20, 30),
            (40, 60, 80),
            (100, 200, 240),
            (500, 1000, 1200),
            (1000, 2000, 2600),
        ),
    ),
    "heat_3d": (
        ("tsteps", "n"),
        ((20, 10), (40, 20), (100, 40), (500, 120), (1000, 200)),
    ),
    "jacobi_1d": (
        ("tsteps", "n"),
        ((20, 30), (40, 120), (100, 400), (500, 2000), (1000, 4000)),
    ),
    "jacobi_2d": (
        ("tsteps", "n"),
        ((20, 30), (40, 90), (100, 250), (500, 1300), (1000, 2800)),
    ),
    "seidel_2d": (
        ("tsteps", "n"),
        ((20, 40), (40, 120), (100, 400), (500, 2000), (1000, 4000)),
    ),
    "cholesky": (("n",), ((40,), (120,), (400,), (2000,), (4000,))),
    "durbin": (("n",), ((40,), (120,), (400,), (2000,), (4000,))),
    "gramschmidt": (
        ("m", "n"),
        ((20, 30), (60, 80), (200, 240), (1000, 1200), (2000, 2600)),
    ),
    "lu": (("n",), ((40,), (120,), (400,), (2000,), (4000,))),
    "ludcmp": (("n",), ((40,), (120,), (400,), (2000,), (4000,))),
    "trisolv": (("n",), ((40,), (120,), (400,), (2000,), (4000,))),
}

KERNELS = tuple(_TABLE)


def sizes_for(kernel: str, dataset: Dataset | str) -> dict[str, int]:
    """Return the named problem sizes of ``kernel`` at the given dataset scale."""
    key = kernel.lower().replace("-", "_")
    if key not in _TABLE:
        raise ValueError(f"unknown kernel: {kernel!r}")
    try:
        scale = dataset if isinstance(dataset, Dataset) else Dataset(str(dataset).lower())
    except ValueError:
        raise ValueError(f"unknown dataset: {dataset!r}") from None
    names, rows = _TABLE[key]
    return dict(zip(names, rows[_ORDER.index(scale)]))
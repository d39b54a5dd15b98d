[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polykernels"
version = "0.1.0"
description = "NumPy implementations of numerical benchmark kernels (stencils, solvers, factorizations, dynamic programming) with deterministic inputs and a timing harness."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "benchmark",
    "stencil",
    "linear-algebra",
    "cholesky",
    "lu",
    "floyd-warshall",
    "jacobi",
    "numerical-kernels",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
polykernels-bench = "polykernels.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["polykernels"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

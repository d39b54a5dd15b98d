# polykernels

A set of classic numerical benchmark kernels written on NumPy arrays,
together with the deterministic input generators they are run with, the
standard problem sizes for each dataset scale, and a small timing harness.

## Kernels

| Module | Kernels | Input builders |
| --- | --- | --- |
| `polykernels.medley` | `deriche`, `floyd_warshall`, `nussinov` | `init_deriche`, `init_floyd_warshall`, `init_nussinov` |
| `polykernels.stencils` | `adi`, `fdtd_2d`, `heat_3d` | `init_adi`, `init_fdtd_2d`, `init_heat_3d` |
| `polykernels.relaxation` | `jacobi_1d`, `jacobi_2d`, `seidel_2d` | `init_jacobi_1d`, `init_jacobi_2d`, `init_seidel_2d` |
| `polykernels.solvers` | `durbin`, `trisolv` | `init_durbin`, `init_trisolv` |
| `polykernels.factorizations` | `cholesky`, `lu`, `ludcmp`, `gramschmidt` | `init_spd_matrix`, `init_ludcmp`, `init_gramschmidt` |

The kernels work on copies: the arrays passed in are left untouched and the
results come back as new arrays. Some return several arrays:

- `fdtd_2d(ex, ey, hz, fict)` returns `(ex, ey, hz)`, one time step per entry of `fict`.
- `heat_3d(a, b, tsteps)`, `jacobi_1d(a, b, tsteps)` and `jacobi_2d(a, b, tsteps)` return `(a, b)`.
- `ludcmp(a, b)` returns `(lu_matrix, y, x)`, where `lu_matrix` is the combined factor from `lu`.
- `gramschmidt(a)` returns `(a_out, q, r)`.

`deriche_coefficients(alpha)` gives the Deriche filter coefficients; the
default `alpha` is 0.25. Malformed inputs (wrong shapes, negative step
counts, a matrix that is not positive definite for `cholesky`, a zero pivot
for `lu`) raise `ValueError`.

## Problem sizes

`polykernels.dataset.Dataset` lists the scales `mini`, `small`, `medium`,
`large` and `xlarge`. `sizes_for(kernel, dataset)` returns a kernel's named
sizes at a scale:

```python
from polykernels.dataset import Dataset, sizes_for

sizes_for("jacobi_2d", Dataset.MINI)   # {'tsteps': 20, 'n': 30}
sizes_for("gramschmidt", "small")      # {'m': 60, 'n': 80}
```

## Examples

```python
from polykernels.medley import init_floyd_warshall, floyd_warshall

paths = init_floyd_warshall(60)
shortest = floyd_warshall(paths)
```

```python
from polykernels.relaxation import init_jacobi_2d, jacobi_2d

a, b = init_jacobi_2d(30)
a, b = jacobi_2d(a, b, 20)
```

```python
from polykernels.factorizations import init_spd_matrix, cholesky

factor = cholesky(init_spd_matrix(40))
```

## Timing

`polykernels.benchmark` holds a `Kernel` for every kernel in the `KERNELS`
mapping. `time_kernel(kernel, dataset, repeats)` builds fresh inputs for each
run, times only the computation and returns a `BenchmarkResult` with the
durations in milliseconds, their `median_ms` and the last run's output.
`median(durations)` takes the median of a list of durations, and
`compare_arrays(name, expected, actual, tolerance)` returns the largest
absolute difference between two arrays or raises `ArrayMismatch` naming the
first index that differs by more than the tolerance.

The harness is also a command:

```
polykernels-bench [KERNEL ...] [--dataset {mini,small,medium,large,xlarge}]
                  [--repeats N] [--csv FILE] [--print-output]
```

With no kernels named it runs all of them. It prints one line per kernel
with the median time, `--print-output` also prints the result arrays, and
`--csv` appends `kernel,dataset,median_ms` rows to the given file. The
defaults are the `mini` dataset and 3 repeats.

## What it does not do

Every kernel here is a single straightforward implementation; the package
has no second, optimised version of the kernels to time or check against.
`compare_arrays` is there for comparing results you supply yourself.

## Tests

```
pip install "polykernels[test]"
pytest
```
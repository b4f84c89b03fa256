# rvbench

Reference models for the small programs used to exercise processor
test environments. The package includes benchmark kernels with their
bundled datasets, a bitwise CRC-32 checksum and a few helper routines
used by debug test programs, and the structures behind semihosting
calls.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `rvbench.checksum`

- `reverse_bits(x)` reverses the bit order of a 32-bit word.
- `crc32a(message)` computes a CRC-32 over bytes, a bytearray or a str
  (a str is encoded as latin-1). It works bit by bit, the way a shift
  register does.
- `fib(n, on_step=None)` returns the n-th Fibonacci number modulo 2**32.
  After every iteration it calls `on_step` with the running value. A
  negative `n` raises `ValueError`.
- `rot13(text)` rotates ASCII letters by 13 places and leaves every
  other character as it is.
- `counting_loop()` counts from zero to ten while keeping a running sum,
  and returns the final counter, which is `10`.
- `debug_checksum(text=FOX)` XORs the CRC of the ROT13 form of `text`
  with the CRC of `text` itself. This is the value the debug test
  program returns.

### `rvbench.semihosting`

- `SemihostOp` is an `IntEnum` of semihosting operation numbers, such
  as `OPEN`, `WRITE` and `EXIT`.
- `AdpCode` is an `IntEnum` of stop reasons, such as
  `STOPPED_APPLICATION_EXIT`.
- `SemihostParams` is a frozen three-word parameter block with the
  fields `param1`, `param2` and `param3`.
- `open_mode(flags)` maps the `O_RDONLY`, `O_WRONLY`, `O_RDWR` and
  `O_TRUNC` flags to a semihosting open mode. The modes are 0 (`r`),
  4 (`w`), 8 (`a`), 6 (`w+`) and 10 (`a+`).
- `open_params(name, flags, address)` and
  `write_params(fd, address, length)` build the parameter blocks for
  open and write calls. A negative value raises `ValueError`.

### `rvbench.kernels`

- `vvadd(a, b)` adds two vectors element by element.
- `daxpy(a, x, y)` computes `a * x + y` element by element.
- `memcpy(src)` copies its input. Byte buffers come back as `bytes`, and
  any other sequence comes back as a list.
- `sgemm_nn(m, n, k, a, lda, b, ldb, c, ldc)` computes the row-major
  `C + A @ B`, where A is m×k, B is k×n and C is m×n, with leading
  dimensions. It returns a new list.
- `strcmp(s1, s2)` compares two strings byte by byte and returns `0`
  when they are equal. Otherwise it returns the difference between the
  first pair of bytes that differ.
- `first_mismatch(results, expected)` returns the index of the first
  element that differs, or `None` when every element matches.

Sequences of different lengths raise `ValueError`. So do matrix sizes
that do not fit the data.

### `rvbench.vvadd_data` and `rvbench.sgemm_data`

Each module has a `dataset()` function that returns the bundled inputs
and expected results.

- `vvadd_data.dataset()` returns a `Dataset` with `input1`, `input2` and
  `verify`, each holding `DATA_SIZE` (300) integers.
- `sgemm_data.dataset()` returns a `MatrixDataset`. It holds two
  `DIM_SIZE` × `DIM_SIZE` (32 × 32) row-major matrices as floats, along
  with their expected product.

## Example

```python
from rvbench.checksum import crc32a, debug_checksum
from rvbench.kernels import vvadd, sgemm_nn, first_mismatch
from rvbench import vvadd_data, sgemm_data

assert crc32a(b"123456789") == 0xCBF43926

data = vvadd_data.dataset()
assert first_mismatch(vvadd(data.input1, data.input2), data.verify) is None

m = sgemm_data.dataset()
zeros = [0.0] * len(m)
product = sgemm_nn(m.dim, m.dim, m.dim, m.input1, m.dim, m.input2, m.dim, zeros, m.dim)
assert first_mismatch(product, m.verify) is None
```

## What the package does not do

- It has no model of a heap allocator.
- It provides no command-line tool.
- It does not compile or run programs on a simulator or on hardware.
  Every routine is a plain Python function that computes the expected
  values.
- The semihosting module only builds parameter blocks. It does not
  perform host calls.
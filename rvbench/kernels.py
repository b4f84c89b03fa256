"""Reference kernels for the vector benchmarks and a result checker."""

from __future__ import annotations

from typing import Optional, Sequence, TypeVar, Union

T = TypeVar("T")
Number = Union[int, float]


def _same_length(name_a: str, a: Sequence, name_b: str, b: Sequence) -> None:
    if len(a) != len(b):
        raise ValueError(
            f"{name_a} and {name_b} differ in length ({len(a)} != {len(b)})"
        )


def vvadd(a: Sequence[Number], b: Sequence[Number]) -> list[Number]:
    """Element-wise sum of two vectors."""
    _same_length("a", a, "b", b)
    return [x + y for x, y in zip(a, b)]


def daxpy(a: float, x: Sequence[float], y: Sequence[float]) -> list[float]:
    """Compute ``a * x + y`` element-wise."""
    _same_length("x", x, "y", y)
    return [a * xi + yi for xi, yi in zip(x, y)]


def memcpy(src: Union[bytes, bytearray, memoryview, Sequence[T]]) -> Union[bytes, list[T]]:
    """Return a fresh copy of ``src``: bytes for byte buffers, a list otherwise."""
    if isinstance(src, (bytes, bytearray, memoryview)):
        return bytes(src)
    return list(src)


def _check_matrix(name: str, data: Sequence, rows: int, cols: int, ld: int) -> None:
    if ld < cols:
        raise ValueError(f"leading dimension of {name} ({ld}) is smaller than {cols}")
    if rows and cols:
        needed = (rows - 1) * ld + cols
        if len(data) < needed:
            raise ValueError(f"{name} holds {len(data)} elements, needs {needed}")


def sgemm_nn(
    m: int,
    n: int,
    k: int,
    a: Sequence[float],
    lda: int,
    b: Sequence[float],
    ldb: int,
    c: Sequence[float],
    ldc: int,
) -> list[float]:
    """Row-major ``C + A @ B`` with A m×k, B k×n and C m×n.

    Elements of ``c`` outside the m×n window are carried over unchanged.
    """
    if m < 0 or n < 0 or k < 0:
        raise ValueError("matrix dimensions must be non-negative")
    _check_matrix("a", a, m, k, lda)
    _check_matrix("b", b, k, n, ldb)
    _check_matrix("c", c, m, n, ldc)
    result = list(c)
    for i in range(m):
        row_a = a[i * lda : i * lda + k]
        for j in range(n):
            column_b = b[j : j + (k - 1) * ldb + 1 : ldb] if k else []
            result[i * ldc + j] += sum(x * y for x, y in zip(row_a, column_b))
    return result


def _as_bytes(s: Union[str, bytes, bytearray]) -> bytes:
    return s.encode("utf-8") if isinstance(s, str) else bytes(s)


def strcmp(s1: Union[str, bytes, bytearray], s2: Union[str, bytes, bytearray]) -> int:
    """Compare two strings byte by byte.

    Returns zero when they are equal, otherwise the difference between the
    first differing bytes, a missing byte counting as zero.
    """
    b1, b2 = _as_bytes(s1), _as_bytes(s2)
    for offset in range(max(len(b1), len(b2))):
        c1 = b1[offset] if offset < len(b1) else 0
        c2 = b2[offset] if offset < len(b2) else 0
        if c1 != c2 or c1 == 0:
            return c1 - c2
    return 0


def first_mismatch(results: Sequence, expected: Sequence) -> Optional[int]:
    """Index of the first element where ``results`` differs, or None."""
    _same_length("results", results, "expected", expected)
    return next(
        (index for index, (got, want) in enumerate(zip(results, expected)) if got != want),
        None,
    )
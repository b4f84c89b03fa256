import pytest

from rvbench import kernels
from rvbench.vvadd_data import dataset

TEST_STR = "The quick brown fox jumped over the lazy dog"
SAME_STR = "The quick brown fox jumped over the lazy dog"
DIFF_STR = "The quick brown fox jumped over the lazy cat"


def test_vvadd_matches_reference_dataset():
    data = dataset()
    result = kernels.vvadd(data.input1, data.input2)
    assert kernels.first_mismatch(result, data.verify) is None


def test_vvadd_length_mismatch():
    with pytest.raises(ValueError):
        kernels.vvadd([1, 2], [1])


def test_daxpy_first_reference_values():
    assert kernels.daxpy(8.0, [15.0, 10.0, 3.0], [6.0, 0.0, 18.0]) == [126.0, 80.0, 42.0]


def test_daxpy_zero_scale_returns_y():
    y = [1.5, -2.0, 7.25]
    assert kernels.daxpy(0.0, [9.0, 9.0, 9.0], y) == y


def test_daxpy_length_mismatch():
    with pytest.raises(ValueError):
        kernels.daxpy(1.0, [1.0], [])


def test_memcpy_list_copy():
    src = [41, 454, 833, 335]
    copy = kernels.memcpy(src)
    assert copy == src
    copy[0] = 0
    assert src[0] == 41


def test_memcpy_bytes():
    src = bytearray(b"abc")
    copy = kernels.memcpy(src)
    assert copy == b"abc"
    src[0] = ord("z")
    assert copy == b"abc"


def test_sgemm_identity():
    a = [1.0, 2.0, 3.0, 4.0]
    identity = [1.0, 0.0, 0.0, 1.0]
    result = kernels.sgemm_nn(2, 2, 2, a, 2, identity, 2, [0.0] * 4, 2)
    assert result == a


def test_sgemm_accumulates_into_c():
    a = [1.0, 2.0, 3.0, 4.0]
    identity = [1.0, 0.0, 0.0, 1.0]
    c = [1.0, 1.0, 1.0, 1.0]
    result = kernels.sgemm_nn(2, 2, 2, identity, 2, a, 2, c, 2)
    assert result == [x + 1.0 for x in a]
    assert c == [1.0, 1.0, 1.0, 1.0]


def test_sgemm_respects_leading_dimension():
    a = [2.0, 99.0]
    b = [3.0, 99.0]
    result = kernels.sgemm_nn(1, 1, 1, a, 2, b, 2, [0.0, 5.0], 2)
    assert result == [6.0, 5.0]


def test_sgemm_rejects_short_matrix():
    with pytest.raises(ValueError):
        kernels.sgemm_nn(2, 2, 2, [1.0], 2, [1.0] * 4, 2, [0.0] * 4, 2)


def test_sgemm_rejects_small_leading_dimension():
    with pytest.raises(ValueError):
        kernels.sgemm_nn(2, 2, 2, [1.0] * 4, 1, [1.0] * 4, 2, [0.0] * 4, 2)


def test_strcmp_equal_strings():
    assert kernels.strcmp(TEST_STR, SAME_STR) == 0


def test_strcmp_different_strings():
    assert kernels.strcmp(TEST_STR, DIFF_STR) > 0
    assert kernels.strcmp(DIFF_STR, TEST_STR) < 0


def test_strcmp_prefix_is_smaller():
    assert kernels.strcmp("abc", "abcd") < 0
    assert kernels.strcmp(b"abcd", b"abc") > 0


def test_strcmp_antisymmetric():
    assert kernels.strcmp("lazy dog", "lazy cat") == -kernels.strcmp("lazy cat", "lazy dog")


def test_first_mismatch_finds_index():
    expected = list(range(10))
    results = list(expected)
    results[5] = -1
    assert kernels.first_mismatch(results, expected) == 5


def test_first_mismatch_none_when_equal():
    assert kernels.first_mismatch([1.0, 2.0], [1.0, 2.0]) is None


def test_first_mismatch_length_mismatch():
    with pytest.raises(ValueError):
        kernels.first_mismatch([1], [1, 2])
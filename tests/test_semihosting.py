import dataclasses

import pytest

from rvbench.semihosting import (
    O_RDONLY,
    O_RDWR,
    O_TRUNC,
    O_WRONLY,
    AdpCode,
    SemihostOp,
    SemihostParams,
    open_mode,
    open_params,
    write_params,
)


def test_op_lookup_by_number():
    assert SemihostOp(0x01) is SemihostOp.OPEN
    assert SemihostOp(0x05) is SemihostOp.WRITE
    assert SemihostOp(0x13) is SemihostOp.ERRNO


def test_op_numbers_are_unique():
    looked_up = [SemihostOp(op.value) for op in SemihostOp]
    assert looked_up == list(SemihostOp)
    assert len({op.value for op in looked_up}) == len(looked_up)


def test_adp_codes_in_stop_range():
    assert all(0x20000 <= code <= 0x20029 for code in AdpCode)
    assert AdpCode(0x20026) is AdpCode.STOPPED_APPLICATION_EXIT


@pytest.mark.parametrize(
    "flags, mode",
    [
        (O_RDONLY, 0),
        (O_WRONLY | O_TRUNC, 4),
        (O_WRONLY, 8),
        (O_RDWR | O_TRUNC, 6),
        (O_RDWR, 10),
    ],
)
def test_open_mode(flags, mode):
    assert open_mode(flags) == mode


def test_open_mode_readonly_ignores_trunc():
    assert open_mode(O_RDONLY | O_TRUNC) == open_mode(O_RDONLY)


def test_open_params_fields():
    params = open_params("out.txt", O_WRONLY, 0x1000)
    assert params == SemihostParams(0x1000, open_mode(O_WRONLY), len("out.txt"))


def test_open_params_counts_bytes():
    params = open_params(b"abc\xff", O_RDONLY, 0)
    assert params.param3 == 4


def test_open_params_requires_name():
    with pytest.raises(ValueError):
        open_params(None, O_RDONLY, 0)


def test_write_params_round_trip():
    message = "Do re mi fa so la ti do!\n"
    params = write_params(1, 0x2000, len(message))
    assert (params.param1, params.param2, params.param3) == (1, 0x2000, len(message))


def test_write_params_rejects_negative_length():
    with pytest.raises(ValueError):
        write_params(1, 0, -1)


def test_params_are_frozen():
    params = write_params(1, 0, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.param1 = 2
    assert params.param1 == 1
import pytest

from gfmul128.shift import (
    mul_x8_bbe,
    mul_x8_lle,
    mul_x_bbe,
    mul_x_ble,
    mul_x_lle,
    xor_blocks,
)

KEY = bytes.fromhex("0123456789abcdeffedcba9876543210")
MSG = bytes.fromhex("0f1e2d3c4b5a69788070605040302010")
ZERO = bytes(16)
SAMPLES = [KEY, MSG, b"\xff" * 16, b"\x01" + bytes(15), bytes(15) + b"\x80"]


def test_xor_with_self_is_zero():
    assert xor_blocks(KEY, KEY) == ZERO


def test_xor_with_zero_is_identity():
    assert xor_blocks(MSG, ZERO) == MSG


def test_xor_is_commutative_and_involutive():
    mixed = xor_blocks(KEY, MSG)
    assert mixed == xor_blocks(MSG, KEY)
    assert xor_blocks(mixed, MSG) == KEY


def test_xor_rejects_wrong_length():
    with pytest.raises(ValueError):
        xor_blocks(KEY, b"\x00" * 15)


def test_rejects_non_bytes():
    with pytest.raises(TypeError):
        mul_x_lle(16)


def test_mul_x_bbe_reduces_with_0x87():
    assert mul_x_bbe(b"\x80" + bytes(15)) == bytes(15) + b"\x87"


def test_mul_x_lle_reduces_with_0xe1():
    assert mul_x_lle(bytes(15) + b"\x01") == b"\xe1" + bytes(15)


@pytest.mark.parametrize("block", SAMPLES)
def test_x8_lle_matches_eight_single_shifts(block):
    value = block
    for _ in range(8):
        value = mul_x_lle(value)
    assert mul_x8_lle(block) == value


@pytest.mark.parametrize("block", SAMPLES)
def test_x8_bbe_matches_eight_single_shifts(block):
    value = block
    for _ in range(8):
        value = mul_x_bbe(value)
    assert mul_x8_bbe(block) == value


@pytest.mark.parametrize("block", SAMPLES)
def test_ble_is_bbe_with_reversed_bytes(block):
    assert mul_x_ble(block) == mul_x_bbe(block[::-1])[::-1]


@pytest.mark.parametrize("shift", [mul_x_lle, mul_x_bbe, mul_x_ble, mul_x8_lle, mul_x8_bbe])
def test_shifts_are_linear(shift):
    assert shift(xor_blocks(KEY, MSG)) == xor_blocks(shift(KEY), shift(MSG))


@pytest.mark.parametrize("shift", [mul_x_lle, mul_x_bbe, mul_x_ble, mul_x8_lle, mul_x8_bbe])
def test_shifts_keep_zero(shift):
    assert shift(ZERO) == ZERO
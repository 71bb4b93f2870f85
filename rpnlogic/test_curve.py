import pytest

from rpnlogic.curve import map, reverse_map


def test_corners():
    assert map(0, 0) == 0.0
    assert map(0xFFFF, 0xFFFF) == 1.0
    assert reverse_map(0.0) == (0, 0)
    assert reverse_map(1.0) == (0xFFFF, 0xFFFF)


def test_interleaving():
    # x fills the even bits, y the odd bits
    scale = float(0xFFFFFFFF)
    assert map(1, 0) == 1 / scale
    assert map(0, 1) == 2 / scale
    assert map(3, 0) == 0b101 / scale
    assert map(0, 3) == 0b1010 / scale


def test_reversible():
    for x in range(0, 0x10000, 1321):
        for y in range(0, 0x10000, 977):
            assert reverse_map(map(x, y)) == (x, y)


def test_out_of_range():
    with pytest.raises(ValueError):
        map(0x10000, 0)
    with pytest.raises(ValueError):
        reverse_map(1.5)

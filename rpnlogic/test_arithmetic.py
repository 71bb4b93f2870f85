import pytest

from rpnlogic.arithmetic import adder, gray_code, multiplier, subber

WORD = 0xFFFFFFFF
SAMPLES = [0, 1, 2, 3, 7, 100, 255, 4096, 65535, 123456789, WORD - 1, WORD]


def test_adder():
    for a in SAMPLES:
        for b in SAMPLES:
            assert adder(a, b) == (a + b) & WORD
    assert adder(WORD, 1) == 0


def test_subber():
    for a in SAMPLES:
        for b in SAMPLES:
            assert subber(a, b) == (a - b) & WORD


def test_multiplier():
    for a in SAMPLES:
        for b in SAMPLES:
            assert multiplier(a, b) == (a * b) & WORD


def test_gray_code():
    assert [gray_code(i) for i in range(9)] == [0, 1, 3, 2, 6, 7, 5, 4, 12]
    for a in range(255):
        assert bin(gray_code(a) ^ gray_code(a + 1)).count("1") == 1


def test_rejects_values_outside_a_word():
    with pytest.raises(ValueError):
        adder(-1, 0)
    with pytest.raises(ValueError):
        gray_code(1 << 32)

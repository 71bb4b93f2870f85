"""32-bit wrapping arithmetic built from bitwise operations only.

Every value is held as a numpy.uint32, so shifts and complements wrap
at 32 bits exactly like a machine word.
"""
import numpy as np

BITS = 32
ONE = np.uint32(1)


def _word(value: int) -> np.uint32:
    if not 0 <= int(value) <= 0xFFFFFFFF:
        raise ValueError(f"Expected an unsigned 32-bit value, got {value}")
    return np.uint32(value)


def adder(a: int, b: int) -> int:
    """Ripple-carry addition, modulo 2**32."""
    a, b = _word(a), _word(b)
    result = np.uint32(0)
    carry = np.uint32(0)
    for i in range(BITS):
        shift = np.uint32(i)
        x = (a >> shift) & ONE
        y = (b >> shift) & ONE
        result |= (x ^ y ^ carry) << shift
        carry = (x & y) | (y & carry) | (x & carry)
    return int(result)


def subber(a: int, b: int) -> int:
    """a - b modulo 2**32, as the complement of ~a + b."""
    return int(~np.uint32(adder(int(~_word(a)), b)))


def multiplier(a: int, b: int) -> int:
    """Shift-and-add multiplication, modulo 2**32."""
    a, b = _word(a), _word(b)
    result = 0
    for i in range(BITS):
        if a & ONE:
            result = adder(result, int(b << np.uint32(i)))
        a >>= ONE
    return result


def gray_code(a: int) -> int:
    """Reflected binary Gray code: consecutive inputs differ in one bit."""
    a = _word(a)
    return int(a ^ (a >> ONE))

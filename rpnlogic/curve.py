"""Z-order (Morton) curve between 16-bit coordinate pairs and [0, 1].

x takes the even bits of the 32-bit curve index, y the odd bits.
"""
import numpy as np

SCALE = float(0xFFFFFFFF)

_HALF = np.uint64(32)
_LOW = np.uint64(0xFFFFFFFF)

# (shift, mask) steps that spread 16 bits out to every other position
_SPREAD = [
    (np.uint64(8), np.uint64(0x00FF00FF00FF00FF)),
    (np.uint64(4), np.uint64(0x0F0F0F0F0F0F0F0F)),
    (np.uint64(2), np.uint64(0x3333333333333333)),
    (np.uint64(1), np.uint64(0x5555555555555555)),
]

# the same steps run backwards, packing every other bit together again
_GATHER = [
    (np.uint64(1), np.uint64(0x3333333333333333)),
    (np.uint64(2), np.uint64(0x0F0F0F0F0F0F0F0F)),
    (np.uint64(4), np.uint64(0x00FF00FF00FF00FF)),
]


def _coordinate(value: int) -> np.uint64:
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"Coordinate must fit in 16 bits, got {value}")
    return np.uint64(value)


def map(x: int, y: int) -> float:
    """Interleave the bits of (x, y) and scale the index into [0, 1]."""
    # x in the low half, y in the high half; both are spread in one pass
    packed = _coordinate(x) | (_coordinate(y) << _HALF)
    for shift, mask in _SPREAD:
        packed = (packed | (packed << shift)) & mask
    index = (packed & _LOW) | ((packed >> _HALF) << np.uint64(1))
    return int(index & _LOW) / SCALE


def reverse_map(n: float) -> tuple[int, int]:
    """Inverse of map(): recover (x, y) from a curve position."""
    if not 0.0 <= n <= 1.0:
        raise ValueError(f"Curve position must be in [0, 1], got {n}")
    index = np.uint64(round(n * SCALE))
    # even bits stay low for x, odd bits move to the high half for y
    packed = (index & np.uint64(0x55555555)) | ((index & np.uint64(0xAAAAAAAA)) << np.uint64(31))
    for shift, mask in _GATHER:
        packed = (packed | (packed >> shift)) & mask
    packed = packed | (packed >> np.uint64(8))
    x = packed & np.uint64(0xFFFF)
    y = (packed >> _HALF) & np.uint64(0xFFFF)
    return int(x), int(y)

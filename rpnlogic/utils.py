from dataclasses import dataclass
from typing import Iterator, Optional

WORD = 0xFFFFFFFF
SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _index(symbol: str) -> int:
    if len(symbol) != 1 or symbol not in SYMBOLS:
        raise ValueError(f"Not a variable symbol: {symbol!r}")
    return ord(symbol) - ord("A")


@dataclass
class Environment:
    """Variable bindings packed into two 32-bit words.

    Bit i of `mask` says whether letter chr(ord('A') + i) is bound,
    and bit i of `values` holds its value. Bits of `values` outside
    `mask` are meaningless and ignored. For example:

    env = Environment()
    env.enable("A")
    env.enable("C")
    env.get("A")            # False
    env.get("B")            # None
    list(env.symbols())     # ['A', 'C']
    """

    mask: int = 0
    values: int = 0

    def enable(self, symbol: str):
        """Mark `symbol` as bound. Enabling twice is harmless."""
        self.mask |= 1 << _index(symbol)

    def get(self, symbol: str) -> Optional[bool]:
        """Return the value bound to `symbol`, or None if it is unbound."""
        index = _index(symbol)
        if (self.mask >> index) & 1 == 0:
            return None
        return (self.values >> index) & 1 != 0

    def symbols(self) -> Iterator[str]:
        """Yield the bound letters in A to Z order."""
        for index, symbol in enumerate(SYMBOLS):
            if (self.mask >> index) & 1:
                yield symbol

    def bits(self) -> Iterator[bool]:
        """Yield the bound values, in the same order as symbols().

        This is the "values of the environment" query; it is named bits()
        because `values` is the packed word itself.
        """
        for index in range(WORD.bit_length()):
            if (self.mask >> index) & 1:
                yield (self.values >> index) & 1 != 0


def assignments(base: Environment) -> Iterator[Environment]:
    """Yield every assignment of the variables bound in `base`.

    Values run through the subsets of the mask in increasing numeric
    order, from 0 up to the mask itself. An empty mask yields nothing.
    """
    mask = base.mask & WORD
    if mask == 0:
        return
    values = 0
    while True:
        yield Environment(mask, values)
        # force the bits outside the mask to 1 so the carry skips them
        spread = values | (~mask & WORD)
        if spread == WORD:
            return
        values = (spread + 1) & mask

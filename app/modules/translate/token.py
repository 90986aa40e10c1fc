"""Request-signing token (``tk``) for the upstream translate endpoint.

The value is a public, deterministic function of the input text and the
current seed pair, reproducing what the upstream front-end computes. All
arithmetic emulates 32-bit two's-complement integers.

Mixing programs are read three characters at a time:
    1st: ``+`` add (masked to 32 bits) or ``^`` xor
    2nd: ``+`` unsigned right shift or ``-`` left shift
    3rd: shift amount, ``0``-``9`` or ``a``-``f`` (10-15)

If upstream changes its constants, bump TOKEN_ALGORITHM_VERSION together
with the programs and the pinned test vectors.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from modules.translate.seed import SeedPair, SeedState

TOKEN_PARAMETER = "tk"
TOKEN_ALGORITHM_VERSION = "tkk-1"

CHAR_MIX = "+-a^+6"
FINAL_MIX = "+-3^+b+-f"

TOKEN_MODULUS = 1_000_000

_UINT32_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000
_INT31_MASK = 0x7FFFFFFF


@dataclass(frozen=True)
class Token:
    """Signing token sent as a query parameter.

    Attributes:
        name: Query parameter name (always ``tk``)
        value: Integer in [0, 1_000_000)
    """

    name: str
    value: int

    def as_param(self) -> Dict[str, int]:
        return {self.name: self.value}


def _int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - 0x100000000 if value & _SIGN_BIT else value


def mix(value: int, program: str) -> int:
    """Apply a mixing program to a 32-bit accumulator."""
    for i in range(0, len(program) - 2, 3):
        op, direction, amount = program[i], program[i + 1], program[i + 2]
        shift = ord(amount) - 87 if amount >= "a" else int(amount)

        if direction == "+":
            shifted = (value & _UINT32_MASK) >> shift
        else:
            shifted = _int32(value << shift)

        if op == "+":
            value = _int32(value + shifted)
        else:
            value = _int32(value ^ shifted)
    return value


def generate_token(text: Any, seed: SeedPair) -> Token:
    """Compute the token for a text under a given seed pair.

    Pure: the same text and seed always give the same token. Each Unicode
    code point of the text is mixed in whole.

    Args:
        text: Input text (converted with str())
        seed: Seed pair

    Returns:
        Token with a value in [0, 1_000_000)
    """
    acc = seed.a
    for char in str(text):
        acc = mix(acc + ord(char), CHAR_MIX)
    acc = mix(acc, FINAL_MIX)

    acc = _int32(acc ^ seed.b)
    if acc < 0:
        acc = (acc & _INT31_MASK) + _SIGN_BIT

    return Token(name=TOKEN_PARAMETER, value=acc % TOKEN_MODULUS)


class TokenGenerator:
    """Generates tokens against the process-wide hourly seed."""

    def __init__(self, seed_state: Optional[SeedState] = None):
        self.seed_state = seed_state or SeedState()

    @property
    def seed(self) -> SeedPair:
        return self.seed_state.current()

    def generate(self, text: Any) -> Token:
        return generate_token(text, self.seed_state.current())

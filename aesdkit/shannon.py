"""Small multiplicative pseudo-random generator yielding values in [0, 1)."""

from __future__ import annotations

DEFAULT_SEED = 123456789
_MULTIPLIER = 16807
_DIVISOR = 32767
_LONG_MAX = 2**63 - 1
_WORD = 2**64


def _wrap_signed64(value: int) -> int:
    value &= _WORD - 1
    return value - _WORD if value > _LONG_MAX else value


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


class ShannonRandom:
    """Generator with 64-bit signed state, advanced by multiplying by 16807."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.seed = _wrap_signed64(seed)

    def random(self) -> float:
        """Advance the state and return the next value."""
        seed = _wrap_signed64(_MULTIPLIER * self.seed)
        if seed < 0:
            seed += _LONG_MAX
        self.seed = seed
        quotient = _truncating_div(seed, _DIVISOR)
        remainder = seed - quotient * _DIVISOR
        return remainder / _DIVISOR
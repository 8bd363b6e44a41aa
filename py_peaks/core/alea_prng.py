"""
Seedable random sources for skyline generation.

The generator only needs a stream of floats in [0, 1). Anything exposing a
``random()`` method satisfies ``RandomSource`` (including ``random.Random``),
so tests can inject scripted sequences. ``AleaPRNG`` is the default source:
Johannes Baagøe's Alea algorithm, which produces the same stream for the same
seed string on every platform.
"""

from typing import Protocol


class RandomSource(Protocol):
    """Anything that yields floats in [0, 1)."""

    def random(self) -> float:
        ...


def _uint32(n):
    return int(n) & 0xFFFFFFFF


class _Mash:
    """Alea's string hashing step, used only while seeding."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data) -> float:
        for char in str(data):
            self.n += ord(char)
            h = 0.02519603282416938 * self.n
            self.n = _uint32(h)
            h -= self.n
            h *= self.n
            self.n = _uint32(h)
            h -= self.n
            self.n += h * 0x100000000  # 2^32
        return _uint32(self.n) * 2.3283064365386963e-10  # 2^-32


class AleaPRNG:
    """
    Alea pseudo random number generator.

    Args:
        seed: Seed string (or number, or an iterable of seed parts)
    """

    def __init__(self, seed):
        self.seed = seed
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            parts = list(seed)
        else:
            parts = [seed]

        mash = _Mash()
        self._s0 = mash(" ")
        self._s1 = mash(" ")
        self._s2 = mash(" ")
        self._c = 1

        for part in parts:
            self._s0 = self._fold(self._s0 - mash(part))
            self._s1 = self._fold(self._s1 - mash(part))
            self._s2 = self._fold(self._s2 - mash(part))

    @staticmethod
    def _fold(value: float) -> float:
        return value + 1 if value < 0 else value

    def random(self) -> float:
        """Return the next float in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self._s0 + self._c * 2.3283064365386963e-10  # 2^-32
        self._s0 = self._s1
        self._s1 = self._s2
        self._c = int(t)
        self._s2 = t - self._c
        return self._s2

    def __repr__(self):
        return f"AleaPRNG(seed={self.seed!r}, calls={self.call_count})"

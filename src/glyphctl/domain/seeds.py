"""Seed derivation and the seeded random stream used by composition.

A seed is a non-negative integer derived from request text.  It is a
selector, never an identity: two requests with the same name, salt, and
timestamp always produce the same seed, and therefore the same marks.

INVARIANT: Nothing in the domain layer reads wall-clock time or global
random state.  Every "random" choice flows through :class:`SeededRandom`.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

_T = TypeVar("_T")

_MASK_32 = 0xFFFFFFFF
_SIGN_32 = 0x80000000


def _to_int32(value: int) -> int:
    """Wrap an arbitrary int to a signed 32-bit value."""
    value &= _MASK_32
    return value - (1 << 32) if value & _SIGN_32 else value


def _seed_key(text: object, salt: str | None, timestamp: int | None) -> str:
    parts = ["" if text is None else str(text)]
    if salt is not None:
        parts.append(str(salt))
    if timestamp is not None:
        parts.append(str(timestamp))
    return "-".join(parts) if len(parts) > 1 else parts[0]


def derive_seed(text: object, salt: str | None = None, timestamp: int | None = None) -> int:
    """Derive a stable non-negative seed from *text* plus optional salt/timestamp.

    The present parts are joined with ``-`` and folded with a rolling
    ``h = h * 31 + code`` accumulation wrapped to 32 bits.
    The result is only suitable for indexing and selection.  Empty input
    yields ``0``; the function never raises.
    """
    key = _seed_key(text, salt, timestamp)
    h = 0
    for ch in key:
        h = _to_int32((h << 5) - h + ord(ch))
    return abs(h)


def seed_hex(seed: int) -> str:
    """Return the 8-character lowercase hex form of *seed*."""
    return f"{seed & _MASK_32:08x}"


class SeededRandom:
    """Deterministic random stream keyed by an integer seed.

    Only :meth:`random.Random.random` is used from the underlying
    generator; every other draw is built on top of it so the sequence
    stays identical across interpreter versions.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self._rng.random()

    def randint(self, low: int, high: int) -> int:
        """Inclusive integer in ``[low, high]``."""
        if high <= low:
            return low
        span = high - low + 1
        return low + min(int(self._rng.random() * span), span - 1)

    def choice(self, items: Sequence[_T]) -> _T:
        if not items:
            raise IndexError("cannot choose from an empty sequence")
        return items[self.randint(0, len(items) - 1)]

    def chance(self, probability: float) -> bool:
        return self._rng.random() < probability

    def shuffled(self, items: Sequence[_T]) -> list[_T]:
        """Return a Fisher-Yates shuffled copy of *items*."""
        out = list(items)
        for i in range(len(out) - 1, 0, -1):
            j = self.randint(0, i)
            out[i], out[j] = out[j], out[i]
        return out

    def fork(self, label: str) -> SeededRandom:
        """Return an independent child stream keyed by *label*."""
        return SeededRandom(derive_seed(label, salt=seed_hex(self.seed)))

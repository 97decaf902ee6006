#!/usr/bin/env python3
"""
Random Sources
==============
Everything the generators need from randomness is ``randrange(n)``: a
uniformly distributed integer in ``[0, n)``. Three sources are provided:

- ``get_rng()``: the process-wide ``secrets.SystemRandom`` instance
- ``seeded_rng(seed)``: a ``random.Random`` for reproducible output
- ``Sha1Random``: a stream derived from the SHA-1 of a file (``pwgen -H``)

Probabilistic decisions are expressed as named ``Chance`` values, so the
thresholds can be tuned and tested without touching the generator logic.
"""

import hashlib
import random
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Union

from .exceptions import ConfigError, RandomSourceError


class RandomSource(Protocol):
    """Anything with a ``randrange(stop)`` drawing uniformly from [0, stop)."""

    def randrange(self, stop: int) -> int:
        ...


# Global instance
_system_random = secrets.SystemRandom()


def get_rng() -> RandomSource:
    """Get the global system random number generator."""
    return _system_random


def seeded_rng(seed: Union[int, str]) -> random.Random:
    """Reproducible pseudo random source. Not suitable for real passwords."""
    return random.Random(seed)


class Sha1Random:
    """
    Deterministic random stream from the SHA-1 hash of a file.

    The file contents, followed by an optional seed, are hashed once. Bytes
    are consumed from the digest and the digest is re-hashed when they run
    out. Draws use rejection sampling so every value in [0, stop) is equally
    likely.
    """

    def __init__(self, path: Union[str, Path], seed: str = ""):
        self.path = Path(path)
        try:
            data = self.path.read_bytes()
        except OSError as e:
            raise RandomSourceError(f"Couldn't read {self.path}: {e.strerror or e}") from e
        self._digest = hashlib.sha1(data + seed.encode('utf-8')).digest()
        self._pos = 0

    @classmethod
    def from_argument(cls, argument: str) -> "Sha1Random":
        """Build from ``path[#seed]`` as accepted on the command line."""
        path, _, seed = argument.partition('#')
        if not path:
            raise RandomSourceError("SHA-1 source needs a file path")
        return cls(path, seed)

    def _next_byte(self) -> int:
        if self._pos >= len(self._digest):
            self._digest = hashlib.sha1(self._digest).digest()
            self._pos = 0
        byte = self._digest[self._pos]
        self._pos += 1
        return byte

    def randrange(self, stop: int) -> int:
        if stop <= 0:
            raise ValueError(f"empty range for randrange({stop})")
        nbytes = max(1, ((stop - 1).bit_length() + 7) // 8)
        span = 256 ** nbytes
        limit = span - span % stop
        while True:
            value = int.from_bytes(bytes(self._next_byte() for _ in range(nbytes)), 'big')
            if value < limit:
                return value % stop


@dataclass(frozen=True)
class Chance:
    """
    A named probability, decided with a single integer draw.

    ``hit`` draws ``randrange(resolution)`` and succeeds when the result is
    below ``probability * resolution``. With the default resolution of 10 a
    chance of 0.3 succeeds on draws 0, 1 and 2.
    """
    probability: float
    resolution: int = 10

    def __post_init__(self):
        if self.resolution <= 0:
            raise ConfigError(f"chance resolution must be positive, got {self.resolution}")
        if not 0.0 <= self.probability <= 1.0:
            raise ConfigError(f"probability must be within [0, 1], got {self.probability}")

    @property
    def threshold(self) -> int:
        return round(self.probability * self.resolution)

    def hit(self, rng: RandomSource) -> bool:
        return rng.randrange(self.resolution) < self.threshold


__all__ = [
    'RandomSource',
    'get_rng',
    'seeded_rng',
    'Sha1Random',
    'Chance',
]

#!/usr/bin/env python3
"""
Password Policy
===============
What a generated password must look like: its length, the character
classes it has to contain, and the characters it must avoid.

The character alphabets are read from ``configs/app.yaml`` so that the
digit and symbol sets can be tuned without touching the generators.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet

from .exceptions import EmptyCharacterSetError, PolicyError
from .settings import require_setting


class Feature(Enum):
    """Character classes a policy can make mandatory."""
    DIGIT = "digit"
    UPPER = "upper"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Policy:
    """Requested password shape.

    ``exclude_vowels`` and ``remove_chars`` are only honored by the random
    generator; the phoneme generator rejects policies that set them.
    """
    length: int
    require_digit: bool = True
    require_upper: bool = True
    require_symbol: bool = False
    exclude_vowels: bool = False
    exclude_ambiguous: bool = False
    remove_chars: str = ""

    def __post_init__(self):
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise PolicyError(f"password length must be an integer, got {self.length!r}")
        if self.length <= 0:
            raise PolicyError(f"invalid password length: {self.length}")

    @property
    def mandatory_features(self) -> FrozenSet[Feature]:
        features = set()
        if self.require_digit:
            features.add(Feature.DIGIT)
        if self.require_upper:
            features.add(Feature.UPPER)
        if self.require_symbol:
            features.add(Feature.SYMBOL)
        return frozenset(features)

    @property
    def minimum_length(self) -> int:
        """Shortest length that leaves room for one letter plus one
        character per mandatory feature."""
        return 1 + len(self.mandatory_features)


def _drop(chars: str, unwanted: str) -> str:
    return ''.join(c for c in chars if c not in unwanted)


@dataclass(frozen=True)
class CharacterSets:
    """The alphabets passwords are built from."""
    digits: str
    uppers: str
    lowers: str
    symbols: str
    ambiguous: str
    vowels: str = ""

    @classmethod
    def from_settings(cls) -> "CharacterSets":
        return cls(
            digits=require_setting('charsets.digits'),
            uppers=require_setting('charsets.uppers'),
            lowers=require_setting('charsets.lowers'),
            symbols=require_setting('charsets.symbols'),
            ambiguous=require_setting('charsets.ambiguous'),
            vowels=require_setting('charsets.vowels'),
        )

    def unwanted(self, policy: Policy) -> str:
        """Characters the policy rules out everywhere."""
        unwanted = policy.remove_chars
        if policy.exclude_ambiguous:
            unwanted += self.ambiguous
        if policy.exclude_vowels:
            unwanted += self.vowels
        return unwanted

    def allowed(self, chars: str, policy: Policy) -> str:
        return _drop(chars, self.unwanted(policy))

    def digit_pool(self, policy: Policy) -> str:
        """Digits that may be injected, failing if a required class is empty."""
        pool = self.allowed(self.digits, policy)
        if policy.require_digit and not pool:
            raise EmptyCharacterSetError("No digits left in the valid set")
        return pool

    def symbol_pool(self, policy: Policy) -> str:
        pool = self.allowed(self.symbols, policy)
        if policy.require_symbol and not pool:
            raise EmptyCharacterSetError("No symbols left in the valid set")
        return pool

    def upper_pool(self, policy: Policy) -> str:
        pool = self.allowed(self.uppers, policy)
        if policy.require_upper and not pool:
            raise EmptyCharacterSetError("No upper case letters left in the valid set")
        return pool

#!/usr/bin/env python3
"""
Random Password Generator
=========================
Completely random (and hard to remember) passwords, drawn character by
character from one flat alphabet. Used for ``--secure``, for short
passwords, and whenever vowels or specific characters must be avoided.
"""

import logging
from typing import Optional

from ..entropy import RandomSource, get_rng
from ..exceptions import EmptyCharacterSetError, GenerationError, InfeasiblePolicyError
from ..policy import CharacterSets, Feature, Policy
from ..settings import require_setting

logger = logging.getLogger(__name__)


class RandomGenerator:
    """Draws every character independently from the allowed alphabet."""

    def __init__(self,
                 policy: Policy,
                 rng: Optional[RandomSource] = None,
                 charsets: Optional[CharacterSets] = None,
                 max_restarts: Optional[int] = None):
        self.policy = policy
        self.rng = rng if rng is not None else get_rng()
        self.charsets = charsets or CharacterSets.from_settings()
        if max_restarts is None:
            max_restarts = int(require_setting('generation.max_restarts'))
        self.max_restarts = max_restarts
        self.restarts = 0

        # one character per required class, no letter needed
        needed = len(policy.mandatory_features)
        if policy.length < needed:
            raise InfeasiblePolicyError(
                f"Length {policy.length} is too short for the required character classes "
                f"(need at least {needed})")

        self._classes = self._build_classes()
        self.alphabet = ''.join(self._classes.values())
        if not self.alphabet:
            raise EmptyCharacterSetError("No characters left in the valid set")

    def _build_classes(self) -> dict:
        """Allowed characters per class, failing when a required one is empty."""
        policy = self.policy
        charsets = self.charsets
        classes = {'lower': charsets.allowed(charsets.lowers, policy)}
        if policy.require_digit:
            classes[Feature.DIGIT] = charsets.digit_pool(policy)
        if policy.require_upper:
            classes[Feature.UPPER] = charsets.upper_pool(policy)
        if policy.require_symbol:
            classes[Feature.SYMBOL] = charsets.symbol_pool(policy)
        return classes

    def _features_in(self, password: str) -> set:
        found = set()
        for feature in self.policy.mandatory_features:
            if any(c in self._classes[feature] for c in password):
                found.add(feature)
        return found

    def generate(self) -> str:
        """Generate one password, restarting until every feature is present."""
        self.restarts = 0
        alphabet = self.alphabet
        while True:
            password = ''.join(alphabet[self.rng.randrange(len(alphabet))]
                               for _ in range(self.policy.length))
            if self._features_in(password) == self.policy.mandatory_features:
                return password

            self.restarts += 1
            if self.restarts > self.max_restarts:
                logger.warning(f"Giving up after {self.max_restarts} restarts")
                raise GenerationError(
                    f"No password satisfying the policy after {self.max_restarts} restarts")
            logger.debug(f"Restart: '{password}' lacks a required character class")

    def generate_many(self, count: int) -> list:
        return [self.generate() for _ in range(count)]


def generate_random_password(policy: Policy, rng: Optional[RandomSource] = None) -> str:
    """Convenience function to generate a completely random password."""
    return RandomGenerator(policy, rng=rng).generate()

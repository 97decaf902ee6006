#!/usr/bin/env python3
"""
Phoneme Password Generator
==========================
Builds pronounceable passwords out of phonetic elements.

Each position goes through the same steps:

1. Selection: the previous element decides which elements may come next
   (a consonant is always followed by a vowel, a vowel is never followed by
   a vowel diphthong, a vowel diphthong or a second vowel in a row is
   followed by a consonant, a word start needs an element allowed to start
   words).
2. Rejection sampling: elements are drawn uniformly from the table until
   one satisfies the constraint.
3. Feature injection: a symbol and/or digit may be placed in front of the
   element, and the element may be uppercased.
4. Assembly: the text is appended. Once the target length is reached the
   password is complete if every mandatory feature was produced, otherwise
   the attempt is thrown away and generation restarts from scratch.

Usage:
    from phonopass.policy import Policy
    from phonopass.generators.phoneme_generator import generate_password

    password = generate_password(Policy(length=8))
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Set

from ..entropy import Chance, RandomSource, get_rng
from ..exceptions import GenerationError, InfeasiblePolicyError
from ..policy import CharacterSets, Feature, Policy
from ..settings import require_setting
from .phonemes import PhonemeUnit, UnitClass, load_elements

logger = logging.getLogger(__name__)


# =============================================================================
# Data Classes
# =============================================================================

class Phase(Enum):
    """Progress of one generation attempt."""
    EMPTY = "empty"
    BUILDING = "building"
    COMPLETE = "complete"


@dataclass
class GenerationState:
    """Mutable state of a single attempt. Never shared between attempts."""
    output: List[str] = field(default_factory=list)
    previous_unit: Optional[PhonemeUnit] = None
    features_satisfied: Set[Feature] = field(default_factory=set)
    phase: Phase = Phase.EMPTY
    vowel_run: int = 0

    def __len__(self) -> int:
        return len(self.output)

    @property
    def text(self) -> str:
        return ''.join(self.output)

    def at_word_start(self, digits: str) -> bool:
        """True at the start of the password or right after a digit.

        Digits are written in front of the element they belong to, so a
        trailing digit is only ever seen while that element is injected.
        """
        return self.previous_unit is None or (bool(self.output) and self.output[-1] in digits)


@dataclass(frozen=True)
class Constraint:
    """What the element at the current position has to look like."""
    kind: Optional[UnitClass] = None
    must_start_word: bool = False
    forbid_vowel_diphthong: bool = False
    max_length: int = 2

    def permits(self, unit: PhonemeUnit) -> bool:
        if self.kind is not None and unit.kind is not self.kind:
            return False
        if self.must_start_word and not unit.may_start_word:
            return False
        if self.forbid_vowel_diphthong and unit.is_vowel and unit.is_diphthong:
            return False
        return len(unit) <= self.max_length


@dataclass(frozen=True)
class PhonemeProbabilities:
    """Tunable probabilities of the phoneme generator."""
    start_vowel: Chance
    follow_consonant: Chance
    uppercase: Chance
    digit: Chance
    symbol: Chance

    @classmethod
    def from_settings(cls) -> "PhonemeProbabilities":
        resolution = int(require_setting('phonemes.resolution'))

        def chance(name: str) -> Chance:
            return Chance(float(require_setting(f'phonemes.probabilities.{name}')), resolution)

        return cls(
            start_vowel=chance('start_vowel'),
            follow_consonant=chance('follow_consonant'),
            uppercase=chance('uppercase'),
            digit=chance('digit'),
            symbol=chance('symbol'),
        )


# =============================================================================
# Generator
# =============================================================================

class PhonemeGenerator:
    """
    Pronounceable password generator.

    The policy is checked when the generator is created: a policy that can
    never be satisfied raises ``InfeasiblePolicyError`` and a required
    character class emptied by the ambiguous filter raises
    ``EmptyCharacterSetError``. Generation itself only fails when the
    restart budget runs out.
    """

    def __init__(self,
                 policy: Policy,
                 rng: Optional[RandomSource] = None,
                 elements: Optional[Sequence[PhonemeUnit]] = None,
                 charsets: Optional[CharacterSets] = None,
                 probabilities: Optional[PhonemeProbabilities] = None,
                 max_restarts: Optional[int] = None):
        self.policy = policy
        self.rng = rng if rng is not None else get_rng()
        self.elements = tuple(elements) if elements is not None else load_elements()
        self.charsets = charsets or CharacterSets.from_settings()
        self.probabilities = probabilities or PhonemeProbabilities.from_settings()
        if max_restarts is None:
            max_restarts = int(require_setting('generation.max_restarts'))
        self.max_restarts = max_restarts
        self.restarts = 0

        self._check_feasible()
        self._digits = self.charsets.digit_pool(policy)
        self._symbols = self.charsets.symbol_pool(policy)

    # -------------------------------------------------------------------------
    # Policy checks
    # -------------------------------------------------------------------------

    def _is_ambiguous(self, text: str) -> bool:
        return self.policy.exclude_ambiguous and any(c in self.charsets.ambiguous for c in text)

    def _check_feasible(self):
        policy = self.policy
        if policy.exclude_vowels:
            raise InfeasiblePolicyError(
                "Phoneme passwords are built around vowels; use the random generator")
        if policy.remove_chars:
            raise InfeasiblePolicyError(
                "Phoneme passwords cannot remove characters; use the random generator")
        if policy.length < policy.minimum_length:
            features = ', '.join(sorted(f.value for f in policy.mandatory_features))
            raise InfeasiblePolicyError(
                f"Length {policy.length} is too short for {features} "
                f"(need at least {policy.minimum_length})")

        # Every constraint the selection rules build is met by a single-letter
        # word-starting element of the requested class.
        for kind in UnitClass:
            if not any(u.kind is kind and not u.is_diphthong and u.may_start_word
                       and not self._is_ambiguous(u.text) for u in self.elements):
                raise InfeasiblePolicyError(
                    f"Element table has no usable single-letter {kind.value} that may start a word")

        if policy.require_upper and not any(
                not self._is_ambiguous(u.text) and not self._is_ambiguous(u.text.upper())
                for u in self.elements):
            raise InfeasiblePolicyError("No element can be uppercased without ambiguous characters")

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def _constraint(self, state: GenerationState) -> Constraint:
        """Constraint for the next position. Draws the class bias once."""
        room = self.policy.length - len(state)
        previous = state.previous_unit
        if previous is None:
            vowel = self.probabilities.start_vowel.hit(self.rng)
            return Constraint(
                kind=UnitClass.VOWEL if vowel else UnitClass.CONSONANT,
                must_start_word=True,
                max_length=room,
            )
        if previous.is_consonant:
            return Constraint(kind=UnitClass.VOWEL, max_length=room)
        # at most two vowel elements in a row, and none after a vowel diphthong
        if previous.is_diphthong or state.vowel_run >= 2:
            return Constraint(kind=UnitClass.CONSONANT, max_length=room)
        consonant = self.probabilities.follow_consonant.hit(self.rng)
        return Constraint(
            kind=UnitClass.CONSONANT if consonant else UnitClass.VOWEL,
            forbid_vowel_diphthong=True,
            max_length=room,
        )

    def _draw_unit(self, constraint: Constraint) -> PhonemeUnit:
        while True:
            unit = self.elements[self.rng.randrange(len(self.elements))]
            if constraint.permits(unit) and not self._is_ambiguous(unit.text):
                return unit

    # -------------------------------------------------------------------------
    # Feature injection
    # -------------------------------------------------------------------------

    def _pick(self, chars: str) -> str:
        return chars[self.rng.randrange(len(chars))]

    def _inject_features(self, state: GenerationState, unit: PhonemeUnit) -> str:
        """Add symbols/digits in front of ``unit`` and return its final text."""
        policy = self.policy
        chances = self.probabilities

        if policy.require_symbol and unit.may_start_word and chances.symbol.hit(self.rng):
            state.output.append(self._pick(self._symbols))
            state.features_satisfied.add(Feature.SYMBOL)

        # digit goes last so that it sits right before the element
        if policy.require_digit and unit.may_start_word and chances.digit.hit(self.rng):
            state.output.append(self._pick(self._digits))
            state.features_satisfied.add(Feature.DIGIT)

        text = unit.text
        if policy.require_upper:
            eligible = state.at_word_start(self.charsets.digits) or unit.is_consonant
            if eligible and chances.uppercase.hit(self.rng):
                upper = text.upper()
                if not self._is_ambiguous(upper):
                    text = upper
                    state.features_satisfied.add(Feature.UPPER)
        return text

    # -------------------------------------------------------------------------
    # Assembly
    # -------------------------------------------------------------------------

    def _append(self, state: GenerationState, unit: PhonemeUnit, text: str) -> Phase:
        """Append ``text`` and work out where the attempt stands.

        Returns ``Phase.EMPTY`` when the attempt has to be restarted.
        """
        state.output.extend(text)
        state.previous_unit = unit
        state.vowel_run = state.vowel_run + 1 if unit.is_vowel else 0
        state.phase = Phase.BUILDING

        length = self.policy.length
        if len(state) > length:
            logger.debug(f"Restart: injected characters overran length {length}")
            return Phase.EMPTY
        if len(state) == length:
            missing = self.policy.mandatory_features - state.features_satisfied
            if missing:
                names = ', '.join(sorted(f.value for f in missing))
                logger.debug(f"Restart: '{state.text}' is missing {names}")
                return Phase.EMPTY
            state.phase = Phase.COMPLETE
        return state.phase

    def generate(self) -> str:
        """Generate one password."""
        self.restarts = 0
        state = GenerationState()
        while True:
            constraint = self._constraint(state)
            unit = self._draw_unit(constraint)
            text = self._inject_features(state, unit)
            phase = self._append(state, unit, text)

            if phase is Phase.COMPLETE:
                return state.text
            if phase is Phase.EMPTY:
                self.restarts += 1
                if self.restarts > self.max_restarts:
                    logger.warning(f"Giving up after {self.max_restarts} restarts")
                    raise GenerationError(
                        f"No password satisfying the policy after {self.max_restarts} restarts")
                state = GenerationState()

    def generate_many(self, count: int) -> List[str]:
        """Generate ``count`` passwords from the same random stream."""
        return [self.generate() for _ in range(count)]


def generate_password(policy: Policy, rng: Optional[RandomSource] = None) -> str:
    """
    Convenience function to generate a pronounceable password.

    Args:
        policy: Requested length and mandatory features
        rng: Random source, defaults to the system random generator

    Returns:
        Generated password string
    """
    return PhonemeGenerator(policy, rng=rng).generate()

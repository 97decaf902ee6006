#!/usr/bin/env python3
"""
Phoneme Element Table
=====================
Loads the catalog of phonetic elements used by the phoneme generator.

Each element is a short run of letters (one or two) tagged as vowel or
consonant, and flagged when it may not start a word. Two-letter elements
are diphthongs regardless of their class.

Usage:
    from phonopass.generators.phonemes import load_elements

    elements = load_elements()
    vowels = [e for e in elements if e.is_vowel]
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Tuple

import yaml

from ...exceptions import ConfigError


# =============================================================================
# Configuration Path
# =============================================================================

PHONEMES_DIR = Path(__file__).parent
ELEMENTS_FILE = 'elements.yaml'


# =============================================================================
# Data Classes
# =============================================================================

class UnitClass(Enum):
    """Phonetic class of an element."""
    VOWEL = "vowel"
    CONSONANT = "consonant"


@dataclass(frozen=True)
class PhonemeUnit:
    """A phonetic element: one letter, or a two-letter diphthong."""
    text: str
    kind: UnitClass
    may_start_word: bool = True

    def __post_init__(self):
        if not isinstance(self.kind, UnitClass):
            raise ConfigError(f"element '{self.text}' has invalid kind {self.kind!r}")
        if not 1 <= len(self.text) <= 2:
            raise ConfigError(f"element '{self.text}' must be one or two letters")
        if not (self.text.isalpha() and self.text.islower()):
            raise ConfigError(f"element '{self.text}' must be lowercase letters")

    @property
    def is_vowel(self) -> bool:
        return self.kind is UnitClass.VOWEL

    @property
    def is_consonant(self) -> bool:
        return self.kind is UnitClass.CONSONANT

    @property
    def is_diphthong(self) -> bool:
        return len(self.text) == 2

    def __len__(self) -> int:
        return len(self.text)


# =============================================================================
# Loaders
# =============================================================================

def _build_element(entry) -> PhonemeUnit:
    if not isinstance(entry, dict) or 'text' not in entry or 'kind' not in entry:
        raise ConfigError(f"element entry {entry!r} needs 'text' and 'kind'")
    try:
        kind = UnitClass(entry['kind'])
    except ValueError:
        raise ConfigError(f"element '{entry['text']}' has unknown kind '{entry['kind']}'") from None
    return PhonemeUnit(
        text=str(entry['text']),
        kind=kind,
        may_start_word=bool(entry.get('first', True)),
    )


@lru_cache(maxsize=4)
def load_elements(filename: str = ELEMENTS_FILE) -> Tuple[PhonemeUnit, ...]:
    """Load the element table from the phonemes directory.

    The result is cached and immutable; the order of the YAML file is kept
    because elements are drawn by index.
    """
    filepath = PHONEMES_DIR / filename
    if not filepath.exists():
        raise ConfigError(f"Missing element table: {filepath}")
    with open(filepath, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    entries = data.get('elements')
    if not entries:
        raise ConfigError(f"{filename} has no elements")

    elements = tuple(_build_element(entry) for entry in entries)
    texts = [e.text for e in elements]
    if len(set(texts)) != len(texts):
        raise ConfigError(f"{filename} has duplicate elements")
    return elements


__all__ = [
    'PHONEMES_DIR',
    'UnitClass',
    'PhonemeUnit',
    'load_elements',
]

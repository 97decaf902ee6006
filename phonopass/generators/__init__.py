#!/usr/bin/env python3
"""
Password Generators
===================
Provides two generation strategies:
- Phoneme: pronounceable passwords built from phonetic elements
- Random: every character drawn independently from a flat alphabet
"""

from .phonemes import (
    PhonemeUnit,
    UnitClass,
    load_elements,
)
from .phoneme_generator import (
    Constraint,
    GenerationState,
    Phase,
    PhonemeGenerator,
    PhonemeProbabilities,
    generate_password,
)
from .random_generator import (
    RandomGenerator,
    generate_random_password,
)

__all__ = [
    # Element table
    'PhonemeUnit',
    'UnitClass',
    'load_elements',
    # Phoneme
    'Constraint',
    'GenerationState',
    'Phase',
    'PhonemeGenerator',
    'PhonemeProbabilities',
    'generate_password',
    # Random
    'RandomGenerator',
    'generate_random_password',
]

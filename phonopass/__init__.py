#!/usr/bin/env python3
"""
phonopass - Pronounceable Password Generator
============================================

Generates random passwords that are easy to read out and remember, built
from phonetic elements, with optional digits, capitals and symbols.

Quick Start
-----------
    from phonopass import Policy, generate_password

    generate_password(Policy(length=10))
    generate_password(Policy(length=12, require_symbol=True, exclude_ambiguous=True))

    # Reproducible output from a seeded source
    from phonopass import seeded_rng
    generate_password(Policy(length=8), rng=seeded_rng(42))

Modules
-------
    phonopass.generators - Phoneme and fully random generators
    phonopass.policy     - Password policy and character sets
    phonopass.entropy    - Random sources
    phonopass.settings   - YAML configuration

CLI Usage
---------
    python -m phonopass
    python -m phonopass -sy 16 3
"""

__version__ = "0.2.0"

from .entropy import Chance, RandomSource, Sha1Random, get_rng, seeded_rng
from .exceptions import (
    ConfigError,
    EmptyCharacterSetError,
    GenerationError,
    InfeasiblePolicyError,
    PhonopassError,
    PolicyError,
    RandomSourceError,
)
from .policy import CharacterSets, Feature, Policy
from .generators import (
    PhonemeGenerator,
    PhonemeUnit,
    RandomGenerator,
    UnitClass,
    generate_password,
    generate_random_password,
    load_elements,
)

__all__ = [
    '__version__',
    # Generation
    'generate_password',
    'generate_random_password',
    'PhonemeGenerator',
    'RandomGenerator',
    'PhonemeUnit',
    'UnitClass',
    'load_elements',
    # Policy
    'Policy',
    'Feature',
    'CharacterSets',
    # Randomness
    'RandomSource',
    'Chance',
    'Sha1Random',
    'get_rng',
    'seeded_rng',
    # Errors
    'PhonopassError',
    'ConfigError',
    'PolicyError',
    'InfeasiblePolicyError',
    'EmptyCharacterSetError',
    'GenerationError',
    'RandomSourceError',
]

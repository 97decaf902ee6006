"""
Custom exceptions for phonopass.
"""


class PhonopassError(Exception):
    """Base exception for phonopass."""

    pass


class ConfigError(PhonopassError, ValueError):
    """Configuration file missing or malformed."""

    pass


class PolicyError(PhonopassError, ValueError):
    """Password policy has invalid values."""

    pass


class InfeasiblePolicyError(PolicyError):
    """Password policy can never be satisfied."""

    pass


class EmptyCharacterSetError(PolicyError):
    """A required character class has no characters left."""

    pass


class GenerationError(PhonopassError, RuntimeError):
    """Password generation gave up after too many restarts."""

    pass


class RandomSourceError(PhonopassError):
    """Random source could not be created."""

    pass

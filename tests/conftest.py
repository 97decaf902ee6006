"""
Shared fixtures: scripted random sources and a generator that records the
elements it picks.
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phonopass.generators.phoneme_generator import PhonemeGenerator


class ScriptedRandom:
    """Random source replaying a fixed list of draws."""

    def __init__(self, draws, fallback=None):
        self.draws = list(draws)
        self.fallback = fallback
        self.calls = []

    def randrange(self, stop):
        if self.draws:
            value = self.draws.pop(0)
            assert 0 <= value < stop, f"scripted draw {value} outside [0, {stop})"
        elif self.fallback is not None:
            value = self.fallback.randrange(stop)
        else:
            raise IndexError("random script exhausted")
        self.calls.append((stop, value))
        return value


class ConstantRandom:
    """Random source that always returns the same value (clamped to range)."""

    def __init__(self, value=0):
        self.value = value

    def randrange(self, stop):
        return min(self.value, stop - 1)


class RecordingGenerator(PhonemeGenerator):
    """Keeps the elements accepted during the last attempt."""

    def generate(self):
        self._state = None
        self.units = []
        return super().generate()

    def _append(self, state, unit, text):
        if state is not self._state:
            self._state = state
            self.units = []
        self.units.append((unit, text))
        return super()._append(state, unit, text)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def constant():
    return ConstantRandom


@pytest.fixture
def recording():
    return RecordingGenerator

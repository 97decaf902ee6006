"""
Tests for Random Sources
========================
Tests for phonopass/entropy.py.
"""

import pytest

from phonopass.entropy import Chance, Sha1Random, get_rng, seeded_rng
from phonopass.exceptions import ConfigError, RandomSourceError


class TestSystemRandom:
    """Tests for the default source."""

    def test_shared_instance(self):
        """Test that the system source is process-wide."""
        assert get_rng() is get_rng()

    def test_range(self):
        """Test that draws stay in [0, n)."""
        rng = get_rng()
        assert all(0 <= rng.randrange(7) < 7 for _ in range(200))


class TestSeeded:
    """Tests for the seeded source."""

    def test_reproducible(self):
        """Test that the same seed gives the same stream."""
        first = seeded_rng(42)
        second = seeded_rng(42)
        assert [first.randrange(100) for _ in range(20)] == \
               [second.randrange(100) for _ in range(20)]


class TestSha1Random:
    """Tests for the file-hash source."""

    @pytest.fixture
    def keyfile(self, tmp_path):
        path = tmp_path / 'key'
        path.write_bytes(b'not so random')
        return path

    def test_deterministic(self, keyfile):
        """Test that the same file and seed give the same stream."""
        first = Sha1Random(keyfile, 'example.com')
        second = Sha1Random(keyfile, 'example.com')
        assert [first.randrange(1000) for _ in range(50)] == \
               [second.randrange(1000) for _ in range(50)]

    def test_seed_changes_stream(self, keyfile):
        """Test that a different seed gives a different stream."""
        first = Sha1Random(keyfile, 'a')
        second = Sha1Random(keyfile, 'b')
        assert [first.randrange(1000) for _ in range(50)] != \
               [second.randrange(1000) for _ in range(50)]

    @pytest.mark.parametrize("stop", [1, 2, 10, 40, 256, 257, 100000])
    def test_range(self, keyfile, stop):
        """Test that draws stay in range, across digest refills."""
        rng = Sha1Random(keyfile)
        for _ in range(100):
            assert 0 <= rng.randrange(stop) < stop

    def test_all_values_reached(self, keyfile):
        """Test that small ranges are covered."""
        rng = Sha1Random(keyfile)
        assert {rng.randrange(10) for _ in range(500)} == set(range(10))

    def test_from_argument(self, keyfile):
        """Test parsing path#seed."""
        from_argument = Sha1Random.from_argument(f"{keyfile}#example.com")
        direct = Sha1Random(keyfile, 'example.com')
        assert from_argument.path == keyfile
        assert from_argument.randrange(1000) == direct.randrange(1000)

    def test_from_argument_without_seed(self, keyfile):
        """Test that the seed is optional."""
        assert Sha1Random.from_argument(str(keyfile)).randrange(1000) == \
               Sha1Random(keyfile).randrange(1000)

    def test_missing_file(self, tmp_path):
        """Test that an unreadable file is reported."""
        with pytest.raises(RandomSourceError, match="Couldn't read"):
            Sha1Random(tmp_path / 'missing')

    def test_empty_path(self):
        """Test that an argument without a path is rejected."""
        with pytest.raises(RandomSourceError):
            Sha1Random.from_argument("#seed")

    def test_empty_range(self, keyfile):
        """Test that randrange(0) is an error like random.randrange."""
        with pytest.raises(ValueError):
            Sha1Random(keyfile).randrange(0)


class FixedDraw:
    def __init__(self, value):
        self.value = value
        self.stops = []

    def randrange(self, stop):
        self.stops.append(stop)
        return self.value


class TestChance:
    """Tests for named probabilities."""

    def test_threshold(self):
        """Test the draw threshold."""
        assert Chance(0.3).threshold == 3
        assert Chance(0.5).threshold == 5
        assert Chance(0.25, resolution=100).threshold == 25

    @pytest.mark.parametrize("draw,expected", [(0, True), (2, True), (3, False), (9, False)])
    def test_hit(self, draw, expected):
        """Test that draws below the threshold succeed."""
        rng = FixedDraw(draw)
        assert Chance(0.3).hit(rng) is expected
        assert rng.stops == [10]

    def test_never_and_always(self):
        """Test the extremes."""
        assert not Chance(0.0).hit(FixedDraw(0))
        assert Chance(1.0).hit(FixedDraw(9))

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_invalid_probability(self, probability):
        """Test that probabilities outside [0, 1] are rejected."""
        with pytest.raises(ConfigError):
            Chance(probability)

    def test_invalid_resolution(self):
        """Test that the resolution must be positive."""
        with pytest.raises(ConfigError):
            Chance(0.5, resolution=0)

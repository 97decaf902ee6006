"""
Tests for Settings
==================
Tests for the YAML configuration loader in phonopass/settings.py.
"""

import pytest

from phonopass import settings
from phonopass.exceptions import ConfigError
from phonopass.generators.phoneme_generator import PhonemeProbabilities


@pytest.fixture
def fresh_config():
    settings.load_app_config.cache_clear()
    yield
    settings.load_app_config.cache_clear()


class TestSettings:
    """Tests for dotted-path settings access."""

    def test_get_setting(self):
        """Test reading a nested value."""
        assert settings.get_setting('defaults.length') == 8
        assert settings.get_setting('phonemes.probabilities.digit') == 0.3

    def test_default(self):
        """Test the fallback for missing keys."""
        assert settings.get_setting('defaults.nope') is None
        assert settings.get_setting('nope.deeper', 5) == 5

    def test_require_setting(self):
        """Test that required keys must exist."""
        assert settings.require_setting('generation.max_restarts') == 10000
        with pytest.raises(ConfigError, match="defaults.nope"):
            settings.require_setting('defaults.nope')

    def test_config_ships_with_package(self):
        """Test that app.yaml is read from the installed package."""
        package_dir = settings.CONFIG_DIR.parent
        assert (package_dir / '__init__.py').exists()
        assert settings.APP_CONFIG_PATH == settings.CONFIG_DIR / 'app.yaml'
        assert settings.APP_CONFIG_PATH.exists()
        assert sorted(settings.__all__) == [
            'APP_CONFIG_PATH', 'get_setting', 'load_app_config', 'require_setting',
        ]

    def test_missing_config(self, fresh_config, monkeypatch, tmp_path):
        """Test that a missing config file is reported."""
        monkeypatch.setattr(settings, 'APP_CONFIG_PATH', tmp_path / 'app.yaml')
        with pytest.raises(ConfigError, match="Missing app config"):
            settings.load_app_config()

    def test_custom_config(self, fresh_config, monkeypatch, tmp_path):
        """Test loading another config file."""
        path = tmp_path / 'app.yaml'
        path.write_text("defaults:\n  length: 12\n")
        monkeypatch.setattr(settings, 'APP_CONFIG_PATH', path)
        assert settings.get_setting('defaults.length') == 12


class TestProbabilities:
    """Tests for the configured generator probabilities."""

    def test_from_settings(self):
        """Test the shipped probabilities."""
        probabilities = PhonemeProbabilities.from_settings()
        assert probabilities.start_vowel.probability == 0.5
        assert probabilities.follow_consonant.probability == 0.6
        assert probabilities.uppercase.probability == 0.2
        assert probabilities.digit.probability == 0.3
        assert probabilities.symbol.probability == 0.2
        assert probabilities.digit.resolution == 10

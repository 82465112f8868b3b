"""
Tests for geocoder configuration loading.
"""

import tempfile
from pathlib import Path

import pytest

from geocoder import InvalidConfigurationError, NominatimGeocoder
from geocoder.config import getGeocoderConfig, getLoggingConfig, loadConfig, substituteEnvVars

# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def tempDir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sampleConfigToml():
    """Provide sample valid TOML configuration."""
    return """
[geocoder]
user-agent = "${TEST_GEOCODER_USER_AGENT}"
scheme = "https"
timeout = 5

[geocoder.proxies]
https = "http://proxy.local:3128"

[logging]
level = "DEBUG"
console = true
"""


# ============================================================================
# Tests
# ============================================================================


def test_load_config_with_env_substitution(tempDir, sampleConfigToml, monkeypatch):
    """Test loading TOML and substituting environment variables, dood!"""
    monkeypatch.setenv("TEST_GEOCODER_USER_AGENT", "configured_app/2.0")
    configPath = tempDir / "geocoder.toml"
    configPath.write_text(sampleConfigToml)

    config = loadConfig(str(configPath))

    assert getGeocoderConfig(config)["user-agent"] == "configured_app/2.0"
    assert getGeocoderConfig(config)["proxies"] == {"https": "http://proxy.local:3128"}
    assert getLoggingConfig(config) == {"level": "DEBUG", "console": True}

    geocoder = NominatimGeocoder.fromConfig(config)
    assert geocoder.userAgent == "configured_app/2.0"
    assert geocoder.timeout == 5


def test_unset_env_keeps_placeholder(tempDir, sampleConfigToml, monkeypatch):
    """Test that unset variables are left as is, dood!"""
    monkeypatch.delenv("TEST_GEOCODER_USER_AGENT", raising=False)
    configPath = tempDir / "geocoder.toml"
    configPath.write_text(sampleConfigToml)

    config = loadConfig(str(configPath))

    assert getGeocoderConfig(config)["user-agent"] == "${TEST_GEOCODER_USER_AGENT}"


def test_substitute_env_vars_nested(monkeypatch):
    """Test recursive substitution in dicts and lists."""
    monkeypatch.setenv("TEST_PROXY_HOST", "proxy.local")

    result = substituteEnvVars({"a": ["http://${TEST_PROXY_HOST}:3128", 1], "b": {"c": "${TEST_PROXY_HOST}"}, "d": 2})

    assert result == {"a": ["http://proxy.local:3128", 1], "b": {"c": "proxy.local"}, "d": 2}


def test_missing_config_file(tempDir):
    """Test that missing file raises configuration error, dood!"""
    with pytest.raises(InvalidConfigurationError):
        loadConfig(str(tempDir / "missing.toml"))


def test_invalid_toml(tempDir):
    """Test that broken TOML raises configuration error, dood!"""
    configPath = tempDir / "broken.toml"
    configPath.write_text("[geocoder\nuser-agent = ")

    with pytest.raises(InvalidConfigurationError):
        loadConfig(str(configPath))


def test_missing_sections():
    """Test section getters on empty config."""
    assert getGeocoderConfig({}) == {}
    assert getLoggingConfig({}) == {}

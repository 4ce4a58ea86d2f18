# tests/core/config/test_settings.py
"""
Testes da projeção tipada `RuntimeSettings`.
"""

import pytest

from krmfn.core.config import DEFAULT_CONFIG, RuntimeSettings, compute_config_hash
from krmfn.core.config.errors import InvalidConfigRootTypeError


def test_defaults_match_embedded_config():
    settings = RuntimeSettings.from_config(DEFAULT_CONFIG)
    assert settings.engine == "docker"
    assert settings.user == "nobody"
    assert settings.network == "none"
    assert settings.keep_reader_annotations is True
    assert settings.signals == {"LOG_TO_STDERR": "true", "STRUCTURED_RESULTS": "true"}
    assert settings.config_hash == compute_config_hash(DEFAULT_CONFIG)


def test_overrides_are_projected():
    settings = RuntimeSettings.from_config(
        {"runtime": {"engine": "podman", "keep_reader_annotations": False, "signals": {"X": 1}}}
    )
    assert settings.engine == "podman"
    assert settings.user == "nobody"
    assert settings.keep_reader_annotations is False
    assert settings.signals == {"LOG_TO_STDERR": "true", "STRUCTURED_RESULTS": "true", "X": "1"}


@pytest.mark.parametrize("signals", [None, {}])
def test_fixed_signals_cannot_be_configured_away(signals):
    settings = RuntimeSettings.from_config({"runtime": {"signals": signals}})
    assert settings.signals == {"LOG_TO_STDERR": "true", "STRUCTURED_RESULTS": "true"}


def test_signals_section_must_be_mapping():
    with pytest.raises(InvalidConfigRootTypeError):
        RuntimeSettings.from_config({"runtime": {"signals": "LOG_TO_STDERR"}})


def test_empty_config_uses_defaults():
    assert RuntimeSettings.from_config(None).network == "none"


def test_runtime_section_must_be_mapping():
    with pytest.raises(InvalidConfigRootTypeError):
        RuntimeSettings.from_config({"runtime": ["docker"]})

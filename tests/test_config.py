"""
Tests for environment-driven configuration
"""

import logging

import pytest

from tensor_srs.config import TensorSettings, build_engine_config, load_engine_config, load_settings
from tensor_srs.errors import InvalidParameter
from tensor_srs.fsrs import DEFAULT_W

ENV_KEYS = [
    "TENSOR_SRS_WEIGHTS",
    "TENSOR_SRS_ENABLE_SHORT_TERM",
    "TENSOR_SRS_RELEARNING_STEPS",
    "TENSOR_SRS_DEFAULT_R_TARGET",
    "TENSOR_SRS_BASE_STRENGTH",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestLoadSettings:
    """Tests for load_settings"""

    def test_defaults(self):
        settings = load_settings(use_dotenv=False)
        assert settings.weights is None
        assert settings.enable_short_term is True
        assert settings.relearning_steps == 1
        assert settings.default_r_target == 0.9
        assert settings.base_strength == 0.5

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TENSOR_SRS_ENABLE_SHORT_TERM", "false")
        monkeypatch.setenv("TENSOR_SRS_RELEARNING_STEPS", "3")
        monkeypatch.setenv("TENSOR_SRS_DEFAULT_R_TARGET", "0.85")
        monkeypatch.setenv("TENSOR_SRS_BASE_STRENGTH", "0.25")

        settings = load_settings(use_dotenv=False)
        assert settings.enable_short_term is False
        assert settings.relearning_steps == 3
        assert settings.default_r_target == 0.85
        assert settings.base_strength == 0.25

    def test_weights_split(self, monkeypatch):
        monkeypatch.setenv("TENSOR_SRS_WEIGHTS", " 0.5, 1.0 ,2.0")
        assert load_settings(use_dotenv=False).weights == [0.5, 1.0, 2.0]

    def test_empty_values_ignored(self, monkeypatch):
        monkeypatch.setenv("TENSOR_SRS_WEIGHTS", "")
        monkeypatch.setenv("TENSOR_SRS_BASE_STRENGTH", "")
        settings = load_settings(use_dotenv=False)
        assert settings.weights is None
        assert settings.base_strength == 0.5

    @pytest.mark.parametrize("key,value", [
        ("TENSOR_SRS_DEFAULT_R_TARGET", "1.5"),
        ("TENSOR_SRS_BASE_STRENGTH", "abc"),
        ("TENSOR_SRS_RELEARNING_STEPS", "-1"),
        ("TENSOR_SRS_WEIGHTS", "0.1,oops"),
    ])
    def test_invalid_values(self, monkeypatch, key, value):
        monkeypatch.setenv(key, value)
        with pytest.raises(InvalidParameter):
            load_settings(use_dotenv=False)

    def test_logs_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="tensor_srs.config"):
            load_settings(use_dotenv=False)
        assert "Loaded engine settings" in caplog.text


class TestEngineConfigFromSettings:
    """Tests for build_engine_config / load_engine_config"""

    def test_defaults(self):
        config = load_engine_config(use_dotenv=False)
        assert config.w == DEFAULT_W
        assert config.enable_short_term is True

    def test_19_weights_migrated(self, monkeypatch):
        monkeypatch.setenv("TENSOR_SRS_WEIGHTS", ",".join(str(v) for v in DEFAULT_W[:19]))
        config = load_engine_config(use_dotenv=False)
        assert len(config.w) == 21
        assert config.decay == -0.5

    def test_wrong_length(self, monkeypatch):
        monkeypatch.setenv("TENSOR_SRS_WEIGHTS", "0.1,0.2,0.3")
        with pytest.raises(InvalidParameter):
            load_engine_config(use_dotenv=False)

    def test_knobs_forwarded(self):
        config = build_engine_config(TensorSettings(default_r_target=0.8, base_strength=0.3))
        assert config.default_r_target == 0.8
        assert config.base_strength == 0.3

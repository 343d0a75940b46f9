"""Tests for settings.py: load_settings defaults and env overrides."""
from __future__ import annotations

import pytest

from support_rag.settings import EngineSettings, Paths, load_settings

ENV_VARS = (
    "SUPPORT_RAG_TOP_K",
    "SUPPORT_RAG_LIST_TOP_K",
    "SUPPORT_RAG_RESPONSE_DELAY",
    "SUPPORT_RAG_GREETING_SEED",
    "SUPPORT_RAG_LOG_LEVEL",
    "SUPPORT_RAG_DATA_DIR",
)


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestEngineSettings:
    def test_defaults(self):
        s = EngineSettings()
        assert s.top_k == 3
        assert s.list_top_k == 15
        assert s.response_delay_seconds == 0.0
        assert s.greeting_seed is None
        assert s.log_level == "INFO"


class TestPaths:
    def test_default_data_dir(self):
        assert Paths().data_dir == "data"


class TestLoadSettings:
    def test_returns_tuple_of_settings_and_paths(self, clean_env):
        settings, paths = load_settings()
        assert isinstance(settings, EngineSettings)
        assert isinstance(paths, Paths)

    def test_defaults_when_env_vars_absent(self, clean_env):
        settings, paths = load_settings()
        assert settings == EngineSettings()
        assert paths == Paths()

    def test_env_vars_override_defaults(self, clean_env):
        clean_env.setenv("SUPPORT_RAG_TOP_K", "5")
        clean_env.setenv("SUPPORT_RAG_LIST_TOP_K", "20")
        clean_env.setenv("SUPPORT_RAG_RESPONSE_DELAY", "0.5")
        clean_env.setenv("SUPPORT_RAG_GREETING_SEED", "7")
        clean_env.setenv("SUPPORT_RAG_LOG_LEVEL", "debug")
        clean_env.setenv("SUPPORT_RAG_DATA_DIR", "/tmp/support-data")
        settings, paths = load_settings()
        assert settings.top_k == 5
        assert settings.list_top_k == 20
        assert settings.response_delay_seconds == 0.5
        assert settings.greeting_seed == 7
        assert settings.log_level == "DEBUG"
        assert paths.data_dir == "/tmp/support-data"

    def test_blank_value_uses_default(self, clean_env):
        clean_env.setenv("SUPPORT_RAG_TOP_K", "  ")
        settings, _ = load_settings()
        assert settings.top_k == 3

    @pytest.mark.parametrize(
        "name, value",
        [
            ("SUPPORT_RAG_TOP_K", "three"),
            ("SUPPORT_RAG_GREETING_SEED", "1.5"),
            ("SUPPORT_RAG_RESPONSE_DELAY", "soon"),
        ],
    )
    def test_invalid_number_names_variable(self, clean_env, name, value):
        clean_env.setenv(name, value)
        with pytest.raises(ValueError, match=name):
            load_settings()

"""
Tests for Settings -> GenerationConfig
"""
import dataclasses

import pytest

from backend.config.generation import GenerationConfig, get_generation_config
from backend.config.settings import Settings
from backend.domain.prompts.review import SYSTEM_INSTRUCTION


def test_defaults_use_gemini(monkeypatch):
    for name in ("LLM_PROVIDER", "GEMINI_API_KEY", "GEMINI_MODEL"):
        monkeypatch.delenv(name, raising=False)

    config = get_generation_config(Settings(_env_file=None))

    assert config.provider == "gemini"
    assert config.model == "gemini-2.0-flash"
    assert config.api_key is None
    assert config.system_instruction == SYSTEM_INSTRUCTION


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LLM_PROVIDER", "gemini")
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-1.5-pro")
    monkeypatch.setenv("MAX_TOKENS", "512")

    config = get_generation_config(Settings(_env_file=None))

    assert config.api_key == "secret"
    assert config.model == "gemini-1.5-pro"
    assert config.max_tokens == 512


def test_openai_compat_config():
    s = Settings(
        _env_file=None,
        llm_provider="openai_compat",
        openai_compat_model="m",
        openai_compat_base_url="http://h/v1",
        openai_compat_api_key="k",
    )

    config = get_generation_config(s)

    assert (config.provider, config.model, config.base_url, config.api_key) == ("openai_compat", "m", "http://h/v1", "k")


def test_ollama_config():
    s = Settings(_env_file=None, llm_provider="ollama", ollama_model="llama3", ollama_base_url="http://o:11434")

    config = get_generation_config(s)

    assert (config.provider, config.model, config.base_url) == ("ollama", "llama3", "http://o:11434")


def test_unknown_provider_is_kept_for_adapter_to_reject():
    config = get_generation_config(Settings(_env_file=None, llm_provider="nope"))

    assert config.provider == "nope"


def test_config_is_immutable():
    config = GenerationConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.model = "other"

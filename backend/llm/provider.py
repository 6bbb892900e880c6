from __future__ import annotations

from backend.config.generation import GenerationConfig
from backend.llm.base import LLMAdapter


def get_llm_adapter(config: GenerationConfig) -> LLMAdapter:
    if config.provider == "gemini":
        from backend.llm.gemini import GeminiAdapter

        return GeminiAdapter(
            model=config.model,
            api_key=config.api_key,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
    if config.provider == "openai_compat":
        from backend.llm.openai_compat import OpenAICompatAdapter

        return OpenAICompatAdapter(
            model=config.model,
            base_url=config.base_url,
            api_key=config.api_key,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
    if config.provider == "ollama":
        from backend.llm.ollama import OllamaAdapter

        return OllamaAdapter(
            model=config.model,
            base_url=config.base_url,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
    raise ValueError(f"Unknown llm_provider: {config.provider}")

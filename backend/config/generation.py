from __future__ import annotations

from dataclasses import dataclass

from backend.config.settings import Settings, settings as default_settings
from backend.domain.prompts.review import SYSTEM_INSTRUCTION


@dataclass(frozen=True)
class GenerationConfig:
    """
    Generation Client 생성 시 주입되는 설정.

    - provider: "gemini" | "openai_compat" | "ollama"
    - model: 호출할 모델 이름 (provider별)
    - api_key: provider credential. None이면 라이브러리 기본 환경변수 사용
    - base_url: openai_compat / ollama 엔드포인트
    - system_instruction: 모든 호출에 고정으로 붙는 system message
    """
    provider: str = "gemini"
    model: str = "gemini-2.0-flash"
    api_key: str | None = None
    base_url: str | None = None
    system_instruction: str = SYSTEM_INSTRUCTION
    temperature: float = 0.3
    max_tokens: int = 2048


def get_generation_config(settings: Settings | None = None) -> GenerationConfig:
    s = settings or default_settings
    provider = s.llm_provider

    if provider == "gemini":
        return GenerationConfig(
            provider=provider,
            model=s.gemini_model,
            api_key=s.gemini_api_key or None,
            temperature=s.temperature,
            max_tokens=s.max_tokens,
        )
    if provider == "openai_compat":
        return GenerationConfig(
            provider=provider,
            model=s.openai_compat_model,
            api_key=s.openai_compat_api_key,
            base_url=s.openai_compat_base_url,
            temperature=s.temperature,
            max_tokens=s.max_tokens,
        )
    if provider == "ollama":
        return GenerationConfig(
            provider=provider,
            model=s.ollama_model,
            base_url=s.ollama_base_url,
            temperature=s.temperature,
            max_tokens=s.max_tokens,
        )
    # provider 검증은 adapter 생성 시점(get_llm_adapter)에 한다
    return GenerationConfig(provider=provider, temperature=s.temperature, max_tokens=s.max_tokens)

from __future__ import annotations

from langchain_openai import ChatOpenAI

from .base import ChatModelAdapter


class OpenAICompatAdapter(ChatModelAdapter):
    """
    vLLM 등 OpenAI-compatible 서버(`/v1/chat/completions`)에
    ChatOpenAI를 base_url로 붙여서 사용.
    """
    provider_name = "openai_compat"

    def __init__(self, model: str, base_url: str, api_key: str, temperature: float, max_tokens: int):
        chat = ChatOpenAI(
            model=model,
            base_url=base_url,
            api_key=api_key,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        super().__init__(chat, model)

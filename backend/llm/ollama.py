from __future__ import annotations

from langchain_ollama import ChatOllama

from .base import ChatModelAdapter


class OllamaAdapter(ChatModelAdapter):
    provider_name = "ollama"

    def __init__(self, model: str, base_url: str, temperature: float, max_tokens: int):
        # review는 자유 텍스트이므로 format="json" 지정하지 않음
        chat = ChatOllama(
            model=model,
            base_url=base_url,
            temperature=temperature,
            num_predict=max_tokens,
        )
        super().__init__(chat, model)

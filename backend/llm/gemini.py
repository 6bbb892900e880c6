"""
Google Gemini adapter.

Uses langchain-google-genai. If no api_key is given the library falls back to
the GOOGLE_API_KEY environment variable.
"""

from __future__ import annotations

from langchain_google_genai import ChatGoogleGenerativeAI

from .base import ChatModelAdapter


class GeminiAdapter(ChatModelAdapter):
    provider_name = "gemini"

    def __init__(
        self,
        model: str = "gemini-2.0-flash",
        api_key: str | None = None,
        temperature: float = 0.3,
        max_tokens: int = 2048,
    ):
        kwargs = {}
        if api_key:
            kwargs["google_api_key"] = api_key
        chat = ChatGoogleGenerativeAI(
            model=model,
            temperature=temperature,
            max_output_tokens=max_tokens,
            **kwargs,
        )
        super().__init__(chat, model)

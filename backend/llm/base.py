from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Sequence

from langchain_core.messages import BaseMessage


class MalformedResponse(ValueError):
    pass


def message_text(res: Any) -> str:
    """
    Chat model 응답에서 text만 꺼낸다.

    - content가 str이면 그대로
    - content가 part list면 text part만 이어 붙임 (Gemini 등)
    - 그 외는 malformed
    """
    content = getattr(res, "content", None)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts)
    raise MalformedResponse(f"Unexpected model response: {type(res).__name__}")


class LLMAdapter(ABC):
    @property
    @abstractmethod
    def provider(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def model_name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    async def ainvoke(self, messages: Sequence[BaseMessage]) -> str:
        """Return raw text output from the model."""
        raise NotImplementedError


class ChatModelAdapter(LLMAdapter):
    """LangChain chat model을 감싸는 공통 구현. provider별로 chat만 만든다."""

    provider_name = "chat"

    def __init__(self, chat, model: str):
        self.chat = chat
        self._model = model

    @property
    def provider(self) -> str:
        return self.provider_name

    @property
    def model_name(self) -> str:
        return self._model

    async def ainvoke(self, messages: Sequence[BaseMessage]) -> str:
        res = await self.chat.ainvoke(list(messages))
        return message_text(res)

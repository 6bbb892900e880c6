from __future__ import annotations

from typing import Sequence

from langchain_core.messages import BaseMessage

from backend.llm.base import LLMAdapter


class GenerationError(RuntimeError):
    """Any failure while producing a review. Causes are not distinguished."""


async def invoke_adapter(adapter: LLMAdapter, messages: Sequence[BaseMessage]) -> str:
    try:
        return await adapter.ainvoke(messages)
    except Exception as e:
        raise GenerationError("LLM generation failed") from e

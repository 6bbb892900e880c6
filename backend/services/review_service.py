from __future__ import annotations

import logging
from typing import Callable

from backend.config.generation import GenerationConfig
from backend.domain.prompts.review import build_review_messages
from backend.llm.base import LLMAdapter
from backend.llm.invoke import GenerationError, invoke_adapter
from backend.llm.provider import get_llm_adapter

logger = logging.getLogger(__name__)


class ReviewService:
    """
    Generation Client.

    - GenerationConfig를 생성 시 주입받음 (전역 settings 참조 X)
    - code -> [system, preamble + code] single-turn 호출
    - 어떤 실패든 GenerationError 하나로 올림. retry / cache 없음
    """

    def __init__(
        self,
        config: GenerationConfig,
        adapter_factory: Callable[[GenerationConfig], LLMAdapter] = get_llm_adapter,
    ) -> None:
        self.config = config
        self._adapter_factory = adapter_factory
        self._adapter: LLMAdapter | None = None

    def _get_adapter(self) -> LLMAdapter:
        if self._adapter is None:
            try:
                self._adapter = self._adapter_factory(self.config)
            except Exception as e:
                raise GenerationError("LLM client could not be created") from e
        return self._adapter

    async def generate(self, code: str) -> str:
        adapter = self._get_adapter()
        messages = build_review_messages(code, system_instruction=self.config.system_instruction)

        logger.debug("GENERATE_START provider=%s model=%s chars=%d", adapter.provider, adapter.model_name, len(code))
        text = await invoke_adapter(adapter, messages)
        logger.debug("GENERATE_DONE provider=%s chars=%d", adapter.provider, len(text))
        return text

from __future__ import annotations

from functools import lru_cache

from backend.config.generation import get_generation_config
from backend.services.review_service import ReviewService


@lru_cache(maxsize=1)
def _default_review_service() -> ReviewService:
    return ReviewService(get_generation_config())


def get_review_service() -> ReviewService:
    """FastAPI dependency. 테스트에서는 app.dependency_overrides로 교체."""
    return _default_review_service()

from __future__ import annotations

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReviewRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")
    code: Optional[str] = Field(default=None, description="Source code to review")

    @field_validator("code", mode="before")
    @classmethod
    def _falsy_as_missing(cls, v: Any) -> Any:
        # null, "", 0, false, [], {} 모두 "없음"으로 취급 -> 400
        if not v:
            return None
        return v

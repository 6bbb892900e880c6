import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from backend.api.deps import get_review_service
from backend.domain.schemas.review import ReviewRequest
from backend.services.review_service import ReviewService
from backend.shared.context import run_id_var

logger = logging.getLogger("reviewbot")

PROMPT_REQUIRED = "Prompt is required"
GENERATION_FAILED = "An error occurred while processing your request."

router = APIRouter()
ai_router = APIRouter(prefix="/ai")


@router.get("/health")
async def health():
    return {"ok": True}


@router.get("/schema/review")
async def review_schema():
    return {"request": ReviewRequest.model_json_schema()}


@ai_router.post("/get-review", response_class=PlainTextResponse)
async def get_review(
    req: Optional[ReviewRequest] = None,
    service: ReviewService = Depends(get_review_service),
):
    code = req.code if req is not None else None
    if not code:
        return PlainTextResponse(PROMPT_REQUIRED, status_code=400)

    try:
        text = await service.generate(code)
    except Exception as e:
        # GenerationError 외 예외도 같은 고정 메시지로
        logger.error("REVIEW_FAILED run_id=%s error=%r cause=%r", run_id_var.get(), e, e.__cause__)
        return PlainTextResponse(GENERATION_FAILED, status_code=500)

    return PlainTextResponse(text, status_code=200)


router.include_router(ai_router)

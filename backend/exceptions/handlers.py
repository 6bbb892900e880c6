from __future__ import annotations

import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from backend.shared.context import run_id_var

logger = logging.getLogger("reviewbot")


def _scrub(errors) -> list[dict]:
    # 사용자가 보낸 값(input, ctx)은 응답에 다시 싣지 않는다
    return [{k: v for k, v in err.items() if k not in ("input", "ctx", "url")} for err in errors]


def register_exception_handlers(app) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        run_id = run_id_var.get()
        errors = _scrub(exc.errors())
        logger.warning(
            "VALIDATION run_id=%s path=%s errors=%s",
            run_id,
            request.url.path,
            errors,
        )
        return JSONResponse(status_code=422, content={"detail": errors, "run_id": run_id})

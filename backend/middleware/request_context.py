from __future__ import annotations

import logging
import re
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from backend.shared.context import run_id_var

logger = logging.getLogger("reviewbot")

RUN_ID_HEADER = "X-Run-Id"
_RUN_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def _resolve_run_id(request: Request) -> str:
    # 호출자가 보낸 run id는 형식이 맞을 때만 이어받는다
    incoming = request.headers.get(RUN_ID_HEADER, "")
    if _RUN_ID_RE.match(incoming):
        return incoming
    return str(uuid.uuid4())


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        run_id = _resolve_run_id(request)
        token = run_id_var.set(run_id)

        start = time.perf_counter()
        try:
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - start) * 1000
            response.headers[RUN_ID_HEADER] = run_id
            logger.info(
                "REQ run_id=%s %s %s status=%s elapsed=%.1fms",
                run_id,
                request.method,
                request.url.path,
                response.status_code,
                elapsed_ms,
            )
            return response
        finally:
            run_id_var.reset(token)

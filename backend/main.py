from fastapi import FastAPI

from backend.api.routes import router
from backend.shared.logging import setup_logging
from backend.middleware.request_context import RequestContextMiddleware
from backend.exceptions.handlers import register_exception_handlers


def create_app(log_level: str | None = None) -> FastAPI:
    """
    Code review proxy: POST /ai/get-review -> LLM review as plain text.
    """
    setup_logging(log_level)

    app = FastAPI(
        title="Code Review Proxy",
        version="0.1.0",
        description="Relays a code snippet to an LLM and returns its review.",
    )
    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)
    app.include_router(router)
    return app


app = create_app()

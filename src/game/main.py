from __future__ import annotations

import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.game.api.routes import health_router, players_router
from src.game.api.schemas.common import fail
from src.game.config import get_settings
from src.game.db.session import bootstrap_database, db_transaction
from src.game.exceptions import PlayerServiceError
from src.game.middleware import RequestBodyLimitMiddleware, RequestContextMiddleware
from src.game.services.player_service import PlayerService

logger = logging.getLogger("game.api")


def create_app(player_service: PlayerService | None = None) -> FastAPI:
    settings = get_settings()

    app = FastAPI(title="Game Players API", version="0.1.0")
    app.state.player_service = player_service or PlayerService(db_transaction)

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(RequestBodyLimitMiddleware, max_bytes=settings.request_body_limit_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )

    @app.on_event("startup")
    def on_startup() -> None:
        bootstrap_database()

    @app.exception_handler(PlayerServiceError)
    async def handle_player_error(request: Request, exc: PlayerServiceError):
        request_id = getattr(request.state, "request_id", uuid.uuid4().hex)
        return JSONResponse(
            status_code=exc.status_code,
            content=fail(code=exc.code, message=exc.message, request_id=request_id),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        request_id = getattr(request.state, "request_id", uuid.uuid4().hex)
        message = "; ".join([err.get("msg", "invalid input") for err in exc.errors()])
        return JSONResponse(
            status_code=400,
            content=fail(code="VALIDATION_ERROR", message=message, request_id=request_id),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        request_id = getattr(request.state, "request_id", uuid.uuid4().hex)
        message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=fail(code="HTTP_ERROR", message=message, request_id=request_id),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        request_id = getattr(request.state, "request_id", uuid.uuid4().hex)
        logger.exception("Unhandled error", extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content=fail(code="INTERNAL_ERROR", message="Internal server error.", request_id=request_id),
        )

    app.include_router(health_router, prefix="/api")
    app.include_router(players_router)

    return app


app = create_app()

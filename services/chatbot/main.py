"""
Chatbot API
Handles: health check, root banner, keyword chat, API metadata
Port: $PORT (default 8080)
Run with: chatbot-api  (or python -m chatbot.main)

The chat endpoint never calls out anywhere: replies come from the keyword
rule table in classifier.py. Everything else here is plumbing for running
behind a hosting proxy (CORS, forwarded headers, docs in development only).
"""

import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .classifier import classify
from .config import API_DESCRIPTION, API_NAME, API_VERSION, Settings
from .dependencies import require_message
from .exceptions import MessageRequiredException
from .logging_config import setup_logging
from .models import ChatResponse, ErrorResponse, HealthResponse, InfoResponse

logger = logging.getLogger("chatbot.api")

ROOT_BANNER = "🤖 Chatbot API is running! Endpoints: /health, /api/chat"

ENDPOINTS = [
    "/health - Health check",
    "/api/chat - Chatbot principal",
    "/api/info - Información de la API",
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_message_id() -> str:
    return uuid.uuid4().hex[:8]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Starting %s on port %s", API_NAME, settings.port)
        yield

    docs = settings.is_development
    app = FastAPI(
        title=API_NAME,
        description=API_DESCRIPTION,
        version=API_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )
    app.state.settings = settings

    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Endpoints ─────────────────────────────────────────────────────────────

    @app.get("/health", name="HealthCheck", tags=["Health"], response_model=HealthResponse)
    async def health():
        return HealthResponse(status="healthy", timestamp=_utcnow(), version=API_VERSION)

    @app.get("/", name="Root", tags=["Info"], response_class=PlainTextResponse)
    async def root():
        return ROOT_BANNER

    @app.post(
        "/api/chat",
        name="Chat",
        tags=["Chat"],
        response_model=ChatResponse,
        responses={400: {"model": ErrorResponse}},
    )
    async def chat(message: str = Depends(require_message)):
        return ChatResponse(
            reply=classify(message),
            timestamp=_utcnow(),
            message_id=new_message_id(),
        )

    @app.get("/api/info", name="ApiInfo", tags=["Info"], response_model=InfoResponse)
    async def info():
        return InfoResponse(
            name=API_NAME,
            version=API_VERSION,
            description=API_DESCRIPTION,
            endpoints=ENDPOINTS,
            author=settings.author,
            timestamp=_utcnow(),
        )

    # ── Error handlers ────────────────────────────────────────────────────────

    @app.exception_handler(MessageRequiredException)
    async def message_required(request: Request, exc: MessageRequiredException):
        logger.debug("Rejected chat request: %s", exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(404)
    async def not_found(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=404,
            content={"error": "Not Found", "message": "Available endpoints: /health, /api/chat, /api/info"},
        )

    return app


app = create_app()


def run():
    import uvicorn

    settings = app.state.settings
    setup_logging(settings.log_level)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
        forwarded_allow_ips=settings.forwarded_allow_ips,
    )


if __name__ == "__main__":
    run()

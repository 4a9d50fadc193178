# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Kariua Parish API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings
from app.exceptions import (
    ParishAPIException,
    parish_exception_handler,
    validation_exception_handler,
)
from app.routers import chat, health, intentions
from core.services.chat_service import ChatService
from core.services.intention_service import IntentionService
from lib.storage import build_store
from lib.telegram_client import TelegramNotifier

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup: create tables for the configured store.
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting Kariua Parish API in {settings.ENVIRONMENT} mode")
    logger.info(f"Storage backend: {app.state.store.backend_name}")
    if not app.state.notifier.is_configured:
        logger.warning("Telegram relay not configured; intentions will be saved without notification")

    app.state.store.initialize()

    yield

    logger.info("Shutting down Kariua Parish API")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application and its services.

    Settings are read once here and passed into each component; nothing
    downstream reads the environment.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Kariua Parish API",
        description="""
## Kariua Parish Website API

Backend for the parish website: prayer intentions and the parish assistant.

| Endpoint | Purpose |
|----------|---------|
| `GET /api/health` | Liveness |
| `GET /api/prayer-intentions` | Prayer wall, newest first |
| `POST /api/prayer-intentions` | Submit an intention (also posted to the parish Telegram chat) |
| `POST /api/chat` | Ask the parish assistant |
""",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Health", "description": "API health and readiness checks"},
            {"name": "Prayer Intentions", "description": "Submit and list prayer intentions"},
            {"name": "Chat", "description": "Parish assistant chat"},
        ],
    )

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    store = build_store(
        settings.storage_backend,
        database_url=settings.DATABASE_URL,
        echo=settings.DATABASE_ECHO,
    )
    notifier = TelegramNotifier(
        bot_token=settings.TELEGRAM_BOT_TOKEN,
        chat_id=settings.TELEGRAM_CHAT_ID,
        api_base=settings.TELEGRAM_API_BASE,
        timeout=settings.NOTIFY_TIMEOUT_SECONDS,
    )

    app.state.settings = settings
    app.state.store = store
    app.state.notifier = notifier
    app.state.intention_service = IntentionService(store=store, notifier=notifier)
    app.state.chat_service = ChatService(
        api_key=settings.OPENAI_API_KEY,
        model=settings.OPENAI_MODEL,
        max_completion_tokens=settings.OPENAI_MAX_COMPLETION_TOKENS,
        timeout=settings.OPENAI_TIMEOUT_SECONDS,
    )

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    # CORS middleware - allows cross-origin requests from the site front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    app.add_exception_handler(ParishAPIException, parish_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            }
        )

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(intentions.router, prefix="/api", tags=["Prayer Intentions"])
    app.include_router(chat.router, prefix="/api", tags=["Chat"])

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Kariua Parish API",
            "version": API_VERSION,
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )

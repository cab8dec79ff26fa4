"""
SEO Analyzer Service - Main Application

A FastAPI backend service that captures website screenshots and content using
Playwright, audits pages with Lighthouse, and asks Claude AI (Anthropic) for
actionable SEO recommendations. A companion RAG path answers questions from
documents embedded in ChromaDB.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from config import Settings, settings as default_settings
from dependencies import Services, build_services
from errors import IndexingError
from routes import router

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build services (failing fast on missing credentials) and optionally index documents"""
    if app.state.services is None:
        app.state.services = build_services(app.state.settings)
    services: Services = app.state.services

    if services.settings.RAG_INDEX_ON_STARTUP:
        try:
            await services.indexer.rebuild()
        except IndexingError:
            logger.exception("Startup indexing failed; /rag/query unavailable until /init succeeds")

    logger.info("🚀 SEO Analyzer started")
    yield
    logger.info("SEO Analyzer shutdown complete")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors: answer 400 before any downstream call"""
    logger.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
    fields = {str(error.get("loc", ())[-1]) for error in exc.errors() if error.get("loc")}
    detail = "Invalid URL provided" if "url" in fields else "Invalid request"
    return JSONResponse(status_code=400, content={"detail": detail})


def create_app(settings: Optional[Settings] = None, services: Optional[Services] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Settings to build services from (defaults to global settings)
        services: Pre-built services; when given, startup wiring is skipped
    """
    settings = settings or (services.settings if services else default_settings)
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="SEO Analyzer Service", lifespan=lifespan)
    app.state.settings = settings
    app.state.services = services

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include all routes from routes.py
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, timeout_keep_alive=60)

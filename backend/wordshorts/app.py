"""
Word Shorts Backend - FastAPI Application

Vocabulary decks with three memorization stages and a word x media navigator.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root (parent of backend/)
# Must happen before importing modules that use environment variables
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from wordshorts.api.dependencies import cleanup_dependencies, init_dependencies  # noqa: E402
from wordshorts.api.routes import decks_router, navigator_router, vocab_router  # noqa: E402
from wordshorts.config import (  # noqa: E402
    CORS_ALLOWED_HEADERS,
    CORS_ALLOWED_METHODS,
    get_api_host,
    get_api_port,
    get_cors_allow_credentials,
    get_cors_origins,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan manager for startup/shutdown events.

    Startup:
    - Initialize singleton dependencies
    - Load or seed the deck store

    Shutdown:
    - Close HTTP connections
    """
    logger.info("Starting Word Shorts backend...")

    await init_dependencies()
    logger.info("Dependencies initialized")

    yield

    logger.info("Shutting down Word Shorts backend...")
    await cleanup_dependencies()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Word Shorts API",
    description="Vocabulary decks with stage-based memorization",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration - loaded from environment with restrictive defaults
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=get_cors_allow_credentials(),
    allow_methods=CORS_ALLOWED_METHODS,
    allow_headers=CORS_ALLOWED_HEADERS,
)

# Register API routers
app.include_router(decks_router)
app.include_router(navigator_router)
app.include_router(vocab_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "wordshorts-backend",
        "version": "0.1.0",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())

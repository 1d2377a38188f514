"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdfsegment import __version__
from pdfsegment.api.routes import router as extract_router
from pdfsegment.config import get_chunking_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Validates configuration on startup so a bad CHUNK_SIZE/CHUNK_OVERLAP
    pair fails the boot rather than the first request.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    chunker = get_chunking_config().chunker()
    logger.info(
        f"Starting pdfsegment API (chunk_size={chunker.chunk_size}, "
        f"chunk_overlap={chunker.overlap})"
    )
    yield
    logger.info("Shutting down pdfsegment API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="pdfsegment API",
        description=(
            "Extracts text from PDF documents, removes page-number artifacts, "
            "and partitions the result by logical page or into overlapping "
            "fixed-size chunks for indexing pipelines."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(extract_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "pdfsegment"}

    return application


app = create_app()

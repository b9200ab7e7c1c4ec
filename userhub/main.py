# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging
import time

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Local application imports
from .api.graphql import create_graphql_router
from .core.config import get_settings
from .core.logging import setup_logging
from .infrastructure.db import (
    check_database_health,
    close_mongo_connection,
    ensure_user_indexes,
    get_user_collection,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Configures logging, verifies MongoDB is reachable, ensures the unique
    indexes on email and username, and closes the client on shutdown.
    """
    setup_logging()
    settings = get_settings()

    if not await check_database_health():
        logger.critical("MongoDB connection error: database is unreachable")
        raise RuntimeError("Could not establish MongoDB connection")
    logger.info("MongoDB connected")

    await ensure_user_indexes(get_user_collection())
    logger.info("User indexes ensured")

    logger.info(f"Server ready at http://localhost:{settings.port}{settings.graphql_path}")

    yield

    close_mongo_connection()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - GraphQL route registration
    - Health endpoints

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    settings = get_settings()

    application = FastAPI(
        title="userhub API",
        version="1.0.0",
        description="User record store served over GraphQL",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(create_graphql_router(), prefix=settings.graphql_path)

    @application.get("/", tags=["Health"])
    async def root():
        """Root endpoint - basic info."""
        return {
            "name": "userhub API",
            "version": "1.0.0",
            "graphql": settings.graphql_path,
            "environment": settings.environment,
        }

    @application.get("/health", tags=["Health"])
    async def health_check():
        """Database connectivity check."""
        db_healthy = await check_database_health()
        return JSONResponse(
            status_code=200 if db_healthy else 503,
            content={
                "status": "healthy" if db_healthy else "degraded",
                "timestamp": time.time(),
                "checks": {"database": "healthy" if db_healthy else "unhealthy"},
            },
        )

    return application


# Create application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "userhub.main:app",
        host="0.0.0.0",
        port=get_settings().port,
        log_level=get_settings().log_level.lower(),
    )

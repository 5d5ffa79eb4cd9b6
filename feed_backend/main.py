# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.error_handlers import register_error_handlers
from .api.v1 import auth_router, feed_router, realtime_router
from .core.config import get_settings
from .di.container import get_container
from .infrastructure.db.mongo_connection import ensure_indexes, close_database
from .infrastructure.notifications import RealtimePublisher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures MongoDB indexes and runs the realtime publisher's dispatch task
    for the lifetime of the application.
    """
    container = get_container()
    publisher: RealtimePublisher = container.get(RealtimePublisher)

    try:
        await ensure_indexes()
    except Exception as e:
        # Don't fail app startup if MongoDB is not reachable yet
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    await publisher.start()

    yield

    await publisher.stop()
    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Domain error handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="Feed Backend API",
        version="1.0.0",
        description="Content feed with authentication, post management and realtime updates",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(feed_router, prefix="/api/v1/feed")
    application.include_router(realtime_router, prefix="/api/v1/feed")

    return application


# Create application instance
app = create_application()

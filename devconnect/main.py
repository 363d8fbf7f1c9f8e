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
from .api.v1 import auth_router, profile_router, post_router, health_router
from .core.config import get_settings
from .infrastructure.db.mongo_connection import ensure_indexes, close_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Ensures MongoDB indexes on startup and closes the shared client on shutdown.
    Startup fails if the indexes cannot be created: the unique index on
    profiles.user_id is what keeps one profile per user.
    """
    try:
        await ensure_indexes()
    except Exception as e:
        logger.error(f"Failed to ensure MongoDB indexes, refusing to start: {e}", exc_info=True)
        close_client()
        raise
    
    yield
    
    close_client()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging and CORS configuration
    - Error handlers and API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    
    application = FastAPI(
        title="DevConnect API",
        version="1.0.0",
        description="Developer profiles, posts, likes and comments",
        lifespan=lifespan
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_error_handlers(application)
    
    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(profile_router, prefix="/api/v1/profiles")
    application.include_router(post_router, prefix="/api/v1/posts")
    application.include_router(health_router, prefix="/health")
    
    return application


app = create_application()

# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Local application imports
from .api.graphql import create_graphql_router
from .api.rest import auth_router, feed_router, upload_router, notifications_router, register_exception_handlers
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di import AppContext, DIContainer

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Opens the application context (MongoDB client, indexes, image directory),
    builds the DI container from it, and closes everything on shutdown after
    pending broadcasts and file deletions have finished.
    """
    context = AppContext(get_settings(), BASE_DIR)
    await context.open()

    app.state.context = context
    app.state.container = DIContainer(context)
    logger.info("Application startup complete")

    yield

    await context.close()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - REST, WebSocket and GraphQL route registration
    - Static serving of stored images

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    load_dotenv(BASE_DIR / ".env")
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Feed API",
        version="1.0.0",
        description="Social feed backend with REST, GraphQL and WebSocket notifications",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["OPTIONS", "GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_exception_handlers(application)

    # Register API routers
    application.include_router(auth_router, prefix="/auth")
    application.include_router(feed_router, prefix="/feed")
    application.include_router(upload_router)
    application.include_router(notifications_router)
    application.include_router(create_graphql_router(), prefix="/graphql")

    # Stored image paths double as URL paths; the directory is created by AppContext.open()
    image_dir = settings.image_upload_dir.strip("/") or "images"
    application.mount(
        f"/{image_dir}",
        StaticFiles(directory=BASE_DIR / image_dir, check_dir=False),
        name="images",
    )

    return application


# Create application instance
app = create_application()

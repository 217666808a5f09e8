from dotenv import load_dotenv
import sys
import uvicorn
from fastapi import FastAPI
from contextlib import asynccontextmanager
# Routers
from app.routes.health import router as health_router
from app.routes.interview_questions import router as interview_questions_router
# CORS Middleware
from app.core.cors_middleware import add_cors_middleware
# Logger
from loguru import logger
from app.core.logging_config import configure_logging
# Configuration and shared clients
from app.core.settings import load_settings
from app.core.ai_client_manager import create_completion_client
from app.database import create_record_store
# Error Handling
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.errors.exceptions import ConfigMissing
from app.errors.handlers import http_exception_handler, generic_exception_handler, validation_exception_handler

# Load environment variables
load_dotenv()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    # Startup
    try:
        settings = getattr(app.state, "settings", None) or load_settings()
        configure_logging(settings.log_level)
        app.state.settings = settings
        app.state.record_store = create_record_store(settings.mongodb_uri, settings.mongodb_db)
        app.state.completion_client = create_completion_client(settings)
        logger.info("Application startup completed successfully")
    except ConfigMissing as e:
        logger.error(f"Configuration error: {e}")
        raise
    except Exception as e:
        logger.error(f"Error during application startup: {e}")
        raise

    yield

    # Shutdown
    await app.state.completion_client.close()
    app.state.record_store.close()
    logger.info("Application shutdown")

# Initialize FastAPI app
app = FastAPI(
    title="Interview Question Generator API",
    description="Generates interview question/answer pairs for a job role with an LLM",
    version="0.1.0",
    lifespan=lifespan
)
# Add CORS middleware
add_cors_middleware(app)

# Centralized error handlers
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Include routers
app.include_router(health_router)
app.include_router(interview_questions_router)


def run():
    """Validate configuration, then serve the app with uvicorn. Exits with status 1 on missing configuration."""
    try:
        settings = load_settings()
    except ConfigMissing as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    configure_logging(settings.log_level)
    app.state.settings = settings
    logger.info(f"Server running on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()

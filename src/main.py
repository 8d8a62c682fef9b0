import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import select
import uvicorn

from src.core.database import get_session
from src.core.logging_config import setup_logging
from src.core.response.handlers import register_exception_handlers
from src.core.config import settings

# Import routers from apps
from src.apps.blog import post_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)
    async with get_session() as session:
        await session.exec(select(1))
    logger.info("Database connection established")
    yield
    logger.info("Shutting down")


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_INFO,
    version=settings.PROJECT_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# Health check endpoint
@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with health check."""
    return {"message": "Server is running", "status": "healthy", "version": settings.PROJECT_VERSION}


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "message": "Service is running normally"}


app.include_router(post_router, prefix=settings.API_PREFIX)


if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.bootstrap import bootstrap_app
from app.core.config import settings
from app.core.middlewares import security_headers_middleware, request_logging_middleware
from app.core.services import get_http_client_manager

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.DEBUG else logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Initializes the shared HTTP client pool on startup and closes it on shutdown.
    """
    logger.info("Starting application...")

    manager = get_http_client_manager()
    logger.info("Initializing HTTP Client Pool...")
    await manager.initialize()
    logger.info("HTTP Client initialized.")

    yield

    logger.info("Shutting down application...")
    logger.info("Closing HTTP Client Pool...")
    await manager.close()


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    version=settings.VERSION,
    lifespan=lifespan,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url=f"{settings.API_V1_STR}/docs",
    redoc_url=f"{settings.API_V1_STR}/redoc"
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Logs unhandled errors; the client only sees the error type."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    response_content = {
        "status": "error",
        "error_type": exc.__class__.__name__,
        "message": "Internal server error",
    }

    return JSONResponse(
        status_code=500,
        content=response_content,
    )

# Security headers middleware
app.middleware("http")(security_headers_middleware)

# Request logging middleware
app.middleware("http")(request_logging_middleware)


bootstrap_app(app)


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.VERSION}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0",
                port=8000,
                log_level="info"
        )

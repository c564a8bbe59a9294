"""FastAPI application entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore import __version__
from bookstore.api import api_router
from bookstore.config import settings
from bookstore.core.exceptions import AppException, error_response
from bookstore.core.logging import get_logger, setup_logging
from bookstore.database import close_db, init_db
from bookstore.schemas.common import StatusResponse

setup_logging(settings.log_level)
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    # Startup
    await init_db()
    logger.info(f"{settings.app_name} started")
    yield
    # Shutdown
    await close_db()


app = FastAPI(
    title=settings.app_name,
    description="Catalog management API for book records",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _json(result: tuple[int, dict]) -> JSONResponse:
    status_code, body = result
    return JSONResponse(status_code=status_code, content=body)


# Exception handlers
@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    """Handle application exceptions."""
    return _json(error_response(exc, request.url.path))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report unparseable request bodies with the same field error shape."""
    field_errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field_errors.append({
            "field": ".".join(location) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return _json(error_response(
        exc,
        request.url.path,
        status_code=400,
        message="Validation failed",
        field_errors=field_errors,
    ))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions."""
    return _json(error_response(
        exc,
        request.url.path,
        status_code=exc.status_code,
        message=str(exc.detail),
    ))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    message = f"{type(exc).__name__}: {exc}" if settings.debug else None
    return _json(error_response(exc, request.url.path, message=message))


# Include API router
app.include_router(api_router)


# Health check endpoint
@app.get("/health", response_model=StatusResponse)
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "docs": "/docs" if settings.debug else None,
    }


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "bookstore.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()

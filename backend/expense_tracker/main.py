"""
FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from expense_tracker.config import settings
from expense_tracker.api.router import api_router
from expense_tracker.core.exceptions import (
    AuthenticationError,
    ConflictError,
    ExpenseTrackerError,
    InvalidInputError,
    NotFoundError,
    PersistenceError,
)
from expense_tracker.database import close_db, init_db

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name}...")
    init_db()
    yield
    logger.info(f"Shutting down {settings.app_name}...")
    close_db()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version="1.0.0",
    description="Expense tracking backend with per-user statistics",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix="/api/v1")


def _error_response(status_code: int, error: str, exc: ExpenseTrackerError) -> JSONResponse:
    content = {"error": error, "message": exc.message}
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=status_code, content=content)


# Exception handlers
@app.exception_handler(InvalidInputError)
async def invalid_input_exception_handler(request: Request, exc: InvalidInputError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.message}")
    return _error_response(400, "invalid_input", exc)


@app.exception_handler(ConflictError)
async def conflict_exception_handler(request: Request, exc: ConflictError):
    return _error_response(400, "conflict", exc)


@app.exception_handler(AuthenticationError)
async def authentication_exception_handler(request: Request, exc: AuthenticationError):
    return JSONResponse(
        status_code=401,
        content={"error": "invalid_credentials", "message": exc.message},
    )


@app.exception_handler(NotFoundError)
async def not_found_exception_handler(request: Request, exc: NotFoundError):
    return JSONResponse(
        status_code=404,
        content={"error": "not_found", "message": exc.message},
    )


@app.exception_handler(PersistenceError)
async def persistence_exception_handler(request: Request, exc: PersistenceError):
    logger.error(f"PersistenceError on {request.method} {request.url.path}: {exc.message} ({exc.details})")
    return JSONResponse(
        status_code=500,
        content={"error": "persistence_error", "message": exc.message},
    )


@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/api/v1/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "app_name": settings.app_name
    }


def run():
    """Serve the app with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run("expense_tracker.main:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()

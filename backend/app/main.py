"""
FastAPI entrypoint for the Notes backend application.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.router import api_router
from app.core.config import settings
from app.core.exceptions import UserManagementError, ValidationError
from app.core.logging_config import configure_logging
from app.core.utils import format_message

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Notes API",
    description="Backend API for notes user management",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UserManagementError)
async def user_management_error_handler(request: Request, exc: UserManagementError):
    return JSONResponse(status_code=exc.status_code, content=format_message(exc.message))


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies the same way as missing fields."""
    logger.debug(f"Invalid request body for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=ValidationError.status_code,
        content=format_message(ValidationError.default_message),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=format_message("Internal server error"),
    )


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Notes API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}

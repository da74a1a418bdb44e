import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from links_app.config import settings
from links_app.database.connection import engine, Base
from links_app.exceptions import LinkServiceError, ValidationError
from links_app.logging_config import configure_logging
from links_app.api.v1 import links, redirect

# Import models to ensure they're registered with Base
from links_app.models import Link, Tag, Visit  # noqa: F401

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A link shortener service built with FastAPI",
    debug=settings.debug
)


@app.exception_handler(LinkServiceError)
async def link_service_error_handler(request: Request, exc: LinkServiceError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Router-level errors (unknown path, wrong method) in the same {error} shape"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    error = ValidationError.from_errors(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, error.message)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
app.include_router(links.router)
# The redirect router catches every /{slug}, it must be included last
app.include_router(redirect.router)


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)

"""
Guide Validator Web Service - Main Application
Localized home, guide profile and onboarding pages on Supabase
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.routes import admin, auth, health, pages
from app.utils.page_cache import create_page_cache
from shared.utils.logger import configure_logging

settings = get_settings()

configure_logging(
    log_level=settings.log_level,
    log_format=settings.log_format,
    config_path=settings.log_config_path
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    logger.info("Starting Guide Validator web service", environment=settings.environment)

    app.state.page_cache = create_page_cache(settings.redis_url)

    yield

    await app.state.page_cache.close()
    logger.info("Guide Validator web service shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Guide Validator - Web Service",
    description="Localized guide profiles, onboarding links and sign-out",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all completed requests"""
    response = await call_next(request)

    logger.info(
        "Request completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code
    )

    return response


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Custom HTTP exception handler"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": True,
            "message": exc.detail,
            "status_code": exc.status_code
        },
        headers=exc.headers
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        method=request.method,
        path=request.url.path,
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        }
    )


# Register routes; locale-prefixed pages go last so they don't shadow fixed paths
app.include_router(health.router, tags=["Health"])
app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])


@app.get("/api")
async def service_info():
    """Service metadata"""
    return {
        "service": "guide-validator-web",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs"
    }


app.include_router(pages.router, tags=["Pages"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )

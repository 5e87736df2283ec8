"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.

Run with:
    uvicorn posts_api.main:app
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from posts_api.api.error_handlers import register_exception_handlers
from posts_api.api.v1 import post_router, user_router
from posts_api.core.config import get_settings
from posts_api.core.logging_config import setup_logging
from posts_api.di.container import reset_container

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    - Domain error handlers
    - Shutdown handler closing the shared upstream client
    
    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    
    application = FastAPI(
        title=settings.project_name,
        description="Enriched posts and users proxied from an upstream JSON API",
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    
    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Register API routers
    application.include_router(post_router, prefix=f"{settings.api_prefix}/posts")
    application.include_router(user_router, prefix=f"{settings.api_prefix}/users")
    
    register_exception_handlers(application)
    
    @application.get("/")
    async def root():
        """Root endpoint - service info."""
        return {
            "status": "running",
            "service": settings.project_name,
            "version": settings.api_version,
            "upstream": settings.upstream_base_url,
            "docs": "/docs",
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    @application.on_event("shutdown")
    async def shutdown_event():
        """Release the shared upstream client."""
        await reset_container()
        logger.info("Posts API stopped")
    
    return application


# Create application instance
app = create_application()

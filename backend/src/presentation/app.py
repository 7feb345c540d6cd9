"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.routing import APIRoute

from infrastructure.config import Settings, get_settings, setup_logger, get_logger
from infrastructure.database import init_db, close_db
from presentation.api.error_handlers import register_exception_handlers
from presentation.api.v1.endpoints import activities, health
from presentation.middleware import (
    BodySizeLimitMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings: Settings = app.state.settings
    
    setup_logger(
        level=settings.log_level,
        log_format=settings.log_format,
    )
    
    await init_db()
    logger.info(f"API Listen on {settings.port}")
    
    yield
    
    # Shutdown
    await close_db()


def operation_id(route: APIRoute) -> str:
    """Use the endpoint function name as the OpenAPI operation id."""
    return route.name


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application with its middleware, routes and docs.
    
    Args:
        settings: Settings to use; defaults to the cached environment settings
        
    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    
    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.app_version,
        docs_url=settings.docs_path,
        servers=[{"url": settings.swagger_server}],
        contact={
            "name": settings.contact_name,
            "url": settings.contact_url,
            "email": settings.contact_email,
        },
        generate_unique_id_function=operation_id,
        lifespan=lifespan,
    )
    app.state.settings = settings
    
    # Added last runs first: CORS sees the request before anything else
    app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)
    app.add_middleware(BodySizeLimitMiddleware, max_body_size=settings.max_body_size)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_methods,
        allow_headers=["*"],
    )
    
    register_exception_handlers(app)
    
    app.include_router(health.router)
    app.include_router(activities.router, prefix=settings.api_prefix)
    
    return app

"""FastAPI application factory."""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortit.api import redirect, status, urls
from shortit.config import Settings
from shortit.middleware.logging import LoggingMiddleware
from shortit.services.key_factory import KeyStrategyFactory
from shortit.store.factory import StoreFactory
from shortit.store.strategies import MappingStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings, store: Optional[MappingStore] = None) -> FastAPI:
    """Create and configure FastAPI application.
    
    Args:
        settings: Application settings
        store: Mapping store to use instead of building one from settings
        
    Returns:
        Configured FastAPI app
    """
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Own the store: connect on startup, close on shutdown."""
        logger.info(f"Starting URL shortener ({settings.env}, {settings.store_backend} store)")
        if store is not None:
            app.state.store = store
        else:
            app.state.store = StoreFactory.from_name(settings.store_backend, settings)
        
        yield
        
        logger.info("Shutting down URL shortener")
        app.state.store.close()
    
    app = FastAPI(
        title="URL Shortener",
        description="Shortens URLs and redirects short keys to them",
        version="1.0.0",
        lifespan=lifespan
    )
    
    app.state.settings = settings
    app.state.key_strategy = KeyStrategyFactory.from_name(settings.key_strategy, settings)
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_middleware(LoggingMiddleware)
    
    @app.exception_handler(StarletteHTTPException)
    async def plain_text_http_exception(request, exc: StarletteHTTPException):
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )
    
    app.include_router(status.router)
    app.include_router(urls.router)
    app.include_router(redirect.router)
    
    if settings.is_production:
        # Static client build takes over / (mounted last so API routes win)
        if os.path.isdir(settings.static_dir):
            app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="client")
        else:
            logger.warning(
                f"Static directory {settings.static_dir} not found, client will not be served"
            )
    else:
        app.add_api_route("/", status.server_status, methods=["GET"], tags=["status"])
    
    return app

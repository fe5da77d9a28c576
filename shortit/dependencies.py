"""
FastAPI dependencies for dependency injection.

The store and key strategy are created by the application lifespan and
kept on app.state; these dependencies hand them to routes and services.

Pattern: Dependency Injection
- Loose coupling between components
- Easy to test (inject a fake store)
- Flexible (swap implementations via config)
"""

from fastapi import Depends, Request

from shortit.config import Settings
from shortit.services.key_strategies import KeyStrategy
from shortit.services.url_service import URLService
from shortit.store.strategies import MappingStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> MappingStore:
    """
    Get the mapping store owned by the running application.
    
    Returns:
        MappingStore created at startup
    """
    return request.app.state.store


def get_key_strategy(request: Request) -> KeyStrategy:
    return request.app.state.key_strategy


def get_url_service(
    store: MappingStore = Depends(get_store),
    key_strategy: KeyStrategy = Depends(get_key_strategy)
) -> URLService:
    """
    Get URLService with all dependencies injected.
    
    Controllers depend on the service, the service depends on the store.
    """
    return URLService(store=store, key_strategy=key_strategy)

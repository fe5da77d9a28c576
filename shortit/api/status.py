from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from shortit.config import Settings
from shortit.dependencies import get_app_settings, get_store
from shortit.store.strategies import MappingStore

router = APIRouter(tags=["status"])


def server_status():
    """Root endpoint, replaced by the static client in production"""
    return PlainTextResponse("Server is running...")


@router.get("/health")
def health_check(
    store: MappingStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings)
):
    """Health check endpoint, including the store connection"""
    healthy = store.ping()
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "store": settings.store_backend,
        },
    )

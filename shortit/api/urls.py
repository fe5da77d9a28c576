from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from shortit.config import Settings
from shortit.dependencies import get_app_settings, get_url_service
from shortit.exceptions import StoreError
from shortit.services.url_service import URLService

router = APIRouter(tags=["urls"])


@router.post("/short-it", response_class=PlainTextResponse)
def create_short_url(
    request: Request,
    url: str = Form("", alias="URL"),
    url_service: URLService = Depends(get_url_service),
    settings: Settings = Depends(get_app_settings)
):
    """Shorten the form field URL and return the short URL as plain text"""
    if not url:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="URL is required"
        )
    
    try:
        mapping = url_service.shorten(url)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to store URL"
        )
    
    base_url = settings.base_url or str(request.base_url)
    return url_service.short_url(base_url, mapping.key)

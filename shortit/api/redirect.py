from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Response, status

from shortit.dependencies import get_url_service
from shortit.exceptions import StoreError
from shortit.services.url_service import URLService

router = APIRouter(tags=["redirect"])


def location_header(url: str) -> str:
    """
    Make a stored URL safe to send as a Location header.
    
    Printable ASCII is passed through byte for byte; only control
    characters and non-ASCII characters are percent-encoded (as UTF-8).
    """
    return "".join(
        char if " " <= char < "\x7f" else quote(char, safe="")
        for char in url
    )


@router.get("/short/")
def redirect_without_key():
    """The key path segment was left empty"""
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Key field is empty"
    )


@router.get("/short/{key}")
def redirect_to_url(
    key: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the URL stored under key.
    
    Runs in the threadpool: store backends are blocking.
    """
    if not key.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Key field is empty"
        )
    
    try:
        url = url_service.resolve(key)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch URL"
        )
    
    if url is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="URL not found"
        )
    
    # RedirectResponse would re-quote characters such as | { } ^
    return Response(
        status_code=status.HTTP_302_FOUND,
        headers={"location": location_header(url)}
    )

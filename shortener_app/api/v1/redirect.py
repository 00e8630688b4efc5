from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from shortener_app.api.v1.shorten import ALL_METHODS
from shortener_app.services.url_service import URLService
from shortener_app.dependencies import get_url_service

router = APIRouter(tags=["redirect"])


# `:path` so the whole remainder is the key: "/" gives "" (always a miss)
# and "/a/b" looks up "a/b". Any method is looked up, not just GET.
@router.api_route("/{short_code:path}", methods=ALL_METHODS)
def redirect_to_original_url(
    short_code: str,
    url_service: URLService = Depends(get_url_service)
):
    """Redirect to the original URL with 307, or 404 if the code is unknown"""
    original_url = url_service.get_original_url(short_code)

    if original_url is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short code not found"
        )

    return RedirectResponse(url=original_url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)

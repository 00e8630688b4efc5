from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError
from shortener_app.schemas.url import URLCreate, ShortenResponse
from shortener_app.services.url_service import URLService
from shortener_app.dependencies import get_url_service

router = APIRouter(tags=["shorten"])

# Every method is routed here so that e.g. GET /shorten answers 405
# instead of falling through to the redirect route.
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@router.api_route("/shorten", methods=ALL_METHODS, response_model=ShortenResponse)
async def shorten_url(
    request: Request,
    url_service: URLService = Depends(get_url_service)
):
    """
    Create a new short URL.

    Body is decoded by hand rather than declared as a parameter so that
    malformed input maps to 400 with a plain-text message, not FastAPI's 422.
    """
    if request.method != "POST":
        raise HTTPException(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            detail="Method not allowed",
            headers={"Allow": "POST"}
        )

    body = await request.body()
    # A bare `null` is well-formed and decodes to an empty request
    if body.strip() == b"null":
        body = b"{}"

    try:
        url_data = URLCreate.model_validate_json(body)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid request body"
        )

    url_pair = url_service.create_short_url(url_data.original)
    return ShortenResponse(short_code=url_pair.short_code)

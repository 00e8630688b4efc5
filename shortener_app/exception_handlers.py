from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


async def plain_text_http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as a plain-text body instead of FastAPI's JSON `detail`."""
    return PlainTextResponse(
        f"{exc.detail}\n",
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None)
    )

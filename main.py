import uvicorn
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortener_app.config import settings
from shortener_app.logging_config import setup_logging
from shortener_app.exception_handlers import plain_text_http_exception_handler
from shortener_app.middleware import RequestLoggingMiddleware
from shortener_app.api.v1 import shorten, redirect

logger = setup_logging(settings.log_level, json_format=settings.log_json)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A minimal in-memory URL shortener service built with FastAPI",
    debug=settings.debug
)

app.add_middleware(RequestLoggingMiddleware)
app.add_exception_handler(StarletteHTTPException, plain_text_http_exception_handler)


######## Include routers
# /shorten must be registered before the catch-all redirect route
app.include_router(shorten.router)
app.include_router(redirect.router)


if __name__ == "__main__":
    logger.info("Server starting: http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)

"""
FastAPI server for the LLM chat proxy.

A single catch-all endpoint: OPTIONS answers CORS preflight, POST forwards
the chat request to the selected provider, everything else is rejected.
"""

import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import MethodNotAllowedError, ProxyError
from .router import RequestRouter

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# Create FastAPI app; docs routes off so every path reaches the proxy handler
app = FastAPI(
    title="LLM Chat Proxy",
    description="Forwards chat requests to OpenAI, Anthropic or Google",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

router = RequestRouter()


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    """Attach permissive CORS headers to every response."""
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Methods outside ALL_METHODS are refused by routing before reaching chat()."""
    if exc.status_code == 405:
        return error_response(MethodNotAllowedError().message, 405)
    return error_response(str(exc.detail), exc.status_code)


@app.api_route("/{path:path}", methods=ALL_METHODS)
async def chat(request: Request, path: str):
    """
    Proxy a chat request.

    Body: ``{"messages": [...], "provider": "...", "apiKey": "...", "model": "..."}``

    Returns:
        The provider's JSON response, or ``{"error": message}``
    """
    if request.method == "OPTIONS":
        return Response(status_code=200)

    try:
        if request.method != "POST":
            raise MethodNotAllowedError()

        try:
            body = await request.json()
        except ValueError:
            body = None

        data = await router.handle(body)
        return JSONResponse(data)

    except ProxyError as e:
        return error_response(e.message, e.status_code)
    except Exception as e:
        logger.error(f"Request failed: {e}", exc_info=True)
        return error_response(str(e), 500)


if __name__ == "__main__":
    import uvicorn

    from .models import ProxyConfig

    config = ProxyConfig.from_env()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "llm_chat_proxy.api:app",
        host=config.host,
        port=config.port,
        reload=False,
        log_level=config.log_level,
    )

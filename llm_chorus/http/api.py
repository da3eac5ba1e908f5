"""FastAPI HTTP endpoints for llm-chorus.

This module exposes the chat pipeline and a health check over HTTP.
Serve `create_app()` (or the module-level `app`) with any ASGI server.
"""

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Dict, Optional

try:
    from fastapi import APIRouter, Depends, FastAPI, Request, Response
    from fastapi.middleware.cors import CORSMiddleware
    from fastapi.responses import JSONResponse
except ImportError:
    raise ImportError(
        "FastAPI is required for HTTP endpoints. "
        "Please install with: pip install llm-chorus"
    )

from .. import __version__
from ..api.client import ChorusClient
from ..models.responses import ErrorResponse
from ..providers.errors import ErrorTranslator, InvalidRequestError

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache(maxsize=1)
def get_client() -> ChorusClient:
    """Process-wide client; credentials are read once from the environment."""
    return ChorusClient()


@router.options("/chat")
async def chat_preflight():
    """CORS preflight; headers are added by the middleware."""
    return Response(status_code=200)


@router.post("/chat")
async def chat(request: Request, client: ChorusClient = Depends(get_client)):
    """Chat completion across one or several providers."""
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})

    try:
        result = await client.chat(body)
    except InvalidRequestError as e:
        return JSONResponse(status_code=400, content={"error": e.message})
    except Exception as e:
        logger.exception("Server error in chat handler")
        return JSONResponse(
            status_code=500,
            content={"error": "Server error", "details": ErrorTranslator.truncate(e)}
        )

    if isinstance(result, ErrorResponse):
        return JSONResponse(
            status_code=result.status_code,
            content=result.model_dump(exclude_none=True)
        )
    return result.model_dump()


def _health_report(client: ChorusClient) -> Dict[str, Any]:
    providers = client.provider_status()
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "providers": providers,
    }


@router.get("/health")
async def health(client: ChorusClient = Depends(get_client)):
    """Report configuration; key presence only, never key material."""
    return _health_report(client)


@router.post("/health")
async def health_probe(client: ChorusClient = Depends(get_client)):
    """Health report plus a minimal live call to every configured provider."""
    report = _health_report(client)
    if not any(p["configured"] for p in report["providers"].values()):
        report["status"] = "error"
        report["error"] = "No provider API keys configured"
        return JSONResponse(status_code=500, content=report)

    report["probe"] = await client.probe()
    return report


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unexpected failures outside a handler, e.g. while building the client."""
    logger.error("Unhandled server error", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Server error", "details": ErrorTranslator.truncate(exc)}
    )


def create_app(client: Optional[ChorusClient] = None) -> FastAPI:
    """
    Build the ASGI application.

    Args:
        client: Client to serve requests with; the lazily created
            process-wide client when omitted
    """
    app = FastAPI(title="llm-chorus", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(Exception, server_error_handler)
    app.include_router(router, prefix="/api")
    if client is not None:
        app.dependency_overrides[get_client] = lambda: client
    return app


app = create_app()

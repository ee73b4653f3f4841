"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from nutrition_query.api.models import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from nutrition_query.app_logging import configure_logging
from nutrition_query.config import parse_allowed_origins
from nutrition_query.containers import AppContainer
from nutrition_query.domain.errors import (
    ExternalLookupError,
    LookupBadJsonError,
    LookupHttpError,
    LookupNetworkError,
)

CORS_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

_HTTP_ERROR_KINDS = {
    404: "not_found",
    405: "method_not_allowed",
}


def error_response(
    error: str, message: str, status_code: int = 400, **extra: object
) -> JSONResponse:
    """Build the ``{error, message, ...}`` envelope."""
    body = ErrorResponse(error=error, message=message, **extra)
    return JSONResponse(body.model_dump(), status_code=status_code)


def lookup_error_response(exc: ExternalLookupError) -> JSONResponse:
    """Map an external lookup failure to a 502 answer."""
    if isinstance(exc, LookupNetworkError):
        return error_response(
            exc.kind, "Failed to reach Open Food Facts", 502, detail=str(exc)
        )
    if isinstance(exc, LookupHttpError):
        return error_response(
            exc.kind,
            "Open Food Facts answered with an error",
            502,
            status=exc.status,
            detail=exc.detail,
        )
    if isinstance(exc, LookupBadJsonError):
        return error_response(exc.kind, "Invalid response from Open Food Facts", 502)
    return error_response(exc.kind, "External lookup failed", 502, detail=str(exc))


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allow_origins),
        allow_methods=["POST", "OPTIONS"],
        allow_headers=CORS_HEADERS,
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        kind = _HTTP_ERROR_KINDS.get(exc.status_code, "http_error")
        return error_response(kind, str(exc.detail), exc.status_code)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.options("/analyze")
    async def analyze_options() -> PlainTextResponse:
        """Answer bare OPTIONS requests; CORS preflights never reach here."""
        return PlainTextResponse("ok")

    @app.post("/analyze")
    async def analyze(request: Request) -> JSONResponse:
        """Estimate calories and macros for a free-form food query."""
        content_type = request.headers.get("content-type", "")
        if "application/json" not in content_type.lower():
            return error_response(
                "bad_request", "Content-Type must be application/json"
            )
        try:
            payload = await request.json()
        except ValueError:
            return error_response("bad_request", "Invalid JSON body")
        try:
            body = AnalyzeRequest.model_validate(payload)
        except ValidationError:
            return error_response(
                "bad_request", "query is required (non-empty string)"
            )
        query = body.query.strip()
        if not query:
            return error_response(
                "bad_request", "query is required (non-empty string)"
            )

        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.analysis_service.analyze(query)
        except ExternalLookupError as exc:
            logger.warning("External lookup failed (%s): %s", exc.kind, exc)
            return lookup_error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error while analyzing query")
            return error_response(
                "internal_error", "Unexpected error", 500, detail=str(exc)
            )
        return JSONResponse(AnalyzeResponse.from_domain(result).model_dump())

    return app

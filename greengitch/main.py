"""FastAPI entry point exposing the GreenGitch REST API."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from .climate_issues import as_mapping
from .config import get_settings
from .schemas import (
    CityListResponse,
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    HealthResponse,
)
from .service import GreenGitchService, get_greengitch_service
from .utils import DEFAULT_PLACEHOLDER_SIZE, render_placeholder_svg

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"
MISSING_FIELDS_DETAIL = "City and issue are required"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


app = FastAPI(title="GreenGitch Backend", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    if request.url.path == GENERATE_PATH:
        logger.info("Rejected generation request with invalid body: %s", exc.errors())
        return _error_response(status.HTTP_400_BAD_REQUEST, MISSING_FIELDS_DETAIL)
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "Invalid request parameters")


@app.get("/health", response_model=HealthResponse, summary="Health Check Endpoint")
async def healthcheck(
    service: GreenGitchService = Depends(get_greengitch_service),
):
    return HealthResponse(
        status="ok",
        provider=service.provider_name,
        credentialConfigured=service.settings.has_stability_api_key,
    )


@app.get(
    "/api/cities",
    response_model=CityListResponse,
    summary="List the supported cities and their climate issues",
)
async def list_cities():
    return CityListResponse(cities=as_mapping())


@app.post(
    GENERATE_PATH,
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Generate climate awareness images for a city and issue",
)
async def generate_images(
    payload: GenerateRequest,
    service: GreenGitchService = Depends(get_greengitch_service),
):
    city = (payload.city or "").strip()
    issue = (payload.issue or "").strip()
    if not city or not issue:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=MISSING_FIELDS_DETAIL,
        )

    images = await run_in_threadpool(service.generate_awareness_images, city, issue)
    return GenerateResponse(images=images)


@app.get(
    "/placeholder.svg",
    summary="Placeholder artwork for image slots without a real generation",
    response_class=Response,
)
async def placeholder_svg(
    height: int = Query(default=DEFAULT_PLACEHOLDER_SIZE),
    width: int = Query(default=DEFAULT_PLACEHOLDER_SIZE),
):
    return Response(content=render_placeholder_svg(width, height), media_type="image/svg+xml")


__all__ = ["app"]


if __name__ == "__main__":  # pragma: no cover - convenience entry point
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "greengitch.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level,
    )

"""FastAPI entry point exposing the RealPix REST API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool

from .aiservices.imagegenerationclient import ProviderError
from .config import Settings, get_settings
from .schemas import GenerationRequest, GenerationResult, HealthResponse
from .service import PROMPT_REQUIRED, ImageGenerationService, PromptValidationError

logger = logging.getLogger(__name__)

GENERATION_FAILED = "Failed to generate image"
PROVIDER_ERROR_REDACTED = "The image provider could not complete the request"
INTERNAL_ERROR = "Internal server error"
INTERNAL_ERROR_REDACTED = "An unexpected error occurred"


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_generation_service(request: Request) -> ImageGenerationService:
    return request.app.state.generation_service


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _error_response(status_code: int, result: GenerationResult) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=result.to_payload())


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PromptValidationError)
    async def prompt_validation_handler(request: Request, exc: PromptValidationError):
        return _error_response(status.HTTP_400_BAD_REQUEST, GenerationResult.failed(exc.message))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Malformed bodies are reported like a missing prompt instead of FastAPI's 422.
        logger.debug("Rejected request body: %s", exc.errors())
        return _error_response(status.HTTP_400_BAD_REQUEST, GenerationResult.failed(PROMPT_REQUIRED))

    @app.exception_handler(ProviderError)
    async def provider_error_handler(request: Request, exc: ProviderError):
        logger.error("Error generating image: %s", exc, exc_info=exc)
        settings: Settings = request.app.state.settings
        detail = PROVIDER_ERROR_REDACTED if settings.is_production else str(exc)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            GenerationResult.failed(detail, message=GENERATION_FAILED),
        )


def create_app(
    settings: Settings | None = None,
    generation_service: ImageGenerationService | None = None,
) -> FastAPI:
    """Build the API around a single settings object resolved at startup."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings.uploads_dir.mkdir(parents=True, exist_ok=True)
        yield

    app = FastAPI(title="RealPix Backend", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.generation_service = generation_service or ImageGenerationService(settings)

    # Registered before CORSMiddleware so the 500 envelope still carries CORS headers.
    @app.middleware("http")
    async def unhandled_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
            detail = INTERNAL_ERROR_REDACTED if settings.is_production else str(exc)
            return _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                GenerationResult.failed(detail, message=INTERNAL_ERROR),
            )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.allowed_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.mount("/uploads", StaticFiles(directory=settings.uploads_dir, check_dir=False), name="uploads")

    _register_exception_handlers(app)

    @app.get("/api/health", response_model=HealthResponse, summary="Health Check Endpoint")
    async def healthcheck(settings: Settings = Depends(get_app_settings)):
        return HealthResponse(
            status="ok",
            message="RealPix API is running",
            environment=settings.environment,
            timestamp=_utc_timestamp(),
        )

    @app.post(
        "/api/generate-image",
        response_model=GenerationResult,
        response_model_exclude_none=True,
        summary="Generate one image from a text prompt",
    )
    async def generate_image(
        payload: GenerationRequest,
        service: ImageGenerationService = Depends(get_generation_service),
    ):
        return await run_in_threadpool(service.generate, payload.prompt)

    logger.info(
        "RealPix API configured for %s mode (%s), allowing origin %s",
        settings.environment,
        "demo" if app.state.generation_service.demo_mode else settings.image_model,
        settings.allowed_origin,
    )
    return app


app = create_app()


__all__ = ["app", "create_app"]


if __name__ == "__main__":  # pragma: no cover - convenience entry point
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    _settings = get_settings()
    logger.info("RealPix server running on port %s in %s mode", _settings.port, _settings.environment)
    logger.info("API available at http://localhost:%s/api", _settings.port)
    uvicorn.run("backend.main:app", host=_settings.host, port=_settings.port, reload=_settings.is_development)

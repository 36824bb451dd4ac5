import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cyrcipher.api.v1.router import api_router
from cyrcipher.core.config import get_settings
from cyrcipher.core.exceptions import CipherError, CipherLabError, EngineNotFoundError, ValidationError
from cyrcipher.core.logging import configure_logging
from cyrcipher.models.schemas import ErrorResponse

settings = get_settings()
logger = logging.getLogger(__name__)


def _error_name(exc: CipherLabError) -> str:
    if isinstance(exc, CipherError):
        return exc.kind.value
    return type(exc).__name__


async def cipher_lab_error_handler(request: Request, exc: CipherLabError) -> JSONResponse:
    """Render CipherLabError subclasses as ErrorResponse bodies."""
    if isinstance(exc, EngineNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)

    body = ErrorResponse(
        error=_error_name(exc),
        message=exc.message,
        details=exc.details,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Classical ciphers over Cyrillic text: route (table) transposition "
            "and keyword polyalphabetic substitution over the 33-letter "
            "Russian alphabet."
        ),
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        debug=settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CipherLabError, cipher_lab_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "cyrcipher.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()

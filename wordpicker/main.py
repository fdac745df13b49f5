"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wordpicker.config import configure_logging, get_settings
from wordpicker.core import container
from wordpicker.domain.common.exceptions import DomainError
from wordpicker.exceptions import WordPickerError
from wordpicker.infrastructure.picking.routers import picker_panel, picker_sessions

settings = get_settings()
configure_logging(settings.ENVIRONMENT)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("application_starting", environment=settings.ENVIRONMENT)
    yield
    await container.dictionary_service().close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WordPickerError)
async def wordpicker_error_handler(request: Request, exc: WordPickerError) -> JSONResponse:
    """Translate application errors to their HTTP status."""
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Domain rule violations are client errors."""
    logger.info("domain_rule_rejected", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=400, content={"detail": exc.message})


api_router = APIRouter(prefix=settings.API_V1_PREFIX)


@api_router.get("/")
async def api_root() -> dict[str, str]:
    return {
        "message": f"{settings.PROJECT_NAME} v1",
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
    }


api_router.include_router(picker_sessions.router)
api_router.include_router(picker_panel.router)
app.include_router(api_router)


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": "Welcome to the wordpicker API"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}

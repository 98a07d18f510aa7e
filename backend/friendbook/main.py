from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from friendbook.api.error_handlers import register_error_handlers
from friendbook.api.v1 import friends as friends_router
from friendbook.core.config import settings
from friendbook.core.observability import setup_logging
from friendbook.core.reporting import reporter
from friendbook.db.base import Base
from friendbook.db.session import engine
from friendbook.schemas.friend import InternalErrorEnvelope, ValidationErrorEnvelope


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    setup_logging(settings.log_level, settings.log_format)
    reporter.initialize()
    Base.metadata.create_all(bind=engine)
    logger.info("%s started", settings.project_name)
    yield
    logger.info("%s shutting down", settings.project_name)


app = FastAPI(
    title=settings.project_name,
    version=settings.api_version,
    lifespan=lifespan,
    openapi_url=f"{settings.api_prefix}/spec",
    docs_url=settings.api_prefix,
    redoc_url=None,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/health", tags=["health"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(
    friends_router.router,
    prefix=settings.api_prefix,
    responses={
        400: {"model": ValidationErrorEnvelope, "description": "Validation Error"},
        500: {"model": InternalErrorEnvelope, "description": "Internal Server Error"},
    },
)

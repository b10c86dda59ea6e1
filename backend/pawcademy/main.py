"""Module: main."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pawcademy.api.api import api_router
from pawcademy.core.config import settings
from pawcademy.core.errors import register_exception_handlers
from pawcademy.core.log_config import setup_logging
from pawcademy.db.init_db import init_db

logger = setup_logging(settings.log_level)

app = FastAPI(
    title="Pawcademy API",
    version="0.1.0",
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
)

app.include_router(api_router, prefix="/api")

# The static client may be opened from any origin; auth travels in a bearer header, not cookies.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

init_db()
logger.info("Pawcademy API ready (environment=%s)", settings.environment)

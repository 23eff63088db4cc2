"""
FastAPI application entry point for the Career Compass backend.

This module creates the FastAPI app, builds the one CareerAdvisor the app
uses, and registers all routers.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from career_compass.config import settings
from career_compass.routes.careers import router as careers_router
from career_compass.routes.health import router as health_router
from career_compass.services.career_advisor import CareerAdvisor

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS (empty means none)
    - Anything else: Allows all origins for local development

    Returns:
        List of allowed origin URLs, or ["*"] outside production.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        else:
            logger.warning(
                "CORS_ALLOWED_ORIGINS not set in production. "
                "No web origins allowed. Set CORS_ALLOWED_ORIGINS for the browser client."
            )
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log detailed validation errors and return them to the client."""
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder({
            "error": "validation_error",
            "details": exc.errors(),
        })
    )


def create_app(advisor: Optional[CareerAdvisor] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        advisor: Advisor to serve requests with. Defaults to one built from
            the environment settings.
    """
    app = FastAPI(
        title="Career Compass API",
        description="Career recommendations and career Q&A backed by Gemini",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    if advisor is None:
        advisor = CareerAdvisor(settings.advisor_config())
        if not advisor.has_default_credential:
            logger.info("GEMINI_API_KEY not set; requests without a key get static results")
    app.state.career_advisor = advisor

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(careers_router)

    return app


app = create_app()

logger.info("FastAPI app initialized successfully")

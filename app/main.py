import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from app.api.v1.router import router as api_v1_router
from app.core.config import settings as app_settings
from app.core.exceptions import (
    InvalidProspectDataError,
    PhotoNotFoundError,
    ProspectNotFoundError,
)
from app.core.rate_limit import limiter

# Configure logging
logging.basicConfig(level=app_settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Prospect CRM",
    description="Prospect tracking with photos and an activity log",
    version="0.1.0",
)

# Attach rate limiter state so slowapi middleware can find it
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS middleware – restricted to configured origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        o.strip() for o in app_settings.CORS_ORIGINS.split(",") if o.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_v1_router)

# Uploaded photos, addressed by the ``file_path`` stored on each photo
app.mount(
    app_settings.UPLOAD_URL_PREFIX,
    StaticFiles(directory=app_settings.UPLOAD_DIR, check_dir=False),
    name="uploads",
)


@app.exception_handler(ProspectNotFoundError)
async def prospect_not_found_handler(request: Request, exc: ProspectNotFoundError):
    logger.warning("Prospect not found: %s", exc.detail)
    return JSONResponse(
        status_code=404,
        content={"detail": exc.detail, "type": "prospect_not_found"},
    )


@app.exception_handler(PhotoNotFoundError)
async def photo_not_found_handler(request: Request, exc: PhotoNotFoundError):
    logger.warning("Photo not found: %s", exc.detail)
    return JSONResponse(
        status_code=404,
        content={"detail": exc.detail, "type": "photo_not_found"},
    )


@app.exception_handler(InvalidProspectDataError)
async def invalid_prospect_data_handler(
    request: Request, exc: InvalidProspectDataError
):
    logger.warning("Invalid prospect data: %s", exc.detail)
    return JSONResponse(
        status_code=422,
        content={"detail": exc.detail, "type": "invalid_prospect_data"},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Request validation error: %s", exc.errors())
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Request validation failed",
            # ctx may hold the raw ValueError from a model validator
            "errors": jsonable_encoder(exc.errors(), custom_encoder={Exception: str}),
            "type": "validation_error",
        },
    )


@app.exception_handler(SQLAlchemyError)
async def persistence_exception_handler(request: Request, exc: SQLAlchemyError):
    """Storage failures are fatal for the request and never retried here."""
    logger.error(
        "Persistence error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "The database could not complete the request.",
            "type": "persistence_error",
        },
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Catch-all handler for unexpected/unhandled exceptions.

    Returns a generic 500 response so that raw stack traces are never
    leaked to the client.
    """
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected internal error occurred. Please try again later.",
            "type": "internal_server_error",
        },
    )


"""
UA Document Utilities API

HTTP front for the date and RNOKPP helpers: canonical DD.MM.YYYY date
parsing and arithmetic, RNOKPP checksum validation and decoding,
phone number and person name formatting.

Usage:
    uvicorn main:app --reload

Then access the API documentation at http://localhost:8000/docs
"""
import logging
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import router as production_router
from api.routes.health import API_VERSION
from middleware.api_key import APIKeyMiddleware
from middleware.request_id import RequestIDMiddleware, get_request_id
from utils.config import API_HOST, API_KEYS, API_PORT, LOG_JSON_FORMAT, LOG_LEVEL
from utils.exceptions import AppError
from utils.logging_config import configure_logging

# Configure structured JSON logging
configure_logging(level=LOG_LEVEL, json_format=LOG_JSON_FORMAT)
logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError):
    """
    Global handler for all AppError exceptions.

    Converts custom exceptions to consistent JSON responses.
    """
    logger.warning(
        f"[{exc.code}] {exc.message} | Details: {exc.details}",
        extra={"request_id": get_request_id(request), "path": request.url.path}
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def create_app(api_keys: Optional[List[str]] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        api_keys: Valid X-API-Key values. Empty or None disables auth.
    """
    application = FastAPI(
        title="UA Document Utilities API",
        description="""
    Helpers for Ukrainian document data.

    ## Features

    * **Dates**: parse DD.MM.YYYY / MM.YYYY / YYYY, week boundaries, day and month shifts, day counts
    * **Date-times**: strict DD.MM.YYYY HH:MM:SS comparison
    * **RNOKPP**: control digit validation, date of birth and gender decoding
    * **Formatting**: +38 phone numbers, person name display forms
    """,
        version=API_VERSION,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Order matters: last added = outermost
    application.add_middleware(APIKeyMiddleware, api_keys=api_keys)
    application.add_middleware(RequestIDMiddleware)

    application.add_exception_handler(AppError, app_error_handler)

    application.include_router(production_router, prefix="/api/v1")

    @application.get("/api")
    async def api_info():
        """API information endpoint."""
        return {
            "name": "UA Document Utilities API",
            "version": API_VERSION,
            "docs": "/docs",
            "health": "/api/v1/health"
        }

    return application


app = create_app(API_KEYS)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=API_HOST,
        port=API_PORT,
        reload=False
    )

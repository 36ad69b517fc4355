"""FastAPI server for CLAIMSO services"""

from __future__ import annotations

from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from claimso.api.middleware.security_headers import SecurityHeadersMiddleware
from claimso.api.routes.calendar_events import router as calendar_router
from claimso.api.routes.claim_packet import router as claim_packet_router
from claimso.api.routes.email_parser import router as email_parser_router
from claimso.api.routes.health import router as health_router
from claimso.api.routes.passes import router as passes_router
from claimso.config import APP_VERSION, SERVICE_NAME, is_development
from claimso.observability.logging import get_logger
from claimso.observability.telemetry import counter, log_event
from claimso.utils.redaction import redact

# Load environment variables from .env file
load_dotenv()

app = FastAPI(title="CLAIMSO Services API", version=APP_VERSION)

logger = get_logger(__name__)


# Custom validation error handler to prevent information leakage
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Reject malformed or incomplete requests with 400, listing only field names.
    """
    logger.warning("Validation error on %s: %s", redact(str(request.url)), exc.errors())
    counter("api.validation_errors")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Missing or invalid required fields",
            "error_count": len(exc.errors()),
            "invalid_fields": [str(err["loc"][-1]) for err in exc.errors()],
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s: %s", request.url.path, type(exc).__name__, exc_info=exc)
    counter("api.unhandled_errors")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


ALLOWED_ORIGINS = ["https://claimso.com", "https://www.claimso.com"]

# Allow localhost in development only
if is_development():
    ALLOWED_ORIGINS.extend(
        [
            "http://localhost:3000",
            "http://localhost:8000",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:8000",
        ]
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
)

app.add_middleware(SecurityHeadersMiddleware)

app.include_router(health_router)
app.include_router(email_parser_router)
app.include_router(claim_packet_router)
app.include_router(passes_router)
app.include_router(calendar_router)

log_event("api.startup", service=SERVICE_NAME, version=APP_VERSION)


@app.get("/")
def root() -> dict[str, Any]:
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": APP_VERSION,
        "endpoints": {
            "POST /email-parser": "Parse and classify email content",
            "POST /pdf-generator": "Generate warranty claim packets",
            "POST /pass-generator": "Generate Apple Wallet passes",
            "POST /calendar-generator": "Generate calendar events",
            "GET /health": "Health check endpoint",
        },
    }

from datetime import datetime, timezone
import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

load_dotenv()

from app.config import settings
from app.core.exceptions import ScoringException
from app.core.logging_config import configure_logging
from app.models.errors import ErrorResponse

# IMPORT ROUTERS
from app.routers.health import router as health_router
from app.routers.scoring import router as scoring_router
from app.routers.catalog import router as catalog_router

configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
logger = logging.getLogger(__name__)


# SWAGGER UI tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Scoring"},
    {"name": "Catalog"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


# EXCEPTION HANDLERS

def _error(status_code: int, error_code: str, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def scoring_exception_handler(request: Request, exc: ScoringException):
    logger.warning(f"{exc.error_code} on {request.url.path}: {exc.message}")
    return _error(exc.status_code, exc.error_code, exc.message)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", "Request validation failed")
    err = errors[0]
    error_type = err.get("type", "")
    if "json_invalid" in error_type:
        return _error(status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST", "Malformed JSON request body")
    field = ".".join(str(part) for part in err.get("loc", []) if part != "body")
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        err.get("msg") or f"Invalid value for field '{field}'",
        {"field": field, "type": error_type} if field else None,
    )


app.add_exception_handler(ScoringException, scoring_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)           # Health
app.include_router(scoring_router)          # Scoring
app.include_router(catalog_router)          # Catalog


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )

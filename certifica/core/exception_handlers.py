# =============================================
# certifica/core/exception_handlers.py
# =============================================
from fastapi import Request, HTTPException, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

from certifica.core.exceptions import AppException

logger = logging.getLogger(__name__)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions"""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"Application exception: {exc.message}", extra={
        "path": request.url.path,
        "method": request.method,
        "details": exc.details
    })

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": True,
            "message": exc.message,
            "error_type": exc.details.get("error_type", "APPLICATION_ERROR"),
            "details": exc.details
        }
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Handle SQLAlchemy integrity constraint violations"""
    logger.error(f"Database integrity error: {str(exc)}", extra={
        "path": request.url.path,
        "method": request.method
    })

    error_msg = str(exc.orig) if hasattr(exc, 'orig') else str(exc)

    if "unique" in error_msg.lower():
        message = "A record with this information already exists"
        error_type = "DUPLICATE_RECORD"
    elif "not null" in error_msg.lower():
        message = "Required field cannot be empty"
        error_type = "MISSING_REQUIRED_FIELD"
    else:
        message = "Database constraint violation"
        error_type = "CONSTRAINT_VIOLATION"

    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "error": True,
            "message": message,
            "error_type": error_type,
            "details": {}
        }
    )


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle general SQLAlchemy database errors"""
    logger.error(f"Database error: {str(exc)}", extra={
        "path": request.url.path,
        "method": request.method
    })

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": True,
            "message": "Database operation failed",
            "error_type": "DATABASE_ERROR",
            "details": {}
        }
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request body/query validation errors"""
    logger.warning(f"Validation error: {exc.errors()}", extra={
        "path": request.url.path,
        "method": request.method
    })

    errors = []
    for error in exc.errors():
        field_path = " -> ".join(str(loc) for loc in error["loc"])
        errors.append({
            "field": field_path,
            "message": error["msg"],
            "type": error["type"]
        })

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": True,
            "message": "Validation failed",
            "error_type": "VALIDATION_ERROR",
            "details": {
                "validation_errors": errors
            }
        }
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle FastAPI HTTP exceptions"""
    logger.warning(f"HTTP exception: {exc.detail}", extra={
        "path": request.url.path,
        "method": request.method,
        "status_code": exc.status_code
    })

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": True,
            "message": exc.detail,
            "error_type": "HTTP_ERROR",
            "details": {
                "status_code": exc.status_code
            }
        },
        headers=getattr(exc, "headers", None)
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions"""
    logger.error(f"Unhandled exception: {str(exc)}", extra={
        "path": request.url.path,
        "method": request.method,
        "exception_type": type(exc).__name__
    }, exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": True,
            "message": "Internal server error",
            "error_type": "INTERNAL_ERROR",
            "details": {
                "exception_type": type(exc).__name__
            }
        }
    )

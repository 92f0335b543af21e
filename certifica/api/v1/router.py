# =============================================
# certifica/api/v1/router.py
# =============================================
from fastapi import APIRouter

from certifica.api.v1.endpoints import (
    auth,
    courses,
    students,
    certificates,
    settings,
    themes,
    dashboard,
    verification
)
from certifica.config.settings import get_settings

# Get settings
app_settings = get_settings()

# =============================================
# API V1 ROUTER
# =============================================
api_router = APIRouter()

# =============================================
# AUTHENTICATION ROUTES
# =============================================
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
    responses={
        401: {"description": "Unauthorized"}
    }
)

# =============================================
# DASHBOARD ROUTES
# =============================================
api_router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["Dashboard"],
    responses={
        503: {"description": "Database unavailable"}
    }
)

# =============================================
# COURSE MANAGEMENT ROUTES
# =============================================
api_router.include_router(
    courses.router,
    prefix="/courses",
    tags=["Courses"],
    responses={
        404: {"description": "Course not found"},
        409: {"description": "Operation already in progress"}
    }
)

# =============================================
# STUDENT MANAGEMENT ROUTES
# =============================================
api_router.include_router(
    students.router,
    prefix="/students",
    tags=["Students"],
    responses={
        404: {"description": "Student or course not found"},
        409: {"description": "Operation already in progress"}
    }
)

# =============================================
# CERTIFICATE ROUTES
# =============================================
api_router.include_router(
    certificates.router,
    prefix="/certificates",
    tags=["Certificates"],
    responses={
        404: {"description": "Student or course not found"},
        503: {"description": "Verification code could not be generated"}
    }
)

# =============================================
# SETTINGS AND THEME ROUTES
# =============================================
api_router.include_router(
    settings.router,
    prefix="/settings",
    tags=["Settings"]
)

api_router.include_router(
    themes.router,
    prefix="/themes",
    tags=["Themes"],
    responses={
        404: {"description": "Theme not found"},
        409: {"description": "Last theme cannot be removed"}
    }
)

# =============================================
# PUBLIC VERIFICATION ROUTES
# =============================================
api_router.include_router(
    verification.router,
    prefix="/verification",
    tags=["Verification"],
    responses={
        404: {"description": "Certificate not found"}
    }
)

@api_router.get("/info", tags=["Info"])
async def get_api_info():
    """
    Get API information and configuration
    """
    return {
        "app_name": app_settings.APP_NAME,
        "version": app_settings.VERSION,
        "environment": app_settings.ENVIRONMENT,
        "debug": app_settings.DEBUG,
        "certificate": {
            "verify_base_url": app_settings.PUBLIC_VERIFY_BASE_URL,
            "issue_place": app_settings.CERTIFICATE_ISSUE_PLACE
        }
    }

# =============================================
# certifica/main.py
# =============================================
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from contextlib import asynccontextmanager
import logging
import time
import uvicorn

from certifica.config.settings import get_settings, validate_environment
from certifica.config.database import init_database, close_database, async_session
from certifica.api.v1.router import api_router
from certifica.core.exceptions import AppException
from certifica.core.exception_handlers import (
    app_exception_handler,
    integrity_error_handler,
    sqlalchemy_error_handler,
    request_validation_error_handler,
    global_exception_handler,
    http_exception_handler
)
from certifica.services.auth_service import AuthService

# =============================================
# SETTINGS
# =============================================
settings = get_settings()

# =============================================
# LOGGING CONFIGURATION
# =============================================
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format=settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)

# =============================================
# LIFESPAN CONTEXT MANAGER
# =============================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events"""
    # Startup
    logger.info(f"Starting {settings.APP_NAME} v{settings.VERSION}...")
    validate_environment()
    await init_database()

    async with async_session() as session:
        await AuthService(session).ensure_default_admin(
            settings.DEFAULT_ADMIN_USERNAME,
            settings.DEFAULT_ADMIN_PASSWORD
        )

    logger.info(f"{settings.APP_NAME} started successfully")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}...")
    await close_database()

# =============================================
# FASTAPI APPLICATION
# =============================================
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    Painel administrativo de emissão de certificados de cursos profissionalizantes.

    ## Principais Funcionalidades

    * **Cursos**: Cadastro de cursos com carga horária, conteúdo programático e tema
    * **Alunos**: Matrícula, busca e acompanhamento do status de emissão
    * **Certificados**: Emissão com código de verificação e QR code
    * **Verificação Pública**: Consulta de autenticidade pelo código, sem login
    * **Configurações**: Dados da escola, instrutor, assinatura e temas de cores

    ## Autenticação

    * **JWT Bearer Tokens** para todas as rotas administrativas
    """,
    version=settings.VERSION,
    openapi_tags=[
        {"name": "Authentication", "description": "Login e credenciais do administrador"},
        {"name": "Dashboard", "description": "Carga inicial e estatísticas do painel"},
        {"name": "Courses", "description": "Gestão de cursos"},
        {"name": "Students", "description": "Gestão de alunos"},
        {"name": "Certificates", "description": "Emissão e visualização de certificados"},
        {"name": "Settings", "description": "Configurações da escola"},
        {"name": "Themes", "description": "Temas de cores dos certificados"},
        {"name": "Verification", "description": "Verificação pública de autenticidade"},
        {"name": "Info", "description": "Informações sobre a API"},
    ],
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# =============================================
# MIDDLEWARE CONFIGURATION
# =============================================

# Request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time to response headers"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response

# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    start_time = time.time()

    logger.info(f"Request: {request.method} {request.url.path}")

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        f"Response: {request.method} {request.url.path} - "
        f"Status: {response.status_code} - Time: {process_time:.4f}s"
    )

    return response

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Process-Time"],
)

# ==========================================
# EXCEPTION HANDLERS
# ==========================================

@app.exception_handler(AppException)
async def handle_app_exception(request, exc):
    return await app_exception_handler(request, exc)

# Exceções do banco de dados
@app.exception_handler(IntegrityError)
async def handle_integrity_error(request, exc):
    return await integrity_error_handler(request, exc)

@app.exception_handler(SQLAlchemyError)
async def handle_sqlalchemy_error(request, exc):
    return await sqlalchemy_error_handler(request, exc)

@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request, exc):
    return await request_validation_error_handler(request, exc)

# HTTP Exceptions do FastAPI
@app.exception_handler(HTTPException)
async def handle_http_exception(request, exc):
    return await http_exception_handler(request, exc)

# Handler global (deve ser o último)
@app.exception_handler(Exception)
async def handle_global_exception(request, exc):
    return await global_exception_handler(request, exc)

# ==========================================
# ROUTERS
# ==========================================
app.include_router(api_router, prefix="/api/v1")

# ==========================================
# ROUTES BÁSICAS
# ==========================================
@app.get("/")
async def root():
    return {
        "message": settings.APP_NAME,
        "version": settings.VERSION,
        "docs": "/docs",
        "health": "/health"
    }

@app.get("/health")
async def health():
    return {"status": "healthy", "version": settings.VERSION}

# =============================================
# DEVELOPMENT SERVER
# =============================================
if __name__ == "__main__":
    uvicorn.run(
        "certifica.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info" if settings.DEBUG else "warning",
        access_log=settings.DEBUG
    )

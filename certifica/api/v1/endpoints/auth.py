# =============================================
# certifica/api/v1/endpoints/auth.py
# =============================================
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from typing import AsyncIterator

from certifica.config.database import get_db
from certifica.services.auth_service import AuthService
from certifica.core.security import verify_token
from certifica.core.exceptions import AppException, ConfirmationRequiredError
from certifica.core.inflight import inflight_registry
from certifica.database.models.admin_user import AdminUser
from certifica.schemas.auth import LoginRequest, TokenResponse, AdminResponse, CredentialsUpdate

# =============================================
# ROUTER AND DEPENDENCIES
# =============================================
router = APIRouter()
security = HTTPBearer()

async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(db)

async def get_current_admin(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> AdminUser:
    """Get current authenticated admin from JWT token"""
    try:
        payload = verify_token(credentials.credentials)
        return await auth_service.get_admin(payload["sub"])
    except AppException as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"}
        )

async def guard_mutation(
    request: Request,
    current_admin: AdminUser = Depends(get_current_admin)
) -> AsyncIterator[AdminUser]:
    """Reject a mutation while an identical one from the same admin is still running"""
    key = f"{current_admin.id}:{request.method}:{request.url.path}"
    async with inflight_registry.hold(key):
        yield current_admin

def require_confirmation(resource: str):
    """Build a dependency that demands ?confirm=true on destructive routes"""
    async def dependency(
        confirm: bool = Query(False, description="Confirma a exclusão")
    ) -> bool:
        if not confirm:
            raise ConfirmationRequiredError(resource)
        return True
    return dependency

# =============================================
# AUTHENTICATION ROUTES
# =============================================

@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Autenticar administrador e retornar token JWT

    - **username**: Usuário
    - **password**: Senha

    Retorna:
    - **access_token**: Token JWT de acesso
    - **token_type**: Sempre "bearer"
    - **admin**: Dados do administrador
    """
    return await auth_service.login(login_data)

@router.get("/me", response_model=AdminResponse)
async def get_me(current_admin: AdminUser = Depends(get_current_admin)):
    """
    Dados do administrador autenticado

    **Requer autenticação**
    """
    return AdminResponse.model_validate(current_admin)

@router.put("/credentials", response_model=AdminResponse)
async def update_credentials(
    data: CredentialsUpdate,
    current_admin: AdminUser = Depends(guard_mutation),
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Alterar usuário e senha de acesso ao painel

    **Requer autenticação**

    - **username**: Novo usuário
    - **new_password**: Nova senha (mínimo 8 caracteres, com maiúscula, minúscula e número)
    """
    return await auth_service.update_credentials(current_admin.id, data)

# =============================================
# certifica/services/auth_service.py
# =============================================
from datetime import timedelta
from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from certifica.config.settings import get_settings
from certifica.repositories.admin_user_repository import AdminUserRepository
from certifica.database.models.admin_user import AdminUser
from certifica.schemas.auth import LoginRequest, TokenResponse, AdminResponse, CredentialsUpdate
from certifica.core.security import (
    verify_password,
    get_password_hash,
    create_access_token,
    DUMMY_PASSWORD_HASH,
)
from certifica.core.exceptions import AppException, InvalidCredentialsError, InvalidTokenError

logger = logging.getLogger(__name__)
settings = get_settings()

class AuthService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.admin_repo = AdminUserRepository(db)

    # =============================================
    # AUTHENTICATION
    # =============================================

    async def authenticate(self, username: str, password: str) -> AdminUser:
        """Check credentials; unknown user and wrong password fail the same way"""
        admin = await self.admin_repo.get_by_username(username.strip())
        if not admin:
            verify_password(password, DUMMY_PASSWORD_HASH)
            logger.warning("Login failed: unknown username")
            raise InvalidCredentialsError()

        if not verify_password(password, admin.password_hash):
            logger.warning(f"Login failed for admin {admin.id}")
            raise InvalidCredentialsError()

        return admin

    async def login(self, login_data: LoginRequest) -> TokenResponse:
        admin = await self.authenticate(login_data.username, login_data.password)

        expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        access_token = create_access_token(
            data={"sub": str(admin.id), "username": admin.username},
            expires_delta=expires
        )

        logger.info(f"Admin logged in: {admin.username}")
        return TokenResponse(
            access_token=access_token,
            token_type="bearer",
            expires_in=int(expires.total_seconds()),
            admin=AdminResponse.model_validate(admin)
        )

    async def get_admin(self, admin_id: str) -> AdminUser:
        """Resolve the admin behind a token subject"""
        try:
            admin = await self.admin_repo.get_by_id(UUID(admin_id))
        except ValueError:
            raise InvalidTokenError()
        if not admin:
            raise InvalidTokenError()
        return admin

    # =============================================
    # CREDENTIAL MANAGEMENT
    # =============================================

    async def update_credentials(self, admin_id: UUID, data: CredentialsUpdate) -> AdminResponse:
        """Overwrite username and password of the logged-in admin"""
        try:
            other = await self.admin_repo.get_by_username(data.username)
            if other and other.id != admin_id:
                raise AppException("Usuário já está em uso", status_code=409,
                                   details={"error_type": "DUPLICATE_RECORD"})

            admin = await self.admin_repo.update_credentials(
                admin_id, data.username, get_password_hash(data.new_password)
            )
            if not admin:
                raise InvalidTokenError()

            logger.info(f"Admin credentials changed: {admin_id}")
            return AdminResponse.model_validate(admin)

        except AppException:
            raise
        except Exception as e:
            logger.error(f"Error updating credentials for {admin_id}: {e}")
            raise AppException(f"Erro ao atualizar credenciais: {str(e)}")

    async def ensure_default_admin(self, username: str, password: Optional[str]) -> Optional[AdminUser]:
        """Seed the single admin when none exists and a password is configured"""
        if await self.admin_repo.get_first():
            return None
        if not password:
            logger.warning("No admin user exists and DEFAULT_ADMIN_PASSWORD is not set")
            return None

        admin = await self.admin_repo.create(username, get_password_hash(password))
        logger.info(f"Default admin created: {admin.username}")
        return admin

    async def set_credentials(self, username: str, password: str) -> AdminUser:
        """Create the admin, or reset the existing one"""
        admin = await self.admin_repo.get_first()
        password_hash = get_password_hash(password)
        if admin:
            return await self.admin_repo.update_credentials(admin.id, username, password_hash)
        return await self.admin_repo.create(username, password_hash)

# =============================================
# certifica/repositories/admin_user_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional
from uuid import UUID
import logging

from certifica.database.models.admin_user import AdminUser
from certifica.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

class AdminUserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, admin_id: UUID) -> Optional[AdminUser]:
        try:
            result = await self.db.execute(select(AdminUser).where(AdminUser.id == admin_id))
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error getting admin {admin_id}: {e}")
            raise DatabaseError("select", str(e))

    async def get_by_username(self, username: str) -> Optional[AdminUser]:
        try:
            result = await self.db.execute(select(AdminUser).where(AdminUser.username == username))
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error getting admin by username: {e}")
            raise DatabaseError("select", str(e))

    async def get_first(self) -> Optional[AdminUser]:
        """The panel keeps a single credential record"""
        try:
            result = await self.db.execute(select(AdminUser).order_by(AdminUser.created_at).limit(1))
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error getting admin credential: {e}")
            raise DatabaseError("select", str(e))

    async def create(self, username: str, password_hash: str) -> AdminUser:
        try:
            db_admin = AdminUser(username=username, password_hash=password_hash)
            self.db.add(db_admin)
            await self.db.commit()
            await self.db.refresh(db_admin)

            logger.info(f"Admin created: {db_admin.username}")
            return db_admin

        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error creating admin: {e}")
            raise DatabaseError("insert", str(e))

    async def update_credentials(self, admin_id: UUID, username: str, password_hash: str) -> Optional[AdminUser]:
        try:
            db_admin = await self.get_by_id(admin_id)
            if not db_admin:
                return None

            db_admin.username = username
            db_admin.password_hash = password_hash
            await self.db.commit()
            await self.db.refresh(db_admin)

            logger.info(f"Admin credentials updated: {admin_id}")
            return db_admin

        except DatabaseError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error updating admin credentials {admin_id}: {e}")
            raise DatabaseError("update", str(e))

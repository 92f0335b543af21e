# =============================================
# certifica/repositories/settings_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional, Dict, Any
import logging

from certifica.database.models.school_settings import SchoolSettings
from certifica.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

class SettingsRepository:
    """Singleton settings row"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self) -> Optional[SchoolSettings]:
        try:
            result = await self.db.execute(
                select(SchoolSettings).order_by(SchoolSettings.created_at).limit(1)
            )
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error getting school settings: {e}")
            raise DatabaseError("select", str(e))

    async def save(self, values: Dict[str, Any], commit: bool = True) -> SchoolSettings:
        """Update the existing row wholesale, or insert it when absent"""
        existing = await self.get()
        try:
            if existing:
                for field, value in values.items():
                    setattr(existing, field, value)
                db_settings = existing
            else:
                db_settings = SchoolSettings(**values)
                self.db.add(db_settings)

            if commit:
                await self.db.commit()
                await self.db.refresh(db_settings)
            else:
                await self.db.flush()

            logger.info("School settings saved")
            return db_settings

        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error saving school settings: {e}")
            raise DatabaseError("save", str(e))

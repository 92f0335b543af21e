# =============================================
# certifica/repositories/theme_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func
from typing import Optional, List, Iterable
import logging

from certifica.database.models.theme import Theme
from certifica.schemas.theme import ThemeCreate
from certifica.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

class ThemeRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self) -> List[Theme]:
        """Get all themes in insertion order"""
        try:
            result = await self.db.execute(select(Theme).order_by(Theme.created_at))
            return list(result.scalars().all())
        except Exception as e:
            logger.error(f"Error getting themes: {e}")
            raise DatabaseError("select", str(e))

    async def get_by_id(self, theme_id: str) -> Optional[Theme]:
        try:
            result = await self.db.execute(select(Theme).where(Theme.id == theme_id))
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error getting theme {theme_id}: {e}")
            raise DatabaseError("select", str(e))

    async def count(self) -> int:
        try:
            result = await self.db.execute(select(func.count(Theme.id)))
            return result.scalar() or 0
        except Exception as e:
            logger.error(f"Error counting themes: {e}")
            raise DatabaseError("select", str(e))

    async def upsert_many(self, themes: Iterable[ThemeCreate], commit: bool = True) -> None:
        """Insert or update themes by id; every theme must carry an id"""
        try:
            for theme in themes:
                db_theme = await self.db.get(Theme, theme.id)
                if db_theme is None:
                    self.db.add(Theme(
                        id=theme.id,
                        name=theme.name,
                        primary_color=theme.primary_color,
                        accent_color=theme.accent_color,
                        ribbon_color=theme.ribbon_color,
                    ))
                    # Flush per insert so created_at keeps list order
                    await self.db.flush()
                else:
                    db_theme.name = theme.name
                    db_theme.primary_color = theme.primary_color
                    db_theme.accent_color = theme.accent_color
                    db_theme.ribbon_color = theme.ribbon_color

            if commit:
                await self.db.commit()

        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error upserting themes: {e}")
            raise DatabaseError("upsert", str(e))

    async def delete(self, theme_id: str, commit: bool = True) -> bool:
        try:
            result = await self.db.execute(delete(Theme).where(Theme.id == theme_id))
            if commit:
                await self.db.commit()
            return result.rowcount > 0
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error deleting theme {theme_id}: {e}")
            raise DatabaseError("delete", str(e))

# =============================================
# certifica/services/settings_service.py
# =============================================
import secrets
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import status
import logging

from certifica.repositories.settings_repository import SettingsRepository
from certifica.repositories.theme_repository import ThemeRepository
from certifica.schemas.settings import SchoolSettingsUpdate, SchoolSettingsResponse
from certifica.schemas.theme import ThemeCreate, ThemeUpdate, ThemeResponse
from certifica.core.exceptions import (
    AppException,
    DatabaseError,
    LastThemeError,
    ThemeNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# =============================================
# DEFAULTS (persisted on first load)
# =============================================

DEFAULT_SETTINGS = {
    "school_name": "MELO & MELO CURSOS E TREINAMENTOS",
    "cnpj": "21.658.460/0001-81",
    "show_cnpj": True,
    "instructor_name": "LOURIVAL G. MELO",
    "instructor_cpf": "000.000.000-00",
    "show_instructor_cpf": False,
    "instructor_title": "Diretor & Instrutor Chefe",
    "signature_image": None,
}

DEFAULT_THEMES = [
    ThemeCreate(id="blue-gold", name="Azul & Ouro (Padrão)",
                primary_color="#0f172a", accent_color="#e67e00", ribbon_color="#f59e0b"),
    ThemeCreate(id="green-gold", name="Verde & Ouro",
                primary_color="#064e3b", accent_color="#c49a00", ribbon_color="#84cc16"),
    ThemeCreate(id="office-blue", name="Azul Corporativo",
                primary_color="#1e3a8a", accent_color="#3b82f6", ribbon_color="#2563eb"),
]

def new_theme_id() -> str:
    return secrets.token_hex(5)

def _with_ids(themes: List[ThemeCreate]) -> List[ThemeCreate]:
    prepared = [t if t.id else t.model_copy(update={"id": new_theme_id()}) for t in themes]
    ids = [t.id for t in prepared]
    if len(ids) != len(set(ids)):
        raise ValidationError("themes", "IDs de tema repetidos")
    return prepared


class SettingsService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.settings_repo = SettingsRepository(db)
        self.theme_repo = ThemeRepository(db)

    async def _commit(self, operation: str) -> None:
        try:
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error committing {operation}: {e}")
            raise DatabaseError(operation, str(e))

    async def _response(self, school) -> SchoolSettingsResponse:
        themes = await self.theme_repo.get_all()
        response = SchoolSettingsResponse.model_validate(school)
        response.themes = [ThemeResponse.model_validate(theme) for theme in themes]
        return response

    # =============================================
    # SCHOOL SETTINGS
    # =============================================

    async def _ensure_defaults(self):
        """Store the default settings row and themes when they are missing"""
        school = await self.settings_repo.get()
        seeded = False
        if school is None:
            logger.info("No school settings found, persisting defaults")
            school = await self.settings_repo.save(dict(DEFAULT_SETTINGS), commit=False)
            seeded = True
        if await self.theme_repo.count() == 0:
            logger.info("No themes found, persisting defaults")
            await self.theme_repo.upsert_many(DEFAULT_THEMES, commit=False)
            seeded = True
        if seeded:
            await self._commit("seed")
        return school

    async def get_school_settings(self) -> SchoolSettingsResponse:
        """Settings row plus themes; defaults are stored the first time"""
        school = await self._ensure_defaults()
        return await self._response(school)

    async def save_school_settings(self, settings_data: SchoolSettingsUpdate) -> SchoolSettingsResponse:
        """Overwrite the settings; a themes list, when sent, replaces the stored one"""
        await self._ensure_defaults()

        try:
            values = settings_data.model_dump(exclude={"themes"})
            school = await self.settings_repo.save(values, commit=False)

            if settings_data.themes is not None:
                await self._replace_themes(settings_data.themes)

            await self._commit("save")
            logger.info("School settings updated")
            return await self._response(school)

        except AppException:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error saving settings: {e}")
            raise AppException(f"Erro ao salvar configurações: {str(e)}")

    # =============================================
    # THEMES
    # =============================================

    async def list_themes(self) -> List[ThemeResponse]:
        themes = await self.theme_repo.get_all()
        return [ThemeResponse.model_validate(theme) for theme in themes]

    async def _replace_themes(self, themes: List[ThemeCreate]) -> None:
        if not themes:
            raise LastThemeError()

        prepared = _with_ids(themes)
        keep_ids = {t.id for t in prepared}

        await self.theme_repo.upsert_many(prepared, commit=False)
        for existing in await self.theme_repo.get_all():
            if existing.id not in keep_ids:
                await self.theme_repo.delete(existing.id, commit=False)

    async def replace_themes(self, themes: List[ThemeCreate]) -> List[ThemeResponse]:
        """Make the stored theme list equal to the given one"""
        try:
            await self._replace_themes(themes)
            await self._commit("replace")
        except AppException:
            await self.db.rollback()
            raise

        logger.info(f"Themes replaced ({len(themes)} themes)")
        return await self.list_themes()

    async def create_theme(self, theme_data: ThemeCreate) -> ThemeResponse:
        theme_data = _with_ids([theme_data])[0]
        if await self.theme_repo.get_by_id(theme_data.id):
            raise AppException(
                f"Tema '{theme_data.id}' já existe",
                status_code=status.HTTP_409_CONFLICT,
                details={"theme_id": theme_data.id, "error_type": "DUPLICATE_RECORD"}
            )

        await self.theme_repo.upsert_many([theme_data])
        logger.info(f"Theme created: {theme_data.id}")
        return ThemeResponse.model_validate(await self.theme_repo.get_by_id(theme_data.id))

    async def update_theme(self, theme_id: str, theme_data: ThemeUpdate) -> ThemeResponse:
        theme = await self.theme_repo.get_by_id(theme_id)
        if not theme:
            raise ThemeNotFoundError(theme_id)

        merged = ThemeCreate(
            id=theme.id,
            name=theme.name,
            primary_color=theme.primary_color,
            accent_color=theme.accent_color,
            ribbon_color=theme.ribbon_color,
        ).model_copy(update=theme_data.model_dump(exclude_unset=True, exclude_none=True))

        await self.theme_repo.upsert_many([merged])
        await self.db.refresh(theme)
        logger.info(f"Theme updated: {theme_id}")
        return ThemeResponse.model_validate(theme)

    async def delete_theme(self, theme_id: str) -> bool:
        """Delete a theme; the last remaining one cannot go"""
        if not await self.theme_repo.get_by_id(theme_id):
            raise ThemeNotFoundError(theme_id)
        if await self.theme_repo.count() <= 1:
            raise LastThemeError()

        await self.theme_repo.delete(theme_id)
        logger.info(f"Theme deleted: {theme_id}")
        return True

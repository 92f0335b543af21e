# =============================================
# certifica/api/v1/endpoints/themes.py
# =============================================
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from certifica.config.database import get_db
from certifica.services.settings_service import SettingsService
from certifica.schemas.theme import ThemeCreate, ThemeUpdate, ThemeResponse
from certifica.database.models.admin_user import AdminUser
from certifica.api.v1.endpoints.auth import get_current_admin, guard_mutation, require_confirmation

router = APIRouter()

async def get_settings_service(db: AsyncSession = Depends(get_db)) -> SettingsService:
    return SettingsService(db)

@router.get("/", response_model=List[ThemeResponse])
async def get_themes(
    current_admin: AdminUser = Depends(get_current_admin),
    settings_service: SettingsService = Depends(get_settings_service)
):
    """
    Listar temas de certificado

    **Requer autenticação**
    """
    return await settings_service.list_themes()

@router.put("/", response_model=List[ThemeResponse])
async def replace_themes(
    themes: List[ThemeCreate],
    current_admin: AdminUser = Depends(guard_mutation),
    settings_service: SettingsService = Depends(get_settings_service)
):
    """
    Substituir a lista de temas

    **Requer autenticação**

    Temas enviados são criados ou atualizados; os ausentes são removidos.
    A lista não pode ficar vazia.
    """
    return await settings_service.replace_themes(themes)

@router.post("/", response_model=ThemeResponse, status_code=status.HTTP_201_CREATED)
async def create_theme(
    theme_data: ThemeCreate,
    current_admin: AdminUser = Depends(guard_mutation),
    settings_service: SettingsService = Depends(get_settings_service)
):
    """
    Criar tema

    **Requer autenticação**

    - **id**: Identificador (opcional; gerado quando ausente)
    - **primary_color**, **accent_color**, **ribbon_color**: Cores #RRGGBB
    """
    return await settings_service.create_theme(theme_data)

@router.put("/{theme_id}", response_model=ThemeResponse)
async def update_theme(
    theme_id: str,
    theme_data: ThemeUpdate,
    current_admin: AdminUser = Depends(guard_mutation),
    settings_service: SettingsService = Depends(get_settings_service)
):
    """
    Atualizar tema

    **Requer autenticação**
    """
    return await settings_service.update_theme(theme_id, theme_data)

@router.delete("/{theme_id}")
async def delete_theme(
    theme_id: str,
    confirmed: bool = Depends(require_confirmation("tema")),
    current_admin: AdminUser = Depends(guard_mutation),
    settings_service: SettingsService = Depends(get_settings_service)
):
    """
    Excluir tema

    **Requer autenticação e confirm=true**

    O último tema não pode ser excluído. Cursos que usavam o tema passam a usar o primeiro da lista.
    """
    await settings_service.delete_theme(theme_id)
    return {"message": "Tema excluído com sucesso"}

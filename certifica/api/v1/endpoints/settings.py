# =============================================
# certifica/api/v1/endpoints/settings.py
# =============================================
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from certifica.config.database import get_db
from certifica.services.settings_service import SettingsService
from certifica.schemas.settings import SchoolSettingsUpdate, SchoolSettingsResponse
from certifica.database.models.admin_user import AdminUser
from certifica.api.v1.endpoints.auth import get_current_admin, guard_mutation

router = APIRouter()

async def get_settings_service(db: AsyncSession = Depends(get_db)) -> SettingsService:
    return SettingsService(db)

@router.get("/", response_model=SchoolSettingsResponse)
async def get_school_settings(
    current_admin: AdminUser = Depends(get_current_admin),
    settings_service: SettingsService = Depends(get_settings_service)
):
    """
    Configurações da escola e lista de temas

    **Requer autenticação**

    Na primeira leitura os valores padrão são gravados.
    """
    return await settings_service.get_school_settings()

@router.put("/", response_model=SchoolSettingsResponse)
async def save_school_settings(
    settings_data: SchoolSettingsUpdate,
    current_admin: AdminUser = Depends(guard_mutation),
    settings_service: SettingsService = Depends(get_settings_service)
):
    """
    Salvar configurações da escola

    **Requer autenticação**

    - **school_name**, **cnpj**, **show_cnpj**: Dados da escola
    - **instructor_name**, **instructor_cpf**, **show_instructor_cpf**, **instructor_title**: Instrutor
    - **signature_image**: Assinatura digitalizada em data URL (opcional)
    - **themes**: Lista completa de temas (opcional; substitui a atual)
    """
    return await settings_service.save_school_settings(settings_data)

# =============================================
# certifica/api/v1/endpoints/dashboard.py
# =============================================
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import async_sessionmaker

from certifica.config.database import get_session_factory
from certifica.services.dashboard_service import DashboardService
from certifica.schemas.dashboard import BootstrapResponse, DashboardSummary
from certifica.database.models.admin_user import AdminUser
from certifica.api.v1.endpoints.auth import get_current_admin

router = APIRouter()

async def get_dashboard_service(
    session_factory: async_sessionmaker = Depends(get_session_factory)
) -> DashboardService:
    return DashboardService(session_factory)

@router.get("/bootstrap", response_model=BootstrapResponse)
async def bootstrap(
    current_admin: AdminUser = Depends(get_current_admin),
    dashboard_service: DashboardService = Depends(get_dashboard_service)
):
    """
    Carga inicial do painel: cursos, alunos e configurações

    **Requer autenticação**

    As três leituras são feitas em paralelo. Se qualquer uma falhar a resposta
    é 503 e o cliente deve tentar novamente.
    """
    return await dashboard_service.bootstrap()

@router.get("/summary", response_model=DashboardSummary)
async def summary(
    current_admin: AdminUser = Depends(get_current_admin),
    dashboard_service: DashboardService = Depends(get_dashboard_service)
):
    """
    Totais e certificados emitidos por curso (do maior para o menor)

    **Requer autenticação**
    """
    return await dashboard_service.summary()

# =============================================
# certifica/api/v1/endpoints/certificates.py
# =============================================
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from certifica.config.database import get_db
from certifica.services.certificate_service import CertificateService
from certifica.services.certificate_renderer import build_scale, VIEWPORT_MARGIN
from certifica.schemas.certificate import CertificateDocument, CertificateScale
from certifica.database.models.admin_user import AdminUser
from certifica.api.v1.endpoints.auth import get_current_admin, guard_mutation

# =============================================
# ROUTER INSTANCE
# =============================================
router = APIRouter()

async def get_certificate_service(db: AsyncSession = Depends(get_db)) -> CertificateService:
    return CertificateService(db)

# =============================================
# CERTIFICATE ROUTES
# =============================================

@router.get("/scale", response_model=CertificateScale)
async def get_scale(
    viewport_width: float = Query(..., gt=VIEWPORT_MARGIN, description="Largura disponível em pixels"),
    printing: bool = Query(False, description="Impressão sempre usa escala 1"),
    current_admin: AdminUser = Depends(get_current_admin)
):
    """
    Escala de exibição do certificado para a largura de tela informada

    **Requer autenticação**

    O certificado nunca é ampliado; na impressão a escala é sempre 1.
    """
    return build_scale(viewport_width, printing=printing)

@router.post("/{student_id}/issue", response_model=CertificateDocument)
async def issue_certificate(
    student_id: UUID,
    current_admin: AdminUser = Depends(guard_mutation),
    certificate_service: CertificateService = Depends(get_certificate_service)
):
    """
    Emitir (ou reemitir) o certificado do aluno

    **Requer autenticação**

    - Marca o aluno como EMITIDO com a data de hoje
    - Mantém o código de verificação já existente na reemissão
    - Retorna o documento pronto para exibição
    """
    return await certificate_service.issue_certificate(student_id)

@router.get("/{student_id}", response_model=CertificateDocument)
async def get_certificate(
    student_id: UUID,
    current_admin: AdminUser = Depends(get_current_admin),
    certificate_service: CertificateService = Depends(get_certificate_service)
):
    """
    Visualizar o certificado do aluno sem alterar o cadastro

    **Requer autenticação**
    """
    return await certificate_service.get_certificate(student_id)

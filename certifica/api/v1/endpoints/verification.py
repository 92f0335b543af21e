# =============================================
# certifica/api/v1/endpoints/verification.py
# =============================================
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from certifica.config.database import get_db
from certifica.services.verification_service import VerificationService
from certifica.schemas.verification import VerificationResult

# Public routes: no authentication
router = APIRouter()

async def get_verification_service(db: AsyncSession = Depends(get_db)) -> VerificationService:
    return VerificationService(db)

@router.get("/", response_model=VerificationResult)
async def verify_from_link(
    verify: Optional[str] = Query(None, description="Código recebido pelo link público / QR code"),
    verification_service: VerificationService = Depends(get_verification_service)
):
    """
    Verificar certificado a partir do link público (?verify=CÓDIGO)

    Retorna também **clean_url**, o endereço da página sem o parâmetro verify.
    """
    return await verification_service.verify_link(verify)

@router.get("/{code}", response_model=VerificationResult)
async def verify_code(
    code: str,
    verification_service: VerificationService = Depends(get_verification_service)
):
    """
    Verificar autenticidade de um certificado pelo código

    - **code**: Código de 8 caracteres (maiúsculas ou minúsculas)

    Qualquer falha retorna 404 com a mesma mensagem.
    """
    return await verification_service.verify(code)

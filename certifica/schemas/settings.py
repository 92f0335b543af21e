# =============================================
# certifica/schemas/settings.py
# =============================================
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List

from certifica.core.validators import format_cnpj, format_cpf
from certifica.schemas.theme import ThemeCreate, ThemeResponse

MAX_SIGNATURE_IMAGE_LENGTH = 2 * 1024 * 1024

# =============================================
# BASE SCHEMA
# =============================================
class SchoolSettingsBase(BaseModel):
    school_name: str = Field(..., min_length=1, max_length=255, description="Razão social")
    cnpj: str = Field("", max_length=18, description="CNPJ da escola")
    show_cnpj: bool = Field(True, description="Imprimir CNPJ no certificado")
    instructor_name: str = Field(..., min_length=1, max_length=255, description="Nome do instrutor")
    instructor_cpf: str = Field("", max_length=14, description="CPF do instrutor")
    show_instructor_cpf: bool = Field(False, description="Imprimir CPF do instrutor")
    instructor_title: str = Field("", max_length=255, description="Cargo do instrutor")
    signature_image: Optional[str] = Field(None, description="Assinatura digitalizada (data URL)")

    @field_validator('school_name', 'instructor_name')
    @classmethod
    def validate_required_text(cls, v):
        if not v.strip():
            raise ValueError("Campo é obrigatório")
        return v.strip().upper()

    @field_validator('cnpj')
    @classmethod
    def validate_cnpj(cls, v):
        return format_cnpj(v) if v and v.strip() else ""

    @field_validator('instructor_cpf')
    @classmethod
    def validate_instructor_cpf(cls, v):
        return format_cpf(v) if v and v.strip() else ""

    @field_validator('signature_image')
    @classmethod
    def validate_signature_image(cls, v):
        if not v:
            return None
        if not v.startswith("data:image/"):
            raise ValueError("Assinatura deve ser uma imagem em data URL")
        if len(v) > MAX_SIGNATURE_IMAGE_LENGTH:
            raise ValueError("Imagem de assinatura muito grande")
        return v

# =============================================
# UPDATE SCHEMA
# =============================================
class SchoolSettingsUpdate(SchoolSettingsBase):
    """Substitui as configurações; se themes vier, substitui também a lista de temas"""
    themes: Optional[List[ThemeCreate]] = Field(None, description="Lista completa de temas")

# =============================================
# RESPONSE SCHEMA
# =============================================
class SchoolSettingsResponse(SchoolSettingsBase):
    model_config = ConfigDict(from_attributes=True)

    themes: List[ThemeResponse] = Field(default_factory=list)

    # Stored values are returned as-is
    @field_validator('school_name', 'instructor_name')
    @classmethod
    def validate_required_text(cls, v):
        return v

    @field_validator('cnpj')
    @classmethod
    def validate_cnpj(cls, v):
        return v

    @field_validator('instructor_cpf')
    @classmethod
    def validate_instructor_cpf(cls, v):
        return v

# =============================================
# certifica/schemas/theme.py
# =============================================
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime

from certifica.core.validators import validate_hex_color

# =============================================
# BASE SCHEMA
# =============================================
class ThemeBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Nome do tema")
    primary_color: str = Field(..., description="Bordas e títulos (#RRGGBB)")
    accent_color: str = Field(..., description="Fundo do nome do curso (#RRGGBB)")
    ribbon_color: str = Field(..., description="Faixa superior e selo (#RRGGBB)")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Nome do tema é obrigatório")
        return v.strip()

    @field_validator('primary_color', 'accent_color', 'ribbon_color')
    @classmethod
    def validate_colors(cls, v):
        return validate_hex_color(v)

# =============================================
# CREATE SCHEMA
# =============================================
class ThemeCreate(ThemeBase):
    """Schema para criação de tema; sem id, um id curto é gerado"""
    id: Optional[str] = Field(None, min_length=1, max_length=64, pattern=r"^[A-Za-z0-9_-]+$")

# =============================================
# UPDATE SCHEMA
# =============================================
class ThemeUpdate(BaseModel):
    """Schema para atualização de tema (campos opcionais)"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    primary_color: Optional[str] = None
    accent_color: Optional[str] = None
    ribbon_color: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if v is None:
            return v
        if not v.strip():
            raise ValueError("Nome do tema é obrigatório")
        return v.strip()

    @field_validator('primary_color', 'accent_color', 'ribbon_color')
    @classmethod
    def validate_colors(cls, v):
        return validate_hex_color(v) if v is not None else v

# =============================================
# RESPONSE SCHEMA
# =============================================
class ThemeResponse(ThemeBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: Optional[datetime] = None

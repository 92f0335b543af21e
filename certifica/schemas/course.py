# =============================================
# certifica/schemas/course.py
# =============================================
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID

def _clean_syllabus(items: List[str]) -> List[str]:
    return [item.strip() for item in items if item and item.strip()]

# =============================================
# BASE SCHEMA
# =============================================
class CourseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Nome do curso")
    description: str = Field("", max_length=5000, description="Descrição do curso")
    duration: str = Field(..., min_length=1, max_length=500, description="Carga horária / texto de duração")
    syllabus: List[str] = Field(default_factory=list, description="Conteúdo programático, em ordem")
    instructor: str = Field("", max_length=255, description="Instrutor responsável")
    theme_id: Optional[str] = Field(None, max_length=64, description="Tema do certificado")

    @field_validator('name', 'duration')
    @classmethod
    def validate_upper_text(cls, v):
        if not v or not v.strip():
            raise ValueError("Campo é obrigatório")
        return v.strip().upper()

    @field_validator('syllabus')
    @classmethod
    def validate_syllabus(cls, v):
        return _clean_syllabus(v)

# =============================================
# CREATE SCHEMA
# =============================================
class CourseCreate(CourseBase):
    """Schema para criação de curso"""
    pass

# =============================================
# UPDATE SCHEMA
# =============================================
class CourseUpdate(BaseModel):
    """Schema para atualização de curso (campos opcionais)"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    duration: Optional[str] = Field(None, min_length=1, max_length=500)
    syllabus: Optional[List[str]] = None
    instructor: Optional[str] = Field(None, max_length=255)
    theme_id: Optional[str] = Field(None, max_length=64)

    # theme_id may be null (falls back to the default theme); the other columns may not
    @field_validator('description', 'instructor')
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Campo não pode ser nulo")
        return v

    @field_validator('name', 'duration')
    @classmethod
    def validate_upper_text(cls, v):
        if v is None:
            raise ValueError("Campo não pode ser nulo")
        if not v.strip():
            raise ValueError("Campo não pode ser vazio")
        return v.strip().upper()

    @field_validator('syllabus')
    @classmethod
    def validate_syllabus(cls, v):
        if v is None:
            raise ValueError("Campo não pode ser nulo")
        return _clean_syllabus(v)

# =============================================
# RESPONSE SCHEMA
# =============================================
class CourseResponse(CourseBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Stored values are returned as-is
    @field_validator('name', 'duration')
    @classmethod
    def validate_upper_text(cls, v):
        return v

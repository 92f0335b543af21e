# =============================================
# certifica/schemas/student.py
# =============================================
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import date, datetime
from uuid import UUID

from certifica.core.validators import format_cpf, validate_iso_date
from certifica.schemas.enums import StudentStatusEnum

# =============================================
# BASE SCHEMA
# =============================================
class StudentBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Nome completo")
    cpf: str = Field(..., min_length=11, max_length=14, description="CPF (com ou sem máscara)")
    course_id: UUID = Field(..., description="Curso do aluno")
    completion_date: str = Field(
        default_factory=lambda: date.today().isoformat(),
        description="Data de conclusão impressa no certificado (AAAA-MM-DD)"
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Nome é obrigatório")
        return v.strip().upper()

    @field_validator('cpf')
    @classmethod
    def validate_cpf(cls, v):
        return format_cpf(v)

    @field_validator('completion_date')
    @classmethod
    def validate_completion_date(cls, v):
        return validate_iso_date(v.strip())

# =============================================
# CREATE SCHEMA
# =============================================
class StudentCreate(StudentBase):
    """Schema para cadastro de aluno; status começa PENDENTE"""
    pass

# =============================================
# UPDATE SCHEMA
# =============================================
class StudentUpdate(BaseModel):
    """Schema para edição de cadastro (status e código só mudam na emissão)"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    cpf: Optional[str] = Field(None, min_length=11, max_length=14)
    course_id: Optional[UUID] = None
    completion_date: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Nome não pode ser vazio")
        return v.strip().upper() if v else v

    @field_validator('cpf')
    @classmethod
    def validate_cpf(cls, v):
        return format_cpf(v) if v is not None else v

    @field_validator('completion_date')
    @classmethod
    def validate_completion_date(cls, v):
        return validate_iso_date(v.strip()) if v is not None else v

# =============================================
# RESPONSE SCHEMA
# =============================================
class StudentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    cpf: str
    course_id: UUID
    registration_date: str
    completion_date: str = ""
    status: StudentStatusEnum
    issued_at: Optional[str] = None
    verification_code: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

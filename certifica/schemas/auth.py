# =============================================
# certifica/schemas/auth.py
# =============================================
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from certifica.core.validators import validate_password

# =============================================
# LOGIN SCHEMAS
# =============================================
class LoginRequest(BaseModel):
    """Schema for login request"""
    username: str = Field(..., min_length=1, max_length=255, description="Usuário")
    password: str = Field(..., min_length=1, max_length=255, description="Senha")

class AdminResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class TokenResponse(BaseModel):
    """Schema for token response"""
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token expiration time in seconds")
    admin: AdminResponse = Field(..., description="Authenticated admin")

# =============================================
# CREDENTIAL MANAGEMENT SCHEMAS
# =============================================
class CredentialsUpdate(BaseModel):
    """Overwrites the stored admin username and password"""
    username: str = Field(..., min_length=3, max_length=255, description="Novo usuário")
    new_password: str = Field(..., min_length=8, max_length=72, description="Nova senha")

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        if not v.strip():
            raise ValueError("Usuário é obrigatório")
        return v.strip()

    @field_validator('new_password')
    @classmethod
    def validate_new_password(cls, v):
        return validate_password(v)

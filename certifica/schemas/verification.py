# =============================================
# certifica/schemas/verification.py
# =============================================
from pydantic import BaseModel, Field
from typing import Optional

class VerificationResult(BaseModel):
    """Public confirmation of an issued certificate"""
    valid: bool = True
    verification_code: str
    student_name: str
    student_cpf: str
    course_name: str
    course_duration: str
    issued_at: Optional[str] = None
    completion_date: str = Field(..., description="DD/MM/AAAA")
    clean_url: Optional[str] = Field(None, description="Verification page without the ?verify= parameter")

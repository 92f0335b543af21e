# =============================================
# certifica/schemas/certificate.py
# =============================================
from pydantic import BaseModel, Field
from typing import Optional, List
from uuid import UUID

# =============================================
# THEME COLORS
# =============================================
class ThemeColors(BaseModel):
    """Resolved theme plus the colours derived from it"""
    theme_id: str
    primary: str
    accent: str
    ribbon: str
    accent_light: str = Field(..., description="Accent at 5% opacity (page decoration)")
    accent_tint: str = Field(..., description="Accent at 10% opacity (code badge)")

# =============================================
# PAGE BLOCKS
# =============================================
class SyllabusItem(BaseModel):
    number: int = Field(..., ge=1, le=10)
    text: str

class SignatureBlock(BaseModel):
    image: Optional[str] = Field(None, description="Data URL; when absent the name is drawn as signature")
    instructor_name: str
    instructor_title: str
    instructor_cpf: Optional[str] = Field(None, description="Present only when enabled in settings")

class CertificateFront(BaseModel):
    legal_notice: str
    school_name: str
    school_cnpj: Optional[str] = Field(None, description="Present only when enabled in settings")
    title: str
    subtitle: str
    course_name: str
    award_text: str
    student_name: str
    student_cpf: str
    course_duration: str
    issue_place_and_date: str
    verification_code: Optional[str] = None
    seal_caption: str
    signature: SignatureBlock

class CertificateBack(BaseModel):
    title: str
    subtitle: str
    left_column: List[SyllabusItem] = Field(default_factory=list)
    right_column: List[SyllabusItem] = Field(default_factory=list)
    signature: SignatureBlock

# =============================================
# DOCUMENT
# =============================================
class CertificateDocument(BaseModel):
    """Renderable two-page certificate"""
    student_id: UUID
    course_id: UUID
    status: str
    display_date: str
    verification_code: Optional[str] = None
    verification_url: Optional[str] = None
    qr_code_url: Optional[str] = None
    canvas_width: int
    canvas_height: int
    theme: ThemeColors
    front: CertificateFront
    back: CertificateBack

class CertificateScale(BaseModel):
    scale: float = Field(..., gt=0, le=1)
    canvas_width: int
    canvas_height: int
    scaled_height: float
    printing: bool = False

# =============================================
# certifica/services/certificate_renderer.py
# =============================================
"""
Certificate renderer.

Turns a student, its course and the school settings into a two-page
CertificateDocument. Everything here is pure: the caller loads the records
and decides what to do with the result.
"""

from datetime import date
from typing import Any, List, Optional, Sequence
from urllib.parse import quote

from certifica.config.settings import get_settings
from certifica.core.validators import parse_iso_date, format_br_date
from certifica.schemas.certificate import (
    CertificateDocument,
    CertificateFront,
    CertificateBack,
    CertificateScale,
    SignatureBlock,
    SyllabusItem,
    ThemeColors,
)
from certifica.services.catalog import resolve_theme
from certifica.services.verification_service import build_verification_url

settings = get_settings()

# A4 landscape at 96 dpi
CANVAS_WIDTH = 1123
CANVAS_HEIGHT = 794
VIEWPORT_MARGIN = 80

SYLLABUS_COLUMN_SIZE = 5
SYLLABUS_MAX_ITEMS = 10

LEGAL_NOTICE = "EMITIDO CONFORME AUTORIZAÇÃO DA LEI Nº 9394/96 E DECRETO 5154/04"
FRONT_TITLE = "CERTIFICADO"
FRONT_SUBTITLE = "De Qualificação Profissional"
AWARD_TEXT = "Este certificado é orgulhosamente concedido a:"
BACK_TITLE = "Conteúdo do Curso"
BACK_SUBTITLE = "Cronograma de Aprendizado e Prática"
SEAL_HEADER = "Selo de Qualidade"
SEAL_BODY = "OFICIAL"

# =============================================
# HELPERS
# =============================================

def hex_to_rgba(hex_color: str, alpha: float) -> str:
    value = hex_color.lstrip("#")
    r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {alpha})"

def format_display_date(completion_date: Optional[str], issued_at: Optional[str], today: Optional[date] = None) -> str:
    """Completion date as DD/MM/YYYY, else the issuance date, else today"""
    completion = parse_iso_date(completion_date)
    if completion:
        return format_br_date(completion)
    if issued_at:
        return issued_at
    return format_br_date(today or date.today())

def split_syllabus(items: Sequence[str]) -> List[List[SyllabusItem]]:
    """Two numbered columns of five; items past the tenth are dropped"""
    numbered = [SyllabusItem(number=i + 1, text=text) for i, text in enumerate(list(items)[:SYLLABUS_MAX_ITEMS])]
    return [numbered[:SYLLABUS_COLUMN_SIZE], numbered[SYLLABUS_COLUMN_SIZE:]]

def build_qr_code_url(data: str, primary_color: str) -> str:
    size = settings.QR_CODE_SIZE
    return (
        f"{settings.QR_CODE_ENDPOINT}?size={size}x{size}"
        f"&data={quote(data, safe='')}"
        f"&bgcolor=ffffff&color={primary_color.lstrip('#')}&margin=4"
    )

def seal_caption(school_name: str) -> str:
    words = school_name.split()
    first_word = words[0] if words else ""
    return " ".join(part for part in (SEAL_HEADER, SEAL_BODY, first_word) if part)

def fit_scale(
    viewport_width: float,
    *,
    canvas_width: int = CANVAS_WIDTH,
    margin: int = VIEWPORT_MARGIN,
    printing: bool = False
) -> float:
    """Scale that fits the canvas in the viewport; always 1.0 when printing"""
    if printing or viewport_width >= canvas_width + margin:
        return 1.0
    scale = (viewport_width - margin) / canvas_width
    return min(1.0, max(0.0, scale))

def build_scale(viewport_width: float, printing: bool = False) -> CertificateScale:
    scale = fit_scale(viewport_width, printing=printing)
    if scale <= 0:
        raise ValueError("Viewport is narrower than the page margin")
    return CertificateScale(
        scale=scale,
        canvas_width=CANVAS_WIDTH,
        canvas_height=CANVAS_HEIGHT,
        scaled_height=round(CANVAS_HEIGHT * scale, 2),
        printing=printing,
    )

# =============================================
# RENDERING
# =============================================

def _signature(school: Any) -> SignatureBlock:
    return SignatureBlock(
        image=school.signature_image or None,
        instructor_name=school.instructor_name,
        instructor_title=school.instructor_title,
        instructor_cpf=school.instructor_cpf if school.show_instructor_cpf else None,
    )

def render_certificate(
    student: Any,
    course: Any,
    school: Any,
    *,
    base_url: Optional[str] = None,
    today: Optional[date] = None
) -> CertificateDocument:
    """
    Render the certificate of one student.

    `school` carries the settings fields plus a `themes` sequence. The
    verification link and QR code are only present once the student holds
    a verification code.
    """
    theme = resolve_theme(course.theme_id, school.themes)
    colors = ThemeColors(
        theme_id=theme.id,
        primary=theme.primary_color,
        accent=theme.accent_color,
        ribbon=theme.ribbon_color,
        accent_light=hex_to_rgba(theme.accent_color, 0.05),
        accent_tint=hex_to_rgba(theme.accent_color, 0.1),
    )

    display_date = format_display_date(student.completion_date, student.issued_at, today)

    verification_url = None
    qr_code_url = None
    if student.verification_code:
        verification_url = build_verification_url(student.verification_code, base_url)
        qr_code_url = build_qr_code_url(verification_url, colors.primary)

    signature = _signature(school)
    left_column, right_column = split_syllabus(course.syllabus or [])

    front = CertificateFront(
        legal_notice=LEGAL_NOTICE,
        school_name=school.school_name,
        school_cnpj=school.cnpj if school.show_cnpj else None,
        title=FRONT_TITLE,
        subtitle=FRONT_SUBTITLE,
        course_name=course.name.upper(),
        award_text=AWARD_TEXT,
        student_name=student.name.upper(),
        student_cpf=student.cpf,
        course_duration=course.duration.upper(),
        issue_place_and_date=f"{settings.CERTIFICATE_ISSUE_PLACE}, {display_date}",
        verification_code=student.verification_code,
        seal_caption=seal_caption(school.school_name),
        signature=signature,
    )

    back = CertificateBack(
        title=BACK_TITLE,
        subtitle=BACK_SUBTITLE,
        left_column=left_column,
        right_column=right_column,
        signature=signature,
    )

    return CertificateDocument(
        student_id=student.id,
        course_id=course.id,
        status=student.status,
        display_date=display_date,
        verification_code=student.verification_code,
        verification_url=verification_url,
        qr_code_url=qr_code_url,
        canvas_width=CANVAS_WIDTH,
        canvas_height=CANVAS_HEIGHT,
        theme=colors,
        front=front,
        back=back,
    )

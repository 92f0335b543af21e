# =============================================
# certifica/services/verification_service.py
# =============================================
import secrets
from typing import Optional, Tuple
from urllib.parse import urlsplit, urlunsplit, parse_qsl, urlencode
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from certifica.config.settings import get_settings
from certifica.database.models.course import Course
from certifica.database.models.student import Student
from certifica.repositories.course_repository import CourseRepository
from certifica.repositories.student_repository import StudentRepository
from certifica.schemas.verification import VerificationResult
from certifica.core.exceptions import AppException, CertificateNotFoundError
from certifica.core.validators import parse_iso_date, format_br_date

logger = logging.getLogger(__name__)
settings = get_settings()

# No 0/O/1/I so a printed code can be typed back unambiguously
VERIFICATION_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
CODE_LENGTH = 8

VERIFY_QUERY_PARAM = "verify"

# =============================================
# CODE GENERATION
# =============================================

def generate_verification_code(length: int = CODE_LENGTH) -> str:
    """Draw each character independently from a CSPRNG"""
    return "".join(secrets.choice(VERIFICATION_ALPHABET) for _ in range(length))

def normalize_code(raw: Optional[str]) -> Optional[str]:
    """Trim and upper-case user input; empty input becomes None"""
    if raw is None:
        return None
    code = raw.strip().upper()
    return code or None

def build_verification_url(code: str, base_url: Optional[str] = None) -> str:
    base = base_url or settings.PUBLIC_VERIFY_BASE_URL
    separator = "&" if "?" in base else "?"
    return f"{base}{separator}{urlencode({VERIFY_QUERY_PARAM: code})}"

def strip_verify_param(url: str) -> str:
    """Return the URL without the verify query parameter"""
    parts = urlsplit(url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != VERIFY_QUERY_PARAM]
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))

# =============================================
# LOOKUP
# =============================================

class VerificationService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.student_repo = StudentRepository(db)
        self.course_repo = CourseRepository(db)

    async def resolve(self, raw_code: Optional[str]) -> Tuple[Student, Course]:
        """
        Find the issued certificate holding a code.

        Every failure (empty code, unknown code, pending student, removed
        course) raises the same CertificateNotFoundError.
        """
        code = normalize_code(raw_code)
        if not code:
            raise CertificateNotFoundError()

        student = await self.student_repo.get_issued_by_code(code)
        if not student:
            logger.info("Verification lookup failed")
            raise CertificateNotFoundError()

        course = await self.course_repo.get_by_id(student.course_id)
        if not course:
            logger.info("Verification lookup failed: course removed")
            raise CertificateNotFoundError()

        return student, course

    async def verify(self, raw_code: Optional[str], page_url: Optional[str] = None) -> VerificationResult:
        """Build the public confirmation for a code"""
        try:
            student, course = await self.resolve(raw_code)

            completion = parse_iso_date(student.completion_date)
            completion_display = format_br_date(completion) if completion else (student.issued_at or "")

            return VerificationResult(
                verification_code=student.verification_code,
                student_name=student.name,
                student_cpf=student.cpf,
                course_name=course.name,
                course_duration=course.duration,
                issued_at=student.issued_at,
                completion_date=completion_display,
                clean_url=strip_verify_param(page_url) if page_url else None
            )

        except AppException:
            raise
        except Exception as e:
            logger.error(f"Error verifying certificate: {e}")
            raise AppException(f"Erro ao verificar certificado: {str(e)}")

    async def verify_link(self, raw_code: Optional[str]) -> VerificationResult:
        """Resolve a code received through the public ?verify= link"""
        return await self.verify(raw_code, page_url=build_verification_url(normalize_code(raw_code) or ""))

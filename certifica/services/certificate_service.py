# =============================================
# certifica/services/certificate_service.py
# =============================================
from datetime import date
from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from certifica.config.settings import get_settings
from certifica.repositories.course_repository import CourseRepository
from certifica.repositories.student_repository import StudentRepository
from certifica.schemas.certificate import CertificateDocument
from certifica.schemas.enums import StudentStatusEnum
from certifica.services.settings_service import SettingsService
from certifica.services.certificate_renderer import render_certificate
from certifica.services.verification_service import generate_verification_code
from certifica.core.exceptions import (
    AppException,
    CourseNotFoundError,
    StudentNotFoundError,
    VerificationCodeExhaustedError,
)
from certifica.core.validators import format_br_date

logger = logging.getLogger(__name__)
settings = get_settings()

class CertificateService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.student_repo = StudentRepository(db)
        self.course_repo = CourseRepository(db)
        self.settings_service = SettingsService(db)

    async def _load(self, student_id: UUID):
        student = await self.student_repo.get_by_id(student_id)
        if not student:
            raise StudentNotFoundError(student_id)

        course = await self.course_repo.get_by_id(student.course_id)
        if not course:
            raise CourseNotFoundError(student.course_id)

        return student, course

    async def draw_unique_code(self, student_id: Optional[UUID] = None) -> str:
        """Draw codes until one is unused by any other student"""
        attempts = settings.VERIFICATION_CODE_MAX_ATTEMPTS
        for attempt in range(1, attempts + 1):
            code = generate_verification_code()
            if not await self.student_repo.code_exists(code, exclude_student_id=student_id):
                return code
            logger.warning(f"Verification code collision (attempt {attempt}/{attempts})")

        raise VerificationCodeExhaustedError(attempts)

    async def issue_certificate(self, student_id: UUID, today: Optional[date] = None) -> CertificateDocument:
        """
        Issue (or reissue) a student's certificate and render it.

        Marks the student EMITIDO with today's date. A student that already
        holds a verification code keeps it, so printed QR codes stay valid.
        """
        try:
            student, course = await self._load(student_id)

            code = student.verification_code or await self.draw_unique_code(student.id)
            student = await self.student_repo.update(student.id, {
                "status": StudentStatusEnum.EMITIDO.value,
                "issued_at": format_br_date(today or date.today()),
                "verification_code": code,
            })

            logger.info(f"Certificate issued for student {student_id} (code {code})")

            school = await self.settings_service.get_school_settings()
            return render_certificate(student, course, school, today=today)

        except AppException:
            raise
        except Exception as e:
            logger.error(f"Error issuing certificate for student {student_id}: {e}")
            raise AppException(f"Erro ao emitir o certificado: {str(e)}")

    async def get_certificate(self, student_id: UUID, today: Optional[date] = None) -> CertificateDocument:
        """Render the certificate as it currently stands, without issuing it"""
        student, course = await self._load(student_id)
        school = await self.settings_service.get_school_settings()
        return render_certificate(student, course, school, today=today)

# =============================================
# certifica/services/student_service.py
# =============================================
from datetime import date
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from certifica.repositories.course_repository import CourseRepository
from certifica.repositories.student_repository import StudentRepository
from certifica.schemas.student import StudentCreate, StudentUpdate, StudentResponse
from certifica.schemas.enums import StudentStatusEnum
from certifica.services.catalog import filter_students
from certifica.core.exceptions import AppException, CourseNotFoundError, StudentNotFoundError
from certifica.core.validators import format_br_date

logger = logging.getLogger(__name__)

class StudentService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.student_repo = StudentRepository(db)
        self.course_repo = CourseRepository(db)

    async def _ensure_course(self, course_id: UUID) -> None:
        if not await self.course_repo.get_by_id(course_id):
            raise CourseNotFoundError(course_id)

    # =============================================
    # BASIC CRUD OPERATIONS
    # =============================================

    async def create_student(self, student_data: StudentCreate) -> StudentResponse:
        """Register a student as PENDENTE with today's registration date"""
        try:
            await self._ensure_course(student_data.course_id)

            values = student_data.model_dump()
            values.update({
                "registration_date": format_br_date(date.today()),
                "status": StudentStatusEnum.PENDENTE.value,
                "issued_at": None,
                "verification_code": None,
            })
            student = await self.student_repo.create(values)

            logger.info(f"Student created successfully: {student.id}")
            return StudentResponse.model_validate(student)

        except AppException:
            raise
        except Exception as e:
            logger.error(f"Error creating student: {e}")
            raise AppException(f"Erro ao cadastrar aluno: {str(e)}")

    async def get_student(self, student_id: UUID) -> StudentResponse:
        student = await self.student_repo.get_by_id(student_id)
        if not student:
            raise StudentNotFoundError(student_id)
        return StudentResponse.model_validate(student)

    async def get_students(self, search: Optional[str] = None) -> List[StudentResponse]:
        """All students, optionally narrowed by name, CPF or course name"""
        students = await self.student_repo.get_all()
        if search and search.strip():
            courses = await self.course_repo.get_all()
            students = filter_students(students, courses, search)
        return [StudentResponse.model_validate(student) for student in students]

    async def update_student(self, student_id: UUID, student_data: StudentUpdate) -> StudentResponse:
        """Edit registration fields; status and code are left alone"""
        try:
            values = student_data.model_dump(exclude_unset=True, exclude_none=True)
            if "course_id" in values:
                await self._ensure_course(values["course_id"])

            updated_student = await self.student_repo.update(student_id, values)
            if not updated_student:
                raise StudentNotFoundError(student_id)

            logger.info(f"Student updated successfully: {student_id}")
            return StudentResponse.model_validate(updated_student)

        except AppException:
            raise
        except Exception as e:
            logger.error(f"Error updating student {student_id}: {e}")
            raise AppException(f"Erro ao atualizar aluno: {str(e)}")

    async def delete_student(self, student_id: UUID) -> bool:
        deleted = await self.student_repo.delete(student_id)
        if not deleted:
            raise StudentNotFoundError(student_id)
        return True

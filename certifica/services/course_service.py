# =============================================
# certifica/services/course_service.py
# =============================================
from typing import List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from certifica.repositories.course_repository import CourseRepository
from certifica.repositories.student_repository import StudentRepository
from certifica.repositories.settings_repository import SettingsRepository
from certifica.repositories.theme_repository import ThemeRepository
from certifica.schemas.course import CourseCreate, CourseUpdate, CourseResponse
from certifica.core.exceptions import AppException, CourseNotFoundError, DatabaseError

logger = logging.getLogger(__name__)

class CourseService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.course_repo = CourseRepository(db)
        self.student_repo = StudentRepository(db)
        self.settings_repo = SettingsRepository(db)
        self.theme_repo = ThemeRepository(db)

    # =============================================
    # BASIC CRUD OPERATIONS
    # =============================================

    async def create_course(self, course_data: CourseCreate) -> CourseResponse:
        """Create a course, filling instructor and theme from the school defaults"""
        try:
            if not course_data.instructor.strip():
                school = await self.settings_repo.get()
                if school:
                    course_data.instructor = school.instructor_name

            if not course_data.theme_id:
                themes = await self.theme_repo.get_all()
                if themes:
                    course_data.theme_id = themes[0].id

            course = await self.course_repo.create(course_data)

            logger.info(f"Course created successfully: {course.name} (ID: {course.id})")
            return CourseResponse.model_validate(course)

        except AppException:
            raise
        except Exception as e:
            logger.error(f"Error creating course: {e}")
            raise AppException(f"Erro ao criar curso: {str(e)}")

    async def get_course(self, course_id: UUID) -> CourseResponse:
        course = await self.course_repo.get_by_id(course_id)
        if not course:
            raise CourseNotFoundError(course_id)
        return CourseResponse.model_validate(course)

    async def get_courses(self) -> List[CourseResponse]:
        courses = await self.course_repo.get_all()
        return [CourseResponse.model_validate(course) for course in courses]

    async def update_course(self, course_id: UUID, course_data: CourseUpdate) -> CourseResponse:
        """Update course fields that were sent"""
        try:
            updated_course = await self.course_repo.update(course_id, course_data)
            if not updated_course:
                raise CourseNotFoundError(course_id)

            logger.info(f"Course updated successfully: {course_id}")
            return CourseResponse.model_validate(updated_course)

        except AppException:
            raise
        except Exception as e:
            logger.error(f"Error updating course {course_id}: {e}")
            raise AppException(f"Erro ao atualizar curso: {str(e)}")

    async def delete_course(self, course_id: UUID) -> int:
        """
        Delete a course and all of its students in one transaction.

        Returns the number of students removed. Any failure rolls the whole
        operation back and surfaces as DatabaseError.
        """
        course = await self.course_repo.get_by_id(course_id)
        if not course:
            raise CourseNotFoundError(course_id)

        try:
            removed_students = await self.student_repo.delete_by_course(course_id, commit=False)
            await self.course_repo.delete(course_id, commit=False)
            await self.db.commit()
        except DatabaseError:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error deleting course {course_id}: {e}")
            raise DatabaseError("delete", str(e))

        logger.info(f"Course deleted: {course_id} ({removed_students} students removed)")
        return removed_students

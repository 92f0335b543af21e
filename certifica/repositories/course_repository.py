# =============================================
# certifica/repositories/course_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from typing import Optional, List
from uuid import UUID
import logging

from certifica.database.models.course import Course
from certifica.schemas.course import CourseCreate, CourseUpdate
from certifica.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

class CourseRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    # =============================================
    # BASIC CRUD OPERATIONS
    # =============================================

    async def create(self, course_data: CourseCreate) -> Course:
        """Create a new course"""
        try:
            db_course = Course(**course_data.model_dump())

            self.db.add(db_course)
            await self.db.commit()
            await self.db.refresh(db_course)

            logger.info(f"Course created successfully: {db_course.id}")
            return db_course

        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error creating course: {e}")
            raise DatabaseError("insert", str(e))

    async def get_by_id(self, course_id: UUID) -> Optional[Course]:
        """Get course by ID"""
        try:
            result = await self.db.execute(select(Course).where(Course.id == course_id))
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error getting course by ID {course_id}: {e}")
            raise DatabaseError("select", str(e))

    async def get_all(self) -> List[Course]:
        """Get all courses in insertion order"""
        try:
            result = await self.db.execute(select(Course).order_by(Course.created_at))
            return list(result.scalars().all())
        except Exception as e:
            logger.error(f"Error getting all courses: {e}")
            raise DatabaseError("select", str(e))

    async def update(self, course_id: UUID, course_data: CourseUpdate) -> Optional[Course]:
        """Update course"""
        try:
            db_course = await self.get_by_id(course_id)
            if not db_course:
                return None

            for field, value in course_data.model_dump(exclude_unset=True).items():
                setattr(db_course, field, value)

            await self.db.commit()
            await self.db.refresh(db_course)

            logger.info(f"Course updated successfully: {course_id}")
            return db_course

        except DatabaseError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error updating course {course_id}: {e}")
            raise DatabaseError("update", str(e))

    async def delete(self, course_id: UUID, commit: bool = True) -> bool:
        """Delete course; with commit=False the caller owns the transaction"""
        try:
            result = await self.db.execute(delete(Course).where(Course.id == course_id))
            if commit:
                await self.db.commit()
            return result.rowcount > 0
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error deleting course {course_id}: {e}")
            raise DatabaseError("delete", str(e))


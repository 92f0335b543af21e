# =============================================
# certifica/repositories/student_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, and_
from typing import Optional, List, Dict, Any
from uuid import UUID
import logging

from certifica.database.models.student import Student
from certifica.schemas.enums import StudentStatusEnum
from certifica.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

class StudentRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    # =============================================
    # BASIC CRUD OPERATIONS
    # =============================================

    async def create(self, student_data: Dict[str, Any]) -> Student:
        """Create a new student from a fully populated field mapping"""
        try:
            db_student = Student(**student_data)

            self.db.add(db_student)
            await self.db.commit()
            await self.db.refresh(db_student)

            logger.info(f"Student created successfully: {db_student.id}")
            return db_student

        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error creating student: {e}")
            raise DatabaseError("insert", str(e))

    async def get_by_id(self, student_id: UUID) -> Optional[Student]:
        """Get student by ID"""
        try:
            result = await self.db.execute(select(Student).where(Student.id == student_id))
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error getting student by ID {student_id}: {e}")
            raise DatabaseError("select", str(e))

    async def get_all(self) -> List[Student]:
        """Get all students in insertion order"""
        try:
            result = await self.db.execute(select(Student).order_by(Student.created_at))
            return list(result.scalars().all())
        except Exception as e:
            logger.error(f"Error getting all students: {e}")
            raise DatabaseError("select", str(e))

    async def update(self, student_id: UUID, values: Dict[str, Any]) -> Optional[Student]:
        """Apply the given column values to a student"""
        try:
            db_student = await self.get_by_id(student_id)
            if not db_student:
                return None

            for field, value in values.items():
                setattr(db_student, field, value)

            await self.db.commit()
            await self.db.refresh(db_student)

            logger.info(f"Student updated successfully: {student_id}")
            return db_student

        except DatabaseError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error updating student {student_id}: {e}")
            raise DatabaseError("update", str(e))

    async def delete(self, student_id: UUID) -> bool:
        """Delete student"""
        try:
            result = await self.db.execute(delete(Student).where(Student.id == student_id))
            await self.db.commit()

            success = result.rowcount > 0
            if success:
                logger.info(f"Student deleted: {student_id}")
            return success

        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error deleting student {student_id}: {e}")
            raise DatabaseError("delete", str(e))

    async def delete_by_course(self, course_id: UUID, commit: bool = True) -> int:
        """Delete every student of a course; with commit=False the caller owns the transaction"""
        try:
            result = await self.db.execute(delete(Student).where(Student.course_id == course_id))
            if commit:
                await self.db.commit()
            return result.rowcount
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error deleting students of course {course_id}: {e}")
            raise DatabaseError("delete", str(e))

    # =============================================
    # VERIFICATION QUERIES
    # =============================================

    async def get_issued_by_code(self, code: str) -> Optional[Student]:
        """Find the issued student holding a verification code (expects a normalized code)"""
        try:
            stmt = select(Student).where(
                and_(
                    Student.verification_code == code,
                    Student.status == StudentStatusEnum.EMITIDO.value
                )
            )
            result = await self.db.execute(stmt)
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error looking up verification code: {e}")
            raise DatabaseError("select", str(e))

    async def code_exists(self, code: str, exclude_student_id: Optional[UUID] = None) -> bool:
        """Check if a verification code is already assigned"""
        try:
            stmt = select(Student.id).where(Student.verification_code == code)
            if exclude_student_id:
                stmt = stmt.where(Student.id != exclude_student_id)
            result = await self.db.execute(stmt)
            return result.first() is not None
        except Exception as e:
            logger.error(f"Error checking verification code: {e}")
            raise DatabaseError("select", str(e))

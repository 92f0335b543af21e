# =============================================
# certifica/services/dashboard_service.py
# =============================================
import asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker
import logging

from certifica.repositories.course_repository import CourseRepository
from certifica.repositories.student_repository import StudentRepository
from certifica.schemas.course import CourseResponse
from certifica.schemas.student import StudentResponse
from certifica.schemas.dashboard import BootstrapResponse, DashboardSummary
from certifica.services.settings_service import SettingsService
from certifica.services.catalog import build_summary
from certifica.core.exceptions import ServiceUnavailableError

logger = logging.getLogger(__name__)

class DashboardService:
    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def _load_courses(self):
        async with self.session_factory() as session:
            return await CourseRepository(session).get_all()

    async def _load_students(self):
        async with self.session_factory() as session:
            return await StudentRepository(session).get_all()

    async def _load_settings(self):
        async with self.session_factory() as session:
            return await SettingsService(session).get_school_settings()

    async def bootstrap(self) -> BootstrapResponse:
        """
        Initial load of the admin panel.

        Courses, students and settings are read concurrently, each in its own
        session. If any of them fails the whole load fails with 503 and the
        client is expected to retry.
        """
        try:
            courses, students, school = await asyncio.gather(
                self._load_courses(),
                self._load_students(),
                self._load_settings(),
            )
        except Exception as e:
            logger.error(f"Initial data load failed: {e}")
            raise ServiceUnavailableError(str(e))

        logger.info(f"Initial data loaded: {len(courses)} courses, {len(students)} students")
        return BootstrapResponse(
            courses=[CourseResponse.model_validate(c) for c in courses],
            students=[StudentResponse.model_validate(s) for s in students],
            settings=school,
        )

    async def summary(self) -> DashboardSummary:
        async with self.session_factory() as session:
            courses = await CourseRepository(session).get_all()
            students = await StudentRepository(session).get_all()
        return build_summary(courses, students)

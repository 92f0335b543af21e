# =============================================
# certifica/schemas/dashboard.py
# =============================================
from pydantic import BaseModel, Field
from typing import List
from uuid import UUID

from certifica.schemas.course import CourseResponse
from certifica.schemas.student import StudentResponse
from certifica.schemas.settings import SchoolSettingsResponse

class CourseIssuanceStat(BaseModel):
    course_id: UUID
    course_name: str
    count: int = Field(..., ge=0)

class DashboardSummary(BaseModel):
    total_courses: int = 0
    total_students: int = 0
    total_issued: int = 0
    course_stats: List[CourseIssuanceStat] = Field(default_factory=list)

class BootstrapResponse(BaseModel):
    """Everything the admin panel needs on first load"""
    courses: List[CourseResponse] = Field(default_factory=list)
    students: List[StudentResponse] = Field(default_factory=list)
    settings: SchoolSettingsResponse

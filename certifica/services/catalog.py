# =============================================
# certifica/services/catalog.py
# =============================================
"""
Pure view-model helpers over already-loaded records.

These functions take plain sequences of ORM objects (or anything exposing
the same attributes) and never touch the database.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Dict, Any

from certifica.schemas.enums import StudentStatusEnum
from certifica.schemas.dashboard import CourseIssuanceStat, DashboardSummary

REMOVED_COURSE_NAME = "CURSO REMOVIDO"

@dataclass(frozen=True)
class ResolvedTheme:
    id: str
    name: str
    primary_color: str
    accent_color: str
    ribbon_color: str

# Used when no theme is configured at all
FALLBACK_THEME = ResolvedTheme(
    id="fallback",
    name="Padrão",
    primary_color="#0f172a",
    accent_color="#e67e00",
    ribbon_color="#f59e0b",
)

def _courses_by_id(courses: Iterable[Any]) -> Dict[Any, Any]:
    return {course.id: course for course in courses}

def course_name_for(student: Any, courses: Iterable[Any]) -> str:
    course = _courses_by_id(courses).get(student.course_id)
    return course.name if course else REMOVED_COURSE_NAME

def filter_students(students: Sequence[Any], courses: Iterable[Any], term: Optional[str]) -> List[Any]:
    """Case-insensitive substring match on name, cpf or course name"""
    needle = (term or "").strip().lower()
    if not needle:
        return list(students)

    by_id = _courses_by_id(courses)
    matches = []
    for student in students:
        course = by_id.get(student.course_id)
        # The removed-course label is display only and never matches
        course_name = course.name if course else ""
        if (
            needle in (student.name or "").lower()
            or needle in (student.cpf or "").lower()
            or needle in course_name.lower()
        ):
            matches.append(student)
    return matches

def issuance_stats(courses: Sequence[Any], students: Iterable[Any]) -> List[CourseIssuanceStat]:
    """Issued certificates per course, highest first; ties keep course order"""
    issued: Dict[Any, int] = {}
    for student in students:
        if student.status == StudentStatusEnum.EMITIDO.value:
            issued[student.course_id] = issued.get(student.course_id, 0) + 1

    stats = [
        CourseIssuanceStat(course_id=course.id, course_name=course.name, count=issued.get(course.id, 0))
        for course in courses
    ]
    # sorted() is stable
    return sorted(stats, key=lambda stat: stat.count, reverse=True)

def resolve_theme(theme_id: Optional[str], themes: Sequence[Any]) -> ResolvedTheme:
    """Exact match, else the first configured theme, else the fallback"""
    chosen = None
    if theme_id:
        chosen = next((theme for theme in themes if theme.id == theme_id), None)
    if chosen is None and themes:
        chosen = themes[0]
    if chosen is None:
        return FALLBACK_THEME

    return ResolvedTheme(
        id=chosen.id,
        name=chosen.name,
        primary_color=chosen.primary_color,
        accent_color=chosen.accent_color,
        ribbon_color=chosen.ribbon_color,
    )

def build_summary(courses: Sequence[Any], students: Sequence[Any]) -> DashboardSummary:
    total_issued = sum(1 for s in students if s.status == StudentStatusEnum.EMITIDO.value)
    return DashboardSummary(
        total_courses=len(courses),
        total_students=len(students),
        total_issued=total_issued,
        course_stats=issuance_stats(courses, students),
    )

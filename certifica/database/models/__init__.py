# =============================================
# certifica/database/models/__init__.py
# =============================================
"""
Database Models Package

Importa todos os modelos para garantir que sejam registrados no SQLAlchemy.
Este arquivo garante que o Alembic detecte todas as tabelas para migrações.
"""

from .course import Course
from .student import Student
from .theme import Theme
from .school_settings import SchoolSettings
from .admin_user import AdminUser

__all__ = [
    "Course",
    "Student",
    "Theme",
    "SchoolSettings",
    "AdminUser",
]

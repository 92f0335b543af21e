# =============================================
# certifica/database/models/school_settings.py
# =============================================
from sqlalchemy import Column, String, Boolean, Text, DateTime, Uuid
from sqlalchemy.sql import func
from certifica.config.database import Base
from certifica.database.models._timestamps import utcnow
import uuid

class SchoolSettings(Base):
    """Singleton row; themes live in their own table"""
    __tablename__ = "school_settings"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # School
    school_name = Column(String(255), nullable=False)
    cnpj = Column(String(18), nullable=False, default="")
    show_cnpj = Column(Boolean, nullable=False, default=True)

    # Instructor
    instructor_name = Column(String(255), nullable=False)
    instructor_cpf = Column(String(14), nullable=False, default="")
    show_instructor_cpf = Column(Boolean, nullable=False, default=False)
    instructor_title = Column(String(255), nullable=False, default="")
    signature_image = Column(Text, nullable=True)

    # Audit Fields
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow, nullable=True)

    def __repr__(self):
        return f"<SchoolSettings(id={self.id}, school_name='{self.school_name}')>"

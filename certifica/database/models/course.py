# =============================================
# certifica/database/models/course.py
# =============================================
from sqlalchemy import Column, String, Text, DateTime, JSON, Uuid
from sqlalchemy.sql import func
from certifica.config.database import Base
from certifica.database.models._timestamps import utcnow
import uuid

class Course(Base):
    __tablename__ = "courses"

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Course Info
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    duration = Column(String(500), nullable=False)
    syllabus = Column(JSON, nullable=False, default=list)
    instructor = Column(String(255), nullable=False, default="")

    # Non-owning reference; unknown ids fall back to the default theme when rendering
    theme_id = Column(String(64), nullable=True)

    # Audit Fields
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow, nullable=True)

    def __repr__(self):
        return f"<Course(id={self.id}, name='{self.name}', theme_id='{self.theme_id}')>"

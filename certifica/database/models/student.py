# =============================================
# certifica/database/models/student.py
# =============================================
from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.sql import func
from certifica.config.database import Base
from certifica.database.models._timestamps import utcnow
import uuid

class Student(Base):
    __tablename__ = "students"

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Basic Info
    name = Column(String(255), nullable=False, index=True)
    cpf = Column(String(14), nullable=False, index=True)

    # No FK: course deletion removes students explicitly
    course_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    # Dates (display strings, as printed on the certificate)
    registration_date = Column(String(10), nullable=False)
    completion_date = Column(String(10), nullable=False, default="")

    # Issuance
    status = Column(String(20), nullable=False, default="PENDENTE", index=True)
    issued_at = Column(String(10), nullable=True)
    verification_code = Column(String(8), unique=True, nullable=True, index=True)

    # Audit Fields
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow, nullable=True)

    def __repr__(self):
        return f"<Student(id={self.id}, name='{self.name}', status='{self.status}')>"

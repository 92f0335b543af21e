# =============================================
# certifica/database/models/admin_user.py
# =============================================
from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.sql import func
from certifica.config.database import Base
from certifica.database.models._timestamps import utcnow
import uuid

class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Audit Fields
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow, nullable=True)

    def __repr__(self):
        return f"<AdminUser(id={self.id}, username='{self.username}')>"

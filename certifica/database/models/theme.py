# =============================================
# certifica/database/models/theme.py
# =============================================
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from certifica.config.database import Base
from certifica.database.models._timestamps import utcnow

class Theme(Base):
    __tablename__ = "themes"

    # Primary Key (slug or short random id)
    id = Column(String(64), primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    primary_color = Column(String(7), nullable=False)
    accent_color = Column(String(7), nullable=False)
    ribbon_color = Column(String(7), nullable=False)

    # Audit Fields
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Theme(id='{self.id}', name='{self.name}')>"

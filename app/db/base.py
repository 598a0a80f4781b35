from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.models.shared.enums import Base

class BaseModel(Base):
    """Base model with common fields"""
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

class OwnedMixin:
    """Resources controlled by an owner admin. Null for legacy/unowned rows."""
    owner_admin_id = Column(String(100), nullable=True, index=True)

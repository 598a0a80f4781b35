from sqlalchemy import Column, Integer, String, DateTime, Index, Enum as SQLEnum, text
from app.db.base import BaseModel
from app.models.shared.enums import AccessRequestStatus, ResourceType

class AccessRequest(BaseModel):
    """Time-bounded, owner-approved access from one admin to another admin's resource."""
    __tablename__ = 'access_requests'

    resource_type = Column(SQLEnum(ResourceType, name="resource_type"), nullable=False)
    resource_id = Column(Integer, nullable=False)
    owner_admin_id = Column(String(100), nullable=False, index=True)
    requester_admin_id = Column(String(100), nullable=False, index=True)
    status = Column(SQLEnum(AccessRequestStatus, name="access_request_status"), nullable=False,
                    default=AccessRequestStatus.PENDING)
    requested_at = Column(DateTime(timezone=True), nullable=False)
    decided_at = Column(DateTime(timezone=True))
    allowed_until = Column(DateTime(timezone=True))   # only set when APPROVED
    note = Column(String(500))

    __table_args__ = (
        # one pending request per (requester, resource)
        Index(
            "uq_access_requests_one_pending",
            "requester_admin_id", "resource_type", "resource_id",
            unique=True,
            postgresql_where=text("status = 'PENDING'"),
            sqlite_where=text("status = 'PENDING'"),
        ),
        Index("ix_access_requests_resource", "resource_type", "resource_id"),
    )

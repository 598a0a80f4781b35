from sqlalchemy import Column, String, Date, DateTime, Enum as SQLEnum
from app.db.base import BaseModel
from app.models.shared.enums import DelegationStatus

class AdminDelegation(BaseModel):
    __tablename__ = 'admin_delegations'

    from_admin_id = Column(String(100), nullable=False, index=True)
    to_admin_id = Column(String(100), nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    # Only ACTIVE and REVOKED are stored; EXPIRED is derived from end_date
    status = Column(SQLEnum(DelegationStatus, name="delegation_status"), nullable=False,
                    default=DelegationStatus.ACTIVE)
    reason = Column(String(500))
    revoked_at = Column(DateTime(timezone=True))

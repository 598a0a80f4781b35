from sqlalchemy import Column, Integer, String, Date, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.db.base import BaseModel, OwnedMixin
from app.models.shared.enums import LeaveStatus, LeaveType

class LeaveRequest(OwnedMixin, BaseModel):
    __tablename__ = 'leave_requests'

    employee_id = Column(Integer, ForeignKey('employees.id'), nullable=False, index=True)
    leave_type = Column(SQLEnum(LeaveType, name="leave_type"), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(SQLEnum(LeaveStatus, name="leave_status"), default=LeaveStatus.PENDING, nullable=False)
    reason = Column(String(500))

    # Relationships
    employee = relationship("Employee", back_populates="leave_requests")

from sqlalchemy import Column, Integer, String, Date, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.db.base import BaseModel, OwnedMixin
from app.models.shared.enums import EmploymentStatus

class Employee(OwnedMixin, BaseModel):
    __tablename__ = 'employees'

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    phone = Column(String(20))
    hire_date = Column(Date, nullable=False)
    position = Column(String(100))
    department_id = Column(Integer, ForeignKey('departments.id'))
    employment_status = Column(SQLEnum(EmploymentStatus, name="employment_status"),
                               default=EmploymentStatus.ACTIVE, nullable=False)

    # Relationships
    department = relationship("Department", back_populates="employees")
    leave_requests = relationship("LeaveRequest", back_populates="employee")

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.db.base import BaseModel, OwnedMixin
from app.models.shared.enums import JobApplicationStatus

class JobApplication(OwnedMixin, BaseModel):
    __tablename__ = 'job_applications'

    candidate_id = Column(Integer, ForeignKey('candidates.id'), nullable=False, index=True)
    job_title = Column(String(100), nullable=False)
    status = Column(SQLEnum(JobApplicationStatus, name="job_application_status"),
                    default=JobApplicationStatus.APPLIED, nullable=False)
    cover_letter = Column(String(500))
    expected_salary = Column(Numeric(18, 2))

    # Relationships
    candidate = relationship("Candidate", back_populates="job_applications")

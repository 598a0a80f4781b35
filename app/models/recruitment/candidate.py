from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.db.base import BaseModel, OwnedMixin

class Candidate(OwnedMixin, BaseModel):
    __tablename__ = 'candidates'

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    phone = Column(String(20))
    linkedin_profile = Column(String(200))
    years_of_experience = Column(Integer)
    skills = Column(String(1000))

    # Relationships
    job_applications = relationship("JobApplication", back_populates="candidate")

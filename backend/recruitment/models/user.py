from sqlalchemy import Column, Date, Integer, String
from sqlalchemy.orm import relationship

from recruitment.db.base import Base


class User(Base):
    """Candidate or recruiter account."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    surname = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    birth_date = Column(Date, nullable=False)
    phone = Column(String(30), nullable=False)
    address = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False)  # 'Candidato' | 'Reclutador'

    # Relationships
    job_offers = relationship("JobOffer", back_populates="recruiter", passive_deletes=True)
    applications = relationship("Application", back_populates="candidate", passive_deletes=True)
    academic_backgrounds = relationship(
        "AcademicBackground", back_populates="candidate", passive_deletes=True
    )
    employment_backgrounds = relationship(
        "EmploymentBackground", back_populates="candidate", passive_deletes=True
    )

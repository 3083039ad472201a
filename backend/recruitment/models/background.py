from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from recruitment.db.base import Base


class AcademicBackground(Base):
    """Degree or course a candidate completed."""

    __tablename__ = "academic_backgrounds"

    id = Column(Integer, primary_key=True, index=True)
    candidate_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    institution = Column(String(200), nullable=False)
    degree = Column(String(200), nullable=False)
    start_year = Column(Integer, nullable=False)
    end_year = Column(Integer, nullable=False)

    candidate = relationship("User", back_populates="academic_backgrounds")


class EmploymentBackground(Base):
    """Previous job held by a candidate."""

    __tablename__ = "employment_backgrounds"

    id = Column(Integer, primary_key=True, index=True)
    candidate_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    company = Column(String(200), nullable=False)
    title = Column(String(200), nullable=False)
    duties = Column(Text, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    candidate = relationship("User", back_populates="employment_backgrounds")

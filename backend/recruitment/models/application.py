from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from recruitment.db.base import Base
from recruitment.models.enums import ApplicationStatus


class Application(Base):
    """A candidate's application to a job offer."""

    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, index=True)
    candidate_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    job_offer_id = Column(Integer, ForeignKey("job_offers.id"), nullable=False, index=True)
    status = Column(String(40), nullable=False, default=ApplicationStatus.APPLYING.value)
    comment = Column(Text, nullable=True)  # Required whenever status changes
    application_date = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    candidate = relationship("User", back_populates="applications")
    job_offer = relationship("JobOffer", back_populates="applications")

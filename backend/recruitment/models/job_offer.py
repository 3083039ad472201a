from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from recruitment.db.base import Base
from recruitment.models.enums import ContractType, OfferStatus


class JobOffer(Base):
    """
    Job offer published by a recruiter.

    ``status`` doubles as the logical deactivation flag: withdrawn offers
    stay in the table with status 'Baja'.
    """

    __tablename__ = "job_offers"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String(200), nullable=False)
    salary = Column(Float, nullable=False)
    contract_type = Column(String(20), nullable=False, default=ContractType.INDEFINITE.value)
    close_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default=OfferStatus.OPEN.value, index=True)
    recruiter_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    recruiter = relationship("User", back_populates="job_offers")
    applications = relationship("Application", back_populates="job_offer", passive_deletes=True)

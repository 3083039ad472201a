from recruitment.models.user import User
from recruitment.models.job_offer import JobOffer
from recruitment.models.application import Application
from recruitment.models.background import AcademicBackground, EmploymentBackground
from recruitment.models.enums import ApplicationStatus, ContractType, OfferStatus, Role

__all__ = [
    "User",
    "JobOffer",
    "Application",
    "AcademicBackground",
    "EmploymentBackground",
    "ApplicationStatus",
    "ContractType",
    "OfferStatus",
    "Role",
]

"""
Recruitment Database Seeder

Creates demo users and records:
- A recruiter (Sarah Chen) with one open and one closed job offer
- A candidate (John Doe) with an application, an academic and an
  employment background
"""

import sys
from datetime import date

sys.path.insert(0, ".")

from recruitment.core.security import get_password_hash
from recruitment.db.base import Base
from recruitment.db.session import SessionLocal, engine
from recruitment.models import (
    AcademicBackground,
    Application,
    ApplicationStatus,
    ContractType,
    EmploymentBackground,
    JobOffer,
    OfferStatus,
    Role,
    User,
)


def seed_database():
    """Seed the database with demo data."""

    # Create all tables
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()

    try:
        # Check if already seeded
        existing_recruiter = db.query(User).filter(User.email == "recruiter@example.com").first()
        if existing_recruiter:
            print("Database already seeded. Skipping...")
            return

        print("Seeding database...")

        # 1. Recruiter
        recruiter = User(
            name="Sarah",
            surname="Chen",
            email="recruiter@example.com",
            password_hash=get_password_hash("recruiter123"),
            birth_date=date(1988, 4, 12),
            phone="+56 9 1234 5678",
            address="Av. Providencia 1234, Santiago",
            role=Role.RECRUITER.value,
        )

        # 2. Candidate
        candidate = User(
            name="John",
            surname="Doe",
            email="john.doe@example.com",
            password_hash=get_password_hash("candidate123"),
            birth_date=date(1995, 9, 3),
            phone="+56 9 8765 4321",
            address="Calle Larga 55, Valparaíso",
            role=Role.CANDIDATE.value,
        )
        db.add_all([recruiter, candidate])
        db.flush()  # Get IDs

        # 3. Job offers
        open_offer = JobOffer(
            title="Backend Developer",
            description="Build and maintain the recruitment platform API.",
            location="Santiago",
            salary=1800000,
            contract_type=ContractType.INDEFINITE.value,
            close_date=date(2026, 12, 31),
            status=OfferStatus.OPEN.value,
            recruiter_id=recruiter.id,
        )
        closed_offer = JobOffer(
            title="Data Analyst Intern",
            description="Support the analytics team with weekly reports.",
            location="Remote",
            salary=450000,
            contract_type=ContractType.INTERNSHIP.value,
            close_date=date(2025, 3, 1),
            status=OfferStatus.CLOSED.value,
            recruiter_id=recruiter.id,
        )
        db.add_all([open_offer, closed_offer])
        db.flush()

        # 4. Candidate records
        db.add_all(
            [
                Application(
                    candidate_id=candidate.id,
                    job_offer_id=open_offer.id,
                    status=ApplicationStatus.REVIEWING.value,
                    comment="CV shortlisted for technical review",
                ),
                AcademicBackground(
                    candidate_id=candidate.id,
                    institution="Universidad de Chile",
                    degree="Ingeniería Civil en Computación",
                    start_year=2013,
                    end_year=2019,
                ),
                EmploymentBackground(
                    candidate_id=candidate.id,
                    company="Acme Software",
                    title="Junior Developer",
                    duties="Maintained internal REST services.",
                    start_date=date(2019, 3, 1),
                    end_date=date(2022, 8, 31),
                ),
            ]
        )

        # Commit all changes
        db.commit()

        print("Database seeded successfully!")
        print("\nCreated Users:")
        print("   - recruiter@example.com (password: recruiter123) [Reclutador]")
        print("   - john.doe@example.com (password: candidate123) [Candidato]")
        print("\nCreated Job Offers:")
        print(f"   - #{open_offer.id} {open_offer.title} [Vigente]")
        print(f"   - #{closed_offer.id} {closed_offer.title} [Cerrada]")

    except Exception as e:
        db.rollback()
        print(f"Error seeding database: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()

"""
Application API controller (path ``postulacion``).

Candidates apply to job offers; recruiters move applications through the
selection stages. Every status change must carry a comment.

GET variants:
- ``?oferta_id=N``: applicants of one offer, joined with their user data
- ``todas_las_ofertas`` (body or query): every offer with its applicants
- ``?candidato_id=N``: one candidate's applications, joined with the offer
- ``?id=N`` / no filter: one application / all applications
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field, model_validator
from sqlalchemy import select
from sqlalchemy.orm import Session

from recruitment.api.controller import PatchModel, ResourceController, WireModel
from recruitment.core.errors import InvalidRequestError
from recruitment.models import Application, ApplicationStatus, JobOffer, Role, User
from recruitment.services import ensure_role, records


# ============== Pydantic Schemas ==============


class ApplicationCreate(WireModel):
    candidate_id: int = Field(alias="candidato_id", gt=0)
    job_offer_id: int = Field(alias="oferta_laboral_id", gt=0)
    comment: Optional[str] = Field(None, alias="comentario")


class ApplicationReplace(WireModel):
    """Status change performed by a recruiter (PUT)."""

    status: ApplicationStatus = Field(alias="estado_postulacion")
    comment: str = Field(alias="comentario", min_length=1)
    recruiter_id: int = Field(alias="reclutador_id", gt=0)


class ApplicationPatch(PatchModel):
    status: Optional[ApplicationStatus] = Field(None, alias="estado_postulacion")
    comment: Optional[str] = Field(None, alias="comentario")

    nullable_fields: ClassVar[frozenset[str]] = frozenset({"comment"})

    @model_validator(mode="after")
    def status_change_needs_comment(self):
        if "status" in self.model_fields_set and not self.comment:
            raise ValueError("'comentario' is required when updating 'estado_postulacion'")
        return self


class ApplicationOut(WireModel):
    id: int
    candidate_id: int = Field(alias="candidato_id")
    job_offer_id: int = Field(alias="oferta_laboral_id")
    status: str = Field(alias="estado_postulacion")
    comment: Optional[str] = Field(None, alias="comentario")
    application_date: Optional[datetime] = Field(None, alias="fecha_postulacion")


class ApplicantOut(WireModel):
    """One applicant of an offer."""

    application_id: int = Field(alias="postulacion_id")
    candidate_id: int = Field(alias="candidato_id")
    name: str = Field(alias="nombre")
    surname: str = Field(alias="apellido")
    email: str
    status: str = Field(alias="estado_postulacion")
    comment: Optional[str] = Field(None, alias="comentario")
    application_date: Optional[datetime] = Field(None, alias="fecha_postulacion")


class CandidateApplicationOut(WireModel):
    """One application of a candidate, with the offer it targets."""

    application_id: int = Field(alias="postulacion_id")
    status: str = Field(alias="estado_postulacion")
    comment: Optional[str] = Field(None, alias="comentario")
    offer_title: str = Field(alias="oferta_titulo")
    offer_description: str = Field(alias="oferta_descripcion")


# ============== Helper Functions ==============


def list_applicants(db: Session, job_offer_id: int) -> list[dict]:
    """Applicants of one offer joined with their user record."""
    rows = db.execute(
        select(
            Application.id.label("application_id"),
            User.id.label("candidate_id"),
            User.name,
            User.surname,
            User.email,
            Application.status,
            Application.comment,
            Application.application_date,
        )
        .join(User, Application.candidate_id == User.id)
        .where(Application.job_offer_id == job_offer_id)
        .order_by(Application.id)
    ).mappings()
    return [
        ApplicantOut.model_validate(dict(row)).model_dump(mode="json", by_alias=True)
        for row in rows
    ]


def list_applicants_by_offer(db: Session) -> list[dict]:
    """Every offer with the list of its applicants."""
    offers = db.execute(select(JobOffer.id, JobOffer.title).order_by(JobOffer.id)).all()
    return [
        {
            "oferta_id": offer.id,
            "titulo": offer.title,
            "postulantes": list_applicants(db, offer.id),
        }
        for offer in offers
    ]


def list_candidate_applications(db: Session, candidate_id: int) -> list[dict]:
    """A candidate's applications with the title and description of each offer."""
    rows = db.execute(
        select(
            Application.id.label("application_id"),
            Application.status,
            Application.comment,
            JobOffer.title.label("offer_title"),
            JobOffer.description.label("offer_description"),
        )
        .join(JobOffer, Application.job_offer_id == JobOffer.id)
        .where(Application.candidate_id == candidate_id)
        .order_by(Application.id)
    ).mappings()
    return [
        CandidateApplicationOut.model_validate(dict(row)).model_dump(mode="json", by_alias=True)
        for row in rows
    ]


def _query_id(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise InvalidRequestError(f"'{name}' must be an integer") from e


# ============== Controller ==============


class ApplicationController(ResourceController):
    label = "Application"

    def get(self, payload, row_id):
        if "oferta_id" in self.query:
            job_offer_id = _query_id(self.query["oferta_id"], "oferta_id")
            records.get_or_404(self.db, JobOffer, job_offer_id, "Job offer")
            return self.respond(list_applicants(self.db, job_offer_id))

        if "todas_las_ofertas" in self.query or (payload and "todas_las_ofertas" in payload):
            return self.respond(list_applicants_by_offer(self.db))

        if "candidato_id" in self.query:
            candidate_id = _query_id(self.query["candidato_id"], "candidato_id")
            ensure_role(
                self.db,
                candidate_id,
                Role.CANDIDATE,
                "Only users with the Candidate role have applications",
            )
            return self.respond(list_candidate_applications(self.db, candidate_id))

        if row_id:
            application = records.get_or_404(self.db, Application, row_id, self.label)
            return self.respond(self.serialize(ApplicationOut, application))

        applications = records.get_all(self.db, Application)
        return self.respond([self.serialize(ApplicationOut, a) for a in applications])

    def post(self, payload, row_id):
        data = self.parse(ApplicationCreate, payload)
        ensure_role(
            self.db,
            data.candidate_id,
            Role.CANDIDATE,
            "Only users with the Candidate role can apply",
        )
        records.get_or_404(self.db, JobOffer, data.job_offer_id, "Job offer")

        application = Application(
            candidate_id=data.candidate_id,
            job_offer_id=data.job_offer_id,
            comment=data.comment,
            status=ApplicationStatus.APPLYING.value,
        )
        records.insert(self.db, application)
        return self.created(application)

    def put(self, payload, row_id):
        row_id = self.require_id(row_id)
        application = records.get_or_404(self.db, Application, row_id, self.label)
        data = self.parse(ApplicationReplace, payload)
        ensure_role(
            self.db,
            data.recruiter_id,
            Role.RECRUITER,
            "Only users with the Recruiter role can update the application status",
        )

        records.replace(self.db, application, {"status": data.status, "comment": data.comment})
        return self.respond({"message": "Application status updated"})

    def patch(self, payload, row_id):
        row_id = self.require_id(row_id)
        records.get_or_404(self.db, Application, row_id, self.label)
        data = self.parse(ApplicationPatch, payload or {})

        records.partial_update(
            self.db, Application, row_id, data.model_dump(exclude_unset=True)
        )
        return self.respond({"message": "Application partially updated"})

    def delete(self, payload, row_id):
        row_id = self.require_id(row_id)
        application = records.get_or_404(self.db, Application, row_id, self.label)
        records.delete(self.db, application)
        return self.respond({"message": "Application deleted"})

"""
Job offer API controller (path ``oferta_laboral``).

Only recruiters may publish offers. Offers are never soft-deleted; the
``estado`` field doubles as the deactivation flag ('Baja').
"""

from datetime import date
from typing import Optional

from pydantic import Field

from recruitment.api.controller import PatchModel, ResourceController, WireModel
from recruitment.models import ContractType, JobOffer, OfferStatus, Role
from recruitment.services import ensure_role, records

OPEN_FILTER = "vigentes"
DEACTIVATE_ACTION = "desactivar"


# ============== Pydantic Schemas ==============


class JobOfferFields(WireModel):
    """Editable fields of an offer, as sent on POST and PUT."""

    title: str = Field(alias="titulo", min_length=1, max_length=200)
    description: str = Field(alias="descripcion", min_length=1)
    location: str = Field(alias="ubicacion", min_length=1, max_length=200)
    salary: float = Field(alias="salario", ge=0)
    contract_type: ContractType = Field(ContractType.INDEFINITE.value, alias="tipo_contrato")
    close_date: date = Field(alias="fecha_cierre")
    status: OfferStatus = Field(OfferStatus.OPEN.value, alias="estado")


class JobOfferCreate(JobOfferFields):
    recruiter_id: int = Field(alias="reclutador_id", gt=0)


class JobOfferReplace(JobOfferFields):
    # PUT replaces every editable field, so nothing falls back to a default
    contract_type: ContractType = Field(alias="tipo_contrato")
    status: OfferStatus = Field(alias="estado")


class JobOfferPatch(PatchModel):
    title: Optional[str] = Field(None, alias="titulo", min_length=1, max_length=200)
    description: Optional[str] = Field(None, alias="descripcion", min_length=1)
    location: Optional[str] = Field(None, alias="ubicacion", min_length=1, max_length=200)
    salary: Optional[float] = Field(None, alias="salario", ge=0)
    contract_type: Optional[ContractType] = Field(None, alias="tipo_contrato")
    close_date: Optional[date] = Field(None, alias="fecha_cierre")
    status: Optional[OfferStatus] = Field(None, alias="estado")


class JobOfferOut(WireModel):
    id: int
    title: str = Field(alias="titulo")
    description: str = Field(alias="descripcion")
    location: str = Field(alias="ubicacion")
    salary: float = Field(alias="salario")
    contract_type: str = Field(alias="tipo_contrato")
    close_date: date = Field(alias="fecha_cierre")
    status: str = Field(alias="estado")
    recruiter_id: int = Field(alias="reclutador_id")


# ============== Controller ==============


class JobOfferController(ResourceController):
    label = "Job offer"

    def get(self, payload, row_id):
        if row_id:
            offer = records.get_or_404(self.db, JobOffer, row_id, self.label)
            return self.respond(self.serialize(JobOfferOut, offer))

        criteria = []
        if self.query.get("estado") == OPEN_FILTER:
            criteria.append(JobOffer.status == OfferStatus.OPEN.value)

        offers = records.get_all(self.db, JobOffer, *criteria)
        return self.respond([self.serialize(JobOfferOut, offer) for offer in offers])

    def post(self, payload, row_id):
        data = self.parse(JobOfferCreate, payload)
        ensure_role(
            self.db,
            data.recruiter_id,
            Role.RECRUITER,
            "Only users with the Recruiter role can create job offers",
        )

        offer = JobOffer(**data.model_dump())
        records.insert(self.db, offer)
        return self.created(offer)

    def put(self, payload, row_id):
        row_id = self.require_id(row_id)
        offer = records.get_or_404(self.db, JobOffer, row_id, self.label)

        if payload and payload.get("accion") == DEACTIVATE_ACTION:
            records.replace(self.db, offer, {"status": OfferStatus.WITHDRAWN.value})
            return self.respond({"message": "Job offer deactivated"})

        data = self.parse(JobOfferReplace, payload)
        records.replace(self.db, offer, data.model_dump())
        return self.respond({"message": "Job offer updated"})

    def patch(self, payload, row_id):
        row_id = self.require_id(row_id)
        records.get_or_404(self.db, JobOffer, row_id, self.label)
        data = self.parse(JobOfferPatch, payload or {})

        records.partial_update(self.db, JobOffer, row_id, data.model_dump(exclude_unset=True))
        return self.respond({"message": "Job offer partially updated"})

    def delete(self, payload, row_id):
        row_id = self.require_id(row_id)
        offer = records.get_or_404(self.db, JobOffer, row_id, self.label)
        records.delete(self.db, offer)
        return self.respond({"message": "Job offer deleted"})

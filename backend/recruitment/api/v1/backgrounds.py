"""
Candidate background API controllers.

- ``antecedente_academico``: degrees and courses (AcademicBackground)
- ``antecedente_laboral``: previous jobs (EmploymentBackground)

Both records belong to a user with the Candidate role and share the same
request handling; only the schemas and the model differ.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from recruitment.api.controller import PatchModel, ResourceController, WireModel
from recruitment.models import AcademicBackground, EmploymentBackground, Role
from recruitment.services import ensure_role, records


# ============== Pydantic Schemas ==============


class AcademicFields(WireModel):
    institution: str = Field(alias="institucion", min_length=1, max_length=200)
    degree: str = Field(alias="titulo_obtenido", min_length=1, max_length=200)
    start_year: int = Field(alias="anio_ingreso", ge=1900, le=2100)
    end_year: int = Field(alias="anio_egreso", ge=1900, le=2100)


class AcademicCreate(AcademicFields):
    candidate_id: int = Field(alias="candidato_id", gt=0)


class AcademicPatch(PatchModel):
    institution: Optional[str] = Field(None, alias="institucion", min_length=1, max_length=200)
    degree: Optional[str] = Field(None, alias="titulo_obtenido", min_length=1, max_length=200)
    start_year: Optional[int] = Field(None, alias="anio_ingreso", ge=1900, le=2100)
    end_year: Optional[int] = Field(None, alias="anio_egreso", ge=1900, le=2100)


class AcademicOut(AcademicCreate):
    id: int


class EmploymentFields(WireModel):
    company: str = Field(alias="empresa", min_length=1, max_length=200)
    title: str = Field(alias="cargo", min_length=1, max_length=200)
    duties: str = Field(alias="funciones", min_length=1)
    start_date: date = Field(alias="fecha_inicio")
    end_date: date = Field(alias="fecha_termino")


class EmploymentCreate(EmploymentFields):
    candidate_id: int = Field(alias="candidato_id", gt=0)


class EmploymentPatch(PatchModel):
    company: Optional[str] = Field(None, alias="empresa", min_length=1, max_length=200)
    title: Optional[str] = Field(None, alias="cargo", min_length=1, max_length=200)
    duties: Optional[str] = Field(None, alias="funciones", min_length=1)
    start_date: Optional[date] = Field(None, alias="fecha_inicio")
    end_date: Optional[date] = Field(None, alias="fecha_termino")


class EmploymentOut(EmploymentCreate):
    id: int


# ============== Controllers ==============


class CandidateRecordController(ResourceController):
    """CRUD over a record owned by a candidate."""

    model = None
    create_schema: type[BaseModel]
    replace_schema: type[BaseModel]
    patch_schema: type[PatchModel]
    out_schema: type[BaseModel]

    def get(self, payload, row_id):
        if row_id:
            record = records.get_or_404(self.db, self.model, row_id, self.label)
            return self.respond(self.serialize(self.out_schema, record))

        rows = records.get_all(self.db, self.model)
        return self.respond([self.serialize(self.out_schema, row) for row in rows])

    def post(self, payload, row_id):
        data = self.parse(self.create_schema, payload)
        ensure_role(
            self.db,
            data.candidate_id,
            Role.CANDIDATE,
            f"Only users with the Candidate role can register {self.label.lower()}s",
        )

        record = self.model(**data.model_dump())
        records.insert(self.db, record)
        return self.created(record)

    def put(self, payload, row_id):
        row_id = self.require_id(row_id)
        record = records.get_or_404(self.db, self.model, row_id, self.label)
        data = self.parse(self.replace_schema, payload)

        records.replace(self.db, record, data.model_dump())
        return self.respond({"message": f"{self.label} updated"})

    def patch(self, payload, row_id):
        row_id = self.require_id(row_id)
        records.get_or_404(self.db, self.model, row_id, self.label)
        data = self.parse(self.patch_schema, payload or {})

        records.partial_update(self.db, self.model, row_id, data.model_dump(exclude_unset=True))
        return self.respond({"message": f"{self.label} partially updated"})

    def delete(self, payload, row_id):
        row_id = self.require_id(row_id)
        record = records.get_or_404(self.db, self.model, row_id, self.label)
        records.delete(self.db, record)
        return self.respond({"message": f"{self.label} deleted"})


class AcademicBackgroundController(CandidateRecordController):
    label = "Academic background"
    model = AcademicBackground
    create_schema = AcademicCreate
    replace_schema = AcademicFields
    patch_schema = AcademicPatch
    out_schema = AcademicOut


class EmploymentBackgroundController(CandidateRecordController):
    label = "Employment background"
    model = EmploymentBackground
    create_schema = EmploymentCreate
    replace_schema = EmploymentFields
    patch_schema = EmploymentPatch
    out_schema = EmploymentOut

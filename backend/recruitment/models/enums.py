"""Closed enumerations stored as plain strings."""

from enum import Enum


class Role(str, Enum):
    CANDIDATE = "Candidato"
    RECRUITER = "Reclutador"


class ContractType(str, Enum):
    INDEFINITE = "Indefinido"
    TEMPORARY = "Temporal"
    FEE_BASED = "Honorarios"
    INTERNSHIP = "Práctica"


class OfferStatus(str, Enum):
    OPEN = "Vigente"
    CLOSED = "Cerrada"
    WITHDRAWN = "Baja"


class ApplicationStatus(str, Enum):
    APPLYING = "Postulando"
    REVIEWING = "Revisando"
    PSYCH_INTERVIEW = "Entrevista Psicológica"
    PERSONAL_INTERVIEW = "Entrevista Personal"
    SELECTED = "Seleccionado"
    REJECTED = "Descartado"

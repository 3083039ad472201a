"""
User API controller (path ``usuario``).

Handles candidate and recruiter accounts. Passwords are hashed on every
write and never stored in plaintext.
"""

import re
from datetime import date
from typing import Any, Optional

from pydantic import Field, field_validator
from sqlalchemy import select
from sqlalchemy.orm import Session

from recruitment.api.controller import PatchModel, ResourceController, WireModel
from recruitment.core.errors import InvalidRequestError, NotFoundError
from recruitment.core.security import get_password_hash, verify_password
from recruitment.models import Role, User
from recruitment.services import records

EMAIL_PATTERN = r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$"


def _validate_email(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    if not re.match(EMAIL_PATTERN, value):
        raise ValueError("Invalid email format")
    return value.lower()


# ============== Pydantic Schemas ==============


class UserCreate(WireModel):
    """Full user payload, used by POST and PUT."""

    name: str = Field(alias="nombre", min_length=1, max_length=100)
    surname: str = Field(alias="apellido", min_length=1, max_length=100)
    email: str = Field(alias="email", min_length=1, max_length=255)
    password: str = Field(alias="contraseña", min_length=1)
    birth_date: date = Field(alias="fecha_nacimiento")
    phone: str = Field(alias="telefono", min_length=1, max_length=30)
    address: str = Field(alias="direccion", min_length=1, max_length=255)
    role: Role = Field(alias="rol")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        """Validate email format."""
        return _validate_email(v)


class UserPatch(PatchModel):
    name: Optional[str] = Field(None, alias="nombre", min_length=1, max_length=100)
    surname: Optional[str] = Field(None, alias="apellido", min_length=1, max_length=100)
    email: Optional[str] = Field(None, alias="email", min_length=1, max_length=255)
    password: Optional[str] = Field(None, alias="contraseña", min_length=1)
    birth_date: Optional[date] = Field(None, alias="fecha_nacimiento")
    phone: Optional[str] = Field(None, alias="telefono", min_length=1, max_length=30)
    address: Optional[str] = Field(None, alias="direccion", min_length=1, max_length=255)
    role: Optional[Role] = Field(None, alias="rol")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        """Validate email format."""
        return _validate_email(v)


class UserOut(WireModel):
    id: int
    name: str = Field(alias="nombre")
    surname: str = Field(alias="apellido")
    email: str
    password_hash: str = Field(alias="contraseña")
    birth_date: date = Field(alias="fecha_nacimiento")
    phone: str = Field(alias="telefono")
    address: str = Field(alias="direccion")
    role: str = Field(alias="rol")


# ============== Helper Functions ==============


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get a user by email address."""
    return db.scalars(select(User).where(User.email == email)).first()


def changed_fields(user: User, fields: dict[str, Any]) -> dict[str, Any]:
    """
    Drop the fields whose value equals what is already stored.

    A password counts as unchanged when it verifies against the stored hash;
    a changed password is returned hashed, under ``password_hash``.
    """
    changes: dict[str, Any] = {}
    for field, value in fields.items():
        if field == "password":
            if not verify_password(value, user.password_hash):
                changes["password_hash"] = get_password_hash(value)
            continue
        if getattr(user, field) != value:
            changes[field] = value
    return changes


# ============== Controller ==============


class UserController(ResourceController):
    label = "User"

    def get(self, payload, row_id):
        if row_id:
            user = records.get_or_404(self.db, User, row_id, self.label)
            return self.respond(self.serialize(UserOut, user))

        users = records.get_all(self.db, User)
        return self.respond([self.serialize(UserOut, user) for user in users])

    def post(self, payload, row_id):
        data = self.parse(UserCreate, payload)

        if get_user_by_email(self.db, data.email):
            raise InvalidRequestError("Email already registered")

        user = User(
            name=data.name,
            surname=data.surname,
            email=data.email,
            password_hash=get_password_hash(data.password),
            birth_date=data.birth_date,
            phone=data.phone,
            address=data.address,
            role=data.role,
        )
        records.insert(self.db, user)
        return self.created(user)

    def put(self, payload, row_id):
        row_id = self.require_id(row_id)
        user = records.get_or_404(self.db, User, row_id, self.label)
        data = self.parse(UserCreate, payload)

        self._apply_changes(user, data.model_dump())
        return self.respond({"message": "User updated"})

    def patch(self, payload, row_id):
        row_id = self.require_id(row_id)
        user = records.get_or_404(self.db, User, row_id, self.label)
        data = self.parse(UserPatch, payload or {})

        fields = data.model_dump(exclude_unset=True)
        if not fields:
            raise InvalidRequestError("No data provided to update")

        self._apply_changes(user, fields)
        return self.respond({"message": "User partially updated"})

    def delete(self, payload, row_id):
        row_id = self.require_id(row_id)
        user = records.get_or_404(self.db, User, row_id, self.label)
        records.delete(self.db, user)
        return self.respond({"message": "User deleted"})

    def _apply_changes(self, user: User, fields: dict[str, Any]) -> None:
        changes = changed_fields(user, fields)
        if not changes:
            raise InvalidRequestError("No changes were made to the user")

        if "email" in changes:
            owner = get_user_by_email(self.db, changes["email"])
            if owner is not None and owner.id != user.id:
                raise InvalidRequestError("Email already registered")

        if records.partial_update(self.db, User, user.id, changes) == 0:
            raise NotFoundError(f"{self.label} {user.id} does not exist")

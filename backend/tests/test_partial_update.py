from datetime import date

import pytest

from recruitment.core.errors import InvalidRequestError, StoreError
from recruitment.db.partial_update import (
    apply_partial_update,
    build_partial_update,
    updatable_columns,
)
from recruitment.models import Application, JobOffer, User


def make_user(db, email="builder@example.com", role="Reclutador"):
    user = User(
        name="Builder",
        surname="Test",
        email=email,
        password_hash="not-a-real-hash",
        birth_date=date(1985, 1, 1),
        phone="123",
        address="Somewhere 1",
        role=role,
    )
    db.add(user)
    db.commit()
    return user


def make_offer(db, recruiter_id):
    offer = JobOffer(
        title="QA Engineer",
        description="Test all the things",
        location="Remote",
        salary=1000,
        close_date=date(2030, 6, 30),
        recruiter_id=recruiter_id,
    )
    db.add(offer)
    db.commit()
    return offer


def test_updatable_columns_exclude_primary_key():
    columns = updatable_columns(JobOffer)
    assert "id" not in columns
    assert columns[0] == "title"
    assert "recruiter_id" in columns


def test_empty_fields_rejected():
    with pytest.raises(InvalidRequestError, match="No data provided to update"):
        build_partial_update(JobOffer, 1, {})


@pytest.mark.parametrize("field", ["id", "nonexistent", "reclutador_id"])
def test_unknown_or_primary_key_field_rejected(field):
    with pytest.raises(InvalidRequestError, match="Fields cannot be updated"):
        build_partial_update(JobOffer, 1, {field: 1})


def test_null_for_required_column_rejected():
    with pytest.raises(InvalidRequestError, match="'title' cannot be null"):
        build_partial_update(JobOffer, 1, {"title": None})


def test_null_for_nullable_column_accepted():
    statement = build_partial_update(Application, 1, {"comment": None})
    assert statement.compile().params["comment"] is None


def test_set_clause_follows_table_order():
    first = build_partial_update(JobOffer, 7, {"salary": 10, "title": "A"})
    second = build_partial_update(JobOffer, 7, {"title": "A", "salary": 10})

    sql = str(first)
    assert sql == str(second)
    assert sql.index("title") < sql.index("salary")
    assert "location" not in sql


def test_statement_binds_values_and_id():
    statement = build_partial_update(JobOffer, 7, {"title": "Lead", "salary": 99.5})
    params = statement.compile().params
    assert params["title"] == "Lead"
    assert params["salary"] == 99.5
    assert 7 in params.values()


def test_apply_touches_only_supplied_columns(db):
    recruiter = make_user(db)
    offer = make_offer(db, recruiter.id)

    rows = apply_partial_update(db, JobOffer, offer.id, {"salary": 2500})

    assert rows == 1
    db.refresh(offer)
    assert offer.salary == 2500
    assert offer.title == "QA Engineer"
    assert offer.location == "Remote"


def test_apply_missing_row_returns_zero(db):
    assert apply_partial_update(db, JobOffer, 404, {"salary": 1}) == 0


def test_apply_constraint_violation_raises_store_error(db):
    make_user(db, email="taken@example.com")
    other = make_user(db, email="free@example.com")

    with pytest.raises(StoreError):
        apply_partial_update(db, User, other.id, {"email": "taken@example.com"})

    # Session is usable again after the rollback
    db.refresh(other)
    assert other.email == "free@example.com"


def test_apply_foreign_key_violation_raises_store_error(db):
    recruiter = make_user(db)
    offer = make_offer(db, recruiter.id)

    with pytest.raises(StoreError):
        apply_partial_update(db, JobOffer, offer.id, {"recruiter_id": 9999})

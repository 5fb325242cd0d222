"""
Tests for generate_schedule against the database.
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.exc import SQLAlchemyError

from shared.core.exceptions import InvalidInputError, NotFoundError, StoreFailureError
from rental_service.app.crud.scheduler.schedule_service import generate_schedule
from rental_service.app.models.leasing.landlords import Landlord
from rental_service.app.models.leasing.leases import Lease
from rental_service.app.models.leasing.tenants import Tenant
from rental_service.app.models.ledger.expenses import Expense
from rental_service.app.models.ledger.payments import Payment
from rental_service.app.models.properties.properties import Property

HOLDER = "holder-1"


@pytest.fixture
def prop(db):
    obj = Property(holder_id=HOLDER, code="A-1", name="Via Roma 1", type="APARTMENT",
                   building_id="bld-7")
    db.add(obj)
    db.commit()
    return obj


@pytest.fixture
def tenant(db):
    obj = Tenant(holder_id=HOLDER, first_name="Anna", last_name="Rossi")
    db.add(obj)
    db.commit()
    return obj


@pytest.fixture
def landlord(db):
    obj = Landlord(holder_id=HOLDER, name="Marco Bianchi")
    db.add(obj)
    db.commit()
    return obj


def add_lease(db, **fields):
    lease = Lease(holder_id=HOLDER, **fields)
    db.add(lease)
    db.commit()
    return lease


def count_rows(db, model):
    return db.query(model).count()


class TestTenantSchedule:

    def test_writes_one_payment_per_month(self, db, prop, tenant):
        lease = add_lease(db, type="TENANT", property_id=prop.id, tenant_id=tenant.id,
                          start_date=date(2026, 1, 10),
                          monthly_rent_without_bills=Decimal("800"),
                          monthly_rent_with_bills=Decimal("950"))

        result = generate_schedule(db, HOLDER, lease.id, 12)

        assert result == {"generated": 12}
        payments = db.query(Payment).order_by(Payment.due_date).all()
        assert len(payments) == 12
        assert {p.amount for p in payments} == {Decimal("950.00")}
        assert all(p.kind == "RENT" and p.status == "PLANNED" for p in payments)
        assert all(p.currency == "EUR" for p in payments)
        assert all(p.building_id == "bld-7" for p in payments)
        assert payments[0].notes == "AUTO_SCHEDULE 2026-01"
        assert payments[0].due_date == date(2026, 1, 5)
        assert count_rows(db, Expense) == 0

    def test_same_month_lease_writes_one_record(self, db, prop, tenant):
        lease = add_lease(db, type="TENANT", property_id=prop.id, tenant_id=tenant.id,
                          start_date=date(2026, 3, 1), end_date=date(2026, 3, 31),
                          monthly_rent_without_bills=Decimal("500"))

        assert generate_schedule(db, HOLDER, lease.id) == {"generated": 1}

    def test_cursor_from_next_payment_due(self, db, prop, tenant):
        lease = add_lease(db, type="TENANT", property_id=prop.id, tenant_id=tenant.id,
                          start_date=date(2026, 1, 1), next_payment_due=date(2026, 1, 31),
                          monthly_rent_without_bills=Decimal("500"))

        generate_schedule(db, HOLDER, lease.id, 2)

        due_dates = [p.due_date for p in db.query(Payment).order_by(Payment.due_date)]
        assert due_dates == [date(2026, 1, 28), date(2026, 2, 28)]

    def test_rerun_duplicates_months(self, db, prop, tenant):
        lease = add_lease(db, type="TENANT", property_id=prop.id, tenant_id=tenant.id,
                          start_date=date(2026, 1, 1),
                          monthly_rent_without_bills=Decimal("500"))

        generate_schedule(db, HOLDER, lease.id, 4)
        generate_schedule(db, HOLDER, lease.id, 4)

        assert count_rows(db, Payment) == 8

    def test_missing_tenant_is_invalid_input(self, db, prop):
        lease = add_lease(db, type="TENANT", property_id=prop.id,
                          start_date=date(2026, 1, 1),
                          monthly_rent_without_bills=Decimal("500"))

        with pytest.raises(InvalidInputError, match=f"Missing tenant for lease {lease.id}"):
            generate_schedule(db, HOLDER, lease.id)
        assert count_rows(db, Payment) == 0

    def test_missing_start_date_is_invalid_input(self, db, prop, tenant):
        lease = add_lease(db, type="TENANT", property_id=prop.id, tenant_id=tenant.id,
                          monthly_rent_without_bills=Decimal("500"))

        with pytest.raises(InvalidInputError, match="Invalid start date"):
            generate_schedule(db, HOLDER, lease.id)


class TestLandlordSchedule:

    def test_writes_one_expense_per_month(self, db, prop, landlord):
        lease = add_lease(db, type="LANDLORD", property_id=prop.id, landlord_id=landlord.id,
                          start_date=date(2026, 2, 1), end_date=date(2026, 7, 31),
                          due_day_of_month=30,
                          monthly_rent_without_bills=Decimal("700"))

        result = generate_schedule(db, HOLDER, lease.id)

        assert result == {"generated": 6}
        expenses = db.query(Expense).order_by(Expense.cost_date).all()
        assert {e.amount for e in expenses} == {Decimal("700.00")}
        assert [e.cost_month for e in expenses] == [
            "2026-02", "2026-03", "2026-04", "2026-05", "2026-06", "2026-07"]
        assert all(e.cost_date.day == 28 for e in expenses)
        first = expenses[0]
        assert first.type == "RENT_TO_LANDLORD"
        assert first.frequency == "MONTHLY"
        assert first.scope == "UNIT"
        assert first.allocation_mode == "NONE"
        assert first.status == "PLANNED"
        assert first.landlord_id == landlord.id
        assert count_rows(db, Payment) == 0

    def test_missing_landlord_is_invalid_input(self, db, prop):
        lease = add_lease(db, type="LANDLORD", property_id=prop.id,
                          start_date=date(2026, 1, 1),
                          monthly_rent_without_bills=Decimal("700"))

        with pytest.raises(InvalidInputError, match="Missing landlord"):
            generate_schedule(db, HOLDER, lease.id)


class TestNotFound:

    def test_unknown_lease(self, db):
        with pytest.raises(NotFoundError, match="Lease nope not found"):
            generate_schedule(db, HOLDER, "nope")

    def test_lease_of_another_holder(self, db, prop, tenant):
        lease = add_lease(db, type="TENANT", property_id=prop.id, tenant_id=tenant.id,
                          start_date=date(2026, 1, 1),
                          monthly_rent_without_bills=Decimal("500"))

        with pytest.raises(NotFoundError):
            generate_schedule(db, "holder-2", lease.id)

    def test_missing_property_writes_nothing(self, db, tenant):
        lease = add_lease(db, type="TENANT", property_id="ghost", tenant_id=tenant.id,
                          start_date=date(2026, 1, 1),
                          monthly_rent_without_bills=Decimal("500"))

        with pytest.raises(NotFoundError, match="Property ghost not found"):
            generate_schedule(db, HOLDER, lease.id)
        assert count_rows(db, Payment) == 0


def test_commit_failure_rolls_back(db, prop, tenant, monkeypatch):
    lease = add_lease(db, type="TENANT", property_id=prop.id, tenant_id=tenant.id,
                      start_date=date(2026, 1, 1),
                      monthly_rent_without_bills=Decimal("500"))

    def broken_commit():
        raise SQLAlchemyError("disk full")

    monkeypatch.setattr(db, "commit", broken_commit)

    with pytest.raises(StoreFailureError, match=f"Could not store schedule for lease {lease.id}"):
        generate_schedule(db, HOLDER, lease.id, 3)

    monkeypatch.undo()
    assert count_rows(db, Payment) == 0

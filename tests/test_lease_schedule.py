"""
Tests for the pure schedule planning functions.

No database: leases are plain attribute bags.
"""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from shared.core.exceptions import InvalidInputError
from rental_service.app.crud.scheduler.lease_schedule import (
    add_months,
    advance_cursor,
    clamp_due_day,
    due_date_for_month,
    monthly_amount,
    parse_amount,
    parse_calendar_date,
    plan_schedule,
    schedule_note,
    seed_cursor,
)
from rental_service.app.enum.leasing_enum import LeaseType


def make_lease(**overrides):
    fields = dict(
        id="lease-1",
        type="TENANT",
        tenant_id="tenant-1",
        landlord_id=None,
        start_date=date(2026, 1, 10),
        end_date=None,
        next_payment_due=None,
        due_day_of_month=None,
        monthly_rent_without_bills=Decimal("800"),
        monthly_rent_with_bills=None,
        bills_included_amount=None,
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


# =============================================================================
# Date helpers
# =============================================================================


class TestDateHelpers:

    def test_clamp_due_day_defaults_to_fifth(self):
        assert clamp_due_day(None) == 5

    @pytest.mark.parametrize("day,expected", [(0, 1), (1, 1), (28, 28), (31, 28)])
    def test_clamp_due_day_bounds(self, day, expected):
        assert clamp_due_day(day) == expected

    def test_add_months_is_calendar_based(self):
        assert add_months(date(2026, 1, 28), 1) == date(2026, 2, 28)
        assert add_months(date(2026, 11, 15), 3) == date(2027, 2, 15)

    def test_due_date_for_month_clamps_to_28(self):
        assert due_date_for_month(date(2026, 2, 1), 31) == date(2026, 2, 28)

    def test_parse_calendar_date_accepts_iso_strings(self):
        assert parse_calendar_date("2026-03-04") == date(2026, 3, 4)
        assert parse_calendar_date("2026-03-04T10:00:00Z") == date(2026, 3, 4)

    def test_parse_calendar_date_rejects_garbage(self):
        assert parse_calendar_date("not a date") is None
        assert parse_calendar_date(42) is None


# =============================================================================
# Due-date cursor
# =============================================================================


class TestCursor:

    def test_seed_clamps_day(self):
        assert seed_cursor(date(2026, 1, 31)) == date(2026, 1, 28)

    def test_unset_cursor_uses_due_day(self):
        due, nxt = advance_cursor(None, date(2026, 4, 1), 10)
        assert due == date(2026, 4, 10)
        assert nxt is None

    def test_landing_pushes_cursor_one_month(self):
        due, nxt = advance_cursor(date(2026, 1, 28), date(2026, 1, 1), None)
        assert due == date(2026, 1, 28)
        assert nxt == date(2026, 2, 28)

    def test_cursor_behind_moves_forward_keeping_day(self):
        due, nxt = advance_cursor(date(2025, 10, 12), date(2026, 1, 1), None)
        assert due == date(2026, 1, 12)
        assert nxt == date(2026, 2, 12)

    def test_cursor_ahead_falls_back_and_is_kept(self):
        cursor = date(2026, 6, 20)
        due, nxt = advance_cursor(cursor, date(2026, 3, 1), 7)
        assert due == date(2026, 3, 7)
        assert nxt == cursor


# =============================================================================
# Amounts
# =============================================================================


class TestAmounts:

    def test_parse_amount(self):
        assert parse_amount("12.50") == Decimal("12.50")
        assert parse_amount(7) == Decimal("7")
        assert parse_amount("abc") is None
        assert parse_amount("NaN") is None
        assert parse_amount(True) is None

    def test_tenant_prefers_gross(self):
        assert monthly_amount(LeaseType.TENANT, Decimal("800"), Decimal("950"), Decimal("150")) == Decimal("950")

    def test_tenant_net_plus_bills(self):
        assert monthly_amount(LeaseType.TENANT, Decimal("800"), None, Decimal("120")) == Decimal("920")

    def test_landlord_always_net(self):
        assert monthly_amount(LeaseType.LANDLORD, Decimal("700"), Decimal("900"), Decimal("200")) == Decimal("700")


# =============================================================================
# Planning
# =============================================================================


class TestPlanSchedule:

    def test_same_month_yields_one_entry(self):
        entries = plan_schedule(make_lease(
            start_date=date(2026, 3, 2), end_date=date(2026, 3, 30)))
        assert len(entries) == 1
        assert entries[0].period == "2026-03"

    @pytest.mark.parametrize("months", [1, 6, 12, 25])
    def test_open_ended_lease_spans_n_consecutive_months(self, months):
        entries = plan_schedule(make_lease(), months)
        assert len(entries) == months
        expected = [add_months(date(2026, 1, 1), i) for i in range(months)]
        assert [e.period for e in entries] == [f"{m.year:04d}-{m.month:02d}" for m in expected]

    def test_end_date_is_inclusive(self):
        entries = plan_schedule(make_lease(
            start_date=date(2026, 1, 15), end_date=date(2026, 6, 1)))
        assert [e.period for e in entries][-1] == "2026-06"
        assert len(entries) == 6

    def test_end_before_start_yields_nothing(self):
        entries = plan_schedule(make_lease(
            start_date=date(2026, 5, 1), end_date=date(2026, 2, 1)))
        assert entries == []

    def test_due_days_never_exceed_28(self):
        entries = plan_schedule(make_lease(due_day_of_month=31), 24)
        assert all(e.due_date.day <= 28 for e in entries)

    def test_next_payment_due_seeds_cursor(self):
        entries = plan_schedule(make_lease(
            start_date=date(2026, 1, 1), next_payment_due=date(2026, 1, 31)), 3)
        assert [e.due_date for e in entries] == [
            date(2026, 1, 28), date(2026, 2, 28), date(2026, 3, 28)]

    def test_tenant_gross_amount(self):
        entries = plan_schedule(make_lease(monthly_rent_with_bills=Decimal("950")))
        assert {e.amount for e in entries} == {Decimal("950.00")}

    def test_landlord_net_amount(self):
        entries = plan_schedule(make_lease(
            type="LANDLORD", tenant_id=None, landlord_id="landlord-1",
            monthly_rent_without_bills=Decimal("700")))
        assert {e.amount for e in entries} == {Decimal("700.00")}

    def test_string_fields_are_parsed(self):
        entries = plan_schedule(make_lease(
            start_date="2026-02-10", monthly_rent_without_bills="640.5"), 2)
        assert entries[0].amount == Decimal("640.50")

    def test_unparsable_gross_is_ignored(self):
        entries = plan_schedule(make_lease(monthly_rent_with_bills="n/a"), 1)
        assert entries[0].amount == Decimal("800.00")


class TestPlanScheduleErrors:

    def test_missing_start_date(self):
        with pytest.raises(InvalidInputError, match="Invalid start date for lease lease-1"):
            plan_schedule(make_lease(start_date=None))

    def test_unparsable_start_date(self):
        with pytest.raises(InvalidInputError, match="Invalid start date"):
            plan_schedule(make_lease(start_date="31/31/2026"))

    @pytest.mark.parametrize("net", [None, "abc", "Infinity"])
    def test_invalid_net_amount(self, net):
        with pytest.raises(InvalidInputError, match="Invalid amount for lease lease-1"):
            plan_schedule(make_lease(monthly_rent_without_bills=net))

    def test_negative_amount(self):
        with pytest.raises(InvalidInputError, match="Invalid amount"):
            plan_schedule(make_lease(monthly_rent_without_bills=Decimal("-5")))

    def test_tenant_lease_without_tenant(self):
        with pytest.raises(InvalidInputError, match="Missing tenant for lease lease-1"):
            plan_schedule(make_lease(tenant_id=None))

    def test_landlord_lease_without_landlord(self):
        with pytest.raises(InvalidInputError, match="Missing landlord for lease lease-1"):
            plan_schedule(make_lease(type="LANDLORD", landlord_id=None))

    def test_unknown_lease_type(self):
        with pytest.raises(InvalidInputError, match="Unsupported lease type"):
            plan_schedule(make_lease(type="SUBLET"))

    def test_start_date_is_checked_before_lease_type(self):
        with pytest.raises(InvalidInputError, match="Invalid start date"):
            plan_schedule(make_lease(type="SUBLET", start_date=None))

    def test_amount_is_checked_before_lease_type(self):
        with pytest.raises(InvalidInputError, match="Invalid amount"):
            plan_schedule(make_lease(type="SUBLET", monthly_rent_without_bills="abc"))

    def test_amount_too_large_for_cents(self):
        with pytest.raises(InvalidInputError, match="Invalid amount for lease lease-1"):
            plan_schedule(make_lease(monthly_rent_without_bills=Decimal("1e30")))

    def test_months_if_no_end_must_be_positive(self):
        with pytest.raises(InvalidInputError):
            plan_schedule(make_lease(), 0)


def test_schedule_note_carries_marker_and_period():
    assert schedule_note("2026-04") == "AUTO_SCHEDULE 2026-04"

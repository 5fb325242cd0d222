"""Monthly rent schedule planning for a lease.

Everything here is pure: it reads lease attributes and returns plain values,
leaving persistence to ``schedule_service``. Dates are calendar dates with no
timezone, and every day-of-month that feeds a date is clamped to 1..28 so the
same day exists in every month, February included.
"""
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Iterator, List, Optional, Tuple

from dateutil.relativedelta import relativedelta

from shared.core.exceptions import InvalidInputError
from ...enum.leasing_enum import LeaseType

DEFAULT_DUE_DAY = 5
MAX_DUE_DAY = 28
AUTO_SCHEDULE_MARKER = "AUTO_SCHEDULE"
CENT = Decimal("0.01")


@dataclass(frozen=True)
class ScheduleEntry:
    period: str          # "YYYY-MM"
    due_date: date
    amount: Decimal


# ----------------------------------------------------
# Date helpers
# ----------------------------------------------------
def parse_calendar_date(value: Any) -> Optional[date]:
    """Accept date, datetime or an ISO string; None when it does not parse."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def clamp_due_day(day: Optional[int]) -> int:
    if day is None:
        day = DEFAULT_DUE_DAY
    return min(max(int(day), 1), MAX_DUE_DAY)


def first_of_month(value: date) -> date:
    return value.replace(day=1)


def add_months(value: date, months: int) -> date:
    # calendar months, not 30-day steps
    return value + relativedelta(months=months)


def months_apart(start: date, end: date) -> int:
    return (end.year - start.year) * 12 + (end.month - start.month)


def period_key(month_start: date) -> str:
    return f"{month_start.year:04d}-{month_start.month:02d}"


def iter_months(start_month: date, end_month: date) -> Iterator[date]:
    """First-of-month dates from start_month to end_month, both included."""
    for offset in range(months_apart(start_month, end_month) + 1):
        yield add_months(start_month, offset)


def due_date_for_month(month_start: date, due_day_of_month: Optional[int]) -> date:
    return month_start.replace(day=clamp_due_day(due_day_of_month))


# ----------------------------------------------------
# Due-date cursor
# ----------------------------------------------------
def seed_cursor(next_payment_due: Optional[date]) -> Optional[date]:
    if next_payment_due is None:
        return None
    return next_payment_due.replace(day=clamp_due_day(next_payment_due.day))


def advance_cursor(
    cursor: Optional[date],
    month_start: date,
    due_day_of_month: Optional[int],
) -> Tuple[date, Optional[date]]:
    """One fold step: return ``(due_date, next_cursor)`` for ``month_start``.

    A cursor behind the month is moved forward in whole months, keeping its
    day. Landing on the month makes the cursor the due date and the month
    after it the next cursor. A cursor already past the month is kept as is
    and the month falls back to ``due_day_of_month``.
    """
    if cursor is None:
        return due_date_for_month(month_start, due_day_of_month), None

    gap = months_apart(first_of_month(cursor), month_start)
    if gap < 0:
        return due_date_for_month(month_start, due_day_of_month), cursor

    landed = add_months(cursor, gap)
    return landed, add_months(landed, 1)


# ----------------------------------------------------
# Amounts
# ----------------------------------------------------
def parse_amount(value: Any) -> Optional[Decimal]:
    """Finite Decimal or None. Booleans are not amounts."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return amount if amount.is_finite() else None


def monthly_amount(lease_type: LeaseType, net: Decimal, gross: Optional[Decimal], bills: Optional[Decimal]) -> Decimal:
    # tenants pay the gross rent; landlords are paid the net one
    if lease_type == LeaseType.TENANT:
        if gross is not None:
            return gross
        if bills is not None:
            return net + bills
    return net


# ----------------------------------------------------
# Planning
# ----------------------------------------------------
def plan_schedule(lease, months_if_no_end: int = 12) -> List[ScheduleEntry]:
    """Validate a lease and lay out one entry per calendar month.

    Raises InvalidInputError before anything is planned when the lease can
    not produce a schedule.
    """
    lease_id = getattr(lease, "id", None)

    start_date = parse_calendar_date(lease.start_date)
    if start_date is None:
        raise InvalidInputError(f"Invalid start date for lease {lease_id}")

    net = parse_amount(lease.monthly_rent_without_bills)
    if net is None:
        raise InvalidInputError(f"Invalid amount for lease {lease_id}")

    try:
        lease_type = LeaseType(lease.type)
    except ValueError:
        raise InvalidInputError(
            f"Unsupported lease type {lease.type!r} for lease {lease_id}")

    if lease_type == LeaseType.TENANT and not lease.tenant_id:
        raise InvalidInputError(f"Missing tenant for lease {lease_id}")
    if lease_type == LeaseType.LANDLORD and not lease.landlord_id:
        raise InvalidInputError(f"Missing landlord for lease {lease_id}")

    if months_if_no_end is None or int(months_if_no_end) < 1:
        raise InvalidInputError("monthsIfNoEnd must be at least 1")

    amount = monthly_amount(
        lease_type,
        net,
        parse_amount(lease.monthly_rent_with_bills),
        parse_amount(lease.bills_included_amount),
    )
    if amount < 0:
        raise InvalidInputError(f"Invalid amount for lease {lease_id}")
    try:
        amount = amount.quantize(CENT)
    except InvalidOperation:
        # too many digits to carry cents
        raise InvalidInputError(f"Invalid amount for lease {lease_id}")

    start_month = first_of_month(start_date)
    if lease.end_date is not None:
        end_date = parse_calendar_date(lease.end_date)
        if end_date is None:
            raise InvalidInputError(f"Invalid end date for lease {lease_id}")
        max_end = first_of_month(end_date)
    else:
        max_end = add_months(start_month, int(months_if_no_end) - 1)

    cursor = seed_cursor(parse_calendar_date(lease.next_payment_due))
    due_day = lease.due_day_of_month

    entries = []
    for month_start in iter_months(start_month, max_end):
        due_date, cursor = advance_cursor(cursor, month_start, due_day)
        entries.append(ScheduleEntry(
            period=period_key(month_start),
            due_date=due_date,
            amount=amount,
        ))

    return entries


def schedule_note(period: str) -> str:
    return f"{AUTO_SCHEDULE_MARKER} {period}"

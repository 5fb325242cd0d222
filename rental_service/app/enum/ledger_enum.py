from enum import Enum


class PaymentKind(str, Enum):
    RENT = "RENT"
    BUILDING_FEE = "BUILDING_FEE"
    OTHER = "OTHER"


class PaymentStatus(str, Enum):
    PLANNED = "PLANNED"
    PAID = "PAID"
    OVERDUE = "OVERDUE"


class ExpenseFrequency(str, Enum):
    ONCE = "ONCE"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class ExpenseScope(str, Enum):
    BUILDING = "BUILDING"
    UNIT = "UNIT"


class AllocationMode(str, Enum):
    NONE = "NONE"
    PER_UNIT = "PER_UNIT"
    PER_M2 = "PER_M2"
    PER_PERSON = "PER_PERSON"


# expense type written for landlord payouts by the schedule generator
RENT_TO_LANDLORD = "RENT_TO_LANDLORD"

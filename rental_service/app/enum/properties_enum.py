from enum import Enum


class PropertyType(str, Enum):
    BUILDING = "BUILDING"
    APARTMENT = "APARTMENT"
    ROOM = "ROOM"
    BED = "BED"


class AttachmentModule(str, Enum):
    tenants = "tenants"
    landlords = "landlords"
    leases = "leases"
    payments = "payments"
    expenses = "expenses"

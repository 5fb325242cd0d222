from enum import Enum


class LeaseType(str, Enum):
    TENANT = "TENANT"
    LANDLORD = "LANDLORD"


class LeaseStatus(str, Enum):
    INCOMING = "INCOMING"
    ACTIVE = "ACTIVE"
    ENDED = "ENDED"


class TenantStatus(str, Enum):
    CURRENT = "CURRENT"
    INCOMING = "INCOMING"
    PAST = "PAST"
    PENDING = "PENDING"


class Gender(str, Enum):
    M = "M"
    F = "F"
    OTHER = "OTHER"

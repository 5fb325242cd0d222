from enum import Enum


class UserRole(str, Enum):
    HOLDER = "HOLDER"
    TENANT = "TENANT"

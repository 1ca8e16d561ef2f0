from enum import Enum


class UserRole(str, Enum):
    """User roles (who may reach admin-only routes and who may not)."""

    ADMIN = "admin"
    CUSTOMER = "customer"

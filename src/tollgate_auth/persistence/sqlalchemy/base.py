"""SQLAlchemy declarative base for tollgate_auth models.

This provides a separate Base for auth models so the credential table
stays independent of the application's profile schema. The application
creates both metadata sets at startup.
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for tollgate_auth models."""

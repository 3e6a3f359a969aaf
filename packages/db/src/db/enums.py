# This project was developed with assistance from AI tools.
"""
Domain enums for the loan product catalog.

Shared domain types used by both SQLAlchemy models (db package)
and Pydantic schemas (api package).
"""

import enum


class LoanType(str, enum.Enum):
    PERSONAL = "personal"
    EDUCATION = "education"
    VEHICLE = "vehicle"
    HOME = "home"
    CREDIT_LINE = "credit_line"
    DEBT_CONSOLIDATION = "debt_consolidation"


class DisbursalSpeed(str, enum.Enum):
    FAST = "fast"
    STANDARD = "standard"
    SLOW = "slow"


class DocsLevel(str, enum.Enum):
    MINIMAL = "minimal"
    STANDARD = "standard"
    EXTENSIVE = "extensive"


class ChatRole(str, enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"

"""
Enumerations shared by models and schemas.

Values are the exact strings exposed over the API and stored in the
database.
"""

import enum


class UserRole(str, enum.Enum):
    """User role enumeration."""
    USER = "user"
    ADMIN = "admin"


class ComplaintStatus(str, enum.Enum):
    """Complaint resolution status."""
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"

    @classmethod
    def active(cls) -> tuple:
        """Statuses that still need attention."""
        return (cls.OPEN, cls.IN_PROGRESS)


class ComplaintCategory(str, enum.Enum):
    """Complaint categorization."""
    ELECTRICAL = "Electrical"
    PLUMBING = "Plumbing"
    SECURITY = "Security"
    APPLIANCES = "Appliances"
    HOUSEKEEPING = "Housekeeping"
    MEDICAL = "Medical"
    CARPENTRY = "Carpentry"
    COMMUNITY = "Community"
    LAUNDRY = "Laundry"
    REPAIRS_AND_MAINTENANCE = "Repairs & Maintenance"
    FOOD_AND_BEVERAGE = "Food & Beverage"
    INTERNET_AND_CONNECTION = "Internet & Connection"
    OTHERS = "Others"


class Priority(str, enum.Enum):
    """Complaint priority levels."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


def enum_values(enum_cls) -> list:
    """``values_callable`` for SQLAlchemy ``Enum`` columns: store values, not names."""
    return [member.value for member in enum_cls]

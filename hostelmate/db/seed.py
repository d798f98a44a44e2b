"""
Demo data loader.

Run ``python -m hostelmate.db.seed`` (or ``hostelmate-seed``) to wipe the
configured database and load one admin, three residents and a handful of
complaints in mixed states. Every demo account uses the password
``password123``.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List

from sqlalchemy.orm import Session

from hostelmate.config.logging import setup_logging
from hostelmate.core.security import get_password_hasher
from hostelmate.db.init_db import reset_db
from hostelmate.db.session import SessionLocal
from hostelmate.models.base.enums import ComplaintCategory, ComplaintStatus, Priority, UserRole
from hostelmate.repositories.complaint import ComplaintRepository
from hostelmate.repositories.user import UserRepository

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

ADMIN = {
    "name": "Admin User",
    "email": "admin@hostel.com",
    "phone_number": "9876543210",
}

RESIDENTS = [
    {"name": "John Doe", "email": "user@hostel.com", "room_number": "A101", "phone_number": "9876543211"},
    {"name": "Jane Smith", "email": "jane@hostel.com", "room_number": "B205", "phone_number": "9876543212"},
    {"name": "Mike Johnson", "email": "mike@hostel.com", "room_number": "C310", "phone_number": "9876543213"},
]

# resident: index into RESIDENTS
COMPLAINTS: List[Dict] = [
    {
        "resident": 0,
        "title": "Fan not working in room",
        "description": (
            "The ceiling fan in my room has stopped working since yesterday. It does not "
            "respond to the regulator and makes a strange noise when I try to turn it on."
        ),
        "category": ComplaintCategory.ELECTRICAL,
        "subcategory": "Fan",
        "priority": Priority.MEDIUM,
    },
    {
        "resident": 1,
        "title": "Water leakage from bathroom tap",
        "description": (
            "There is continuous water leakage from the bathroom tap. The water is dripping "
            "even when the tap is completely closed. This is causing water wastage."
        ),
        "category": ComplaintCategory.PLUMBING,
        "subcategory": "Tap",
        "priority": Priority.HIGH,
        "status": ComplaintStatus.IN_PROGRESS,
        "resolver_name": "Maintenance Team",
    },
    {
        "resident": 2,
        "title": "WiFi connection issues",
        "description": (
            "The WiFi connection in my room is very slow and keeps disconnecting frequently. "
            "Unable to attend online classes properly."
        ),
        "category": ComplaintCategory.INTERNET_AND_CONNECTION,
        "subcategory": "WiFi",
        "priority": Priority.HIGH,
        "status": ComplaintStatus.RESOLVED,
        "resolver_name": "IT Support",
        "resolved_days_ago": 1,
        "rating": 4,
        "feedback": "Issue resolved quickly. Good service!",
    },
    {
        "resident": 0,
        "title": "Room door lock not working",
        "description": (
            "The door lock of my room is jammed and I am having difficulty locking and "
            "unlocking the door. Sometimes the key gets stuck."
        ),
        "category": ComplaintCategory.CARPENTRY,
        "subcategory": "Door",
        "priority": Priority.URGENT,
    },
    {
        "resident": 1,
        "title": "Garbage not collected for 3 days",
        "description": (
            "The garbage from our floor has not been collected for the past 3 days. It is "
            "creating hygiene issues and bad smell."
        ),
        "category": ComplaintCategory.HOUSEKEEPING,
        "subcategory": "Garbage",
        "priority": Priority.HIGH,
        "status": ComplaintStatus.IN_PROGRESS,
        "admin_notes": "Housekeeping team notified. Will be resolved by tomorrow.",
    },
]


def seed(db: Session) -> Dict[str, int]:
    """
    Insert the demo accounts and complaints into an empty schema.

    Returns the number of users and complaints created.
    """
    users = UserRepository(db)
    complaints = ComplaintRepository(db)
    password_hash = get_password_hasher().hash(DEMO_PASSWORD)

    admin = users.create_user(password_hash=password_hash, role=UserRole.ADMIN, **ADMIN)
    residents = [
        users.create_user(password_hash=password_hash, role=UserRole.USER, **data)
        for data in RESIDENTS
    ]

    for data in COMPLAINTS:
        resident = residents[data["resident"]]
        complaint = complaints.create_complaint(
            user_id=resident.id,
            room_number=resident.room_number,
            title=data["title"],
            description=data["description"],
            category=data["category"],
            subcategory=data["subcategory"],
            priority=data["priority"],
        )

        if "status" in data:
            complaint = complaints.update_status(
                complaint,
                new_status=data["status"],
                admin_id=admin.id,
                resolver_name=data.get("resolver_name"),
                admin_notes=data.get("admin_notes"),
            )
        if "resolved_days_ago" in data:
            resolved_at = datetime.now(timezone.utc) - timedelta(days=data["resolved_days_ago"])
            complaint = complaints.update(complaint, {"resolved_at": resolved_at})
        if "rating" in data:
            complaints.set_feedback(complaint, data["rating"], data.get("feedback"))

    logger.info(f"Seeded {len(residents) + 1} users and {len(COMPLAINTS)} complaints")
    return {"users": len(residents) + 1, "complaints": len(COMPLAINTS)}


def main() -> None:
    setup_logging()
    reset_db()

    db = SessionLocal()
    try:
        seed(db)
    finally:
        db.close()

    logger.info(f"Admin: {ADMIN['email']} / {DEMO_PASSWORD}")
    logger.info(
        "Residents: "
        + ", ".join(r["email"] for r in RESIDENTS)
        + f" / {DEMO_PASSWORD}"
    )


if __name__ == "__main__":
    main()

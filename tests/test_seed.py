from hostelmate.db.seed import COMPLAINTS, DEMO_PASSWORD, seed
from hostelmate.models.base.enums import ComplaintStatus, UserRole
from hostelmate.repositories.complaint import ComplaintRepository
from hostelmate.repositories.user import UserRepository
from hostelmate.core.security import get_password_hasher


def test_seed_loads_demo_data(db_session):
    counts = seed(db_session)

    assert counts == {"users": 4, "complaints": len(COMPLAINTS)}

    users = UserRepository(db_session)
    admin = users.find_by_email("admin@hostel.com")
    assert admin.role == UserRole.ADMIN
    assert get_password_hasher().verify(DEMO_PASSWORD, admin.password_hash)
    assert {u.room_number for u in users.find_all() if u.role == UserRole.USER} == {"A101", "B205", "C310"}

    status_counts = ComplaintRepository(db_session).get_status_counts()
    assert status_counts == {
        ComplaintStatus.OPEN: 2,
        ComplaintStatus.IN_PROGRESS: 2,
        ComplaintStatus.RESOLVED: 1,
    }


def test_seeded_resolved_complaint_is_rated(db_session):
    seed(db_session)

    resolved = ComplaintRepository(db_session).search_complaints(status=ComplaintStatus.RESOLVED)[0]

    assert len(resolved) == 1
    assert resolved[0].rating == 4
    assert resolved[0].resolved_at is not None
    assert resolved[0].room_number == "C310"

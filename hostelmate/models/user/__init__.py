from hostelmate.models.user.user import User

__all__ = ["User"]

"""
Core application constants.

Holds the fixed complaint classification table shared by request
validation and the categories endpoint, plus pagination and header
defaults.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

# Pagination defaults
DEFAULT_PAGE: int = 1

# Common HTTP header names
HEADER_REQUEST_ID: str = "X-Request-ID"
HEADER_PROCESS_TIME: str = "X-Process-Time"

# Complaint categories and their allowed subcategories, in display order
CATEGORY_SUBCATEGORIES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Electrical": ("Powercut", "Fan regulator", "Tube light", "Socket", "Switch", "Fan", "Others"),
    "Plumbing": ("Tap", "Shower", "Flush", "Washbasin", "Geyser", "Others"),
    "Security": ("CCTV not working", "Theft", "Others"),
    "Appliances": ("TV", "Washing Machine", "Fridge", "Microwave", "Induction", "Others"),
    "Housekeeping": ("Pest Control", "Garbage", "Utensils", "Cleaning", "Others"),
    "Medical": ("Doctor", "Others"),
    "Carpentry": ("Window", "Door", "Cupboard", "Study Table", "Chair", "Bed & Mattress", "Others"),
    "Community": ("Neighbourhood", "Roommate", "Staff"),
    "Laundry": ("Washing", "Delivery", "Pickup", "Iron"),
    "Repairs & Maintenance": ("Paint", "Lock", "Others"),
    "Food & Beverage": ("Menu", "Food", "Others"),
    "Internet & Connection": ("Network Booster", "DTH", "WiFi"),
    "Others": ("Others",),
})

# Complaint field limits
TITLE_MIN_LENGTH: int = 5
DESCRIPTION_MIN_LENGTH: int = 10
FEEDBACK_MAX_LENGTH: int = 500
MIN_RATING: int = 1
MAX_RATING: int = 5


def allowed_subcategories(category: str) -> Tuple[str, ...]:
    """Subcategories allowed for ``category``; empty for unknown categories."""
    return CATEGORY_SUBCATEGORIES.get(category, ())

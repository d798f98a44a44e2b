"""HostelMate: hostel maintenance complaint tracker."""

__version__ = "1.0.0"

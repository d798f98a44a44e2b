"""
Configuration package for the hostel complaint tracker.

This package contains the environment settings and the logging setup.
"""

from hostelmate.config.settings import settings, get_settings
from hostelmate.config.logging import setup_logging

__all__ = ['settings', 'get_settings', 'setup_logging']

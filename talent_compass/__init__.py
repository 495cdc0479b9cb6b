"""Talent Compass: 9-box succession planning and talent analytics."""

__version__ = "0.1.0"

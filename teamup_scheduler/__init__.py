"""
Teamup Scheduler Package

Room calendar backend for the scheduling platform, storing each room's
events in a Teamup Calendar sub-calendar.
"""

__version__ = "1.0.0"

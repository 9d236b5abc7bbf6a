"""SQLAlchemy models for Subscription Tracker.

All models are imported here so that Base.metadata knows every table
before the schema is created at startup.
"""

from subtracker.models.subscription import Subscription

__all__ = [
    "Subscription",
]

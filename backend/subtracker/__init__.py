"""Subscription Tracker — CRUD HTTP service for subscription records."""

__version__ = "0.1.0"

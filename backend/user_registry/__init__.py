"""User Registry — lookup and creation service for user records."""

__version__ = "1.0.0"

"""API endpoints package."""

from . import health
from . import assessments
from . import quotes
from . import admin

__all__ = ["health", "assessments", "quotes", "admin"]

"""API endpoints package."""

from . import health
from . import project
from . import creative

__all__ = ["health", "project", "creative"]

"""Blueprint Engine: deterministic project and creative blueprint generation."""

__version__ = "1.0.0"

"""Template tables for the creative engine."""

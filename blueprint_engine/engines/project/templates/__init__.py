"""Template tables for the project engine."""

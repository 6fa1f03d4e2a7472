"""Blueprint generation engines."""

# Note: Import engines individually
# Use: from blueprint_engine.engines.project import ProjectBlueprintGenerator
# Use: from blueprint_engine.engines.creative import CreativeBlueprintGenerator

__all__ = [
    "project",
    "creative",
]

"""Data models shared by the blueprint engines."""

from .common import EngineInput, BlueprintRecord, DocumentSection

# Note: form models depend on the engine models; import them directly
# Use: from blueprint_engine.models.forms import ProjectForm, CreativeForm

__all__ = [
    "EngineInput",
    "BlueprintRecord",
    "DocumentSection",
]

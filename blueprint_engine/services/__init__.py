"""Services for blueprint generation and export."""

from .generators import get_project_generator, get_creative_generator
from .deck_exporter import export_deck, build_project_deck, build_creative_deck

__all__ = [
    "get_project_generator",
    "get_creative_generator",
    "export_deck",
    "build_project_deck",
    "build_creative_deck",
]

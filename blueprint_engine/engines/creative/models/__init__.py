"""Creative engine models."""

from .creative import (
    CreativeInput,
    Narrative,
    PromptSet,
    LayoutFramework,
    ComponentSpec,
    ExperienceFlow,
    FigmaSystem,
    CopyDeck,
    PaletteToken,
    TypographyToken,
    StyleGuide,
    CreativeBlueprint,
)

__all__ = [
    "CreativeInput",
    "Narrative",
    "PromptSet",
    "LayoutFramework",
    "ComponentSpec",
    "ExperienceFlow",
    "FigmaSystem",
    "CopyDeck",
    "PaletteToken",
    "TypographyToken",
    "StyleGuide",
    "CreativeBlueprint",
]

"""Creative Intelligence Engine - brand brief to creative production blueprint."""

from .creative_generator import CreativeBlueprintGenerator
from .models import (
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
    "CreativeBlueprintGenerator",
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

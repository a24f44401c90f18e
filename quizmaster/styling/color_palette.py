"""Color palette for QuizMaster supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the page and the desktop window."""

    # Text colors
    TEXT_PRIMARY = ThemeColors(
        light="#0F172A",      # Slate 900
        dark="#F8FAFC"        # Slate 50
    )

    TEXT_SECONDARY = ThemeColors(
        light="#475569",      # Slate 600
        dark="#94A3B8"        # Slate 400
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#F8FAFC",
        dark="#0F172A"
    )

    BACKGROUND_SECONDARY = ThemeColors(
        light="#FFFFFF",
        dark="#1E293B"        # Slate 800
    )

    BACKGROUND_TERTIARY = ThemeColors(
        light="#E2E8F0",
        dark="#334155"        # Slate 700
    )

    # Accent colors
    ACCENT_PRIMARY = ThemeColors(
        light="#4F46E5",      # Indigo 600
        dark="#6366F1"        # Indigo 500
    )

    # Status colors
    SUCCESS = ThemeColors(
        light="#059669",
        dark="#10B981"        # Emerald 500
    )

    ERROR = ThemeColors(
        light="#DC2626",
        dark="#EF4444"        # Red 500
    )

    # Border colors
    BORDER_PRIMARY = ThemeColors(
        light="#CBD5E1",
        dark="#334155"
    )

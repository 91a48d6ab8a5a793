"""
Theme Configuration for the dashboard GUI.
"""

import flet as ft


class Theme:
    """Theme configuration for the application."""

    # Color palette
    PRIMARY = "#6366f1"  # Indigo
    SECONDARY = "#10b981"  # Emerald

    ERROR = "#ef4444"  # Red
    WARNING = "#f59e0b"  # Amber
    SUCCESS = "#22c55e"  # Green
    INFO = "#3b82f6"  # Blue

    DARK_BG = "#0f172a"  # Slate 900
    DARK_CARD = "#1e293b"  # Slate 800
    TEXT_SECONDARY = "#94a3b8"  # Slate 400

    # Spacing
    SPACING_XS = 4
    SPACING_SM = 8
    SPACING_MD = 16
    SPACING_LG = 24

    # Border radius
    RADIUS_MD = 8
    RADIUS_LG = 12

    # Notice colors keyed by NoticeLevel value
    NOTICE_COLORS = {
        "info": INFO,
        "success": SUCCESS,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def get_flet_theme(cls) -> ft.Theme:
        """Get Flet theme configuration."""
        return ft.Theme(
            color_scheme_seed=cls.PRIMARY,
            color_scheme=ft.ColorScheme(
                primary=cls.PRIMARY,
                secondary=cls.SECONDARY,
                error=cls.ERROR,
            ),
        )

    @classmethod
    def card(cls, content: ft.Control) -> ft.Container:
        """Wrap content in a dashboard card."""
        return ft.Container(
            content=content,
            bgcolor=cls.DARK_CARD,
            border_radius=cls.RADIUS_LG,
            padding=cls.SPACING_MD,
        )

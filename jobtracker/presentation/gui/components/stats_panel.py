"""
Stats Panel Component

Application summary cards, one per status, plus the suggestion list.
"""

from typing import Optional

import flet as ft

from jobtracker.domain.services import stats_aggregator
from jobtracker.domain.value_objects import StatsSummary
from ..styles import Theme


def create_stats_panel() -> tuple[ft.Container, dict]:
    """
    Create the summary panel.

    Returns:
        Tuple of (container, controls_dict) for external updates
    """
    cards = ft.ResponsiveRow(spacing=Theme.SPACING_SM)
    tips = ft.Column(spacing=Theme.SPACING_XS)

    def render_stats(summary: Optional[StatsSummary]) -> None:
        if summary is None:
            cards.controls = []
            return
        cards.controls = [
            ft.Container(
                content=ft.Column([
                    ft.Text(label, size=12, color=Theme.TEXT_SECONDARY),
                    ft.Text(str(count), size=22, weight=ft.FontWeight.BOLD),
                ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=2),
                bgcolor=Theme.DARK_BG,
                border_radius=Theme.RADIUS_MD,
                padding=Theme.SPACING_SM,
                col={"sm": 6, "md": 3},
            )
            for label, count in stats_aggregator.display_rows(summary)
        ]

    def render_suggestions(suggestions: list[str]) -> None:
        tips.controls = [ft.Text(f"• {tip}", size=13) for tip in suggestions]

    container = Theme.card(
        ft.Column([
            ft.Text("🤖 Smart Suggestions", size=16, weight=ft.FontWeight.BOLD),
            tips,
            ft.Divider(height=1),
            ft.Text("📈 Application Summary", size=16, weight=ft.FontWeight.BOLD),
            cards,
        ], spacing=Theme.SPACING_SM)
    )

    return container, {
        "render_stats": render_stats,
        "render_suggestions": render_suggestions,
    }

"""
Job List Component

Current page of jobs with edit/delete actions, interview badges and
pagination.
"""

from datetime import datetime
from typing import Awaitable, Callable

import flet as ft

from jobtracker.application.use_cases import BadgeState, ReminderScheduler
from jobtracker.domain.entities import Job
from jobtracker.domain.services import VisiblePage
from jobtracker.infrastructure.export import format_date
from ..styles import Theme


def create_job_list(
    scheduler: ReminderScheduler,
    on_edit: Callable[[Job], None],
    on_delete: Callable[[Job], Awaitable[None]],
    on_previous: Callable[[], None],
    on_next: Callable[[], None],
) -> tuple[ft.Container, dict]:
    """
    Create the job list.

    Returns:
        Tuple of (container, controls_dict) for external updates
    """
    rows = ft.Column(spacing=Theme.SPACING_XS)
    page_label = ft.Text("", color=Theme.TEXT_SECONDARY)
    previous_button = ft.IconButton(
        icon=ft.Icons.CHEVRON_LEFT,
        tooltip="Prev",
        on_click=lambda e: on_previous(),
    )
    next_button = ft.IconButton(
        icon=ft.Icons.CHEVRON_RIGHT,
        tooltip="Next",
        on_click=lambda e: on_next(),
    )
    pagination = ft.Row(
        [previous_button, page_label, next_button],
        alignment=ft.MainAxisAlignment.CENTER,
    )

    def _job_row(job: Job, now: datetime) -> ft.Control:
        details = [
            ft.Text(job.display_name, weight=ft.FontWeight.BOLD),
            ft.Text(
                f"{job.job_type.value} | Status: {job.status.value}",
                size=12,
                color=Theme.TEXT_SECONDARY,
            ),
        ]
        if job.has_interview:
            badges = [
                ft.Container(
                    content=ft.Text(f"Interview: {format_date(job.interview_date)}", size=11),
                    bgcolor=Theme.INFO,
                    border_radius=Theme.RADIUS_MD,
                    padding=ft.padding.symmetric(horizontal=6, vertical=2),
                ),
            ]
            if scheduler.badge_state(job, now) == BadgeState.UPCOMING:
                badges.append(
                    ft.Container(
                        content=ft.Text("Reminder: Upcoming", size=11, color=ft.Colors.BLACK),
                        bgcolor=Theme.WARNING,
                        border_radius=Theme.RADIUS_MD,
                        padding=ft.padding.symmetric(horizontal=6, vertical=2),
                    )
                )
            details.append(ft.Row(badges, spacing=Theme.SPACING_XS))

        async def _on_delete_click(e) -> None:
            await on_delete(job)

        return ft.Container(
            content=ft.Row([
                ft.Column(details, spacing=2, expand=True),
                ft.TextButton("Edit", on_click=lambda e: on_edit(job)),
                ft.TextButton(
                    "Delete",
                    style=ft.ButtonStyle(color=Theme.ERROR),
                    on_click=_on_delete_click,
                ),
            ]),
            bgcolor=Theme.DARK_BG,
            border_radius=Theme.RADIUS_MD,
            padding=Theme.SPACING_SM,
        )

    def render(visible: VisiblePage, current_page: int, now: datetime) -> None:
        """Rebuild rows and pagination for a page."""
        if visible.is_empty:
            rows.controls = [ft.Text("No jobs found", color=Theme.TEXT_SECONDARY)]
        else:
            rows.controls = [_job_row(job, now) for job in visible.items]

        # A page past the end still needs "Prev" to get back
        pagination.visible = visible.total_pages > 0
        page_label.value = f"Page {current_page} of {visible.total_pages}"
        previous_button.disabled = current_page <= 1
        next_button.disabled = current_page >= visible.total_pages

    container = Theme.card(
        ft.Column([
            ft.Text("📋 Your Jobs", size=16, weight=ft.FontWeight.BOLD),
            rows,
            pagination,
        ], spacing=Theme.SPACING_SM)
    )

    return container, {"render": render}

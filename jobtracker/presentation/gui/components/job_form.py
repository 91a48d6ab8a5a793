"""
Job Form Component

Add/Edit form bound to a JobDraft.
"""

from typing import Awaitable, Callable

import flet as ft

from jobtracker.domain.entities import JobDraft, JobStatus, JobType
from ..styles import Theme


def _options(enum_cls) -> list[ft.dropdown.Option]:
    return [ft.dropdown.Option(key=m.value, text=m.label) for m in enum_cls]


def create_job_form(
    on_submit: Callable[[JobDraft], Awaitable[None]],
) -> tuple[ft.Container, dict]:
    """
    Create the add/edit job form.

    The form owns a JobDraft; every input change replaces it. The caller
    receives the draft on submit and pushes the next one back through
    ``controls["load"]``.

    Returns:
        Tuple of (container, controls_dict) for external updates
    """
    _draft = JobDraft.blank()

    def _set(name: str):
        def handler(e) -> None:
            nonlocal _draft
            _draft = _draft.with_field(name, e.control.value or "")
        return handler

    title = ft.Text("Add New Job", size=16, weight=ft.FontWeight.BOLD)

    company_input = ft.TextField(label="Company Name", on_change=_set("company"))
    position_input = ft.TextField(label="Position", on_change=_set("position"))
    status_input = ft.Dropdown(
        label="Status",
        options=_options(JobStatus),
        value=_draft.status,
        on_change=_set("status"),
    )
    job_type_input = ft.Dropdown(
        label="Job Type",
        options=_options(JobType),
        value=_draft.job_type,
        on_change=_set("job_type"),
    )
    date_input = ft.TextField(
        label="Interview Date",
        hint_text="YYYY-MM-DD",
        on_change=_set("interview_date"),
    )

    async def _on_submit_click(e) -> None:
        await on_submit(_draft)

    submit_button = ft.ElevatedButton(
        "Add Job",
        icon=ft.Icons.SAVE,
        bgcolor=Theme.PRIMARY,
        color=ft.Colors.WHITE,
        on_click=_on_submit_click,
    )

    def load(draft: JobDraft) -> None:
        """Show a draft (blank after submit, pre-filled for edit)."""
        nonlocal _draft
        _draft = draft
        company_input.value = draft.company
        position_input.value = draft.position
        status_input.value = draft.status
        job_type_input.value = draft.job_type
        date_input.value = draft.interview_date
        title.value = "Update Job" if draft.is_editing else "Add New Job"
        submit_button.text = "Update Job" if draft.is_editing else "Add Job"

    container = Theme.card(
        ft.Column([
            title,
            company_input,
            position_input,
            ft.Row([status_input, job_type_input], spacing=Theme.SPACING_SM),
            date_input,
            submit_button,
        ], spacing=Theme.SPACING_SM)
    )

    return container, {"load": load}

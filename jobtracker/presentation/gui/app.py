"""
Job Tracker Dashboard - Flet GUI wired to the job backend.

The view owns the filter selection and the form draft; the JobStore owns
the job collection. Every store event re-derives the visible page,
suggestions and stats from scratch.
"""

import logging
from datetime import datetime, timezone

import flet as ft

from jobtracker.application.interfaces import NoticeLevel
from jobtracker.application.use_cases import JobStore, ReminderScheduler, SessionContext
from jobtracker.config.settings import Settings
from jobtracker.domain.entities import Job, JobDraft, JobStatus, JobType
from jobtracker.domain.services import (
    filter_jobs,
    suggestions,
    visible_jobs,
)
from jobtracker.domain.value_objects import ALL, FilterState, Session
from jobtracker.infrastructure.export import ExportPipeline
from jobtracker.infrastructure.http import HttpJobBackend
from jobtracker.infrastructure.security import CryptoService
from jobtracker.infrastructure.storage import FileSessionStore
from .adapters import FletFeedback, FletNotifier
from .components import create_job_form, create_job_list, create_stats_panel
from .styles import Theme


logger = logging.getLogger(__name__)


def _filter_options(enum_cls, all_label: str) -> list[ft.dropdown.Option]:
    return [ft.dropdown.Option(key=ALL, text=all_label)] + [
        ft.dropdown.Option(key=m.value, text=m.label) for m in enum_cls
    ]


def create_session(settings: Settings) -> SessionContext:
    """Build the session context and restore the persisted session."""
    crypto = CryptoService(settings.encryption_key_path)
    crypto.initialize()
    session = SessionContext(FileSessionStore(settings.session_file_path, crypto))
    session.initialize()
    if not session.is_authenticated and settings.api_token:
        session.sign_in(Session(token=settings.api_token, user_name=settings.user_name))
    return session


async def build_app(page: ft.Page, settings: Settings) -> None:
    """Build the dashboard and load the job collection."""

    # === PAGE CONFIGURATION ===
    page.title = "Job Tracker"
    page.theme_mode = ft.ThemeMode.DARK
    page.theme = Theme.get_flet_theme()
    page.bgcolor = Theme.DARK_BG
    page.padding = 20
    page.scroll = ft.ScrollMode.AUTO

    # === COMPONENTS ===
    session = create_session(settings)
    feedback = FletFeedback(page)
    scheduler = ReminderScheduler(
        FletNotifier(page, enabled=settings.notifications_enabled),
        window_hours=settings.reminder_window_hours,
        upcoming_days=settings.upcoming_badge_days,
        dedupe=settings.dedupe_reminders,
    )
    backend = HttpJobBackend(settings, session)
    await backend.open()
    store = JobStore(backend, scheduler, feedback)
    exporter = ExportPipeline(settings)

    # === VIEW STATE ===
    view = {"filters": FilterState(page_size=settings.page_size)}

    def render() -> None:
        filters: FilterState = view["filters"]
        jobs = store.jobs
        visible = visible_jobs(jobs, filters)
        job_list["render"](visible, filters.current_page, datetime.now(timezone.utc))
        stats_panel["render_suggestions"](suggestions(filter_jobs(jobs, filters)))
        stats_panel["render_stats"](store.stats)
        try:
            page.update()
        except Exception as e:
            logger.debug(f"Render skipped: {e}")

    def set_filters(filters: FilterState) -> None:
        view["filters"] = filters
        render()

    def on_store_event(event: str, data: dict) -> None:
        if event in ("jobs_changed", "stats_changed"):
            render()

    store.add_event_listener(on_store_event)

    # === FORM ===
    async def on_submit(draft: JobDraft) -> None:
        next_draft = await store.submit(draft)
        job_form["load"](next_draft)
        page.update()

    job_form_panel, job_form = create_job_form(on_submit)

    def on_edit(job: Job) -> None:
        job_form["load"](JobDraft.from_job(job))
        page.scroll_to(offset=0, duration=300)
        page.update()

    async def on_delete(job: Job) -> None:
        await store.delete_job(job.id)

    # === LIST ===
    def on_previous() -> None:
        set_filters(view["filters"].previous_page())

    def on_next() -> None:
        filters: FilterState = view["filters"]
        total = visible_jobs(store.jobs, filters).total_pages
        set_filters(filters.next_page(total))

    job_list_panel, job_list = create_job_list(
        scheduler, on_edit, on_delete, on_previous, on_next
    )
    stats_panel_container, stats_panel = create_stats_panel()

    # === SEARCH & FILTER ===
    search_input = ft.TextField(
        label="Search by company",
        prefix_icon=ft.Icons.SEARCH,
        on_change=lambda e: set_filters(view["filters"].with_search(e.control.value or "")),
        expand=True,
    )
    job_type_filter = ft.Dropdown(
        label="Job Type",
        options=_filter_options(JobType, "All Job Types"),
        value=ALL,
        on_change=lambda e: set_filters(view["filters"].with_job_type(e.control.value)),
        expand=True,
    )
    status_filter = ft.Dropdown(
        label="Status",
        options=_filter_options(JobStatus, "All Statuses"),
        value=ALL,
        on_change=lambda e: set_filters(view["filters"].with_status(e.control.value)),
        expand=True,
    )

    # === EXPORT ===
    def _export(kind: str) -> None:
        jobs = filter_jobs(store.jobs, view["filters"])
        try:
            if kind == "csv":
                path = exporter.export_csv(jobs, stale=store.refreshing)
            else:
                path = exporter.export_report(jobs, stale=store.refreshing)
        except OSError as e:
            logger.error(f"Export failed: {e}")
            feedback.notice("Export failed", NoticeLevel.ERROR)
            return
        feedback.notice(f"Saved {path}", NoticeLevel.SUCCESS)

    export_row = ft.Row([
        ft.OutlinedButton("Export to CSV", icon=ft.Icons.TABLE_CHART, on_click=lambda e: _export("csv")),
        ft.OutlinedButton("Export to PDF", icon=ft.Icons.PICTURE_AS_PDF, on_click=lambda e: _export("pdf")),
    ], alignment=ft.MainAxisAlignment.END)

    # === HEADER ===
    async def on_logout(e) -> None:
        session.teardown()
        await backend.close()
        page.clean()
        page.add(ft.Text("You have been signed out.", size=18))
        page.update()

    header = ft.Row([
        ft.Text(
            f"👋 Welcome, {session.user_name or 'there'}"
            if session.is_authenticated else "👋 Welcome (not signed in)",
            size=24,
            weight=ft.FontWeight.BOLD,
        ),
        ft.OutlinedButton("Logout", icon=ft.Icons.LOGOUT, on_click=on_logout),
    ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN)

    async def on_disconnect(e) -> None:
        await backend.close()

    page.on_disconnect = on_disconnect

    # === BUILD PAGE ===
    page.add(
        header,
        ft.Divider(height=1),
        job_form_panel,
        ft.Row([search_input, job_type_filter, status_filter], spacing=Theme.SPACING_SM),
        export_row,
        job_list_panel,
        stats_panel_container,
    )
    render()

    await store.load()

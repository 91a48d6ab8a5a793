"""
Flet Adapters - Platform ports implemented with Flet controls.

- FletNotifier: interview reminders as an in-app banner
- FletFeedback: snack bar notices and a modal confirmation dialog

Each adapter builds its overlay controls once, adds them to
``page.overlay`` once and reuses them for every message.
"""

import asyncio
import logging
from typing import Optional

import flet as ft

from jobtracker.application.interfaces import FeedbackPort, NoticeLevel, NotifierPort
from .styles import Theme


logger = logging.getLogger(__name__)

NOTICE_DURATION_MS = 3000


class FletNotifier(NotifierPort):
    """
    Shows reminders as a banner at the top of the page.

    Permission is granted on request when notifications are enabled in
    the settings; it is never granted implicitly. A new reminder replaces
    the text of the one on screen.
    """

    def __init__(self, page: ft.Page, enabled: bool = True) -> None:
        self.page = page
        self.enabled = enabled
        self._granted = False

        self._title = ft.Text("", weight=ft.FontWeight.BOLD)
        self._body = ft.Text("")
        self.banner = ft.Banner(
            bgcolor=Theme.DARK_CARD,
            leading=ft.Icon(ft.Icons.EVENT, color=Theme.WARNING, size=32),
            content=ft.Column([self._title, self._body], tight=True),
            actions=[
                ft.TextButton("Dismiss", on_click=lambda e: self.dismiss()),
            ],
        )
        page.overlay.append(self.banner)

    def request_permission(self) -> bool:
        self._granted = self.enabled
        return self._granted

    def is_granted(self) -> bool:
        return self._granted

    def show(self, title: str, body: str) -> None:
        self._title.value = title
        self._body.value = body
        self.banner.open = True
        self.page.update()

    def dismiss(self) -> None:
        self.banner.open = False
        self.page.update()


class FletFeedback(FeedbackPort):
    """Snack bar notices and confirmation dialogs."""

    def __init__(self, page: ft.Page) -> None:
        self.page = page
        self._pending: Optional[asyncio.Future] = None

        self._notice_text = ft.Text("", color=ft.Colors.WHITE)
        self.snack_bar = ft.SnackBar(
            content=self._notice_text,
            bgcolor=Theme.INFO,
            duration=NOTICE_DURATION_MS,
        )

        self._confirm_text = ft.Text("")
        self.dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text("Please confirm"),
            content=self._confirm_text,
            actions=[
                ft.TextButton("Cancel", on_click=self._on_cancel),
                ft.TextButton("Delete", on_click=self._on_confirm),
            ],
            actions_alignment=ft.MainAxisAlignment.END,
            on_dismiss=self._on_cancel,
        )

        page.overlay.append(self.snack_bar)
        page.overlay.append(self.dialog)

    def notice(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None:
        self._notice_text.value = message
        self.snack_bar.bgcolor = Theme.NOTICE_COLORS.get(level.value, Theme.INFO)
        self.snack_bar.open = True
        try:
            self.page.update()
        except Exception as e:
            logger.debug(f"Notice not rendered: {e}")

    async def confirm(self, message: str) -> bool:
        # Only one question is open at a time; a newer one cancels the older
        self.answer(False)

        answer: asyncio.Future = asyncio.get_running_loop().create_future()
        self._pending = answer
        self._confirm_text.value = message
        self.dialog.open = True
        self.page.update()
        return await answer

    def answer(self, value: bool) -> None:
        """Close the dialog and resolve the pending question, if any."""
        pending, self._pending = self._pending, None
        if pending is None or pending.done():
            return
        self.dialog.open = False
        self.page.update()
        pending.set_result(value)

    # Async handlers run on the event loop that owns the future
    async def _on_cancel(self, e) -> None:
        self.answer(False)

    async def _on_confirm(self, e) -> None:
        self.answer(True)

"""
Job Tracker - Job application dashboard

Entry point for the application.
"""

import logging
import sys

import flet as ft

from jobtracker.config.settings import get_settings


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


async def main(page: ft.Page) -> None:
    """Main entry point - Flet app target."""
    from jobtracker.presentation.gui.app import build_app
    await build_app(page, get_settings())


def run() -> None:
    """Console script entry point."""
    setup_logging(get_settings().log_level)
    ft.app(target=main)


if __name__ == "__main__":
    run()

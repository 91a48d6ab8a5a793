"""
Export Pipeline - Writes the filtered job list as downloadable files.

Exports always receive the filtered set (every page), never just the page
on screen.
"""

import logging
from pathlib import Path
from typing import Sequence

from jobtracker.config.settings import Settings
from jobtracker.domain.entities import Job
from .csv_export import to_csv
from .pdf_report import to_report


logger = logging.getLogger(__name__)


def save_export(data: bytes, filename: str, directory: Path) -> Path:
    """
    Write an export into the download directory.

    Returns:
        Path of the written file (an existing file is replaced).
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_bytes(data)
    return path


class ExportPipeline:
    """Turns a job collection into CSV and PDF downloads."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def _warn_if_stale(self, stale: bool) -> None:
        if stale:
            logger.warning("Exporting while jobs are refreshing; data may be stale")

    def export_csv(self, jobs: Sequence[Job], stale: bool = False) -> Path:
        """Write ``jobs.csv``."""
        self._warn_if_stale(stale)
        path = save_export(to_csv(jobs), self.settings.csv_filename, self.settings.exports_path)
        logger.info(f"Exported {len(jobs)} jobs to {path}")
        return path

    def export_report(self, jobs: Sequence[Job], stale: bool = False) -> Path:
        """Write ``job_applications.pdf``."""
        self._warn_if_stale(stale)
        path = save_export(to_report(jobs), self.settings.report_filename, self.settings.exports_path)
        logger.info(f"Exported {len(jobs)} jobs to {path}")
        return path

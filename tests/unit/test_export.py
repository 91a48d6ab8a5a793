"""
Unit tests for CSV and PDF exports.
"""

import csv
import io
import logging
from datetime import datetime, timezone

import fitz  # PyMuPDF
import pytest

from jobtracker.infrastructure.export import (
    HEADERS,
    REPORT_TITLE,
    ExportPipeline,
    format_date,
    save_export,
    to_csv,
    to_report,
)

from conftest import make_job


@pytest.fixture
def jobs():
    return [
        make_job(
            job_id="1",
            company="Acme",
            position="Engineer",
            status="interview",
            job_type="remote",
            interview_date=datetime(2026, 11, 3, 15, tzinfo=timezone.utc),
        ),
        make_job(job_id="2", company="Globex", position="Analyst"),
    ]


def _pdf_text(data: bytes) -> str:
    with fitz.open(stream=data, filetype="pdf") as doc:
        return "".join(page.get_text() for page in doc)


class TestCsv:
    """Tests for the CSV export."""

    def test_rows(self, jobs):
        """Should write a header plus one line per job."""
        text = to_csv(jobs).decode("utf-8")
        lines = text.split("\n")

        assert text.endswith("\n")
        assert len(lines) - 1 == len(jobs) + 1
        assert lines[0] == "Company,Position,Status,Job Type,Interview Date"
        assert lines[1] == "Acme,Engineer,interview,remote,11/03/2026"

    def test_missing_date_is_empty_cell(self, jobs):
        """Should leave the date cell empty without an interview."""
        lines = to_csv(jobs).decode("utf-8").split("\n")
        assert lines[2] == "Globex,Analyst,pending,full-time,"

    def test_empty_collection(self):
        """Should still write the header."""
        assert to_csv([]) == b"Company,Position,Status,Job Type,Interview Date\n"

    def test_comma_in_company_is_quoted(self):
        """Should keep five columns when a value contains a comma."""
        data = to_csv([make_job(company="Acme, Inc.")]).decode("utf-8")
        rows = list(csv.reader(io.StringIO(data)))

        assert rows[1][0] == "Acme, Inc."
        assert all(len(row) == len(HEADERS) for row in rows)

    def test_format_date(self):
        """Should render month/day/year."""
        assert format_date(datetime(2026, 1, 9, tzinfo=timezone.utc)) == "01/09/2026"
        assert format_date(None) == ""


class TestReport:
    """Tests for the PDF report."""

    def test_is_pdf(self, jobs):
        """Should produce a PDF document."""
        assert to_report(jobs).startswith(b"%PDF")

    def test_contains_title_and_rows(self, jobs):
        """Should contain the title, the headers and every job."""
        text = _pdf_text(to_report(jobs))

        assert REPORT_TITLE in text
        assert "Interview Date" in text
        assert "Globex" in text
        assert "11/03/2026" in text

    def test_escapes_markup(self):
        """Should render markup characters literally."""
        text = _pdf_text(to_report([make_job(company="R&D <Labs>")]))
        assert "R&D <Labs>" in text

    def test_many_jobs_span_pages(self):
        """Should continue long lists on more pages."""
        many = [make_job(job_id=str(i), company=f"Company {i}") for i in range(120)]
        with fitz.open(stream=to_report(many), filetype="pdf") as doc:
            assert doc.page_count > 1


class TestExportPipeline:
    """Tests for writing exports to disk."""

    def test_save_export(self, tmp_path):
        """Should create the directory and write the bytes."""
        path = save_export(b"data", "jobs.csv", tmp_path / "out")

        assert path == tmp_path / "out" / "jobs.csv"
        assert path.read_bytes() == b"data"

    def test_export_csv(self, settings, jobs):
        """Should write jobs.csv into the exports directory."""
        path = ExportPipeline(settings).export_csv(jobs)

        assert path == settings.exports_path / "jobs.csv"
        assert path.read_bytes() == to_csv(jobs)

    def test_export_report(self, settings, jobs):
        """Should write job_applications.pdf."""
        path = ExportPipeline(settings).export_report(jobs)

        assert path.name == "job_applications.pdf"
        assert path.read_bytes().startswith(b"%PDF")

    def test_stale_warning(self, settings, jobs, caplog):
        """Should warn when exporting during a refresh."""
        with caplog.at_level(logging.WARNING):
            ExportPipeline(settings).export_csv(jobs, stale=True)

        assert "stale" in caplog.text

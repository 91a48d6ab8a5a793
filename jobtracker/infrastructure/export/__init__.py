# Export Package
from .csv_export import HEADERS, format_date, to_csv
from .exporter import ExportPipeline, save_export
from .pdf_report import REPORT_TITLE, to_report

__all__ = [
    "ExportPipeline",
    "HEADERS",
    "REPORT_TITLE",
    "format_date",
    "save_export",
    "to_csv",
    "to_report",
]

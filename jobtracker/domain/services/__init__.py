# Domain Services
from . import filter_engine, stats_aggregator, suggestion_engine
from .filter_engine import VisiblePage, filter_jobs, visible_jobs
from .suggestion_engine import suggestions

__all__ = [
    "VisiblePage",
    "filter_engine",
    "filter_jobs",
    "stats_aggregator",
    "suggestion_engine",
    "suggestions",
    "visible_jobs",
]

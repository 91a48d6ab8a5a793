# Domain Value Objects
from .filter_state import ALL, FilterState
from .session import Session
from .stats_summary import StatsSummary

__all__ = ["ALL", "FilterState", "Session", "StatsSummary"]

# GUI Components
from .job_form import create_job_form
from .job_list import create_job_list
from .stats_panel import create_stats_panel

__all__ = ["create_job_form", "create_job_list", "create_stats_panel"]

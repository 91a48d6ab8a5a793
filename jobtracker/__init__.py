"""
Job Tracker - Job application dashboard.

Track applications against a remote backend, filter and page through them,
export reports and get reminded of upcoming interviews.
"""

__version__ = "1.0.0"

"""Handler layer exports."""

from .job_poller import JobPoller
from .vod_workflow import VodWorkflow

__all__ = ["JobPoller", "VodWorkflow"]

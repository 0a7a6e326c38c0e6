"""Domain models for the VOD creation workflow."""

import uuid
from enum import Enum

from pydantic import BaseModel, Field


class JobState(str, Enum):
    """Encoding job states reported by the media services API."""

    QUEUED = "Queued"
    SCHEDULED = "Scheduled"
    PROCESSING = "Processing"
    FINISHED = "Finished"
    ERROR = "Error"
    CANCELING = "Canceling"
    CANCELED = "Canceled"
    # Any state the service reports that is not listed above.
    UNKNOWN = "Unknown"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_JOB_STATES


TERMINAL_JOB_STATES = frozenset({JobState.FINISHED, JobState.ERROR, JobState.CANCELED})


class StreamingEndpointState(str, Enum):
    """Operational states of a streaming endpoint."""

    STOPPED = "Stopped"
    STARTING = "Starting"
    RUNNING = "Running"
    STOPPING = "Stopping"
    DELETING = "Deleting"
    SCALING = "Scaling"


class ResourceNames(BaseModel, frozen=True):
    """Names of every remote resource created by one workflow run."""

    suffix: str

    @property
    def input_asset(self) -> str:
        return f"input-{self.suffix}"

    @property
    def output_asset(self) -> str:
        return f"output-{self.suffix}"

    @property
    def job(self) -> str:
        return f"job-{self.suffix}"

    @property
    def locator(self) -> str:
        return f"locator-{self.suffix}"

    @classmethod
    def generate(cls, length: int = 13) -> "ResourceNames":
        """Derives a run-unique suffix from a random UUID."""
        return cls(suffix=str(uuid.uuid4())[:length])


class JobStatus(BaseModel, frozen=True):
    """Observed state of an encoding job."""

    name: str
    state: JobState
    progress: int = 0
    error_message: str | None = None


class StreamingEndpointInfo(BaseModel, frozen=True):
    """Streaming endpoint details needed to build playback URLs."""

    name: str
    host_name: str
    resource_state: StreamingEndpointState | None = None

    @property
    def is_running(self) -> bool:
        return self.resource_state == StreamingEndpointState.RUNNING


class StreamingPaths(BaseModel, frozen=True):
    """Path templates published by a streaming locator, in API order."""

    streaming_paths: list[list[str]] = Field(default_factory=list)
    download_paths: list[str] = Field(default_factory=list)


class VodResult(BaseModel, frozen=True):
    """Outcome of one VOD workflow run."""

    names: ResourceNames
    job: JobStatus
    streaming_urls: list[str] = Field(default_factory=list)
    download_urls: list[str] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.job.state != JobState.ERROR

    @property
    def urls(self) -> list[str]:
        return [*self.streaming_urls, *self.download_urls]

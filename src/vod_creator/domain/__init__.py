"""Domain layer exports."""

from .models import (
    TERMINAL_JOB_STATES,
    JobState,
    JobStatus,
    ResourceNames,
    StreamingEndpointInfo,
    StreamingEndpointState,
    StreamingPaths,
    VodResult,
)
from .transform_profile import DEFAULT_ENCODING_PROFILE, EncodingProfile
from .url_builder import StreamingUrlBuilder

__all__ = [
    "TERMINAL_JOB_STATES",
    "JobState",
    "JobStatus",
    "ResourceNames",
    "StreamingEndpointInfo",
    "StreamingEndpointState",
    "StreamingPaths",
    "VodResult",
    "DEFAULT_ENCODING_PROFILE",
    "EncodingProfile",
    "StreamingUrlBuilder",
]

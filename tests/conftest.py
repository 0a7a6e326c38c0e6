"""Shared fixtures: an in-memory media services account and a sleep recorder."""

from collections import deque
from datetime import datetime
from pathlib import Path

import pytest

from vod_creator.config import WorkflowConfig
from vod_creator.domain import (
    EncodingProfile,
    JobState,
    JobStatus,
    StreamingEndpointInfo,
    StreamingEndpointState,
    StreamingPaths,
)
from vod_creator.infrastructure.interfaces import AssetUploader, MediaServicesClient


class FakeMediaServicesClient(MediaServicesClient):
    """Records every call and replays a scripted sequence of job states."""

    def __init__(
        self,
        job_states: list[tuple[JobState, int | None]] | None = None,
        endpoint_state: StreamingEndpointState = StreamingEndpointState.RUNNING,
        host_name: str = "example-usea.streaming.media.azure.net",
        paths: StreamingPaths | None = None,
        error_message: str | None = None,
    ):
        self.calls: list[tuple] = []
        self._job_states = deque(job_states or [(JobState.FINISHED, 100)])
        self._endpoint_state = endpoint_state
        self._host_name = host_name
        self._paths = paths or StreamingPaths()
        self._error_message = error_message

    def calls_to(self, operation: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == operation]

    def create_or_update_asset(self, asset_name: str) -> str:
        self.calls.append(("create_or_update_asset", asset_name))
        return asset_name

    def list_upload_urls(self, asset_name: str, expiry_time: datetime) -> list[str]:
        self.calls.append(("list_upload_urls", asset_name, expiry_time))
        return [f"https://storage.example.net/asset-{asset_name}?sig=abc"]

    def create_or_update_transform(
        self, transform_name: str, profile: EncodingProfile
    ) -> str:
        self.calls.append(("create_or_update_transform", transform_name, profile))
        return transform_name

    def create_job(
        self,
        transform_name: str,
        job_name: str,
        input_asset_name: str,
        output_asset_name: str,
    ) -> JobStatus:
        self.calls.append(
            ("create_job", transform_name, job_name, input_asset_name, output_asset_name)
        )
        return JobStatus(name=job_name, state=JobState.QUEUED)

    def get_job(self, transform_name: str, job_name: str) -> JobStatus:
        self.calls.append(("get_job", transform_name, job_name))
        state, progress = self._job_states.popleft()
        return JobStatus(
            name=job_name,
            state=state,
            progress=progress or 0,
            error_message=self._error_message if state == JobState.ERROR else None,
        )

    def create_streaming_locator(
        self, locator_name: str, asset_name: str, streaming_policy_name: str
    ) -> str:
        self.calls.append(
            ("create_streaming_locator", locator_name, asset_name, streaming_policy_name)
        )
        return locator_name

    def get_streaming_endpoint(self, endpoint_name: str) -> StreamingEndpointInfo:
        self.calls.append(("get_streaming_endpoint", endpoint_name))
        return StreamingEndpointInfo(
            name=endpoint_name,
            host_name=self._host_name,
            resource_state=self._endpoint_state,
        )

    def start_streaming_endpoint(self, endpoint_name: str, wait: bool = False) -> None:
        self.calls.append(("start_streaming_endpoint", endpoint_name, wait))

    def list_streaming_paths(self, locator_name: str) -> StreamingPaths:
        self.calls.append(("list_streaming_paths", locator_name))
        return self._paths


class RecordingUploader(AssetUploader):
    """Remembers uploads instead of sending them anywhere."""

    def __init__(self):
        self.uploads: list[tuple[str, Path]] = []

    def upload(self, container_url: str, file_path: Path) -> str:
        self.uploads.append((container_url, file_path))
        return file_path.name


class SleepRecorder:
    """Stands in for time.sleep."""

    def __init__(self):
        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def sleep() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def uploader() -> RecordingUploader:
    return RecordingUploader()


@pytest.fixture
def workflow_config() -> WorkflowConfig:
    return WorkflowConfig()


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    path = tmp_path / "ignite.mp4"
    path.write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return path

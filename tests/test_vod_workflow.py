"""Tests for the VOD workflow driver."""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from tests.conftest import FakeMediaServicesClient, RecordingUploader
from vod_creator.config import WorkflowConfig
from vod_creator.domain import (
    DEFAULT_ENCODING_PROFILE,
    JobState,
    StreamingEndpointState,
    StreamingPaths,
)
from vod_creator.exceptions import MediaServicesError
from vod_creator.handlers import JobPoller, VodWorkflow

HOST = "example-usea.streaming.media.azure.net"

PATHS = StreamingPaths(
    streaming_paths=[
        ["/loc/ignite.ism/manifest(format=m3u8-cmaf)", "/loc/ignite.ism/manifest(format=m3u8-aapl)"],
        ["/loc/ignite.ism/manifest(format=mpd-time-cmaf)"],
    ],
    download_paths=["/loc/Video-ignite-HD-3600kbps-3600000.mp4", "/loc/Thumbnail-ignite-000001.jpg"],
)


def make_workflow(client, uploader, sleep, config=None, manage_transform=True):
    config = config or WorkflowConfig()
    return VodWorkflow(
        client=client,
        uploader=uploader,
        poller=JobPoller(client, config.poll_interval_seconds, sleep=sleep),
        config=config,
        manage_transform=manage_transform,
    )


class TestSuccessfulRun:
    def test_runs_steps_in_order(self, uploader, sleep, input_file):
        client = FakeMediaServicesClient(
            job_states=[(JobState.QUEUED, 0), (JobState.PROCESSING, 40), (JobState.FINISHED, 100)],
            paths=PATHS,
        )
        workflow = make_workflow(client, uploader, sleep)

        result = workflow.run(input_file)

        names = result.names
        operations = [call[0] for call in client.calls]
        assert operations == [
            "create_or_update_asset",
            "list_upload_urls",
            "create_or_update_asset",
            "create_or_update_transform",
            "create_job",
            "get_job",
            "get_job",
            "get_job",
            "create_streaming_locator",
            "get_streaming_endpoint",
            "list_streaming_paths",
        ]
        assert client.calls[0] == ("create_or_update_asset", names.input_asset)
        assert client.calls[2] == ("create_or_update_asset", names.output_asset)
        assert client.calls_to("create_job") == [
            ("create_job", "Default", names.job, names.input_asset, names.output_asset)
        ]
        assert client.calls_to("create_streaming_locator") == [
            (
                "create_streaming_locator",
                names.locator,
                names.output_asset,
                "Predefined_DownloadAndClearStreaming",
            )
        ]
        assert sleep.delays == [30, 30]
        assert result.succeeded

    def test_builds_urls_streaming_then_download(self, uploader, sleep, input_file):
        client = FakeMediaServicesClient(paths=PATHS, host_name=HOST)
        workflow = make_workflow(client, uploader, sleep)

        result = workflow.run(input_file)

        assert result.streaming_urls == [
            f"https://{HOST}/loc/ignite.ism/manifest(format=m3u8-cmaf)",
            f"https://{HOST}/loc/ignite.ism/manifest(format=m3u8-aapl)",
            f"https://{HOST}/loc/ignite.ism/manifest(format=mpd-time-cmaf)",
        ]
        assert result.download_urls == [
            f"https://{HOST}/loc/Video-ignite-HD-3600kbps-3600000.mp4",
            f"https://{HOST}/loc/Thumbnail-ignite-000001.jpg",
        ]
        assert result.urls == result.streaming_urls + result.download_urls

    def test_uploads_input_file_with_short_lived_sas(self, uploader, sleep, input_file):
        client = FakeMediaServicesClient()
        workflow = make_workflow(client, uploader, sleep)
        before = datetime.now(timezone.utc)

        result = workflow.run(input_file)

        [(_, asset_name, expiry_time)] = client.calls_to("list_upload_urls")
        assert asset_name == result.names.input_asset
        assert before + timedelta(hours=1) <= expiry_time
        assert expiry_time <= datetime.now(timezone.utc) + timedelta(hours=1)
        assert uploader.uploads == [
            (f"https://storage.example.net/asset-{asset_name}?sig=abc", input_file)
        ]

    def test_upserts_fixed_transform_profile(self, uploader, sleep, input_file):
        client = FakeMediaServicesClient()
        workflow = make_workflow(client, uploader, sleep)

        workflow.run(input_file)

        assert client.calls_to("create_or_update_transform") == [
            ("create_or_update_transform", "Default", DEFAULT_ENCODING_PROFILE)
        ]

    def test_skips_transform_when_not_managed(self, uploader, sleep, input_file):
        client = FakeMediaServicesClient()
        workflow = make_workflow(client, uploader, sleep, manage_transform=False)

        workflow.run(input_file)

        assert client.calls_to("create_or_update_transform") == []
        assert client.calls_to("create_job")[0][1] == "Default"

    def test_logs_progress_lines(self, uploader, sleep, input_file, caplog):
        client = FakeMediaServicesClient(
            job_states=[(JobState.QUEUED, 0), (JobState.PROCESSING, 40), (JobState.FINISHED, 100)],
            paths=PATHS,
        )
        workflow = make_workflow(client, uploader, sleep)

        with caplog.at_level(logging.INFO):
            result = workflow.run(input_file)

        names = result.names
        messages = [r.getMessage() for r in caplog.records]
        finished = messages.index(f"Job finished: {names.job}")
        locator = messages.index(f"Streaming locator created: {names.locator}")
        assert messages.index(f"Input asset created: {names.input_asset}") < finished
        assert "Video upload completed!" in messages
        assert f"Job created: {names.job}" in messages
        assert finished < locator
        assert messages[-1] == "Playback URLs resolved"
        assert not set(result.urls) & set(messages)


class TestStreamingEndpoint:
    def test_does_not_start_running_endpoint(self, uploader, sleep, input_file):
        client = FakeMediaServicesClient(endpoint_state=StreamingEndpointState.RUNNING)
        workflow = make_workflow(client, uploader, sleep)

        workflow.run(input_file)

        assert len(client.calls_to("get_streaming_endpoint")) == 1
        assert client.calls_to("start_streaming_endpoint") == []

    @pytest.mark.parametrize(
        "state", [StreamingEndpointState.STOPPED, StreamingEndpointState.STARTING]
    )
    def test_starts_endpoint_without_waiting(self, uploader, sleep, input_file, state):
        client = FakeMediaServicesClient(endpoint_state=state)
        workflow = make_workflow(client, uploader, sleep)

        workflow.run(input_file)

        assert client.calls_to("start_streaming_endpoint") == [
            ("start_streaming_endpoint", "default", False)
        ]

    def test_waits_for_endpoint_when_configured(self, uploader, sleep, input_file):
        client = FakeMediaServicesClient(endpoint_state=StreamingEndpointState.STOPPED)
        config = WorkflowConfig(
            streaming_endpoint_name="edge", wait_for_streaming_endpoint=True
        )
        workflow = make_workflow(client, uploader, sleep, config=config)

        workflow.run(input_file)

        assert client.calls_to("get_streaming_endpoint") == [
            ("get_streaming_endpoint", "edge")
        ]
        assert client.calls_to("start_streaming_endpoint") == [
            ("start_streaming_endpoint", "edge", True)
        ]


class TestFailedJob:
    def test_error_stops_before_locator(self, uploader, sleep, input_file, caplog):
        client = FakeMediaServicesClient(
            job_states=[(JobState.PROCESSING, 10), (JobState.ERROR, None)],
            error_message="An error has occurred. Stage: DownloadFile.",
        )
        workflow = make_workflow(client, uploader, sleep)

        with caplog.at_level(logging.INFO):
            result = workflow.run(input_file)

        assert not result.succeeded
        assert result.urls == []
        assert result.job.error_message == "An error has occurred. Stage: DownloadFile."
        assert client.calls_to("create_streaming_locator") == []
        assert client.calls_to("get_streaming_endpoint") == []
        assert client.calls_to("list_streaming_paths") == []
        assert (
            "ERROR: Encoding job has failed An error has occurred. Stage: DownloadFile."
            in [r.getMessage() for r in caplog.records]
        )

    def test_error_without_details_reports_fallback(
        self, uploader, sleep, input_file, caplog
    ):
        client = FakeMediaServicesClient(job_states=[(JobState.ERROR, None)])
        workflow = make_workflow(client, uploader, sleep)

        with caplog.at_level(logging.INFO):
            result = workflow.run(input_file)

        messages = [r.getMessage() for r in caplog.records]
        assert result.job.error_message is None
        assert "ERROR: Encoding job has failed no error details reported" in messages
        assert not any(m.endswith("None") for m in messages)
        assert client.calls_to("create_streaming_locator") == []

    def test_canceled_job_still_gets_locator(self, uploader, sleep, input_file):
        client = FakeMediaServicesClient(job_states=[(JobState.CANCELED, 55)])
        workflow = make_workflow(client, uploader, sleep)

        result = workflow.run(input_file)

        assert result.succeeded
        assert len(client.calls_to("create_streaming_locator")) == 1


class TestInputsAndNames:
    def test_missing_input_file_fails_before_remote_calls(self, uploader, sleep, tmp_path):
        client = FakeMediaServicesClient()
        workflow = make_workflow(client, uploader, sleep)

        with pytest.raises(FileNotFoundError):
            workflow.run(tmp_path / "missing.mp4")
        assert client.calls == []

    def test_missing_upload_url_aborts(self, uploader, sleep, input_file):
        class NoSasClient(FakeMediaServicesClient):
            def list_upload_urls(self, asset_name, expiry_time):
                return []

        client = NoSasClient()
        workflow = make_workflow(client, uploader, sleep)

        with pytest.raises(MediaServicesError):
            workflow.run(input_file)
        assert uploader.uploads == []
        assert client.calls_to("create_job") == []

    def test_remote_failure_aborts_workflow(self, uploader, sleep, input_file):
        class FailingJobClient(FakeMediaServicesClient):
            def create_job(self, transform_name, job_name, input_asset_name, output_asset_name):
                raise MediaServicesError("create job", job_name)

        client = FailingJobClient()
        workflow = make_workflow(client, uploader, sleep)

        with pytest.raises(MediaServicesError):
            workflow.run(input_file)
        assert client.calls_to("get_job") == []

    def test_consecutive_runs_use_distinct_names(self, sleep, input_file):
        first = make_workflow(FakeMediaServicesClient(), RecordingUploader(), sleep)
        second = make_workflow(FakeMediaServicesClient(), RecordingUploader(), sleep)

        a = first.run(input_file).names
        b = second.run(input_file).names

        assert a.suffix != b.suffix
        assert {a.input_asset, a.output_asset, a.job, a.locator}.isdisjoint(
            {b.input_asset, b.output_asset, b.job, b.locator}
        )

"""Handler orchestrating one VOD encoding workflow run."""

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

from vod_creator.config import WorkflowConfig
from vod_creator.domain import (
    DEFAULT_ENCODING_PROFILE,
    EncodingProfile,
    JobState,
    JobStatus,
    ResourceNames,
    StreamingUrlBuilder,
    VodResult,
)
from vod_creator.exceptions import MediaServicesError
from vod_creator.infrastructure.interfaces import AssetUploader, MediaServicesClient

from .job_poller import JobPoller

logger = logging.getLogger(__name__)

NO_ERROR_DETAILS = "no error details reported"


class VodWorkflow:
    """Uploads, encodes and publishes one source video."""

    def __init__(
        self,
        client: MediaServicesClient,
        uploader: AssetUploader,
        poller: JobPoller,
        config: WorkflowConfig,
        manage_transform: bool,
        profile: EncodingProfile = DEFAULT_ENCODING_PROFILE,
        url_builder: StreamingUrlBuilder | None = None,
    ):
        self._client = client
        self._uploader = uploader
        self._poller = poller
        self._config = config
        self._manage_transform = manage_transform
        self._profile = profile
        self._url_builder = url_builder or StreamingUrlBuilder()

    def run(self, input_file: Path) -> VodResult:
        """
        Runs the workflow end to end for a local video file.

        Steps run strictly in order and the first failure aborts the run.
        A job that ends in Error is reported in the result rather than
        raised, and no locator is created for it.

        Args:
            input_file: Local video file to encode.

        Returns:
            VodResult with the final job state and the playable URLs.

        Raises:
            FileNotFoundError: If the input file does not exist.
            MediaServicesError: If a management API call fails.
            AssetUploadError: If the video upload fails.
        """
        if not input_file.is_file():
            raise FileNotFoundError(f"Input file not found: {input_file}")

        names = ResourceNames.generate(self._config.unique_suffix_length)

        input_asset = self._client.create_or_update_asset(names.input_asset)
        logger.info(f"Input asset created: {input_asset}", extra={"asset": input_asset})

        self._upload(input_asset, input_file)

        output_asset = self._client.create_or_update_asset(names.output_asset)
        logger.info(
            f"Output asset created: {output_asset}", extra={"asset": output_asset}
        )

        transform_name = self._config.transform_name
        if self._manage_transform:
            self._client.create_or_update_transform(transform_name, self._profile)
            logger.info(
                f"Transform created: {transform_name}",
                extra={"transform": transform_name},
            )

        job = self._client.create_job(
            transform_name, names.job, input_asset, output_asset
        )
        logger.info(f"Job created: {job.name}", extra={"job": job.name})

        job = self._poller.wait_for_completion(transform_name, names.job)

        if job.state == JobState.ERROR:
            error_message = job.error_message or NO_ERROR_DETAILS
            logger.error(
                f"ERROR: Encoding job has failed {error_message}",
                extra={"job": job.name, "error": error_message},
            )
            return VodResult(names=names, job=job)

        if job.state == JobState.CANCELED:
            logger.warning(f"Job canceled: {job.name}", extra={"job": job.name})
        else:
            logger.info(f"Job finished: {job.name}", extra={"job": job.name})

        return self._publish(names, output_asset, job)

    def _upload(self, asset_name: str, input_file: Path) -> None:
        logger.info(
            "Uploading video to input asset...",
            extra={"asset": asset_name, "file_name": input_file.name},
        )
        expiry_time = datetime.now(timezone.utc) + timedelta(
            hours=self._config.upload_sas_expiry_hours
        )
        container_urls = self._client.list_upload_urls(asset_name, expiry_time)
        if not container_urls:
            raise MediaServicesError("list container SAS", asset_name)

        self._uploader.upload(container_urls[0], input_file)
        logger.info("Video upload completed!", extra={"asset": asset_name})

    def _publish(
        self, names: ResourceNames, output_asset: str, job: JobStatus
    ) -> VodResult:
        locator = self._client.create_streaming_locator(
            names.locator, output_asset, self._config.streaming_policy_name
        )
        logger.info(
            f"Streaming locator created: {locator}", extra={"locator": locator}
        )

        endpoint_name = self._config.streaming_endpoint_name
        endpoint = self._client.get_streaming_endpoint(endpoint_name)
        if not endpoint.is_running:
            logger.info(
                f"Starting streaming endpoint: {endpoint_name}",
                extra={
                    "endpoint": endpoint_name,
                    "state": endpoint.resource_state,
                },
            )
            self._client.start_streaming_endpoint(
                endpoint_name, wait=self._config.wait_for_streaming_endpoint
            )

        paths = self._client.list_streaming_paths(names.locator)
        streaming_urls, download_urls = self._url_builder.build(
            endpoint.host_name, paths
        )

        logger.info(
            "Playback URLs resolved",
            extra={
                "locator": names.locator,
                "host_name": endpoint.host_name,
                "streaming_url_count": len(streaming_urls),
                "download_url_count": len(download_urls),
            },
        )

        return VodResult(
            names=names,
            job=job,
            streaming_urls=streaming_urls,
            download_urls=download_urls,
        )

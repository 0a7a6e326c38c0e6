"""Azure Media Services SDK implementation of the MediaServicesClient interface."""

import logging
from datetime import datetime

from azure.core.exceptions import AzureError
from azure.mgmt.media import AzureMediaServices
from azure.mgmt.media.models import (
    AacAudio,
    Asset,
    AssetContainerPermission,
    H264Layer,
    H264Video,
    Job,
    JobInputAsset,
    JobOutputAsset,
    JpgFormat,
    JpgImage,
    JpgLayer,
    ListContainerSasInput,
    Mp4Format,
    OnErrorType,
    StandardEncoderPreset,
    StreamingLocator,
    Transform,
    TransformOutput,
)

from vod_creator.domain.models import (
    JobState,
    JobStatus,
    StreamingEndpointInfo,
    StreamingEndpointState,
    StreamingPaths,
)
from vod_creator.domain.transform_profile import EncodingProfile
from vod_creator.exceptions import MediaServicesError

from .interfaces import MediaServicesClient

logger = logging.getLogger(__name__)

_FORMATS = {"mp4": Mp4Format, "jpg": JpgFormat}


def _enum_value(value):
    """Returns the wire value of an SDK enum member or plain string."""
    return getattr(value, "value", value)


def _job_state(value) -> JobState:
    """Maps a reported job state, treating unlisted ones as non-terminal."""
    raw = _enum_value(value)
    try:
        return JobState(raw)
    except ValueError:
        logger.warning("Unrecognised job state", extra={"state": raw})
        return JobState.UNKNOWN


def _endpoint_state(value) -> StreamingEndpointState | None:
    """Maps a reported endpoint state; unlisted ones map to None."""
    raw = _enum_value(value)
    if not raw:
        return None
    try:
        return StreamingEndpointState(raw)
    except ValueError:
        logger.warning("Unrecognised streaming endpoint state", extra={"state": raw})
        return None


class AzureMediaServicesClient(MediaServicesClient):
    """Media services operations bound to one resource group and account."""

    def __init__(
        self,
        client: AzureMediaServices,
        resource_group_name: str,
        account_name: str,
    ):
        self._client = client
        self._resource_group_name = resource_group_name
        self._account_name = account_name

    @property
    def _scope(self) -> tuple[str, str]:
        return self._resource_group_name, self._account_name

    def create_or_update_asset(self, asset_name: str) -> str:
        try:
            asset = self._client.assets.create_or_update(
                *self._scope, asset_name, Asset()
            )
        except AzureError as e:
            logger.exception("Asset creation failed", extra={"asset": asset_name})
            raise MediaServicesError("create asset", asset_name, e) from e
        return asset.name

    def list_upload_urls(self, asset_name: str, expiry_time: datetime) -> list[str]:
        try:
            sas = self._client.assets.list_container_sas(
                *self._scope,
                asset_name,
                ListContainerSasInput(
                    permissions=AssetContainerPermission.READ_WRITE,
                    expiry_time=expiry_time,
                ),
            )
        except AzureError as e:
            logger.exception("Listing container SAS failed", extra={"asset": asset_name})
            raise MediaServicesError("list container SAS", asset_name, e) from e
        return list(sas.asset_container_sas_urls or [])

    def create_or_update_transform(
        self, transform_name: str, profile: EncodingProfile
    ) -> str:
        transform = Transform(
            description=profile.description,
            outputs=[self._build_transform_output(profile)],
        )
        try:
            result = self._client.transforms.create_or_update(
                *self._scope, transform_name, transform
            )
        except AzureError as e:
            logger.exception(
                "Transform creation failed", extra={"transform": transform_name}
            )
            raise MediaServicesError("create transform", transform_name, e) from e
        return result.name

    def create_job(
        self,
        transform_name: str,
        job_name: str,
        input_asset_name: str,
        output_asset_name: str,
    ) -> JobStatus:
        job = Job(
            input=JobInputAsset(asset_name=input_asset_name),
            outputs=[JobOutputAsset(asset_name=output_asset_name)],
        )
        try:
            created = self._client.jobs.create(
                *self._scope, transform_name, job_name, job
            )
        except AzureError as e:
            logger.exception("Job submission failed", extra={"job": job_name})
            raise MediaServicesError("create job", job_name, e) from e
        return self._to_job_status(created)

    def get_job(self, transform_name: str, job_name: str) -> JobStatus:
        try:
            job = self._client.jobs.get(*self._scope, transform_name, job_name)
        except AzureError as e:
            logger.exception("Job query failed", extra={"job": job_name})
            raise MediaServicesError("get job", job_name, e) from e
        return self._to_job_status(job)

    def create_streaming_locator(
        self, locator_name: str, asset_name: str, streaming_policy_name: str
    ) -> str:
        locator = StreamingLocator(
            asset_name=asset_name,
            streaming_policy_name=streaming_policy_name,
        )
        try:
            created = self._client.streaming_locators.create(
                *self._scope, locator_name, locator
            )
        except AzureError as e:
            logger.exception(
                "Streaming locator creation failed", extra={"locator": locator_name}
            )
            raise MediaServicesError("create streaming locator", locator_name, e) from e
        return created.name

    def get_streaming_endpoint(self, endpoint_name: str) -> StreamingEndpointInfo:
        try:
            endpoint = self._client.streaming_endpoints.get(*self._scope, endpoint_name)
        except AzureError as e:
            logger.exception(
                "Streaming endpoint query failed", extra={"endpoint": endpoint_name}
            )
            raise MediaServicesError("get streaming endpoint", endpoint_name, e) from e

        return StreamingEndpointInfo(
            name=endpoint.name or endpoint_name,
            host_name=endpoint.host_name or "",
            resource_state=_endpoint_state(endpoint.resource_state),
        )

    def start_streaming_endpoint(self, endpoint_name: str, wait: bool = False) -> None:
        try:
            poller = self._client.streaming_endpoints.begin_start(
                *self._scope, endpoint_name
            )
            if wait:
                poller.result()
        except AzureError as e:
            logger.exception(
                "Streaming endpoint start failed", extra={"endpoint": endpoint_name}
            )
            raise MediaServicesError("start streaming endpoint", endpoint_name, e) from e

    def list_streaming_paths(self, locator_name: str) -> StreamingPaths:
        try:
            response = self._client.streaming_locators.list_paths(
                *self._scope, locator_name
            )
        except AzureError as e:
            logger.exception(
                "Listing streaming paths failed", extra={"locator": locator_name}
            )
            raise MediaServicesError("list streaming paths", locator_name, e) from e

        return StreamingPaths(
            streaming_paths=[
                list(path.paths or []) for path in response.streaming_paths or []
            ],
            download_paths=list(response.download_paths or []),
        )

    def _to_job_status(self, job: Job) -> JobStatus:
        output = job.outputs[0] if job.outputs else None
        error = output.error if output is not None else None
        return JobStatus(
            name=job.name,
            state=_job_state(job.state),
            progress=(output.progress if output is not None else None) or 0,
            error_message=error.message if error is not None else None,
        )

    def _build_transform_output(self, profile: EncodingProfile) -> TransformOutput:
        codecs = [
            AacAudio(
                channels=profile.audio.channels,
                sampling_rate=profile.audio.sampling_rate,
                bitrate=profile.audio.bitrate,
                profile=profile.audio.profile,
            ),
            H264Video(
                key_frame_interval=profile.video.key_frame_interval,
                layers=[
                    H264Layer(
                        bitrate=layer.bitrate,
                        width=str(layer.width),
                        height=str(layer.height),
                        label=layer.label,
                    )
                    for layer in profile.video.layers
                ],
            ),
            JpgImage(
                start=profile.thumbnails.start,
                step=profile.thumbnails.step,
                range=profile.thumbnails.range,
                layers=[
                    JpgLayer(
                        width=profile.thumbnails.width,
                        height=profile.thumbnails.height,
                    )
                ],
            ),
        ]
        formats = [
            _FORMATS[fmt.container](filename_pattern=fmt.filename_pattern)
            for fmt in profile.formats
        ]
        return TransformOutput(
            preset=StandardEncoderPreset(codecs=codecs, formats=formats),
            on_error=(
                OnErrorType.STOP_PROCESSING_JOB
                if profile.stop_job_on_error
                else OnErrorType.CONTINUE_JOB
            ),
            relative_priority=profile.relative_priority,
        )

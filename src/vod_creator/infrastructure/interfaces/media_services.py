"""Abstract interface for media services management operations."""

from abc import ABC, abstractmethod
from datetime import datetime

from vod_creator.domain.models import JobStatus, StreamingEndpointInfo, StreamingPaths
from vod_creator.domain.transform_profile import EncodingProfile


class MediaServicesClient(ABC):
    """
    Narrow capability interface over a media services account.

    Implementations are bound to one resource group and account for their
    whole lifetime, so no operation takes those as arguments.
    """

    @abstractmethod
    def create_or_update_asset(self, asset_name: str) -> str:
        """
        Creates an empty asset, or returns the existing one with that name.

        Args:
            asset_name: Name of the asset.

        Returns:
            The name of the asset as reported by the service.

        Raises:
            MediaServicesError: If the call fails.
        """

    @abstractmethod
    def list_upload_urls(self, asset_name: str, expiry_time: datetime) -> list[str]:
        """
        Lists read-write SAS URLs for the asset's backing storage container.

        Args:
            asset_name: Name of the asset.
            expiry_time: When the returned URLs stop being valid.

        Returns:
            Container URLs carrying their SAS token.

        Raises:
            MediaServicesError: If the call fails.
        """

    @abstractmethod
    def create_or_update_transform(
        self, transform_name: str, profile: EncodingProfile
    ) -> str:
        """
        Upserts a transform with a single output encoding the given profile.

        Args:
            transform_name: Name of the transform.
            profile: Encoder preset applied by the transform output.

        Returns:
            The name of the transform.

        Raises:
            MediaServicesError: If the call fails.
        """

    @abstractmethod
    def create_job(
        self,
        transform_name: str,
        job_name: str,
        input_asset_name: str,
        output_asset_name: str,
    ) -> JobStatus:
        """
        Submits an encoding job from one input asset into one output asset.

        Raises:
            MediaServicesError: If the call fails.
        """

    @abstractmethod
    def get_job(self, transform_name: str, job_name: str) -> JobStatus:
        """
        Fetches the current state of a job.

        Raises:
            MediaServicesError: If the call fails.
        """

    @abstractmethod
    def create_streaming_locator(
        self, locator_name: str, asset_name: str, streaming_policy_name: str
    ) -> str:
        """
        Publishes an asset under a streaming policy.

        Returns:
            The name of the streaming locator.

        Raises:
            MediaServicesError: If the call fails.
        """

    @abstractmethod
    def get_streaming_endpoint(self, endpoint_name: str) -> StreamingEndpointInfo:
        """
        Fetches a streaming endpoint.

        Raises:
            MediaServicesError: If the call fails.
        """

    @abstractmethod
    def start_streaming_endpoint(self, endpoint_name: str, wait: bool = False) -> None:
        """
        Starts a streaming endpoint.

        Args:
            endpoint_name: Name of the streaming endpoint.
            wait: Block until the start operation has completed.

        Raises:
            MediaServicesError: If the call fails.
        """

    @abstractmethod
    def list_streaming_paths(self, locator_name: str) -> StreamingPaths:
        """
        Lists the streaming and download paths of a streaming locator.

        Raises:
            MediaServicesError: If the call fails.
        """

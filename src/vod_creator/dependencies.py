"""Dependency wiring and media services client selection."""

import logging
from enum import Enum

from vod_creator.config import AppConfig
from vod_creator.exceptions import InvalidMediaServicesTypeError, MissingAccountConfigError
from vod_creator.handlers import JobPoller, VodWorkflow
from vod_creator.infrastructure import (
    AccountBinding,
    ApiKeyAccountBinding,
    AzureAdAccountBinding,
    BlobAssetUploader,
)
from vod_creator.infrastructure.interfaces import AssetUploader, MediaServicesClient

logger = logging.getLogger(__name__)


class MediaServicesType(str, Enum):
    """Recognised media services account types."""

    AMS = "ams"
    RMS = "rms"


def get_account_binding(media_services_type: str, config: AppConfig) -> AccountBinding:
    """
    Selects the account binding for a media services type.

    No network call is made here, so an invalid selection fails before any
    workflow step runs.

    Raises:
        InvalidMediaServicesTypeError: If the type is not recognised.
        MissingAccountConfigError: If the selected account is not configured.
    """
    try:
        selected = MediaServicesType(media_services_type)
    except ValueError:
        raise InvalidMediaServicesTypeError(media_services_type) from None

    if selected is MediaServicesType.AMS:
        if config.azure is None:
            raise MissingAccountConfigError(media_services_type)
        return AzureAdAccountBinding(config.azure)

    if config.rms is None:
        raise MissingAccountConfigError(media_services_type)
    return ApiKeyAccountBinding(config.rms)


def get_media_client(media_services_type: str, config: AppConfig) -> MediaServicesClient:
    """Returns an authenticated client for the selected account."""
    return get_account_binding(media_services_type, config).connect()


def get_uploader() -> AssetUploader:
    """Returns the configured asset uploader."""
    return BlobAssetUploader()


def get_workflow(media_services_type: str, config: AppConfig) -> VodWorkflow:
    """Returns a workflow wired to the selected account."""
    binding = get_account_binding(media_services_type, config)
    client = binding.connect()
    logger.info(
        "Media services client ready",
        extra={"media_services_type": media_services_type},
    )
    return VodWorkflow(
        client=client,
        uploader=get_uploader(),
        poller=JobPoller(client, config.workflow.poll_interval_seconds),
        config=config.workflow,
        manage_transform=binding.supports_transform_writes,
    )

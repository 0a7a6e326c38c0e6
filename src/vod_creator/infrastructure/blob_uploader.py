"""Azure Blob Storage implementation of the AssetUploader interface."""

import logging
from pathlib import Path

from azure.core.exceptions import AzureError
from azure.storage.blob import ContainerClient

from vod_creator.exceptions import AssetUploadError

from .interfaces import AssetUploader

logger = logging.getLogger(__name__)


class BlobAssetUploader(AssetUploader):
    """Uploads files straight into an asset's backing blob container."""

    def upload(self, container_url: str, file_path: Path) -> str:
        blob_name = file_path.name
        try:
            container = ContainerClient.from_container_url(container_url)
            with open(file_path, "rb") as data:
                container.upload_blob(name=blob_name, data=data, overwrite=True)
        except (AzureError, OSError) as e:
            logger.exception("Blob upload failed", extra={"blob_name": blob_name})
            raise AssetUploadError(blob_name, e) from e

        logger.info(
            "File uploaded to asset container",
            extra={"blob_name": blob_name, "size": file_path.stat().st_size},
        )
        return blob_name

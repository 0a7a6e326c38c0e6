"""Abstract interface for uploading files into asset containers."""

from abc import ABC, abstractmethod
from pathlib import Path


class AssetUploader(ABC):
    """Abstract base class for asset container upload backends."""

    @abstractmethod
    def upload(self, container_url: str, file_path: Path) -> str:
        """
        Uploads a local file into a container, named by its base file name.

        Args:
            container_url: Container URL carrying a write-capable SAS token.
            file_path: Local file to upload.

        Returns:
            The name of the uploaded blob.

        Raises:
            AssetUploadError: If the upload fails.
        """

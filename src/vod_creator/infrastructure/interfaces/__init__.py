"""Infrastructure interface exports."""

from .asset_uploader import AssetUploader
from .media_services import MediaServicesClient

__all__ = ["AssetUploader", "MediaServicesClient"]

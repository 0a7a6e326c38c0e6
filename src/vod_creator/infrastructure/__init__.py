"""Infrastructure layer exports."""

from .account_bindings import AccountBinding, ApiKeyAccountBinding, AzureAdAccountBinding
from .azure_media_services import AzureMediaServicesClient
from .blob_uploader import BlobAssetUploader

__all__ = [
    "AccountBinding",
    "ApiKeyAccountBinding",
    "AzureAdAccountBinding",
    "AzureMediaServicesClient",
    "BlobAssetUploader",
]

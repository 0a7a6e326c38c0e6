"""Custom exceptions for the VOD creator."""


class InvalidMediaServicesTypeError(ValueError):
    """Raised when the requested media services type is not recognised."""

    def __init__(self, media_services_type: str):
        self.media_services_type = media_services_type
        super().__init__(f"Invalid media service type: {media_services_type}")


class MissingAccountConfigError(ValueError):
    """Raised when the selected media services account has no configuration."""

    def __init__(self, media_services_type: str):
        self.media_services_type = media_services_type
        super().__init__(
            f"No account configuration provided for media service type "
            f"'{media_services_type}'"
        )


class MediaServicesError(Exception):
    """Raised when a call to the media services management API fails."""

    def __init__(
        self, operation: str, resource_name: str, cause: Exception | None = None
    ):
        self.operation = operation
        self.resource_name = resource_name
        self.cause = cause
        super().__init__(f"Media services {operation} failed for '{resource_name}'")


class AssetUploadError(Exception):
    """Raised when uploading a file into an asset container fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to upload '{file_name}' to asset container")

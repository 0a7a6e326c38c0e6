from vod_creator.config import AppConfig, load_config
from vod_creator.exceptions import (
    AssetUploadError,
    InvalidMediaServicesTypeError,
    MediaServicesError,
    MissingAccountConfigError,
)
from vod_creator.logging import setup_logging

__all__ = [
    "setup_logging",
    "AppConfig",
    "load_config",
    "AssetUploadError",
    "InvalidMediaServicesTypeError",
    "MediaServicesError",
    "MissingAccountConfigError",
]

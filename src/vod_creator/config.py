"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel


class AzureMediaServicesConfig(BaseModel, frozen=True):
    """Azure Media Services account authenticated through Azure AD."""

    api_endpoint: str = "https://management.azure.com/"
    aad_tenant_id: str
    client_id: str
    client_secret: str
    subscription_id: str
    resource_group_name: str
    media_services_account_name: str
    aad_authority: str = "https://login.microsoftonline.com"


class RmsConfig(BaseModel, frozen=True):
    """AMS-compatible account authenticated with a static API key."""

    api_endpoint: str
    api_key: str
    subscription_id: str
    resource_group_name: str
    media_services_account_name: str
    api_key_header: str = "x-mkio-token"


class WorkflowConfig(BaseModel, frozen=True):
    """Names and timings used by one VOD workflow run."""

    transform_name: str = "Default"
    streaming_endpoint_name: str = "default"
    streaming_policy_name: str = "Predefined_DownloadAndClearStreaming"
    poll_interval_seconds: float = 30
    upload_sas_expiry_hours: int = 1
    unique_suffix_length: int = 13
    wait_for_streaming_endpoint: bool = False


class LoggingConfig(BaseModel, frozen=True):
    """Log output configuration."""

    level: str = "INFO"
    json_format: bool = False


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    azure: AzureMediaServicesConfig | None = None
    rms: RmsConfig | None = None
    workflow: WorkflowConfig = WorkflowConfig()
    logging: LoggingConfig = LoggingConfig()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _load_azure_config() -> AzureMediaServicesConfig | None:
    if not os.getenv("AMS_SUBSCRIPTION_ID"):
        return None
    return AzureMediaServicesConfig(
        api_endpoint=os.getenv("AMS_API_ENDPOINT", "https://management.azure.com/"),
        aad_tenant_id=os.getenv("AMS_AAD_TENANT_ID", ""),
        client_id=os.getenv("AMS_CLIENT_ID", ""),
        client_secret=os.getenv("AMS_CLIENT_SECRET", ""),
        subscription_id=os.getenv("AMS_SUBSCRIPTION_ID", ""),
        resource_group_name=os.getenv("AMS_RESOURCE_GROUP", ""),
        media_services_account_name=os.getenv("AMS_ACCOUNT_NAME", ""),
        aad_authority=os.getenv(
            "AMS_AAD_AUTHORITY", "https://login.microsoftonline.com"
        ),
    )


def _load_rms_config() -> RmsConfig | None:
    if not os.getenv("RMS_API_ENDPOINT"):
        return None
    return RmsConfig(
        api_endpoint=os.getenv("RMS_API_ENDPOINT", ""),
        api_key=os.getenv("RMS_API_KEY", ""),
        subscription_id=os.getenv("RMS_SUBSCRIPTION_ID", ""),
        resource_group_name=os.getenv("RMS_RESOURCE_GROUP", ""),
        media_services_account_name=os.getenv("RMS_ACCOUNT_NAME", ""),
        api_key_header=os.getenv("RMS_API_KEY_HEADER", "x-mkio-token"),
    )


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        azure=_load_azure_config(),
        rms=_load_rms_config(),
        workflow=WorkflowConfig(
            transform_name=os.getenv("VOD_TRANSFORM_NAME", "Default"),
            streaming_endpoint_name=os.getenv("VOD_STREAMING_ENDPOINT", "default"),
            streaming_policy_name=os.getenv(
                "VOD_STREAMING_POLICY", "Predefined_DownloadAndClearStreaming"
            ),
            poll_interval_seconds=float(os.getenv("VOD_POLL_INTERVAL_SECONDS", "30")),
            upload_sas_expiry_hours=int(os.getenv("VOD_UPLOAD_SAS_EXPIRY_HOURS", "1")),
            wait_for_streaming_endpoint=_env_flag(
                "VOD_WAIT_FOR_STREAMING_ENDPOINT", "false"
            ),
        ),
        logging=LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            json_format=_env_flag("LOG_JSON", "false"),
        ),
    )

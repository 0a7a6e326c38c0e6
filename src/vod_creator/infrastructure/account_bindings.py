"""Account bindings producing authenticated media services clients."""

import logging
from abc import ABC, abstractmethod

from azure.core.credentials import AzureKeyCredential
from azure.core.pipeline.policies import AzureKeyCredentialPolicy
from azure.identity import ClientSecretCredential
from azure.mgmt.media import AzureMediaServices

from vod_creator.config import AzureMediaServicesConfig, RmsConfig

from .azure_media_services import AzureMediaServicesClient

logger = logging.getLogger(__name__)


class AccountBinding(ABC):
    """Credential flow and account scope of one media services account."""

    #: Whether the account accepts transform writes.
    supports_transform_writes: bool = True

    @abstractmethod
    def connect(self) -> AzureMediaServicesClient:
        """
        Builds a client bound to this account.

        Returns:
            A client scoped to the account's resource group and account name.
        """


class AzureAdAccountBinding(AccountBinding):
    """Azure Media Services account signed in with an Azure AD service principal."""

    supports_transform_writes = True

    def __init__(self, config: AzureMediaServicesConfig):
        self._config = config

    @property
    def credential_scope(self) -> str:
        return f"{self._config.api_endpoint.rstrip('/')}/.default"

    def connect(self) -> AzureMediaServicesClient:
        credential = ClientSecretCredential(
            tenant_id=self._config.aad_tenant_id,
            client_id=self._config.client_id,
            client_secret=self._config.client_secret,
            authority=self._config.aad_authority,
        )
        # Blocking sign-in so bad credentials fail before any workflow step.
        credential.get_token(self.credential_scope)
        logger.info(
            "Signed in to Azure AD",
            extra={
                "tenant_id": self._config.aad_tenant_id,
                "subscription_id": self._config.subscription_id,
            },
        )

        client = AzureMediaServices(
            credential=credential,
            subscription_id=self._config.subscription_id,
            base_url=self._config.api_endpoint,
            credential_scopes=[self.credential_scope],
        )
        return AzureMediaServicesClient(
            client,
            self._config.resource_group_name,
            self._config.media_services_account_name,
        )


class ApiKeyAccountBinding(AccountBinding):
    """AMS-compatible account authenticated with a static API key header."""

    # Transform writes are not supported by API-key accounts yet.
    supports_transform_writes = False

    def __init__(self, config: RmsConfig):
        self._config = config

    def connect(self) -> AzureMediaServicesClient:
        credential = AzureKeyCredential(self._config.api_key)
        client = AzureMediaServices(
            credential=credential,
            subscription_id=self._config.subscription_id,
            base_url=self._config.api_endpoint,
            authentication_policy=AzureKeyCredentialPolicy(
                credential, self._config.api_key_header
            ),
        )
        logger.info(
            "API key client created",
            extra={
                "api_endpoint": self._config.api_endpoint,
                "subscription_id": self._config.subscription_id,
            },
        )
        return AzureMediaServicesClient(
            client,
            self._config.resource_group_name,
            self._config.media_services_account_name,
        )

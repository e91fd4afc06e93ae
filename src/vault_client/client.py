"""
vault_client.client

Vault service client.

Responsibilities:
- Hold the service metadata (service name/id, API version, endpoint, signing scope).
- Attach each operation to the shared HTTP client via `*_request` builders.
- Provide one coroutine per operation that builds, sends, and returns the typed output.
"""

from __future__ import annotations

import asyncio
from types import TracebackType

import httpx
from botocore.credentials import Credentials, ReadOnlyCredentials

from vault_client.auth.credentials import resolve_credentials
from vault_client.operations.base import InputShape
from vault_client.operations.create_account import (
    OP_CREATE_ACCOUNT,
    CreateAccountInput,
    CreateAccountOutput,
)
from vault_client.operations.delete_account import (
    OP_DELETE_ACCOUNT,
    DeleteAccountInput,
    DeleteAccountOutput,
)
from vault_client.operations.generate_account_access_key import (
    OP_GENERATE_ACCOUNT_ACCESS_KEY,
    GenerateAccountAccessKeyInput,
    GenerateAccountAccessKeyOutput,
)
from vault_client.operations.list_accounts import (
    OP_LIST_ACCOUNTS,
    ListAccountsInput,
    ListAccountsOutput,
)
from vault_client.request import ClientInfo, Operation, OutputT, VaultRequest
from vault_client.settings import Settings

SERVICE_NAME = "iam"
SERVICE_ID = "Vault"
API_VERSION = "2010-05-08"


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    # Connection retries and pooling belong to the transport, not to the client.
    transport = httpx.AsyncHTTPTransport(
        retries=settings.max_retries,
        limits=httpx.Limits(keepalive_expiry=settings.keepalive_expiry),
    )
    return httpx.AsyncClient(
        transport=transport,
        timeout=httpx.Timeout(settings.timeout_seconds),
    )


class VaultClient:
    """
    Provides the API operation methods for making requests to Vault.

    The HTTP client is shared across operations and may be injected; an injected
    client is never closed by `VaultClient`.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        http: httpx.AsyncClient,
        credentials: Credentials | None = None,
    ) -> None:
        self._settings = settings
        self._http = http
        self._credentials = credentials
        self._credentials_lock = asyncio.Lock()
        self._owns_http = False
        self.info = ClientInfo(
            service_name=SERVICE_NAME,
            service_id=SERVICE_ID,
            api_version=API_VERSION,
            endpoint=settings.endpoint,
            signing_name=SERVICE_NAME,
            signing_region=settings.region,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, *, credentials: Credentials | None = None
    ) -> VaultClient:
        client = cls(settings=settings, http=create_http_client(settings), credentials=credentials)
        client._owns_http = True
        return client

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> VaultClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _get_credentials(self) -> ReadOnlyCredentials:
        # Resolved on first signature so validation failures never need credentials.
        # The default chain and refreshes may do blocking metadata calls; keep them off the loop.
        async with self._credentials_lock:
            if self._credentials is None:
                self._credentials = await asyncio.to_thread(resolve_credentials, self._settings)
        return await asyncio.to_thread(self._credentials.get_frozen_credentials)

    def _new_request(
        self, op: Operation, params: InputShape, output_type: type[OutputT]
    ) -> VaultRequest[OutputT]:
        return VaultRequest(
            info=self.info,
            http=self._http,
            credentials=self._get_credentials,
            operation=op,
            params=params,
            output_type=output_type,
        )

    # CreateAccount

    def create_account_request(
        self, params: CreateAccountInput | None = None
    ) -> VaultRequest[CreateAccountOutput]:
        return self._new_request(
            Operation(name=OP_CREATE_ACCOUNT),
            params if params is not None else CreateAccountInput(),
            CreateAccountOutput,
        )

    async def create_account(self, params: CreateAccountInput | None = None) -> CreateAccountOutput:
        """Create a new Vault account."""
        return await self.create_account_request(params).send()

    # DeleteAccount

    def delete_account_request(
        self, params: DeleteAccountInput | None = None
    ) -> VaultRequest[DeleteAccountOutput]:
        return self._new_request(
            Operation(name=OP_DELETE_ACCOUNT),
            params if params is not None else DeleteAccountInput(),
            DeleteAccountOutput,
        )

    async def delete_account(self, params: DeleteAccountInput | None = None) -> DeleteAccountOutput:
        """Delete a Vault account."""
        return await self.delete_account_request(params).send()

    # GenerateAccountAccessKey

    def generate_account_access_key_request(
        self, params: GenerateAccountAccessKeyInput | None = None
    ) -> VaultRequest[GenerateAccountAccessKeyOutput]:
        return self._new_request(
            Operation(name=OP_GENERATE_ACCOUNT_ACCESS_KEY),
            params if params is not None else GenerateAccountAccessKeyInput(),
            GenerateAccountAccessKeyOutput,
        )

    async def generate_account_access_key(
        self, params: GenerateAccountAccessKeyInput | None = None
    ) -> GenerateAccountAccessKeyOutput:
        """Generate a new access key for the account."""
        return await self.generate_account_access_key_request(params).send()

    # ListAccounts

    def list_accounts_request(
        self, params: ListAccountsInput | None = None
    ) -> VaultRequest[ListAccountsOutput]:
        return self._new_request(
            Operation(name=OP_LIST_ACCOUNTS),
            params if params is not None else ListAccountsInput(),
            ListAccountsOutput,
        )

    async def list_accounts(self, params: ListAccountsInput | None = None) -> ListAccountsOutput:
        """List Vault accounts (one page; see `ListAccountsPaginator` for all)."""
        return await self.list_accounts_request(params).send()


# --- Module Notes -----------------------------------------------------------
# Every operation is `POST /`; the operation is selected by the `Action` body field.

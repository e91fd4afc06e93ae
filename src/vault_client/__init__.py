"""
vault_client

Typed client SDK for the Vault account-management service.

Responsibilities:
- Expose package version metadata.
- Re-export the client, operation shapes, and error types.
"""

from vault_client.client import VaultClient, create_http_client
from vault_client.errors import (
    InvalidParamsError,
    PaginationError,
    ParamMinLenError,
    ParamMinValueError,
    ParamRequiredError,
    SerializationError,
    VaultError,
    VaultServiceError,
)
from vault_client.operations.create_account import (
    Account,
    AccountData,
    CreateAccountInput,
    CreateAccountOutput,
)
from vault_client.operations.delete_account import DeleteAccountInput, DeleteAccountOutput
from vault_client.operations.generate_account_access_key import (
    GenerateAccountAccessKeyInput,
    GenerateAccountAccessKeyOutput,
    GeneratedKey,
)
from vault_client.operations.list_accounts import (
    ListAccountsInput,
    ListAccountsOutput,
    ListedAccount,
)
from vault_client.paginators import ListAccountsPaginator
from vault_client.settings import Settings, get_settings

__all__ = [
    "__version__",
    "Account",
    "AccountData",
    "CreateAccountInput",
    "CreateAccountOutput",
    "DeleteAccountInput",
    "DeleteAccountOutput",
    "GenerateAccountAccessKeyInput",
    "GenerateAccountAccessKeyOutput",
    "GeneratedKey",
    "InvalidParamsError",
    "ListAccountsInput",
    "ListAccountsOutput",
    "ListAccountsPaginator",
    "ListedAccount",
    "PaginationError",
    "ParamMinLenError",
    "ParamMinValueError",
    "ParamRequiredError",
    "SerializationError",
    "Settings",
    "VaultClient",
    "VaultError",
    "VaultServiceError",
    "create_http_client",
    "get_settings",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Submodules import from each other directly; this file only re-exports the public surface.

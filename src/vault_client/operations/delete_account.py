"""
vault_client.operations.delete_account

DeleteAccount operation shapes.
"""

from __future__ import annotations

from typing import Self

from pydantic import Field

from vault_client.errors import InvalidParamsError, ParamMinLenError, ParamRequiredError
from vault_client.operations.base import InputShape, OutputShape

OP_DELETE_ACCOUNT = "DeleteAccount"


class DeleteAccountInput(InputShape):
    account_name: str | None = Field(default=None, alias="AccountName")

    def validate_params(self) -> None:
        invalid = InvalidParamsError("DeleteAccountInput")

        if self.account_name is None:
            invalid.add(ParamRequiredError("AccountName"))
        elif len(self.account_name) < 1:
            invalid.add(ParamMinLenError("AccountName", min_len=1))

        invalid.raise_if_any()

    def set_account_name(self, v: str) -> Self:
        self.account_name = v
        return self


class DeleteAccountOutput(OutputShape):
    # Vault answers a successful delete with an empty body (or `{}`).
    pass

"""
vault_client.operations.generate_account_access_key

GenerateAccountAccessKey operation shapes.

Responsibilities:
- Define the request: target account plus an optional externally-provided key pair.
- Define the response: the generated key (id, secret value, dates, status, owner).
"""

from __future__ import annotations

from datetime import datetime
from typing import Self

from pydantic import Field

from vault_client.errors import InvalidParamsError, ParamMinLenError, ParamRequiredError
from vault_client.operations.base import InputShape, OutputShape

OP_GENERATE_ACCOUNT_ACCESS_KEY = "GenerateAccountAccessKey"


class GenerateAccountAccessKeyInput(InputShape):
    account_name: str | None = Field(default=None, alias="AccountName")
    # When both are given Vault imports this pair instead of generating one.
    external_access_key: str | None = Field(default=None, alias="externalAccessKey")
    external_secret_key: str | None = Field(default=None, alias="externalSecretKey", repr=False)

    def validate_params(self) -> None:
        invalid = InvalidParamsError("GenerateAccountAccessKeyInput")

        if self.account_name is None:
            invalid.add(ParamRequiredError("AccountName"))
        elif len(self.account_name) < 1:
            invalid.add(ParamMinLenError("AccountName", min_len=1))

        if self.external_access_key is not None and len(self.external_access_key) < 1:
            invalid.add(ParamMinLenError("ExternalAccessKey", min_len=1))

        if self.external_secret_key is not None and len(self.external_secret_key) < 1:
            invalid.add(ParamMinLenError("ExternalSecretKey", min_len=1))

        invalid.raise_if_any()

    def set_account_name(self, v: str) -> Self:
        self.account_name = v
        return self

    def set_external_access_key(self, v: str) -> Self:
        self.external_access_key = v
        return self

    def set_external_secret_key(self, v: str) -> Self:
        self.external_secret_key = v
        return self


class GeneratedKey(OutputShape):
    id: str | None = None
    value: str | None = Field(default=None, repr=False)
    create_date: datetime | None = Field(default=None, alias="createDate")
    last_used_date: datetime | None = Field(default=None, alias="lastUsedDate")
    status: str | None = None
    user_id: str | None = Field(default=None, alias="userId")


class GenerateAccountAccessKeyOutput(OutputShape):
    generated_key: GeneratedKey | None = Field(default=None, alias="data")

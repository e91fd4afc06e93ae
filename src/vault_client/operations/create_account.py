"""
vault_client.operations.create_account

CreateAccount operation shapes.

Responsibilities:
- Define the request parameters (name, email, quota, external id) and their rules.
- Define the response: the created account with its server-assigned identifiers.
"""

from __future__ import annotations

from datetime import datetime
from typing import Self

from pydantic import Field, StrictInt

from vault_client.errors import (
    InvalidParamsError,
    ParamMinLenError,
    ParamMinValueError,
    ParamRequiredError,
)
from vault_client.operations.base import InputShape, OutputShape

OP_CREATE_ACCOUNT = "CreateAccount"


class CreateAccountInput(InputShape):
    name: str | None = Field(default=None, alias="name")
    email: str | None = Field(default=None, alias="emailAddress")
    quota_max: StrictInt | None = Field(default=None, alias="quotaMax")
    external_account_id: str | None = Field(default=None, alias="externalAccountId")

    def validate_params(self) -> None:
        invalid = InvalidParamsError("CreateAccountInput")

        if self.name is None:
            invalid.add(ParamRequiredError("Name"))
        elif len(self.name) < 1:
            invalid.add(ParamMinLenError("Name", min_len=1))

        if self.email is None:
            invalid.add(ParamRequiredError("Email"))
        elif len(self.email) < 1:
            invalid.add(ParamMinLenError("Email", min_len=1))

        if self.quota_max is not None and self.quota_max < 1:
            invalid.add(ParamMinValueError("QuotaMax", min_value=1))

        if self.external_account_id is not None and len(self.external_account_id) < 1:
            invalid.add(ParamMinLenError("ExternalAccountID", min_len=1))

        invalid.raise_if_any()

    def set_name(self, v: str) -> Self:
        self.name = v
        return self

    def set_email(self, v: str) -> Self:
        self.email = v
        return self

    def set_quota_max(self, v: int) -> Self:
        self.quota_max = v
        return self

    def set_external_account_id(self, v: str) -> Self:
        self.external_account_id = v
        return self


class AccountData(OutputShape):
    """Information about a Vault account."""

    arn: str | None = None
    name: str | None = None
    email: str | None = Field(default=None, alias="emailAddress")
    id: str | None = None
    quota_max: int | None = Field(default=None, alias="quotaMax")
    create_date: datetime | None = Field(default=None, alias="createDate")
    canonical_id: str | None = Field(default=None, alias="canonicalId")
    alias_list: list[str] = Field(default_factory=list, alias="aliasList")


class Account(OutputShape):
    account_data: AccountData | None = Field(default=None, alias="data")


class CreateAccountOutput(OutputShape):
    account: Account | None = None

    def get_account(self) -> AccountData | None:
        if self.account is None:
            return None
        return self.account.account_data

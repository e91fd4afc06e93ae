"""
vault_client.operations.list_accounts

ListAccounts operation shapes.

Responsibilities:
- Define the paging request (marker, max items).
- Define one page of accounts plus the truncation flag and continuation marker.
"""

from __future__ import annotations

from datetime import datetime
from typing import Self

from pydantic import Field, StrictInt

from vault_client.errors import InvalidParamsError, ParamMinLenError, ParamMinValueError
from vault_client.operations.base import InputShape, OutputShape

OP_LIST_ACCOUNTS = "ListAccounts"


class ListAccountsInput(InputShape):
    marker: str | None = Field(default=None, alias="Marker")
    max_items: StrictInt | None = Field(default=None, alias="MaxItems")

    def validate_params(self) -> None:
        invalid = InvalidParamsError("ListAccountsInput")

        if self.marker is not None and len(self.marker) < 1:
            invalid.add(ParamMinLenError("Marker", min_len=1))

        # Upper bound (1000) is enforced server-side only.
        if self.max_items is not None and self.max_items < 1:
            invalid.add(ParamMinValueError("MaxItems", min_value=1))

        invalid.raise_if_any()

    def set_marker(self, v: str) -> Self:
        self.marker = v
        return self

    def set_max_items(self, v: int) -> Self:
        self.max_items = v
        return self


class ListedAccount(OutputShape):
    arn: str | None = None
    name: str | None = None
    email: str | None = Field(default=None, alias="emailAddress")
    id: str | None = None
    # Listed accounts carry the quota as `quota`, not `quotaMax`.
    quota_max: int | None = Field(default=None, alias="quota")
    create_date: datetime | None = Field(default=None, alias="createDate")
    canonical_id: str | None = Field(default=None, alias="canonicalId")


class ListAccountsOutput(OutputShape):
    accounts: list[ListedAccount] = Field(default_factory=list)
    is_truncated: bool | None = Field(default=None, alias="isTruncated")
    marker: str | None = None

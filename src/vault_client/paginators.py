"""
vault_client.paginators

Marker-based pagination over ListAccounts.

Responsibilities:
- Follow `marker` continuation tokens until the listing is no longer truncated.
- Guard against a server that keeps returning the same marker.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from vault_client.errors import PaginationError
from vault_client.operations.list_accounts import (
    ListAccountsInput,
    ListAccountsOutput,
    ListedAccount,
)

if TYPE_CHECKING:
    from vault_client.client import VaultClient


class ListAccountsPaginator:
    def __init__(self, client: VaultClient, params: ListAccountsInput | None = None) -> None:
        self._client = client
        self._params = params if params is not None else ListAccountsInput()

    async def pages(self) -> AsyncIterator[ListAccountsOutput]:
        params = self._params.model_copy()
        seen: set[str] = {params.marker} if params.marker else set()
        while True:
            page = await self._client.list_accounts(params)
            yield page

            if not page.is_truncated or not page.marker:
                return
            if page.marker in seen:
                raise PaginationError(f"marker {page.marker!r} was returned twice")
            seen.add(page.marker)
            params = params.model_copy(update={"marker": page.marker})

    async def accounts(self) -> AsyncIterator[ListedAccount]:
        async for page in self.pages():
            for account in page.accounts:
                yield account


# --- Module Notes -----------------------------------------------------------
# The caller's input is copied, never mutated; `max_items` applies to every page.

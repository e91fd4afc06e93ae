"""
tests.test_list_accounts

ListAccounts: paging parameters, validation, and page mapping.
"""

from __future__ import annotations

import httpx
import pytest
from pydantic import ValidationError

from conftest import (
    MOCK_ARN,
    MOCK_CANONICAL_ID,
    MOCK_CREATE_DATE,
    MOCK_EMAIL,
    MOCK_ID,
    MOCK_NAME,
    MOCK_TIME,
    Recorder,
    form,
)
from vault_client.errors import InvalidParamsError
from vault_client.operations.list_accounts import ListAccountsInput

MOCK_MARKER = "562385153604"


def one_page(_: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200,
        json={
            "isTruncated": True,
            "marker": MOCK_MARKER,
            "accounts": [
                {
                    "arn": MOCK_ARN,
                    "id": MOCK_ID,
                    "name": MOCK_NAME,
                    "createDate": MOCK_CREATE_DATE,
                    "emailAddress": MOCK_EMAIL,
                    "canonicalId": MOCK_CANONICAL_ID,
                    "quota": 1,
                }
            ],
        },
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("params", "sent"),
    [
        (None, {}),
        (ListAccountsInput().set_max_items(10), {"MaxItems": "10"}),
        (ListAccountsInput().set_marker(MOCK_MARKER), {"Marker": MOCK_MARKER}),
    ],
)
async def test_list_accounts(make_client, params, sent: dict[str, str]) -> None:
    server = Recorder(one_page)
    client = make_client(server)

    out = await client.list_accounts(params)

    assert form(server.requests[0]) == {"Action": "ListAccounts", "Version": "2010-05-08", **sent}
    assert out.is_truncated is True
    assert out.marker == MOCK_MARKER
    assert len(out.accounts) == 1
    account = out.accounts[0]
    assert account.email == MOCK_EMAIL
    assert account.name == MOCK_NAME
    assert account.id == MOCK_ID
    assert account.arn == MOCK_ARN
    assert account.canonical_id == MOCK_CANONICAL_ID
    assert account.create_date == MOCK_TIME
    assert account.quota_max == 1


@pytest.mark.asyncio
async def test_empty_listing_is_zero_valued(make_client) -> None:
    client = make_client(Recorder(lambda _: httpx.Response(200, json={})))

    out = await client.list_accounts()

    assert out.accounts == []
    assert out.is_truncated is None
    assert out.marker is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("params", "expected"),
    [
        (ListAccountsInput(max_items=0), "minimum field value of 1, ListAccountsInput.MaxItems."),
        (ListAccountsInput(marker=""), "minimum field size of 1, ListAccountsInput.Marker."),
    ],
)
async def test_list_accounts_invalid_params(make_client, params, expected: str) -> None:
    server = Recorder(one_page)
    client = make_client(server)

    with pytest.raises(InvalidParamsError) as exc:
        await client.list_accounts(params)

    assert [e.message for e in exc.value.errors] == [expected]
    assert server.requests == []


def test_no_client_side_upper_bound_on_max_items() -> None:
    ListAccountsInput(max_items=5000).validate_params()


@pytest.mark.parametrize("value", [True, False, "10"])
def test_max_items_setter_rejects_non_integers(value) -> None:
    params = ListAccountsInput()

    with pytest.raises(ValidationError):
        params.set_max_items(value)

    assert params.max_items is None

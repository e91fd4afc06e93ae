"""
tests.test_delete_account

DeleteAccount: empty-body success and account-name validation.
"""

from __future__ import annotations

import httpx
import pytest

from conftest import MOCK_NAME, Recorder, form
from vault_client.errors import InvalidParamsError
from vault_client.operations.delete_account import DeleteAccountInput, DeleteAccountOutput


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"", b"{}"])
async def test_delete_account_succeeds(make_client, body: bytes) -> None:
    server = Recorder(lambda _: httpx.Response(200, content=body))
    client = make_client(server)

    out = await client.delete_account(DeleteAccountInput().set_account_name(MOCK_NAME))

    assert isinstance(out, DeleteAccountOutput)
    assert form(server.requests[0]) == {
        "Action": "DeleteAccount",
        "Version": "2010-05-08",
        "AccountName": MOCK_NAME,
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("params", "expected"),
    [
        (DeleteAccountInput(account_name=""), "minimum field size of 1, DeleteAccountInput.AccountName."),
        (DeleteAccountInput(), "missing required field, DeleteAccountInput.AccountName."),
        (None, "missing required field, DeleteAccountInput.AccountName."),
    ],
)
async def test_delete_account_invalid_params(make_client, params, expected: str) -> None:
    server = Recorder(lambda _: httpx.Response(200))
    client = make_client(server)

    with pytest.raises(InvalidParamsError) as exc:
        await client.delete_account(params)

    assert [e.message for e in exc.value.errors] == [expected]
    assert server.requests == []

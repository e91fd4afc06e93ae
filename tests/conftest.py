"""
tests.conftest

Shared fixtures: test settings with static credentials, and a client factory
backed by `httpx.MockTransport` standing in for a Vault server.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from urllib.parse import parse_qs

import httpx
import pytest

from vault_client.client import VaultClient
from vault_client.settings import Settings

MOCK_NAME = "myname"
MOCK_EMAIL = "email@email.com"
MOCK_ID = "893701217479"
MOCK_CANONICAL_ID = "cdc9948f9124efae674ed122d52ce4d83d18c53ed05dcbf3765db56a051d7496"
MOCK_CREATE_DATE = "2020-04-20T01:54:54Z"
MOCK_TIME = datetime(2020, 4, 20, 1, 54, 54, tzinfo=UTC)
MOCK_ARN = "arn:aws:iam::893701217479:/myname/"

Handler = Callable[[httpx.Request], httpx.Response]


def form(request: httpx.Request) -> dict[str, str]:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


class Recorder:
    """Wraps a handler and keeps every request it served."""

    def __init__(self, handler: Handler) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        env="test",
        endpoint="http://vault.test:8600",
        region="us-east-1",
        access_key_id="AKIDEXAMPLE",
        secret_access_key="wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY",
    )


@pytest.fixture
def make_client(settings: Settings) -> Callable[[Recorder], VaultClient]:
    def _make(recorder: Recorder) -> VaultClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        return VaultClient(settings=settings, http=http)

    return _make

"""
vault_client.observability.context

Request-scoped logging context for outgoing Vault calls.

Responsibilities:
- Generate/propagate request uids (sent as `x-scal-request-uids`).
- Bind operation metadata into structlog contextvars for the duration of a call.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

REQUEST_UID_HEADER = "x-scal-request-uids"


def new_request_uid() -> str:
    return uuid.uuid4().hex


@contextmanager
def request_context(*, operation: str, request_uid: str) -> Iterator[None]:
    # bound_contextvars restores the previous values on exit, so nested or
    # concurrent calls on the same task do not leak into each other.
    with structlog.contextvars.bound_contextvars(
        operation=operation,
        request_uid=request_uid,
    ):
        yield


# --- Module Notes -----------------------------------------------------------
# Vault echoes the request uid in its own logs, which lets a client-side event be
# correlated with the server-side trace.

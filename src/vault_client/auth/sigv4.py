"""
vault_client.auth.sigv4

SigV4 signing of outgoing httpx requests.

Responsibilities:
- Adapt an `httpx.Request` to botocore's `AWSRequest` and sign it with `SigV4Auth`.
- Copy the resulting auth headers (Authorization, X-Amz-Date, X-Amz-Security-Token) back.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials, ReadOnlyCredentials

# httpx fills these in on send; they are left out of the canonical request.
_UNSIGNED_HEADERS = frozenset(
    {"content-length", "accept", "accept-encoding", "connection", "user-agent"}
)
_AUTH_HEADERS = ("Authorization", "X-Amz-Date", "X-Amz-Security-Token", "X-Amz-Content-SHA256")


@dataclass(frozen=True, slots=True)
class SigningConfig:
    # Signing name/region end up in the credential scope of the Authorization header.
    signing_name: str
    region: str


def sign_request(
    *,
    cfg: SigningConfig,
    credentials: Credentials | ReadOnlyCredentials,
    request: httpx.Request,
) -> None:
    aws_request = AWSRequest(
        method=request.method,
        url=str(request.url),
        data=request.content,
        headers={
            k: v for k, v in request.headers.items() if k.lower() not in _UNSIGNED_HEADERS
        },
    )
    SigV4Auth(credentials, cfg.signing_name, cfg.region).add_auth(aws_request)

    for name in _AUTH_HEADERS:
        value = aws_request.headers.get(name)
        if value is not None:
            request.headers[name] = value


# --- Module Notes -----------------------------------------------------------
# Only the auth headers are copied back; the signed headers and body go out unchanged.

"""
vault_client.request

A single prepared Vault API call.

Responsibilities:
- Hold the operation metadata, the input shape, and the output type.
- Run the send pipeline: validate -> build -> sign -> transport -> unmarshal.
- Bind per-request logging context (operation, request uid).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx
from botocore.credentials import ReadOnlyCredentials

from vault_client.auth.sigv4 import SigningConfig, sign_request
from vault_client.errors import InvalidParamsError, VaultServiceError
from vault_client.observability.context import (
    REQUEST_UID_HEADER,
    new_request_uid,
    request_context,
)
from vault_client.observability.logging import get_logger
from vault_client.operations.base import InputShape, OutputShape
from vault_client.protocol import FORM_CONTENT_TYPE, encode_query_body, unmarshal, unmarshal_error

log = get_logger(__name__)

OutputT = TypeVar("OutputT", bound=OutputShape)


@dataclass(frozen=True, slots=True)
class Operation:
    name: str
    http_method: str = "POST"
    http_path: str = "/"


@dataclass(frozen=True, slots=True)
class ClientInfo:
    service_name: str
    service_id: str
    api_version: str
    endpoint: str
    signing_name: str
    signing_region: str


class VaultRequest(Generic[OutputT]):
    """
    Returned by the `*_request` client methods. Nothing touches the network until
    `send()`; the output is only valid once `send()` returns without raising.
    """

    def __init__(
        self,
        *,
        info: ClientInfo,
        http: httpx.AsyncClient,
        credentials: Callable[[], Awaitable[ReadOnlyCredentials]],
        operation: Operation,
        params: InputShape,
        output_type: type[OutputT],
    ) -> None:
        self.info = info
        self.operation = operation
        self.params = params
        self.output_type = output_type
        self.request_uid = new_request_uid()
        self._http = http
        self._credentials = credentials

    def validate(self) -> None:
        self.params.validate_params()

    def build(self) -> httpx.Request:
        body = encode_query_body(
            action=self.operation.name,
            version=self.info.api_version,
            params=self.params.to_params(),
        )
        return self._http.build_request(
            self.operation.http_method,
            self.info.endpoint.rstrip("/") + self.operation.http_path,
            content=body,
            headers={
                "Content-Type": FORM_CONTENT_TYPE,
                REQUEST_UID_HEADER: self.request_uid,
            },
        )

    def sign(self, request: httpx.Request, credentials: ReadOnlyCredentials) -> None:
        cfg = SigningConfig(signing_name=self.info.signing_name, region=self.info.signing_region)
        sign_request(cfg=cfg, credentials=credentials, request=request)

    async def send(self) -> OutputT:
        with request_context(operation=self.operation.name, request_uid=self.request_uid):
            try:
                self.validate()
            except InvalidParamsError as e:
                log.info("vault.request.invalid", fields=e.fields)
                raise

            request = self.build()
            self.sign(request, await self._credentials())

            log.debug("vault.request.start", url=str(request.url))
            response = await self._http.send(request)

            if response.status_code >= 300:
                err: VaultServiceError = unmarshal_error(response)
                log.warning(
                    "vault.request.error",
                    status_code=err.status_code,
                    code=err.code,
                    request_id=err.request_id,
                )
                raise err

            log.debug("vault.request.done", status_code=response.status_code)
            return unmarshal(response, self.output_type)


# --- Module Notes -----------------------------------------------------------
# Transport exceptions from `self._http.send` propagate unchanged; retries of failed
# connections are configured on the httpx transport (see `client.create_http_client`).

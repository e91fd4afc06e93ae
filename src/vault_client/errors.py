"""
vault_client.errors

Error types raised by the Vault client.

Responsibilities:
- Aggregate parameter validation failures into a single error raised before any I/O.
- Represent Vault service errors (non-2xx responses) with code/message/status/request id.
- Provide the catalogue of error codes the Vault service is known to return.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class VaultError(Exception):
    """Base class for every error raised by this package."""


# Known Vault error codes: code -> (HTTP status, default message).
KNOWN_ERROR_CODES: dict[str, tuple[int, str]] = {
    "WrongFormat": (400, "Data entered by the user has a wrong format."),
    "Forbidden": (403, "Authentication failed."),
    "EntityDoesNotExist": (404, "Not found."),
    "EntityAlreadyExists": (
        409,
        "The request was rejected because it attempted to create a resource that already exists.",
    ),
    "ServiceFailure": (
        500,
        "Server error: the request processing has failed because of an unknown error, "
        "exception or failure.",
    ),
}


def code_for_status(status_code: int) -> str | None:
    for code, (status, _) in KNOWN_ERROR_CODES.items():
        if status == status_code:
            return code
    return None


@dataclass(slots=True)
class ParamError(ABC):
    """
    A single invalid parameter. `context` is filled in when the error is added
    to an `InvalidParamsError`.
    """

    field: str
    context: str = ""

    code = "InvalidParam"

    @abstractmethod
    def reason(self) -> str: ...

    @property
    def message(self) -> str:
        name = f"{self.context}.{self.field}" if self.context else self.field
        return f"{self.reason()}, {name}."

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


@dataclass(slots=True)
class ParamRequiredError(ParamError):
    code = "ParamRequiredError"

    def reason(self) -> str:
        return "missing required field"


@dataclass(slots=True)
class ParamMinLenError(ParamError):
    min_len: int = 1

    code = "ParamMinLenError"

    def reason(self) -> str:
        return f"minimum field size of {self.min_len}"


@dataclass(slots=True)
class ParamMinValueError(ParamError):
    min_value: int = 1

    code = "ParamMinValueError"

    def reason(self) -> str:
        return f"minimum field value of {self.min_value}"


class InvalidParamsError(VaultError):
    """
    Aggregate of every parameter violation found on one input shape.

    Raised by `validate_params()`; the request is never sent (nor retried).
    """

    code = "InvalidParameter"

    def __init__(self, context: str, errors: list[ParamError] | None = None) -> None:
        self.context = context
        self.errors: list[ParamError] = []
        for err in errors or []:
            self.add(err)
        super().__init__(context)

    def add(self, err: ParamError) -> None:
        err.context = self.context
        self.errors.append(err)

    def raise_if_any(self) -> None:
        if self.errors:
            raise self

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]

    def __str__(self) -> str:
        lines = [f"{self.code}: {len(self.errors)} validation error(s) found."]
        lines += [f"- {e.message}" for e in self.errors]
        return "\n".join(lines) + "\n"


class VaultServiceError(VaultError):
    """A non-2xx response from Vault."""

    def __init__(
        self,
        *,
        code: str,
        message: str,
        status_code: int,
        request_id: str | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        self.request_id = request_id
        super().__init__(message)

    def __str__(self) -> str:
        return (
            f"{self.code}: {self.message}\n"
            f"\tstatus code: {self.status_code}, request id: {self.request_id or ''}"
        )


class SerializationError(VaultError):
    """A successful response whose body could not be decoded."""

    def __init__(self, message: str, *, raw: str) -> None:
        self.raw = raw
        super().__init__(message)


class PaginationError(VaultError):
    pass


# --- Module Notes -----------------------------------------------------------
# Transport failures (httpx.HTTPError) and credential failures (botocore) are not
# wrapped; callers see the library exception unchanged.

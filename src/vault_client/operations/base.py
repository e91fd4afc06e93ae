"""
vault_client.operations.base

Base classes for operation input and output shapes.

Responsibilities:
- Give every shape the same pydantic configuration (wire aliases, populate by name).
- Render shapes as indented JSON for `str()` (unset fields omitted).
- Define the contract inputs follow: `validate_params()` and `to_params()`.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict


class Shape(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def __str__(self) -> str:
        return json.dumps(
            self.model_dump(mode="json", by_alias=True, exclude_none=True),
            indent=2,
            sort_keys=False,
        )


class InputShape(Shape):
    """
    Request parameters. Fields are optional so each can be set independently;
    required-ness is only checked by `validate_params()` right before sending.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", validate_assignment=True)

    def validate_params(self) -> None:
        """Raise `InvalidParamsError` listing every invalid field."""

    def to_params(self) -> dict[str, Any]:
        # Query-protocol body entries, keyed by wire name. Unset fields are not sent.
        return self.model_dump(by_alias=True, exclude_none=True)


class OutputShape(Shape):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# --- Module Notes -----------------------------------------------------------
# Inputs forbid unknown fields to catch typos early; outputs ignore them so newer
# servers can add response fields without breaking older clients.
# Setters go through `validate_assignment`, so a wrong type fails at the setter with
# pydantic's `ValidationError` rather than later on the wire.

"""Result models returned by the project name and URL validators."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidInputError


class ErrorKind(str, Enum):
    """Reasons a project name or repository URL can be rejected."""

    PLACEHOLDER_NAME = "placeholder_name"
    RESERVED_NAME = "reserved_name"
    INVALID_CHARACTERS = "invalid_characters"
    INVALID_START = "invalid_start"
    TOO_LONG = "too_long"
    INVALID_URL_FORMAT = "invalid_url_format"


class Accepted(BaseModel):
    """Successful validation carrying the accepted value."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: Literal["accepted"] = "accepted"
    value: str = Field(..., description="The validated input, returned unchanged.")

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> str:
        return self.value


class Rejected(BaseModel):
    """Failed validation describing which rule the input broke."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: Literal["rejected"] = "rejected"
    kind: ErrorKind = Field(..., description="The first rule the input failed.")
    value: str = Field(..., description="The offending input.")
    message: str = Field(..., description="Human-readable explanation with remediation hints.")

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> str:
        """Raise :class:`InvalidInputError` for this rejection."""

        raise InvalidInputError(self)


ValidationResult = Union[Accepted, Rejected]


__all__ = [
    "Accepted",
    "ErrorKind",
    "Rejected",
    "ValidationResult",
]

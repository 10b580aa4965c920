"""ipcnv - IPv4 address / 32-bit integer conversion tool."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..services.converter import Mode
from ..utils.ip_tools import is_decimal

MODE_RANGE_MESSAGE = f"mode must be >= {min(Mode).value} and <= {max(Mode).value}"


class BaseSchema(BaseModel):
    """Base schema with attribute extraction enabled."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ConversionRequest(BaseSchema):
    mode: Mode
    value: str
    output: Optional[Path] = None

    @field_validator("mode", mode="before")
    @classmethod
    def _check_mode(cls, raw: Any) -> Mode:
        if raw is None:
            raise ValueError(MODE_RANGE_MESSAGE)
        if isinstance(raw, int):
            number = int(raw)
        elif isinstance(raw, str) and is_decimal(raw):
            number = int(raw)
        else:
            raise ValueError("mode must be an integer")
        if number not in {member.value for member in Mode}:
            raise ValueError(MODE_RANGE_MESSAGE)
        return Mode(number)

    @field_validator("value", mode="before")
    @classmethod
    def _check_value(cls, raw: Any) -> str:
        if not raw:
            raise ValueError("-i flag must not be empty")
        return raw


def describe_validation_error(exc: ValidationError) -> str:
    """Return the message of the first failing validator."""
    error = exc.errors()[0]
    reason = error.get("ctx", {}).get("error")
    if reason is not None:
        return str(reason)
    return error["msg"]

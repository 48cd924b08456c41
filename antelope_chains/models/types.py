"""Validated scalar types shared by the chain and token models."""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator

_CHECKSUM256_RE = re.compile(r"^[0-9a-f]{64}$")
_NAME_RE = re.compile(r"^[.1-5a-z]{0,12}[.1-5a-j]?$")


def checksum256(value: Any) -> str:
    """Normalize a 32-byte identifier (raw bytes or hex) to lowercase hex."""
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 32:
            raise ValueError(f"Expected 32 bytes, got {len(value)}")
        return bytes(value).hex()
    if isinstance(value, str):
        normalized = value.strip().lower()
        if not _CHECKSUM256_RE.match(normalized):
            raise ValueError(f"Expected 64 hex characters, got {value!r}")
        return normalized
    raise ValueError(f"Expected bytes or hex string, got {type(value).__name__}")


def _check_name(value: str) -> str:
    if not _NAME_RE.match(value):
        raise ValueError(f"Invalid account name {value!r}")
    return value


ChainId = Annotated[str, BeforeValidator(checksum256)]
Name = Annotated[str, AfterValidator(_check_name)]

"""Antelope token types: account names, symbols, assets and balances."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from antelope_chains.models.types import ChainId, Name

_SYMBOL_RE = re.compile(r"^(\d{1,2}),([A-Z]{1,7})$")
_QUANTITY_RE = re.compile(r"^(-?)(\d+)(?:\.(\d+))?$")

MAX_PRECISION = 18


class Symbol(BaseModel):
    """Token symbol with precision, written as ``"4,EOS"``."""

    model_config = ConfigDict(frozen=True)

    precision: int = Field(ge=0, le=MAX_PRECISION)
    code: str = Field(pattern=r"^[A-Z]{1,7}$")

    @model_validator(mode="before")
    @classmethod
    def _parse(cls, data: Any) -> Any:
        if isinstance(data, str):
            match = _SYMBOL_RE.match(data.strip())
            if not match:
                raise ValueError(f"Invalid symbol {data!r}, expected e.g. '4,EOS'")
            return {"precision": int(match.group(1)), "code": match.group(2)}
        return data

    def __str__(self) -> str:
        return f"{self.precision},{self.code}"


class Asset(BaseModel):
    """Token amount stored as integer units, written as ``"1.0000 EOS"``."""

    model_config = ConfigDict(frozen=True)

    units: int
    symbol: Symbol

    @model_validator(mode="before")
    @classmethod
    def _parse(cls, data: Any) -> Any:
        if not isinstance(data, str):
            return data
        parts = data.strip().split(" ")
        if len(parts) != 2:
            raise ValueError(f"Invalid asset {data!r}, expected e.g. '1.0000 EOS'")
        amount, code = parts
        match = _QUANTITY_RE.match(amount)
        if not match:
            raise ValueError(f"Invalid asset amount {amount!r}")
        sign, whole, fraction = match.groups()
        fraction = fraction or ""
        units = int(whole + fraction)
        return {
            "units": -units if sign else units,
            "symbol": {"precision": len(fraction), "code": code},
        }

    @property
    def quantity(self) -> Decimal:
        return Decimal(self.units).scaleb(-self.symbol.precision)

    def __str__(self) -> str:
        precision = self.symbol.precision
        whole, fraction = divmod(abs(self.units), 10**precision)
        sign = "-" if self.units < 0 else ""
        amount = f"{sign}{whole}.{fraction:0{precision}d}" if precision else f"{sign}{whole}"
        return f"{amount} {self.symbol.code}"


class TokenIdentifier(BaseModel):
    chain: ChainId
    contract: Name
    symbol: Symbol


class TokenMeta(BaseModel):
    id: TokenIdentifier
    logo: Optional[str] = None


class TokenBalance(BaseModel):
    asset: Asset
    contract: Name
    metadata: TokenMeta

"""Pydantic v2 models for chain definitions, logos and explorer templates."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from antelope_chains.models.tokens import Symbol
from antelope_chains.models.types import ChainId, Name


class Logo(BaseModel):
    """Theme-aware logo. A single URL is used for both variants."""

    model_config = ConfigDict(extra="forbid")

    dark: str = Field(min_length=1)
    light: str = Field(min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _from_url(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"dark": data, "light": data}
        return data

    def get_variant(self, variant: str) -> str:
        if variant not in ("dark", "light"):
            raise ValueError(f"Unknown logo variant '{variant}'. Expected 'dark' or 'light'")
        return getattr(self, variant)

    def __str__(self) -> str:
        return self.light


class ExplorerDefinition(BaseModel):
    """Builds block-explorer URLs for transactions."""

    model_config = ConfigDict(extra="forbid")

    prefix: str
    suffix: str
    url_builder: Optional[Callable[[str], str]] = Field(
        default=None,
        validation_alias=AliasChoices("url_builder", "url"),
        exclude=True,
    )

    def url(self, transaction_id: str) -> str:
        if self.url_builder is not None:
            return self.url_builder(str(transaction_id))
        return f"{self.prefix}{transaction_id}{self.suffix}"


class ChainDefinition(BaseModel):
    """The information required to interact with a given chain."""

    model_config = ConfigDict(extra="forbid", serialize_by_alias=True)

    id: ChainId = Field(description="Chain ID (genesis checksum256)")
    url: str = Field(min_length=1, description="Base URL of the chain API endpoint")
    # exposed through the computed `name` property
    stored_name: Optional[str] = Field(default=None, alias="name")
    logo: Optional[Logo] = None
    explorer: Optional[ExplorerDefinition] = None
    system_token_symbol: Optional[Symbol] = None
    system_token_contract: Optional[Name] = None

    @property
    def name(self) -> str:
        """Own name, else the registry name for this chain ID, else a placeholder."""
        from antelope_chains.chain.registry import display_name

        return display_name(self)

    def get_logo(self) -> Optional[Logo]:
        from antelope_chains.chain.registry import get_logo

        return get_logo(self)

    def get_client(self, options: Optional[Mapping[str, Any] | BaseModel] = None):
        """Build the API client for this chain, defaulting to its own URL.

        Any ``url`` in ``options`` takes precedence.
        """
        from antelope_chains.chain.dispatch import get_chain_client

        if isinstance(options, BaseModel):
            overrides = {k: getattr(options, k) for k in options.model_fields_set}
        else:
            overrides = dict(options or {})
        return get_chain_client(self.id, {"url": self.url, **overrides})

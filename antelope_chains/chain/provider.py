"""Async Antelope chain API clients using httpx."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, model_validator

from antelope_chains.config import get_settings
from antelope_chains.models.api import Account, ChainInfo, TelosAccount, WaxAccount
from antelope_chains.models.tokens import Asset

logger = logging.getLogger(__name__)


class APIError(Exception):
    """The chain API answered with an error status or error body."""

    def __init__(self, path: str, status_code: int, error: Any = None):
        self.path = path
        self.status_code = status_code
        self.error = error
        super().__init__(f"{path} failed with HTTP {status_code}: {error}")


class ClientOptions(BaseModel):
    """Options accepted by every client variant."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    url: str = Field(min_length=1)
    timeout: Optional[float] = Field(default=None, gt=0)
    headers: dict[str, str] = Field(default_factory=dict)
    transport: Optional[httpx.AsyncBaseTransport] = None
    # Request handler (sync or async) answering in place of the network
    fetch: Optional[Callable[[httpx.Request], Any]] = None

    @model_validator(mode="after")
    def _one_transport(self) -> ClientOptions:
        if self.fetch is not None and self.transport is not None:
            raise ValueError("Pass either fetch or transport, not both")
        return self


class AntelopeClient:
    """Async client for any chain following the base Antelope API."""

    account_model: type[Account] = Account

    def __init__(
        self,
        url: str,
        *,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        fetch: Callable[[httpx.Request], Any] | None = None,
    ):
        settings = get_settings()
        self.url = url.rstrip("/")
        if fetch is not None:
            if transport is not None:
                raise ValueError("Pass either fetch or transport, not both")
            transport = httpx.MockTransport(fetch)
        self.http = httpx.AsyncClient(
            base_url=self.url,
            timeout=timeout or settings.request_timeout,
            headers={"User-Agent": settings.user_agent, **(headers or {})},
            transport=transport,
        )

    @classmethod
    def from_options(cls, options: ClientOptions) -> AntelopeClient:
        return cls(
            options.url,
            timeout=options.timeout,
            headers=options.headers,
            transport=options.transport,
            fetch=options.fetch,
        )

    async def __aenter__(self) -> AntelopeClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http.aclose()

    async def call(self, path: str, params: dict | None = None) -> Any:
        """POST a JSON body to an API path and return the decoded response."""
        logger.debug(f"POST {self.url}{path}")
        resp = await self.http.post(path, json=params or {})
        try:
            data = resp.json()
        except ValueError:
            data = None
        if resp.is_error:
            error = data.get("error", data) if isinstance(data, dict) else resp.text
            logger.warning(f"{self.url}{path} returned HTTP {resp.status_code}")
            raise APIError(path, resp.status_code, error)
        if isinstance(data, dict) and "error" in data:
            logger.warning(f"{self.url}{path} returned an error body")
            raise APIError(path, resp.status_code, data["error"])
        if data is None:
            raise APIError(path, resp.status_code, "Response is not valid JSON")
        return data

    async def get_info(self) -> ChainInfo:
        return ChainInfo.model_validate(await self.call("/v1/chain/get_info"))

    async def get_account(self, account_name: str) -> Account:
        data = await self.call("/v1/chain/get_account", {"account_name": account_name})
        return self.account_model.model_validate(data)

    async def get_block(self, block_num_or_id: int | str) -> dict:
        return await self.call("/v1/chain/get_block", {"block_num_or_id": block_num_or_id})

    async def get_currency_balance(
        self, code: str, account: str, symbol: str | None = None
    ) -> list[Asset]:
        params = {"code": code, "account": account}
        if symbol:
            params["symbol"] = symbol
        data = await self.call("/v1/chain/get_currency_balance", params)
        return [Asset.model_validate(balance) for balance in data]


class TelosClient(AntelopeClient):
    """Telos API client. Accounts carry Telos voter fields."""

    account_model = TelosAccount


class WaxClient(AntelopeClient):
    """WAX API client. Accounts carry WAX voter reward fields."""

    account_model = WaxAccount

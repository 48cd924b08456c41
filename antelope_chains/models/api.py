"""Response models for the Antelope v1 chain API, with WAX and Telos extensions."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from antelope_chains.models.types import ChainId


class ChainInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    server_version: str = ""
    chain_id: ChainId
    head_block_num: int
    last_irreversible_block_num: int
    head_block_id: str = ""
    head_block_time: str = ""
    head_block_producer: str = ""
    server_version_string: Optional[str] = None


class VoterInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    owner: str
    proxy: str = ""
    producers: list[str] = Field(default_factory=list)
    staked: int = 0
    last_vote_weight: str = "0"
    proxied_vote_weight: str = "0"
    is_proxy: int = 0


class WaxVoterInfo(VoterInfo):
    unpaid_voteshare: str = "0"
    unpaid_voteshare_last_updated: str = ""
    unpaid_voteshare_change_rate: str = "0"
    last_claim_time: str = ""


class TelosVoterInfo(VoterInfo):
    last_stake: int = 0


class Account(BaseModel):
    model_config = ConfigDict(extra="allow")

    account_name: str
    head_block_num: int = 0
    created: str = ""
    privileged: bool = False
    ram_quota: int = -1
    ram_usage: int = 0
    net_weight: int = -1
    cpu_weight: int = -1
    voter_info: Optional[VoterInfo] = None


class WaxAccount(Account):
    voter_info: Optional[WaxVoterInfo] = None


class TelosAccount(Account):
    voter_info: Optional[TelosVoterInfo] = None

"""Inputs and outputs of a configuration resolution."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from facilitator.resolution.models.facilitator import FacilitatorConfig


class ConfigType(str, Enum):
    """Kind of config file paired with a facilitator config file."""

    MOSAIC = "mosaic"
    GATEWAY = "gateway"


class ResolutionMode(str, Enum):
    """Branch taken by a resolution, chosen once per call."""

    EXPLICIT_ONLY = "explicit_only"
    FACILITATOR_FILE = "facilitator_file"
    MOSAIC_FILE = "mosaic_file"
    GATEWAY_FILE = "gateway_file"
    DUAL_FILE = "dual_file"


class ChainIdentifierInput(BaseModel):
    """Origin and auxiliary chain ids supplied by the caller.

    Empty strings count as absent. Whether exactly one id was supplied is
    checked by the resolver, so partial inputs are representable here.
    """

    model_config = ConfigDict(frozen=True)

    origin_chain_id: str | None = Field(default=None, description="Origin chain id")
    aux_chain_id: int | None = Field(default=None, description="Auxiliary chain id")

    @field_validator("origin_chain_id", "aux_chain_id", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def is_complete(self) -> bool:
        """Both ids are present."""
        return self.origin_chain_id is not None and self.aux_chain_id is not None

    @property
    def is_empty(self) -> bool:
        """Neither id is present."""
        return self.origin_chain_id is None and self.aux_chain_id is None

    @property
    def is_partial(self) -> bool:
        """Exactly one id is present."""
        return not self.is_complete and not self.is_empty


class GatewayAddresses(BaseModel):
    """Contract addresses the facilitator works against."""

    model_config = ConfigDict(frozen=True)

    stake_pool_address: str | None = None
    redeem_pool_address: str | None = None
    eip20_gateway_address: str | None = None
    origin_anchor_address: str | None = None
    eip20_co_gateway_address: str | None = None
    auxiliary_anchor_address: str | None = None
    utility_token_address: str | None = None
    value_token_address: str | None = None


class ResolvedConfig(BaseModel):
    """The authoritative configuration handed to the facilitator process."""

    model_config = ConfigDict(frozen=True)

    facilitator: FacilitatorConfig
    gateway_addresses: GatewayAddresses

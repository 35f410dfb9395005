"""Base model for chain configuration documents."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ChainModel(BaseModel):
    """Base for configuration documents shared with the mosaic tooling.

    Files written by the mosaic tooling use camelCase keys. Models accept
    either the camelCase alias or the snake_case field name, ignore unknown
    keys, and are immutable once loaded.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

"""Registry lookup configuration models."""

from pathlib import Path

from pydantic import BaseModel, Field


def default_mosaic_dir() -> Path:
    """Return the mosaic data directory used by the mosaic tooling."""
    return Path.home() / ".mosaic"


class RegistryConfig(BaseModel):
    """Where chain-keyed configuration is looked up without a local file.

    Mosaic configs live at <mosaic_dir>/<origin chain>/<mosaic_file_name>.
    Facilitator configs live at <mosaic_dir>/<aux chain>/<facilitator_file_name>.
    """

    mosaic_dir: Path = Field(
        default_factory=default_mosaic_dir,
        description="Root of the chain registry directory",
    )
    mosaic_file_name: str = Field(
        default="mosaic.json",
        description="File name of a mosaic config inside an origin chain directory",
    )
    facilitator_file_name: str = Field(
        default="facilitator-config.json",
        description="File name of a facilitator config inside an aux chain directory",
    )

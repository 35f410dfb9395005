"""Config source implementations."""

from facilitator.resolution.sources.combined import PairedFileConfigSource
from facilitator.resolution.sources.filesystem import (
    FileFacilitatorSource,
    FileGatewaySource,
    FileMosaicSource,
    load_model_file,
)
from facilitator.resolution.sources.inmemory import (
    InMemoryFacilitatorSource,
    InMemoryGatewaySource,
    InMemoryMosaicSource,
)

__all__ = [
    "FileFacilitatorSource",
    "FileGatewaySource",
    "FileMosaicSource",
    "InMemoryFacilitatorSource",
    "InMemoryGatewaySource",
    "InMemoryMosaicSource",
    "PairedFileConfigSource",
    "load_model_file",
]

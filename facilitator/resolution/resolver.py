"""Configuration resolver.

Combines caller-supplied chain ids with facilitator, mosaic and gateway
config sources into one ResolvedConfig. The branch to take is chosen once
per call by select_mode() and dispatched to a handler; every handler
validates the cross-references between the sources it loaded and never
repairs a mismatch.

Precedence (first match wins):

    exactly one chain id          -> error
    gateway path                  -> GATEWAY_FILE
    ids + mosaic + facilitator    -> DUAL_FILE
    mosaic path                   -> MOSAIC_FILE
    facilitator path              -> FACILITATOR_FILE
    ids                           -> EXPLICIT_ONLY
"""

import os
import time
from collections.abc import Callable
from dataclasses import dataclass

from facilitator.observability.logging import get_logger
from facilitator.observability.metrics import (
    RESOLUTION_COUNT,
    RESOLUTION_LATENCY,
    SOURCE_LOOKUPS,
)
from facilitator.resolution.addresses import GatewayAddressResolver
from facilitator.resolution.errors import (
    ChainMismatchError,
    ChainNotFoundError,
    ConfigResolutionError,
    ConfigSourceError,
    InvalidChainInputError,
)
from facilitator.resolution.models import (
    ChainIdentifierInput,
    ConfigType,
    FacilitatorConfig,
    GatewayConfig,
    MosaicConfig,
    ResolutionMode,
    ResolvedConfig,
)
from facilitator.resolution.source import (
    CombinedConfigSource,
    FacilitatorSource,
    GatewaySource,
    MosaicSource,
)

logger = get_logger(__name__)

PathInput = str | os.PathLike[str] | None

BOTH_IDS_REQUIRED = "Origin chain and auxiliary chain id both are required"
IDS_OR_FACILITATOR_REQUIRED = (
    "Origin chain and auxiliary chain id or a facilitator config path are required"
)
MOSAIC_ORIGIN_MISMATCH = "origin chain id in mosaic config is different than the one provided"
AUX_NOT_IN_MOSAIC = "aux chain is not present in mosaic config"
MOSAIC_NOT_FOUND = "mosaic config not found"


def _path_or_empty(value: PathInput) -> str:
    if value is None:
        return ""
    return os.fspath(value)


@dataclass(frozen=True)
class ResolutionRequest:
    """Normalised inputs of one resolve() call.

    An empty path means the caller did not supply that file.
    """

    chain_ids: ChainIdentifierInput
    mosaic_config_path: str = ""
    facilitator_config_path: str = ""
    gateway_config_path: str = ""

    @property
    def explicit_ids(self) -> tuple[str, int] | None:
        """The (origin, aux) pair when the caller supplied both ids."""
        origin_chain_id = self.chain_ids.origin_chain_id
        aux_chain_id = self.chain_ids.aux_chain_id
        if origin_chain_id is None or aux_chain_id is None:
            return None
        return origin_chain_id, aux_chain_id


def select_mode(request: ResolutionRequest) -> ResolutionMode:
    """Choose the resolution branch for a request.

    Raises:
        InvalidChainInputError: If exactly one chain id is given, or if
            the inputs leave no way to determine the origin chain
    """
    ids = request.chain_ids
    if ids.is_partial:
        raise InvalidChainInputError(BOTH_IDS_REQUIRED)

    if request.gateway_config_path:
        return ResolutionMode.GATEWAY_FILE

    if ids.is_complete and request.mosaic_config_path and request.facilitator_config_path:
        return ResolutionMode.DUAL_FILE

    if request.mosaic_config_path:
        if not ids.is_complete and not request.facilitator_config_path:
            raise InvalidChainInputError(IDS_OR_FACILITATOR_REQUIRED)
        return ResolutionMode.MOSAIC_FILE

    if request.facilitator_config_path:
        return ResolutionMode.FACILITATOR_FILE

    if ids.is_complete:
        return ResolutionMode.EXPLICIT_ONLY

    raise InvalidChainInputError(IDS_OR_FACILITATOR_REQUIRED)


class ConfigResolver:
    """Resolves the facilitator's configuration from its sources.

    Sources are injected; the resolver holds no other state, so one
    instance may serve concurrent resolve() calls.
    """

    def __init__(
        self,
        facilitator_source: FacilitatorSource,
        mosaic_source: MosaicSource,
        gateway_source: GatewaySource,
        combined_source: CombinedConfigSource,
        address_resolver: GatewayAddressResolver | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            facilitator_source: Facilitator config files and registry
            mosaic_source: Mosaic config files and registry
            gateway_source: Gateway config files
            combined_source: Loader for paired facilitator/mosaic files
            address_resolver: Gateway address derivation
        """
        self._facilitator_source = facilitator_source
        self._mosaic_source = mosaic_source
        self._gateway_source = gateway_source
        self._combined_source = combined_source
        self._address_resolver = address_resolver or GatewayAddressResolver()
        self._handlers: dict[ResolutionMode, Callable[[ResolutionRequest], ResolvedConfig]] = {
            ResolutionMode.GATEWAY_FILE: self._resolve_gateway_file,
            ResolutionMode.DUAL_FILE: self._resolve_dual_file,
            ResolutionMode.MOSAIC_FILE: self._resolve_general,
            ResolutionMode.FACILITATOR_FILE: self._resolve_general,
            ResolutionMode.EXPLICIT_ONLY: self._resolve_general,
        }

    def resolve(
        self,
        chain_ids: ChainIdentifierInput,
        mosaic_config_path: PathInput = None,
        facilitator_config_path: PathInput = None,
        gateway_config_path: PathInput = None,
    ) -> ResolvedConfig:
        """Resolve the configuration for one facilitator process.

        Args:
            chain_ids: Caller-supplied origin and auxiliary chain ids
            mosaic_config_path: Mosaic config file
            facilitator_config_path: Facilitator config file
            gateway_config_path: Gateway config file

        Returns:
            The resolved facilitator config and gateway addresses

        Raises:
            ConfigResolutionError: If the inputs or sources are inconsistent
            ConfigSourceError: If a source lookup fails
        """
        request = ResolutionRequest(
            chain_ids=chain_ids,
            mosaic_config_path=_path_or_empty(mosaic_config_path),
            facilitator_config_path=_path_or_empty(facilitator_config_path),
            gateway_config_path=_path_or_empty(gateway_config_path),
        )
        mode = select_mode(request)

        logger.info(
            "config_resolution_started",
            mode=mode.value,
            origin_chain_id=chain_ids.origin_chain_id,
            aux_chain_id=chain_ids.aux_chain_id,
            mosaic_config_path=request.mosaic_config_path or None,
            facilitator_config_path=request.facilitator_config_path or None,
            gateway_config_path=request.gateway_config_path or None,
        )

        start = time.perf_counter()
        try:
            resolved = self._handlers[mode](request)
        except (ConfigResolutionError, ConfigSourceError) as exc:
            RESOLUTION_COUNT.labels(mode=mode.value, outcome="failure").inc()
            logger.warning(
                "config_resolution_failed",
                mode=mode.value,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise

        RESOLUTION_LATENCY.labels(mode=mode.value).observe(time.perf_counter() - start)
        RESOLUTION_COUNT.labels(mode=mode.value, outcome="success").inc()
        logger.info(
            "config_resolved",
            mode=mode.value,
            origin_chain_id=resolved.facilitator.origin_chain,
            aux_chain_id=resolved.facilitator.aux_chain_id,
        )
        return resolved

    # Branch handlers

    def _resolve_gateway_file(self, request: ResolutionRequest) -> ResolvedConfig:
        explicit = request.explicit_ids
        facilitator_path = request.facilitator_config_path

        if explicit is not None:
            origin_chain_id, aux_chain_id = explicit
            if facilitator_path:
                facilitator = self._facilitator_from_file(facilitator_path)
                self._check_facilitator_chains(facilitator, origin_chain_id, aux_chain_id)
            else:
                facilitator = self._facilitator_from_chain(aux_chain_id)

            gateway_config = self._gateway_from_file(request.gateway_config_path)
            if not gateway_config.mosaic_config.has_auxiliary_chain(aux_chain_id):
                raise ChainNotFoundError(AUX_NOT_IN_MOSAIC)
            self._check_gateway_aux_chain(gateway_config, aux_chain_id)
        else:
            if facilitator_path:
                facilitator = self._facilitator_from_file(facilitator_path)
                gateway_config = self._gateway_from_file(request.gateway_config_path)
            else:
                # Only the gateway file names an aux chain to look up
                gateway_config = self._gateway_from_file(request.gateway_config_path)
                facilitator = self._facilitator_from_chain(gateway_config.aux_chain_id)
            self._check_gateway_aux_chain(gateway_config, facilitator.aux_chain_id)

        gateway_addresses = self._address_resolver.from_gateway_config(gateway_config)
        return ResolvedConfig(facilitator=facilitator, gateway_addresses=gateway_addresses)

    def _resolve_dual_file(self, request: ResolutionRequest) -> ResolvedConfig:
        explicit = request.explicit_ids
        if explicit is None:
            raise InvalidChainInputError(BOTH_IDS_REQUIRED)
        origin_chain_id, aux_chain_id = explicit

        # File-level checks only; the pair is never compared with the registry
        facilitator = self._facilitator_from_file(request.facilitator_config_path)
        mosaic_config = self._mosaic_from_file(request.mosaic_config_path)
        self._check_mosaic_file(mosaic_config, origin_chain_id, aux_chain_id)
        self._check_facilitator_chains(facilitator, origin_chain_id, aux_chain_id)
        # The combined loader derives addresses for the file's own aux chain
        if facilitator.aux_chain_id != aux_chain_id:
            raise ChainMismatchError(
                f"Aux chain id {facilitator.aux_chain_id} in facilitator config and "
                f"provided auxchain id {aux_chain_id} are not same"
            )

        return self._combined_source.from_files(
            request.facilitator_config_path, request.mosaic_config_path, ConfigType.MOSAIC
        )

    def _resolve_general(self, request: ResolutionRequest) -> ResolvedConfig:
        explicit = request.explicit_ids
        facilitator_path = request.facilitator_config_path

        if facilitator_path:
            facilitator = self._facilitator_from_file(facilitator_path)
        elif explicit is not None:
            facilitator = self._facilitator_from_chain(explicit[1])
        else:
            raise InvalidChainInputError(IDS_OR_FACILITATOR_REQUIRED)

        # Explicit ids win; loaded values only fill in what the caller omitted
        if explicit is not None:
            origin_chain_id, aux_chain_id = explicit
        else:
            origin_chain_id, aux_chain_id = facilitator.origin_chain, facilitator.aux_chain_id

        if request.mosaic_config_path:
            mosaic_config = self._mosaic_from_file(request.mosaic_config_path)
            self._check_mosaic_file(mosaic_config, origin_chain_id, aux_chain_id)
        else:
            if not self._mosaic_source.exists(origin_chain_id):
                raise ChainNotFoundError(MOSAIC_NOT_FOUND)
            mosaic_config = self._mosaic_from_chain(origin_chain_id)

        if facilitator_path and explicit is not None:
            self._check_facilitator_chains(facilitator, origin_chain_id, aux_chain_id)

        gateway_addresses = self._address_resolver.from_mosaic_config(
            mosaic_config, aux_chain_id
        )
        return ResolvedConfig(facilitator=facilitator, gateway_addresses=gateway_addresses)

    # Cross-reference checks

    @staticmethod
    def _check_mosaic_file(
        mosaic_config: MosaicConfig, origin_chain_id: str, aux_chain_id: int
    ) -> None:
        if mosaic_config.origin_chain.chain != origin_chain_id:
            raise ChainMismatchError(MOSAIC_ORIGIN_MISMATCH)
        if not mosaic_config.has_auxiliary_chain(aux_chain_id):
            raise ChainNotFoundError(AUX_NOT_IN_MOSAIC)

    @staticmethod
    def _check_facilitator_chains(
        facilitator: FacilitatorConfig, origin_chain_id: str, aux_chain_id: int
    ) -> None:
        if not facilitator.has_chain(aux_chain_id):
            raise ChainNotFoundError(
                "facilitator config is invalid as provided auxchain "
                f"{aux_chain_id} is not present"
            )
        if not facilitator.has_chain(origin_chain_id):
            raise ChainNotFoundError(
                "facilitator config is invalid as provided origin chain "
                f"{origin_chain_id} is not present"
            )

    @staticmethod
    def _check_gateway_aux_chain(gateway_config: GatewayConfig, aux_chain_id: int) -> None:
        if gateway_config.aux_chain_id != aux_chain_id:
            raise ChainMismatchError(
                f"Aux chain id {gateway_config.aux_chain_id} in gatewayconfig and "
                f"provided auxchain id {aux_chain_id} are not same"
            )

    # Source lookups

    def _facilitator_from_file(self, path: str) -> FacilitatorConfig:
        SOURCE_LOOKUPS.labels(source="facilitator", kind="file").inc()
        facilitator = self._facilitator_source.from_file(path)
        logger.debug("facilitator_config_loaded", source="file", path=path)
        return facilitator

    def _facilitator_from_chain(self, aux_chain_id: int) -> FacilitatorConfig:
        SOURCE_LOOKUPS.labels(source="facilitator", kind="registry").inc()
        facilitator = self._facilitator_source.from_chain(aux_chain_id)
        logger.debug("facilitator_config_loaded", source="registry", aux_chain_id=aux_chain_id)
        return facilitator

    def _mosaic_from_file(self, path: str) -> MosaicConfig:
        SOURCE_LOOKUPS.labels(source="mosaic", kind="file").inc()
        mosaic_config = self._mosaic_source.from_file(path)
        logger.debug("mosaic_config_loaded", source="file", path=path)
        return mosaic_config

    def _mosaic_from_chain(self, origin_chain_id: str) -> MosaicConfig:
        SOURCE_LOOKUPS.labels(source="mosaic", kind="registry").inc()
        mosaic_config = self._mosaic_source.from_chain(origin_chain_id)
        logger.debug(
            "mosaic_config_loaded", source="registry", origin_chain_id=origin_chain_id
        )
        return mosaic_config

    def _gateway_from_file(self, path: str) -> GatewayConfig:
        SOURCE_LOOKUPS.labels(source="gateway", kind="file").inc()
        gateway_config = self._gateway_source.from_file(path)
        logger.debug("gateway_config_loaded", source="file", path=path)
        return gateway_config

"""Structured logging for the facilitator.

Events are emitted through structlog as JSON (deployments) or coloured
console lines (local runs). Facilitator configs carry worker passwords and
keystores, so a redaction processor runs ahead of the renderer unless it is
explicitly disabled.
"""

import logging
import re
import sys
from collections.abc import Mapping
from typing import Any, cast

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

REDACTED = "[REDACTED]"
REDACTED_PRIVATE_KEY = "[PRIVATE_KEY]"

# Compared against lower-cased keys, so camelCase file keys match too
SENSITIVE_KEYS: frozenset[str] = frozenset({
    "password",
    "passwd",
    "passphrase",
    "secret",
    "token",
    "api_key",
    "apikey",
    "authorization",
    "credentials",
    "mnemonic",
    "seed",
    "keystore",
    "private_key",
    "privatekey",
    "encrypted_accounts",
    "encryptedaccounts",
})

# 32-byte hex strings; 20-byte addresses do not match
PRIVATE_KEY_PATTERN = re.compile(r"\b(?:0x)?[0-9a-fA-F]{64}\b")


class SecretRedactor:
    """structlog processor masking secrets in event values.

    A value is masked whole when its key is sensitive. Otherwise strings
    are scanned for private keys, and containers are walked recursively.
    """

    def __init__(self, sensitive_keys: frozenset[str] = SENSITIVE_KEYS) -> None:
        self._sensitive_keys = sensitive_keys

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return cast(EventDict, self._scrub_mapping(event_dict))

    def _is_sensitive(self, key: Any) -> bool:
        return str(key).lower() in self._sensitive_keys

    def _scrub_mapping(self, data: Mapping[Any, Any]) -> dict[Any, Any]:
        return {
            key: REDACTED if self._is_sensitive(key) else self._scrub(value)
            for key, value in data.items()
        }

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, str):
            return PRIVATE_KEY_PATTERN.sub(REDACTED_PRIVATE_KEY, value)
        if isinstance(value, Mapping):
            return self._scrub_mapping(value)
        if isinstance(value, list):
            return [self._scrub(item) for item in value]
        return value


def _level_number(level: str) -> int:
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_secrets: bool = True,
) -> None:
    """Configure structlog for the process.

    Args:
        level: Minimum log level name; unknown names fall back to INFO
        format: "json" for machine-readable lines, anything else for console
        redact_secrets: Whether to mask passwords, keystores and private keys
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if redact_secrets:
        processors.append(SecretRedactor())
    processors.append(
        structlog.processors.JSONRenderer()
        if format == "json"
        else structlog.dev.ConsoleRenderer(colors=True)
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named after the calling module."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))

"""Diagnostics emitted for malformed policy configuration.

Nothing in the policy pipeline raises on bad input. Each anomaly is reported
through a sink's ``warn`` and processing continues with a degraded result.
"""

from enum import Enum
from typing import Protocol

from src.cspkit.core.logging import get_logger


class DiagnosticKind(str, Enum):
    """Category of a policy diagnostic."""

    INVALID_CONFIG_SHAPE = "invalid_config_shape"
    INVALID_NONCE_TARGET = "invalid_nonce_target"
    MISSING_REPORT_DESTINATION = "missing_report_destination"


INVALID_CONFIG_MESSAGE = "Invalid config, using defaults"
MISSING_REPORT_URI_MESSAGE = "`report_only` enabled but no `report_uri` specified"


def invalid_nonce_target_message(name: object) -> str:
    return f"Invalid `nonces_for` value: {name!r}"


class DiagnosticsSink(Protocol):
    """Receives human-readable warnings from the policy pipeline."""

    def warn(self, message: str, kind: DiagnosticKind | None = None) -> None: ...


class LoggingSink:
    """Default sink: one structlog ``warning`` event per diagnostic."""

    def __init__(self, logger_name: str = "cspkit.policy") -> None:
        self._logger = get_logger(logger_name)

    def warn(self, message: str, kind: DiagnosticKind | None = None) -> None:
        if kind is None:
            self._logger.warning(message)
        else:
            self._logger.warning(message, diagnostic=kind.value)


class CollectingSink:
    """Keeps diagnostics in memory, in emission order."""

    def __init__(self) -> None:
        self.messages: list[str] = []
        self.kinds: list[DiagnosticKind | None] = []

    def warn(self, message: str, kind: DiagnosticKind | None = None) -> None:
        self.messages.append(message)
        self.kinds.append(kind)

    def __len__(self) -> int:
        return len(self.messages)

    def clear(self) -> None:
        self.messages.clear()
        self.kinds.clear()

"""Resolved policy values shared across requests."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, NamedTuple

from src.cspkit.policy.directives import as_tokens


class PrecomputedHeader(NamedTuple):
    """A ready-to-send ``(field_name, field_value)`` pair."""

    field_name: str
    field_value: str


@dataclass(frozen=True)
class ResolvedConfig:
    """Immutable merged configuration whose header must be built per request."""

    directives: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    nonces_for: tuple[Any, ...] = ()
    report_only: bool = False

    def __post_init__(self) -> None:
        frozen = {name: tuple(as_tokens(value)) for name, value in self.directives.items()}
        object.__setattr__(self, "directives", MappingProxyType(frozen))
        object.__setattr__(self, "nonces_for", tuple(self.nonces_for))


@dataclass(frozen=True)
class DefaultConfig:
    """Process-wide defaults that a caller-supplied configuration is merged over."""

    directives: Mapping[str, Any]
    nonces_for: tuple[Any, ...] = ()
    report_only: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {
            "directives": self.directives,
            "nonces_for": self.nonces_for,
            "report_only": self.report_only,
        }

"""Response-context collaborator used by the policy pipeline."""

from dataclasses import dataclass, field
from typing import Any, Protocol


class ResponseContext(Protocol):
    """Where a policy writes its header and per-request values."""

    def put_header(self, name: str, value: str) -> None:
        """Attach or replace a response header."""
        ...

    def assign(self, key: str, value: Any) -> None:
        """Stash a per-request value for later rendering."""
        ...

    def get_header(self, name: str) -> str | None: ...


@dataclass
class SimpleResponseContext:
    """In-memory context for hosts without a framework request object."""

    headers: dict[str, str] = field(default_factory=dict)
    assigns: dict[str, Any] = field(default_factory=dict)

    def put_header(self, name: str, value: str) -> None:
        self.headers[name.lower()] = value

    def assign(self, key: str, value: Any) -> None:
        self.assigns[key] = value

    def get_header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

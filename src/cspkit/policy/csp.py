from typing import Any, TypeVar

from src.cspkit.core.config import Settings, get_settings
from src.cspkit.core.diagnostics import DiagnosticsSink, LoggingSink
from src.cspkit.policy.context import ResponseContext
from src.cspkit.policy.directives import copy_directives
from src.cspkit.policy.header import build_header
from src.cspkit.policy.models import PrecomputedHeader, ResolvedConfig
from src.cspkit.policy.nonces import insert_nonces, nonce_assign_key
from src.cspkit.policy.resolver import default_config, resolve

ContextT = TypeVar("ContextT", bound=ResponseContext)


def apply_policy(
    context: ContextT,
    policy: ResolvedConfig | PrecomputedHeader,
    sink: DiagnosticsSink | None = None,
) -> ContextT:
    """Attach the CSP header for one request and return the same context.

    A precomputed header is attached verbatim. Otherwise fresh nonces are
    generated, assigned to the context and injected into a copy of the
    directives before the header is built.
    """
    if isinstance(policy, PrecomputedHeader):
        context.put_header(policy.field_name, policy.field_value)
        return context

    sink = sink or LoggingSink()
    directives = copy_directives(policy.directives)
    nonces = insert_nonces(directives, policy.nonces_for, sink)
    for name, nonce in nonces.items():
        context.assign(nonce_assign_key(name), nonce)

    field_name, field_value = build_header(directives, policy.report_only, sink)
    context.put_header(field_name, field_value)
    return context


class ContentSecurityPolicy:
    """A configuration resolved once and applied to every request.

    Args:
        config: Raw configuration (mapping, key/value pairs, ``CSPConfig`` or None).
        settings: Settings supplying the defaults; ``get_settings()`` when omitted.
        sink: Diagnostics sink; structlog warnings when omitted.
    """

    def __init__(
        self,
        config: Any = None,
        *,
        settings: Settings | None = None,
        sink: DiagnosticsSink | None = None,
    ):
        self.sink: DiagnosticsSink = sink or LoggingSink()
        self.defaults = default_config(settings or get_settings())
        self.policy = resolve(config, self.defaults, self.sink)

    @property
    def is_precomputed(self) -> bool:
        return isinstance(self.policy, PrecomputedHeader)

    def apply(self, context: ContextT) -> ContextT:
        return apply_policy(context, self.policy, self.sink)

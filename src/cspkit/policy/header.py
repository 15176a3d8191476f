from collections.abc import Mapping

from src.cspkit.core.diagnostics import (
    MISSING_REPORT_URI_MESSAGE,
    DiagnosticKind,
    DiagnosticsSink,
)
from src.cspkit.policy.directives import (
    FIELD_NAME,
    REPORT_ONLY_FIELD_NAME,
    find_directive,
    serialize_directives,
)
from src.cspkit.policy.models import PrecomputedHeader


def build_header(
    directives: Mapping[str, object], report_only: bool, sink: DiagnosticsSink
) -> PrecomputedHeader:
    """Serialize a final directive map and pick the header field name.

    ``directives`` must already contain any injected nonces: the report
    destination check looks at what is actually sent.
    """
    field_value = serialize_directives(directives)

    if not report_only:
        return PrecomputedHeader(FIELD_NAME, field_value)

    if find_directive(directives, "report_uri") is None:
        sink.warn(MISSING_REPORT_URI_MESSAGE, DiagnosticKind.MISSING_REPORT_DESTINATION)
    return PrecomputedHeader(REPORT_ONLY_FIELD_NAME, field_value)

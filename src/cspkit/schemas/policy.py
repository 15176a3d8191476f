from pydantic import BaseModel, Field


class CSPConfig(BaseModel):
    """Typed middleware configuration.

    Unset fields fall back to the settings store and then to the built-in
    defaults, so only the keys a caller sets explicitly take part in the merge.
    """

    directives: dict[str, str | list[str]] | None = Field(
        default=None,
        json_schema_extra={
            "examples": [{"default_src": ["'self'"], "report_uri": "/csp-report"}],
            "description": "Directive name (snake or kebab case) to token or token list.",
        },
    )
    nonces_for: list[str] | None = Field(
        default=None,
        json_schema_extra={"examples": [["script_src", "style_src"]]},
    )
    report_only: bool | None = None

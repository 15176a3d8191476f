from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "cspkit"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Content Security Policy defaults, used where a middleware config leaves a key unset.
    # Complex values are read from the environment as JSON, e.g.
    # CSP_DIRECTIVES='{"default_src": ["\'self\'"]}' and CSP_NONCES_FOR='["script_src"]'
    csp_directives: dict[str, str | list[str]] | None = None  # None = built-in directive set
    csp_nonces_for: list[str] = []
    csp_report_only: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()

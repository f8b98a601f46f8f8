"""Pydantic configuration models with validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


def _normalize_path(value: Any) -> Path:
    """
    Normalize a path-like value without causing filesystem side-effects.

    This function MUST NOT create directories or files.
    """
    if isinstance(value, Path):
        return value.expanduser()
    if isinstance(value, str):
        return Path(value).expanduser()
    raise TypeError(f"Expected path-like value, got: {type(value)!r}")


class IndexerSettings(BaseModel):
    """Per-indexer settings (YAML section: indexers.<id>.*).

    Credentials may be given inline or via the name of an environment
    variable; inline values win. Without either, the credential store
    falls back to INDEXARR_<ID>_USERNAME / INDEXARR_<ID>_PASSWORD.
    """

    enabled: bool = Field(default=True, description="Register this indexer.")
    base_url: Optional[str] = Field(
        default=None,
        description="Override the site's default base URL (mirror/proxy).",
    )

    username: Optional[str] = Field(default=None, repr=False)
    password: Optional[str] = Field(default=None, repr=False)
    username_env: Optional[str] = Field(
        default=None, description="Environment variable holding the username."
    )
    password_env: Optional[str] = Field(
        default=None, description="Environment variable holding the password."
    )

    request_delay_seconds: Optional[float] = Field(
        default=None,
        description="Minimum seconds between requests. Defaults to the site's limit.",
    )
    dump_parse_errors: bool = Field(
        default=False,
        description="Write raw payloads of malformed responses to parse_error_dump_dir.",
    )

    @field_validator("base_url")
    @classmethod
    def _validate_base_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v

    @field_validator("request_delay_seconds")
    @classmethod
    def _validate_delay(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v < 0:
            raise ValueError("request_delay_seconds must be >= 0")
        return v


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (http/logging/diagnostics/indexers).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="indexarr", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # HTTP (YAML section: http.*)
    http_timeout_seconds: float = Field(
        default=30.0,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="HTTP timeout in seconds for indexer requests.",
    )
    http_follow_redirects: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "http_follow_redirects",
            AliasPath("http", "follow_redirects"),
        ),
        description="Whether HTTP client follows redirects.",
    )
    http_user_agent: str = Field(
        default="indexarr/0.1.0",
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="User-Agent for outgoing HTTP requests.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    # Diagnostics (YAML section: diagnostics.*)
    parse_error_dump_dir: Path = Field(
        default=Path("./.cache/indexarr/parse-errors"),
        validation_alias=AliasChoices(
            "parse_error_dump_dir",
            AliasPath("diagnostics", "parse_error_dump_dir"),
        ),
        description="Directory for raw payloads of malformed responses.",
    )

    # Indexers (YAML section: indexers.<id>.*)
    indexers: dict[str, IndexerSettings] = Field(
        default_factory=dict,
        description="Configured indexers keyed by site id.",
    )

    @field_validator("parse_error_dump_dir", mode="before")
    @classmethod
    def _validate_paths(cls, v: Any) -> Path:
        return _normalize_path(v)

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @field_validator("indexers", mode="before")
    @classmethod
    def _normalize_indexer_ids(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {str(k).strip().lower(): (s if s is not None else {}) for k, s in v.items()}
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def enabled_indexers(self) -> dict[str, IndexerSettings]:
        return {k: v for k, v in self.indexers.items() if v.enabled}

    def to_sectioned_dict(self) -> dict[str, Any]:
        """
        Dump configuration in the sectioned shape used by config.yaml/docs.

        Inline credentials are never included.
        """
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "http": {
                "timeout_seconds": self.http_timeout_seconds,
                "follow_redirects": self.http_follow_redirects,
                "user_agent": self.http_user_agent,
            },
            "logging": {"level": self.log_level, "format": self.log_format},
            "diagnostics": {"parse_error_dump_dir": str(self.parse_error_dump_dir)},
            "indexers": {
                k: v.model_dump(exclude={"username", "password"}, exclude_none=True)
                for k, v in self.indexers.items()
            },
        }


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Intended usage:
    - load.py creates EnvOverrides() to read INDEXARR_* variables,
      converts to dict of set values, merges into YAML/defaults,
      then validates AppConfig.

    Supported env var examples (flat, explicit):
    - INDEXARR_ENVIRONMENT
    - INDEXARR_HTTP_TIMEOUT_SECONDS
    - INDEXARR_LOG_LEVEL
    - INDEXARR_PARSE_ERROR_DUMP_DIR

    Per-indexer credentials (INDEXARR_<ID>_USERNAME/PASSWORD) are read by
    the credential store, not here.
    """

    model_config = SettingsConfigDict(
        env_prefix="INDEXARR_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    http_timeout_seconds: Optional[float] = None
    http_follow_redirects: Optional[bool] = None
    http_user_agent: Optional[str] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    parse_error_dump_dir: Optional[Path] = None

    @field_validator("parse_error_dump_dir", mode="before")
    @classmethod
    def _validate_paths(cls, v: Any) -> Any:
        if v is None:
            return None
        return _normalize_path(v)

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)

import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SCALAR_DOCS_PATH = "/scalar"

# Search order used by the middleware when no explicit file is configured
DEFAULT_SEARCH_DIRS = ("api", "doc", ".")

# Wider search order used by zero-config auto-discovery
AUTO_SEARCH_DIRS = ("api", "doc", "docs", "openapi", ".")


def validate_docs_path(docs_path: str | None) -> str:
    """
    Normalize the URL prefix the documentation UI is served under.

    Rules:
    - Missing or empty falls back to /scalar
    - Must start with a slash

    Examples:
        >>> validate_docs_path("")
        "/scalar"

        >>> validate_docs_path("api-docs")
        ValueError: docs_path must start with '/'
    """
    if docs_path is None:
        return DEFAULT_SCALAR_DOCS_PATH

    docs_path = docs_path.strip()
    if not docs_path:
        return DEFAULT_SCALAR_DOCS_PATH

    if not docs_path.startswith("/"):
        raise ValueError(f"docs_path must start with '/', got: {docs_path}")

    return docs_path


class ScalarConfig(BaseModel):
    """Configuration of a single docs middleware instance.

    Immutable once built. Setting either explicit spec path disables the
    directory search entirely.
    """

    model_config = ConfigDict(frozen=True)

    json_spec_path: Optional[str] = None
    yaml_spec_path: Optional[str] = None
    search_dirs: tuple[str, ...] = DEFAULT_SEARCH_DIRS
    docs_path: str = DEFAULT_SCALAR_DOCS_PATH

    @field_validator("json_spec_path", "yaml_spec_path", mode="before")
    @classmethod
    def empty_path_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("search_dirs", mode="before")
    @classmethod
    def default_search_dirs(cls, value):
        if not value:
            return DEFAULT_SEARCH_DIRS
        if isinstance(value, str):
            return tuple(d.strip() for d in value.split(",") if d.strip())
        return tuple(value)

    @field_validator("docs_path", mode="before")
    @classmethod
    def normalize_docs_path(cls, value):
        return validate_docs_path(value)

    @property
    def uses_explicit_paths(self) -> bool:
        return self.json_spec_path is not None or self.yaml_spec_path is not None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SCALAR_", env_file=".env", extra="ignore"
    )

    # Docs UI
    docs_path: str = DEFAULT_SCALAR_DOCS_PATH

    # Explicit spec files, bypass the directory search when set
    json_spec_path: Optional[str] = None
    yaml_spec_path: Optional[str] = None

    # Comma separated, e.g. SCALAR_SEARCH_DIRS=api,doc,.
    search_dirs: Optional[str] = None

    # Demo server
    host: str = "0.0.0.0"
    port: int = 18081

    @field_validator("docs_path", mode="before")
    @classmethod
    def normalize_docs_path(cls, value):
        return validate_docs_path(value)

    def search_dirs_list(self) -> tuple[str, ...]:
        if not self.search_dirs:
            return DEFAULT_SEARCH_DIRS
        return tuple(d.strip() for d in self.search_dirs.split(",") if d.strip())

    def to_config(self) -> ScalarConfig:
        return ScalarConfig(
            json_spec_path=self.json_spec_path,
            yaml_spec_path=self.yaml_spec_path,
            search_dirs=self.search_dirs_list(),
            docs_path=self.docs_path,
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get settings singleton, creating it if needed.

    Returns:
        Settings: The application settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Override settings (primarily for testing).

    Args:
        settings: The Settings instance to use.
    """
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to None (for test cleanup)."""
    global _settings
    _settings = None


def get_loglevel():
    loglevel = os.getenv("LOGLEVEL", "INFO")

    match loglevel:
        case "INFO":
            return logging.INFO
        case "WARNING":
            return logging.WARNING
        case "ERROR":
            return logging.ERROR
        case "CRITICAL":
            return logging.CRITICAL
        case "DEBUG":
            return logging.DEBUG
        case _:
            return logging.INFO

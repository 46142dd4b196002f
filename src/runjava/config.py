"""Centralized configuration — Pydantic BaseSettings with env + TOML sources.

The launcher is driven by the environment variables documented for
``run-java`` style images (``JAVA_OPTIONS``, ``JAVA_MAX_MEM_RATIO``, ...).
An optional ``runjava.toml`` in the working directory can provide the same
values; environment variables override it. Empty variables count as unset,
matching how container images usually blank out optional settings.

Priority (highest wins): init args > env vars > .env > runjava.toml

Usage::

    from runjava.config import get_settings

    s = get_settings()
    print(s.java_max_mem_ratio)
    print(s.heap.small_ceiling_bytes)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from runjava.errors import ConfigurationError

# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------


class _StrictModel(BaseModel):
    """Base for all config sub-models — reject unknown keys so typos fail loudly."""

    model_config = {"extra": "forbid"}


def _check_percent(v: int | None, name: str) -> int | None:
    if v is not None and not 0 <= v <= 100:
        raise ValueError(f"{name} must be between 0 and 100, got {v}")
    return v


class HeapConfig(_StrictModel):
    """Default max-heap sizing used when no ratio is configured.

    Ceilings up to ``small_ceiling_bytes`` get ``small_ratio`` percent,
    larger ones ``large_ratio``. Mirrors the JVM's own default heap sizing
    for small-memory machines.
    """

    small_ceiling_bytes: int = 300 * 1024 * 1024
    small_ratio: int = 25
    large_ratio: int = 50

    @field_validator("small_ceiling_bytes")
    @classmethod
    def validate_threshold(cls, v: int) -> int:
        if v < 0:
            raise ValueError("small_ceiling_bytes must not be negative")
        return v

    @field_validator("small_ratio", "large_ratio")
    @classmethod
    def validate_ratio(cls, v: int) -> int:
        # No off switch here, 0 would become -Xmx0m
        if not 1 <= v <= 100:
            raise ValueError(f"heap ratio must be between 1 and 100, got {v}")
        return v


# ---------------------------------------------------------------------------
# Root Settings
# ---------------------------------------------------------------------------


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        toml_file="runjava.toml",
        env_file=".env",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Options and ratios
    java_options: str = ""
    java_max_mem_ratio: int | None = None  # None → size-based default, 0 → off
    java_init_mem_ratio: int | None = None  # None or 0 → off
    java_major_version: str | None = None

    # Application layout
    java_app_dir: Path | None = None  # None → current working directory
    java_lib_dir: Path | None = None  # None → java_app_dir
    java_app_jar: str | None = None  # None → auto-detect in java_app_dir
    java_main_class: str | None = None
    java_classpath: str | None = None
    java_app_name: str | None = None

    heap: HeapConfig = HeapConfig()

    @field_validator("java_major_version", mode="before")
    @classmethod
    def stringify_version(cls, v: object) -> object:
        # java_major_version = 7 in TOML is an integer
        return str(v) if isinstance(v, int) else v

    @field_validator("java_max_mem_ratio", "java_init_mem_ratio")
    @classmethod
    def validate_mem_ratio(cls, v: int | None) -> int | None:
        return _check_percent(v, "memory ratio")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority: init > env vars > .env > runjava.toml > file secrets."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


# ---------------------------------------------------------------------------
# Singleton
# ---------------------------------------------------------------------------

_settings: Settings | None = None


def load_settings(**overrides: object) -> Settings:
    """Build Settings, turning validation failures into ConfigurationError.

    A bad ratio must stop the launch here; a nonsensical -Xmx would crash
    the JVM much less legibly.
    """
    try:
        return Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid launcher configuration:\n{exc}") from exc


def get_settings() -> Settings:
    """Lazy cached singleton."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Clear the cached singleton (for tests)."""
    global _settings
    _settings = None

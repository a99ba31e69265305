from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .environment import EnvironmentResolver
from .models import ActionKind


class ActionSettings(BaseSettings):
    """Action-level settings loaded from GitHub Actions inputs."""

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        frozen=True,
        extra="ignore",
    )

    action: Optional[ActionKind] = Field(
        default=None,
        description="Lifecycle step to run: build, clean, pack, publish, test",
    )
    working_directory: str = Field(
        default="",
        description="Directory the dotnet process runs in (defaults to the current directory)",
    )
    step_summary: bool = Field(default=True, description="Write a GitHub job summary")

    @field_validator("action", mode="before")
    @classmethod
    def _normalize_action(cls, value: object) -> object:
        if isinstance(value, str):
            trimmed = value.strip().lower()
            return trimmed or None
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Values come from the run's environment snapshot via from_environment.
        return (init_settings,)

    @classmethod
    def from_environment(cls, env: EnvironmentResolver) -> "ActionSettings":
        """Load settings from `INPUT_<FIELD>` variables; empty values keep the default."""
        prefix = cls.model_config["env_prefix"]
        values: Dict[str, Any] = {}
        for name in cls.model_fields:
            value = env.lookup(prefix + name.upper())
            if value is not None:
                values[name] = value
        return cls(**values)

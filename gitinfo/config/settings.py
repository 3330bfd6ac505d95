"""YAML-backed settings for the validator CLI."""

from __future__ import annotations

from typing import Literal, Optional

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import LoadError


class RunnerSettings(BaseModel):
    """Options that may be stored in a config file instead of passed as flags."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    schema_path: Optional[str] = Field(
        default=None,
        description="Schema file overriding the default lookup",
        validation_alias=AliasChoices("schema_path", "schema"),
    )
    color: Literal["auto", "always", "never"] = "auto"


def load_settings(path: Optional[str]) -> RunnerSettings:
    """Load settings from a YAML file; ``None`` or an empty file yields defaults."""
    if not path:
        return RunnerSettings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise LoadError(f"Error reading config: {e}") from e
    except yaml.YAMLError as e:
        raise LoadError(f"Error parsing config: {e}") from e
    if not isinstance(raw, dict):
        raise LoadError("Config invalid: root must be a mapping")
    try:
        return RunnerSettings.model_validate(raw)
    except ValidationError as e:
        raise LoadError(f"Config invalid: {e}") from e

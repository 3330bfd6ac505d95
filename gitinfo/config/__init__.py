"""Runtime configuration for the validator CLI."""

from .settings import RunnerSettings, load_settings

__all__ = ["RunnerSettings", "load_settings"]

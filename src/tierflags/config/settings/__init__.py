"""Config settings – env-based registry configuration."""
from tierflags.config.settings.loaders import EnvSettingsLoader
from tierflags.config.settings.registry import ENV_PREFIX, RegistrySettings

__all__ = ["ENV_PREFIX", "EnvSettingsLoader", "RegistrySettings"]

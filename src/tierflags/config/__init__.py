"""Config – 12-factor settings for the flag registry."""

from tierflags.config.settings import ENV_PREFIX, EnvSettingsLoader, RegistrySettings
from tierflags.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ENV_PREFIX",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "RegistrySettings",
]

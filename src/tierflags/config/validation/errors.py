"""Config validation errors – each names the TIERFLAGS_* variable at fault."""
from __future__ import annotations

from typing import Any

from tierflags.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Registry configuration could not be read or is inconsistent."""

    default_code = "config_error"

    def __init__(self, message: str, *, env_var: str | None = None, **kwargs: Any) -> None:
        if env_var is not None:
            kwargs["detail"] = {"env_var": env_var, **(kwargs.get("detail") or {})}
        super().__init__(message, **kwargs)
        self.env_var = env_var


class InvalidSettingValueError(ConfigError):
    """A registry setting holds a value the registry cannot use."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, *, env_var: str) -> None:
        super().__init__(
            f"{env_var} has invalid value {value!r}: {reason}",
            env_var=env_var,
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]

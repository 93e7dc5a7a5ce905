"""Config settings – RegistrySettings."""
from __future__ import annotations

import dataclasses

from tierflags.config.validation import InvalidSettingValueError
from tierflags.flags.diagnostics import LOG_LEVELS

ENV_PREFIX = "TIERFLAGS"


@dataclasses.dataclass
class RegistrySettings:
    """How a :class:`~tierflags.flags.FlagRegistry` reports diagnostics.

    Environment variables::

        TIERFLAGS_DIAGNOSTICS_ENABLED=false
        TIERFLAGS_DIAGNOSTIC_LEVEL=info
        TIERFLAGS_LOGGER_NAME=myapp.flags
    """

    diagnostics_enabled: bool = True
    diagnostic_level: str = "warning"
    logger_name: str = "tierflags"

    @staticmethod
    def env_var(setting_name: str) -> str:
        """Environment variable that carries *setting_name*."""
        return f"{ENV_PREFIX}_{setting_name.upper()}"

    def __post_init__(self) -> None:
        if not isinstance(self.diagnostics_enabled, bool):
            self._reject("diagnostics_enabled", self.diagnostics_enabled, "expected a boolean")
        level = str(self.diagnostic_level).lower()
        if level not in LOG_LEVELS:
            self._reject(
                "diagnostic_level", self.diagnostic_level, f"expected one of {sorted(LOG_LEVELS)}"
            )
        self.diagnostic_level = level
        if not self.logger_name:
            self._reject("logger_name", self.logger_name, "must not be empty")

    def _reject(self, setting_name: str, value: object, reason: str) -> None:
        raise InvalidSettingValueError(
            setting_name, value, reason, env_var=self.env_var(setting_name)
        )


__all__ = ["ENV_PREFIX", "RegistrySettings"]

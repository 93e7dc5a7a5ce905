"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from tierflags.config.settings.registry import RegistrySettings
from tierflags.config.validation import InvalidSettingValueError

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


class EnvSettingsLoader:
    """Build :class:`RegistrySettings` from ``TIERFLAGS_*`` environment variables.

    Unset variables keep the dataclass default.  *environ* defaults to
    :data:`os.environ`.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def load(self) -> RegistrySettings:
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(RegistrySettings):
            env_var = RegistrySettings.env_var(field.name)
            raw = self._environ.get(env_var)
            if raw is None:
                continue
            kwargs[field.name] = self._coerce(field.name, raw, field.type, env_var)
        return RegistrySettings(**kwargs)

    def _coerce(self, setting_name: str, raw: str, type_hint: Any, env_var: str) -> Any:
        value = raw.strip()
        if type_hint is bool or type_hint == "bool":
            lowered = value.lower()
            if lowered in _TRUTHY:
                return True
            if lowered in _FALSY:
                return False
            raise InvalidSettingValueError(
                setting_name,
                raw,
                f"expected one of {sorted(_TRUTHY | _FALSY)}",
                env_var=env_var,
            )
        return value


__all__ = ["EnvSettingsLoader"]

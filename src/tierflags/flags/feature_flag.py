"""Flags – FeatureFlag variants, FlagType tags and the FlagKey identity."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, ClassVar, NamedTuple

from tierflags.kernel.errors import InvalidFlagError


class FlagType(str, Enum):
    """Type tags as they appear in flag records."""

    ALLOW = "allow"
    INT = "int"
    INT_MIN = "int:min"
    INT_MAX = "int:max"


class FlagKey(NamedTuple):
    """Composite identity of a flag: compared and hashed as a pair."""

    name: str
    tier: str = ""

    def __str__(self) -> str:
        # display form only; lookups always use the tuple
        return f"{self.name}.{self.tier}"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclasses.dataclass(frozen=True, kw_only=True)
class _TieredFlag:
    """Identity fields shared by every variant."""

    flag_type: ClassVar[FlagType]

    name: str
    tier: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidFlagError("flag name must be a non-empty string", field="name")
        if not isinstance(self.tier, str):
            raise InvalidFlagError(
                f"tier of flag '{self.name}' must be a string", field="tier"
            )
        self._validate_value()

    def _validate_value(self) -> None:
        """Override to check ``value`` against the variant's shape."""

    @property
    def key(self) -> FlagKey:
        return FlagKey(self.name, self.tier)

    def to_dict(self) -> dict[str, Any]:
        """Return the flag as a plain record (``name``, ``tier``, ``type``, ``value``)."""
        return {
            "name": self.name,
            "tier": self.tier,
            "type": self.flag_type.value,
            "value": getattr(self, "value", None),
        }


@dataclasses.dataclass(frozen=True, kw_only=True)
class AllowFlag(_TieredFlag):
    """On/off gate."""

    flag_type: ClassVar[FlagType] = FlagType.ALLOW

    value: bool

    def _validate_value(self) -> None:
        if not isinstance(self.value, bool):
            raise InvalidFlagError(
                f"flag '{self.name}' of type 'allow' needs a boolean value, "
                f"got {self.value!r}",
                field="value",
            )


@dataclasses.dataclass(frozen=True, kw_only=True)
class IntFlag(_TieredFlag):
    """Candidate must equal ``value`` exactly."""

    flag_type: ClassVar[FlagType] = FlagType.INT

    value: int

    def _validate_value(self) -> None:
        if not _is_int(self.value):
            raise InvalidFlagError(
                f"flag '{self.name}' of type 'int' needs an integer value, "
                f"got {self.value!r}",
                field="value",
            )


@dataclasses.dataclass(frozen=True, kw_only=True)
class _BoundFlag(_TieredFlag):
    """Inclusive bound; ``None`` means unbounded."""

    value: int | None

    def _validate_value(self) -> None:
        if self.value is not None and not _is_int(self.value):
            raise InvalidFlagError(
                f"flag '{self.name}' of type '{self.flag_type.value}' needs an "
                f"integer or null bound, got {self.value!r}",
                field="value",
            )


@dataclasses.dataclass(frozen=True, kw_only=True)
class IntMinFlag(_BoundFlag):
    """Candidate must be ``>= value``."""

    flag_type: ClassVar[FlagType] = FlagType.INT_MIN


@dataclasses.dataclass(frozen=True, kw_only=True)
class IntMaxFlag(_BoundFlag):
    """Candidate must be ``<= value``."""

    flag_type: ClassVar[FlagType] = FlagType.INT_MAX


FeatureFlag = AllowFlag | IntFlag | IntMinFlag | IntMaxFlag

INT_FLAG_TYPES: tuple[FlagType, ...] = (FlagType.INT, FlagType.INT_MIN, FlagType.INT_MAX)


__all__ = [
    "INT_FLAG_TYPES",
    "AllowFlag",
    "FeatureFlag",
    "FlagKey",
    "FlagType",
    "IntFlag",
    "IntMaxFlag",
    "IntMinFlag",
]

"""Flags – diagnostic events and the sinks that receive them.

The registry never raises on a missing or mismatched flag.  It reports the
anomaly to a :class:`DiagnosticSink` instead and returns its safe default.
The default sink writes a structlog warning; tests inject
:class:`~tierflags.testing.fakes.RecordingDiagnosticSink` and assert on the
recorded events.
"""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from tierflags.flags.feature_flag import FeatureFlag, FlagType
from tierflags.observability.logging import get_logger

LOG_LEVELS: frozenset[str] = frozenset({"debug", "info", "warning", "error", "critical"})


class DiagnosticKind(str, Enum):
    NOT_FOUND = "flag_not_found"
    TYPE_MISMATCH = "flag_type_mismatch"


@dataclasses.dataclass(frozen=True)
class FlagDiagnostic:
    """A single not-found or type-mismatch observation."""

    kind: DiagnosticKind
    name: str
    tier: str
    flag: FeatureFlag | None = None
    expected: tuple[FlagType, ...] = ()
    timestamp: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "kind": self.kind.value,
            "flag_name": self.name,
            "tier": self.tier,
            "observed_at": self.timestamp.isoformat(),
        }
        if self.flag is not None:
            payload["flag"] = self.flag.to_dict()
        if self.expected:
            payload["expected"] = [t.value for t in self.expected]
        return payload


@runtime_checkable
class DiagnosticSink(Protocol):
    """Port: receive diagnostics emitted by the registry."""

    def record(self, diagnostic: FlagDiagnostic) -> None: ...


class LoggingDiagnosticSink:
    """Write each diagnostic as a structlog event.

    Parameters
    ----------
    logger:
        Bound logger to write to.  Defaults to ``get_logger("tierflags")``.
    level:
        Log method used for every diagnostic (``"warning"`` by default).
    """

    def __init__(self, logger: Any = None, level: str = "warning") -> None:
        level = level.lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {level!r}; expected one of {sorted(LOG_LEVELS)}")
        self._log = logger if logger is not None else get_logger("tierflags")
        self._level = level

    @property
    def level(self) -> str:
        return self._level

    def record(self, diagnostic: FlagDiagnostic) -> None:
        fields = diagnostic.to_dict()
        event = fields.pop("kind")
        getattr(self._log, self._level)(event, **fields)


class NullDiagnosticSink:
    """Discard every diagnostic."""

    def record(self, diagnostic: FlagDiagnostic) -> None:  # noqa: ARG002
        return None


__all__ = [
    "LOG_LEVELS",
    "DiagnosticKind",
    "DiagnosticSink",
    "FlagDiagnostic",
    "LoggingDiagnosticSink",
    "NullDiagnosticSink",
]

"""Flags – FlagRegistry, the shared lookup table of tier-scoped flags.

Lifecycle::

    registry = FlagRegistry()
    registry.load([
        {"name": "maxUploads", "tier": "", "type": "int:max", "value": 10},
        AllowFlag(name="newCheckout", tier="beta", value=True),
    ])

    registry.is_in_range("maxUploads", candidate=10)   # True
    registry.is_allowed("newCheckout", "beta")     # True
    registry.is_allowed("nonexistent")             # False, diagnostic emitted

    registry.clear()

Queries never raise on missing or mismatched flags: they report the anomaly
to the configured :class:`~tierflags.flags.diagnostics.DiagnosticSink` and
return ``None`` / ``False``.  Only :meth:`FlagRegistry.load` raises, and only
for malformed records.
"""
from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from tierflags.flags.diagnostics import (
    DiagnosticKind,
    DiagnosticSink,
    FlagDiagnostic,
    LoggingDiagnosticSink,
    NullDiagnosticSink,
)
from tierflags.flags.feature_flag import (
    INT_FLAG_TYPES,
    AllowFlag,
    FeatureFlag,
    FlagKey,
    FlagType,
    IntFlag,
    IntMaxFlag,
    IntMinFlag,
)
from tierflags.flags.records import flags_from_records
from tierflags.observability.logging import get_logger

if TYPE_CHECKING:
    from tierflags.config.settings.registry import RegistrySettings

_log = get_logger(__name__)


class FlagRegistry:
    """In-memory mapping of :class:`FlagKey` to :data:`FeatureFlag`.

    A single re-entrant lock guards the mapping for every operation, so one
    instance can be shared between threads.  Diagnostics are emitted after
    the lock is released.

    Parameters
    ----------
    sink:
        Receives not-found and type-mismatch diagnostics.  Defaults to a
        :class:`LoggingDiagnosticSink` writing structlog warnings.
    """

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self._flags: dict[FlagKey, FeatureFlag] = {}
        self._lock = threading.RLock()
        self._sink: DiagnosticSink = sink if sink is not None else LoggingDiagnosticSink()

    @classmethod
    def from_settings(cls, settings: RegistrySettings | None = None) -> "FlagRegistry":
        """Build a registry whose diagnostic sink follows *settings*."""
        if settings is None:
            from tierflags.config.settings.registry import RegistrySettings

            settings = RegistrySettings()
        if not settings.diagnostics_enabled:
            return cls(sink=NullDiagnosticSink())
        return cls(
            sink=LoggingDiagnosticSink(
                logger=get_logger(settings.logger_name),
                level=settings.diagnostic_level,
            )
        )

    @property
    def sink(self) -> DiagnosticSink:
        return self._sink

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def load(self, flags: Iterable[FeatureFlag | Mapping[str, Any]]) -> None:
        """Insert or overwrite every flag in *flags*, in order.

        The whole batch is validated before anything is stored: a malformed
        record raises :class:`~tierflags.kernel.errors.InvalidFlagError` and
        leaves the registry unchanged.  Later entries for the same
        ``(name, tier)`` overwrite earlier ones.
        """
        decoded = flags_from_records(flags)
        if not decoded:
            return
        with self._lock:
            for flag in decoded:
                self._flags[flag.key] = flag
        _log.debug("flags_loaded", count=len(decoded))

    def clear(self) -> None:
        """Remove every flag."""
        with self._lock:
            self._flags.clear()
        _log.debug("flags_cleared")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, name: str, tier: str = "") -> FeatureFlag | None:
        """Return the flag stored for ``(name, tier)``, or ``None``."""
        with self._lock:
            flag = self._flags.get(FlagKey(name, tier))
        if flag is None:
            self._emit(FlagDiagnostic(kind=DiagnosticKind.NOT_FOUND, name=name, tier=tier))
        return flag

    def is_allowed(self, name: str, tier: str = "") -> bool:
        """``True`` only for an ``allow`` flag whose value is ``True``."""
        flag = self.get(name, tier)
        if flag is None:
            return False
        if not isinstance(flag, AllowFlag):
            self._mismatch(flag, (FlagType.ALLOW,))
            return False
        return bool(flag.value)

    def is_in_range(self, name: str, tier: str = "", *, candidate: int) -> bool:
        """Check *candidate* against an ``int``, ``int:min`` or ``int:max`` flag.

        Bounds are inclusive and a ``None`` bound accepts every candidate.
        """
        flag = self.get(name, tier)
        if flag is None:
            return False

        match flag:
            case IntFlag():
                return candidate == flag.value
            case IntMaxFlag():
                return flag.value is None or candidate <= flag.value
            case IntMinFlag():
                return flag.value is None or candidate >= flag.value
            case _:
                self._mismatch(flag, INT_FLAG_TYPES)
                return False

    def get_all(self) -> Mapping[FlagKey, FeatureFlag]:
        """Return a read-only snapshot of every stored flag."""
        with self._lock:
            return MappingProxyType(dict(self._flags))

    def __len__(self) -> int:
        with self._lock:
            return len(self._flags)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        try:
            with self._lock:
                return FlagKey(*key) in self._flags
        except TypeError:
            # unhashable element
            return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(flags={len(self)})"

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def _mismatch(self, flag: FeatureFlag, expected: tuple[FlagType, ...]) -> None:
        self._emit(
            FlagDiagnostic(
                kind=DiagnosticKind.TYPE_MISMATCH,
                name=flag.name,
                tier=flag.tier,
                flag=flag,
                expected=expected,
            )
        )

    def _emit(self, diagnostic: FlagDiagnostic) -> None:
        # a failing sink must not change the query's result
        try:
            self._sink.record(diagnostic)
        except Exception:  # noqa: BLE001
            _log.exception(
                "flag_diagnostic_sink_failed",
                kind=diagnostic.kind.value,
                flag_name=diagnostic.name,
                tier=diagnostic.tier,
            )


__all__ = ["FlagRegistry"]

"""Unit tests for flag diagnostics and sinks."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
import structlog
from structlog.testing import LogCapture, capture_logs

from tierflags.flags import (
    AllowFlag,
    DiagnosticKind,
    DiagnosticSink,
    FlagDiagnostic,
    FlagRegistry,
    FlagType,
    IntFlag,
    LoggingDiagnosticSink,
    NullDiagnosticSink,
)
from tierflags.testing.fakes import RecordingDiagnosticSink


# ---------------------------------------------------------------------------
# FlagDiagnostic
# ---------------------------------------------------------------------------


class TestFlagDiagnostic:
    def test_defaults(self) -> None:
        d = FlagDiagnostic(kind=DiagnosticKind.NOT_FOUND, name="beta", tier="")
        assert d.flag is None
        assert d.expected == ()
        assert d.timestamp.tzinfo is not None

    def test_frozen(self) -> None:
        d = FlagDiagnostic(kind=DiagnosticKind.NOT_FOUND, name="beta", tier="")
        with pytest.raises((AttributeError, TypeError)):
            d.name = "other"  # type: ignore[misc]

    def test_kind_values(self) -> None:
        assert DiagnosticKind.NOT_FOUND.value == "flag_not_found"
        assert DiagnosticKind.TYPE_MISMATCH.value == "flag_type_mismatch"

    def test_not_found_to_dict(self) -> None:
        ts = datetime(2024, 1, 1, tzinfo=timezone.utc)
        d = FlagDiagnostic(kind=DiagnosticKind.NOT_FOUND, name="beta", tier="eu", timestamp=ts)
        assert d.to_dict() == {
            "kind": "flag_not_found",
            "flag_name": "beta",
            "tier": "eu",
            "observed_at": "2024-01-01T00:00:00+00:00",
        }

    def test_mismatch_to_dict_includes_flag(self) -> None:
        d = FlagDiagnostic(
            kind=DiagnosticKind.TYPE_MISMATCH,
            name="build",
            tier="qa",
            flag=IntFlag(name="build", tier="qa", value=1234),
            expected=(FlagType.ALLOW,),
        )
        payload = d.to_dict()
        assert payload["flag"] == {"name": "build", "tier": "qa", "type": "int", "value": 1234}
        assert payload["expected"] == ["allow"]


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------


class TestSinkProtocol:
    @pytest.mark.parametrize(
        "sink",
        [LoggingDiagnosticSink(), NullDiagnosticSink(), RecordingDiagnosticSink()],
    )
    def test_implementations_satisfy_protocol(self, sink: object) -> None:
        assert isinstance(sink, DiagnosticSink)


class TestLoggingDiagnosticSink:
    def test_default_level(self) -> None:
        assert LoggingDiagnosticSink().level == "warning"

    def test_level_is_case_insensitive(self) -> None:
        assert LoggingDiagnosticSink(level="INFO").level == "info"

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError):
            LoggingDiagnosticSink(level="loud")

    def test_writes_to_injected_logger(self) -> None:
        logger = MagicMock()
        sink = LoggingDiagnosticSink(logger=logger)
        sink.record(FlagDiagnostic(kind=DiagnosticKind.NOT_FOUND, name="beta", tier="eu"))
        logger.warning.assert_called_once()
        args, kwargs = logger.warning.call_args
        assert args == ("flag_not_found",)
        assert kwargs["flag_name"] == "beta"
        assert kwargs["tier"] == "eu"
        assert "kind" not in kwargs

    def test_uses_configured_level(self) -> None:
        logger = MagicMock()
        sink = LoggingDiagnosticSink(logger=logger, level="debug")
        sink.record(FlagDiagnostic(kind=DiagnosticKind.NOT_FOUND, name="beta", tier=""))
        logger.debug.assert_called_once()
        logger.warning.assert_not_called()

    def test_observed_at_survives_timestamper(self) -> None:
        cap = LogCapture()
        log = structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[structlog.processors.TimeStamper(fmt="iso"), cap],
        )
        observed = datetime(2024, 1, 1, tzinfo=timezone.utc)
        LoggingDiagnosticSink(logger=log).record(
            FlagDiagnostic(kind=DiagnosticKind.NOT_FOUND, name="beta", tier="", timestamp=observed)
        )
        [entry] = cap.entries
        assert entry["observed_at"] == "2024-01-01T00:00:00+00:00"
        assert entry["timestamp"] != entry["observed_at"]

    def test_registry_warns_through_structlog(self) -> None:
        with capture_logs() as logs:
            registry = FlagRegistry()
            registry.load([AllowFlag(name="beta", value=True)])
            assert registry.is_allowed("nonexistent", "") is False
            assert registry.is_in_range("beta", candidate=1) is False

        warnings = [e for e in logs if e["log_level"] == "warning"]
        assert [e["event"] for e in warnings] == ["flag_not_found", "flag_type_mismatch"]
        assert warnings[0]["flag_name"] == "nonexistent"
        assert warnings[1]["flag"] == {"name": "beta", "tier": "", "type": "allow", "value": True}
        assert warnings[1]["expected"] == ["int", "int:min", "int:max"]


class TestNullDiagnosticSink:
    def test_discards(self) -> None:
        with capture_logs() as logs:
            registry = FlagRegistry(sink=NullDiagnosticSink())
            assert registry.get("ghost") is None
        assert [e for e in logs if e["log_level"] == "warning"] == []

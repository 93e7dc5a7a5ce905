"""Flags – tier-scoped feature flag model, diagnostics and registry."""
from tierflags.flags.diagnostics import (
    DiagnosticKind,
    DiagnosticSink,
    FlagDiagnostic,
    LoggingDiagnosticSink,
    NullDiagnosticSink,
)
from tierflags.flags.feature_flag import (
    AllowFlag,
    FeatureFlag,
    FlagKey,
    FlagType,
    IntFlag,
    IntMaxFlag,
    IntMinFlag,
)
from tierflags.flags.records import FLAG_TYPES, flag_from_record, flags_from_records
from tierflags.flags.registry import FlagRegistry

__all__ = [
    "FLAG_TYPES",
    "AllowFlag",
    "DiagnosticKind",
    "DiagnosticSink",
    "FeatureFlag",
    "FlagDiagnostic",
    "FlagKey",
    "FlagRegistry",
    "FlagType",
    "IntFlag",
    "IntMaxFlag",
    "IntMinFlag",
    "LoggingDiagnosticSink",
    "NullDiagnosticSink",
    "flag_from_record",
    "flags_from_records",
]

"""Testing fakes – in-memory doubles for registry ports."""
from tierflags.testing.fakes.diagnostics import RecordingDiagnosticSink

__all__ = ["RecordingDiagnosticSink"]

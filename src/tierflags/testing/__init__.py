"""Testing support – recording sink and hypothesis strategies for flags.

Typical use in a test::

    sink = RecordingDiagnosticSink()
    registry = FlagRegistry(sink=sink)
    assert registry.is_allowed("missing") is False
    assert sink.kinds == [DiagnosticKind.NOT_FOUND]
"""

from tierflags.testing.fakes import RecordingDiagnosticSink
from tierflags.testing.generators import (
    feature_flag_strategy,
    flag_name_strategy,
    tier_strategy,
)

__all__ = [
    "RecordingDiagnosticSink",
    "feature_flag_strategy",
    "flag_name_strategy",
    "tier_strategy",
]

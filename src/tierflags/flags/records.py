"""Flags – decoding plain mapping records into FeatureFlag variants.

Producers that deserialise flags from JSON, environment-derived config or a
remote service hand over mappings shaped like::

    {"name": "maxUploads", "tier": "", "type": "int:max", "value": 10}

``tier`` is optional and defaults to ``""``.  Anything else missing or
mistyped raises :class:`~tierflags.kernel.errors.InvalidFlagError`.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from tierflags.flags.feature_flag import (
    AllowFlag,
    FeatureFlag,
    FlagType,
    IntFlag,
    IntMaxFlag,
    IntMinFlag,
)
from tierflags.kernel.errors import InvalidFlagError

FLAG_TYPES: Mapping[FlagType, type[FeatureFlag]] = MappingProxyType(
    {
        FlagType.ALLOW: AllowFlag,
        FlagType.INT: IntFlag,
        FlagType.INT_MIN: IntMinFlag,
        FlagType.INT_MAX: IntMaxFlag,
    }
)

_REQUIRED_KEYS: tuple[str, ...] = ("name", "type", "value")


def flag_from_record(record: Mapping[str, Any]) -> FeatureFlag:
    """Decode a single mapping into the matching :data:`FeatureFlag` variant."""
    if not isinstance(record, Mapping):
        raise InvalidFlagError(
            f"flag record must be a mapping, got {type(record).__name__}"
        )
    for key in _REQUIRED_KEYS:
        if key not in record:
            raise InvalidFlagError(f"flag record is missing '{key}'", field=key)

    try:
        flag_type = FlagType(record["type"])
    except ValueError as exc:
        raise InvalidFlagError(
            f"unknown flag type {record['type']!r}; expected one of "
            f"{[t.value for t in FlagType]}",
            field="type",
        ) from exc

    return FLAG_TYPES[flag_type](
        name=record["name"],
        tier=record.get("tier", ""),
        value=record["value"],
    )


def flags_from_records(
    records: Iterable[Mapping[str, Any] | FeatureFlag],
) -> list[FeatureFlag]:
    """Decode a sequence of records, passing already-built flags through.

    Stops at the first malformed record; the raised error's ``detail`` holds
    its ``index`` in the input sequence.
    """
    flags: list[FeatureFlag] = []
    for index, record in enumerate(records):
        if isinstance(record, FeatureFlag):
            flags.append(record)
            continue
        try:
            flags.append(flag_from_record(record))
        except InvalidFlagError as exc:
            exc.detail.setdefault("index", index)
            raise
    return flags


__all__ = ["FLAG_TYPES", "flag_from_record", "flags_from_records"]

# Decoding of raw entry metadata into Python values.
# Raw entries carry sizes and timestamps the way the native find API
# reports them: 64-bit values split into high/low unsigned 32-bit halves.
# Timestamps are FILETIME ticks (100 ns) since 1601-01-01 UTC.

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Tuple

_EPOCH_1601 = datetime(1601, 1, 1, tzinfo=timezone.utc)

# FILETIME ticks between 1601-01-01 and the POSIX epoch.
EPOCH_DELTA_TICKS = 116444736000000000

_MASK32 = 0xFFFFFFFF
_MAX64 = (1 << 64) - 1


def combine_high_low(high: int, low: int) -> int:
    # Join two unsigned 32-bit halves into one 64-bit value.
    return ((high & _MASK32) << 32) | (low & _MASK32)


def split_high_low(value: int) -> Tuple[int, int]:
    # Inverse of combine_high_low. Values outside 0..2**64-1 are clamped.
    value = min(max(value, 0), _MAX64)
    return (value >> 32) & _MASK32, value & _MASK32


def ns_to_filetime(ns_since_epoch: int) -> Tuple[int, int]:
    # Convert a POSIX nanosecond timestamp (as in os.stat_result.st_mtime_ns)
    # to a (high, low) FILETIME pair. Times before 1601 clamp to zero.
    ticks = ns_since_epoch // 100 + EPOCH_DELTA_TICKS
    return split_high_low(ticks)


def filetime_to_datetime(high: int, low: int) -> datetime:
    # Decode a FILETIME pair into an aware UTC datetime.
    # Tick counts past year 9999 saturate at datetime.max.
    ticks = combine_high_low(high, low)
    try:
        return _EPOCH_1601 + timedelta(microseconds=ticks // 10)
    except OverflowError:
        return datetime.max.replace(tzinfo=timezone.utc)

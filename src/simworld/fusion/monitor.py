"""Bounded newest-first monitor log merge."""

from __future__ import annotations

from collections.abc import Sequence

from simworld._constants import MAX_MONITOR_ITEMS
from simworld.models.messages import LogLevel, MonitorItem
from simworld.models.world import LogItem, LogSeverity

_SEVERITY: dict[LogLevel, LogSeverity] = {
    LogLevel.INFO: LogSeverity.INFO,
    LogLevel.WARN: LogSeverity.WARN,
    LogLevel.ERROR: LogSeverity.ERROR,
    LogLevel.FATAL: LogSeverity.FATAL,
}


def to_log_items(items: Sequence[MonitorItem]) -> list[LogItem]:
    return [LogItem(msg=item.msg, level=_SEVERITY[item.log_level], source=item.source) for item in items]


def merge_monitor_items(
    existing: Sequence[LogItem],
    incoming: Sequence[LogItem],
    *,
    capacity: int = MAX_MONITOR_ITEMS,
) -> list[LogItem]:
    """Prepend *incoming* to *existing* and evict from the tail.

    Incoming items keep their arrival order ahead of the prior items,
    which keep theirs.  The result never holds more than *capacity*
    items; once *incoming* alone fills it, every prior item is dropped.
    Neither input is modified.
    """
    if len(incoming) >= capacity:
        return list(incoming[:capacity])
    keep_existing = capacity - len(incoming)
    return [*incoming, *existing[:keep_existing]]

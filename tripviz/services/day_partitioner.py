"""Day partitioner.

Groups duty log entries by calendar date. The ordered set of dates
decides how many log sheets get rendered; nothing else is filtered out,
so a date with a single one-minute entry still gets a full sheet.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from ..domain.models import DutyLogEntry


def partition_log_dates(duty_logs: Iterable[DutyLogEntry]) -> List[str]:
    """Return the distinct log dates in ascending order.

    Dates are "YYYY-MM-DD" strings, so lexicographic order is
    chronological order.
    """
    return sorted({entry.log_date for entry in duty_logs})


def group_logs_by_date(
    duty_logs: Iterable[DutyLogEntry],
) -> Dict[str, List[DutyLogEntry]]:
    """Group entries by log date.

    Keys come out in ascending date order; entries keep their input
    order inside each group.
    """
    groups: Dict[str, List[DutyLogEntry]] = {}
    for entry in duty_logs:
        groups.setdefault(entry.log_date, []).append(entry)
    return {day: groups[day] for day in sorted(groups)}


def entries_for_date(
    duty_logs: Iterable[DutyLogEntry], log_date: str
) -> List[DutyLogEntry]:
    """Entries logged on ``log_date``, in input order."""
    return [entry for entry in duty_logs if entry.log_date == log_date]

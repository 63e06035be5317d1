"""Insert reminder alarms into iCalendar documents."""

from __future__ import annotations

from typing import List

END_EVENT = "END:VEVENT"


def build_alarm(trigger: str = "-PT5M", action: str = "DISPLAY") -> List[str]:
    """Return the ``VALARM`` block lines for a single reminder."""
    return [
        "BEGIN:VALARM",
        f"TRIGGER:{trigger}",
        f"ACTION:{action}",
        "END:VALARM",
    ]


def split_lines(ics: str) -> List[str]:
    """Split on ``\\n`` only, dropping one trailing ``\\r`` per line.

    Other separators (lone ``\\r``, form feed, U+2028 ...) can appear inside
    TEXT property values and stay part of their line.
    """
    if not ics:
        return []
    lines = ics.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def add_alerts(ics: str, trigger: str = "-PT5M", action: str = "DISPLAY") -> str:
    """Add an alarm to every event in ``ics``.

    The alarm is placed just before each ``END:VEVENT`` line. Lines are
    re-joined with ``\\n`` so CRLF input comes back with bare newlines.
    """
    alarm = build_alarm(trigger, action)
    lines: List[str] = []
    for line in split_lines(ics):
        if line == END_EVENT:
            lines.extend(alarm)
        lines.append(line)
    return "\n".join(lines)

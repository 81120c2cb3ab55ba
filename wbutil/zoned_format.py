"""strftime-style formatting of timezone-aware times, independent of the C library locale."""

from __future__ import annotations

from datetime import datetime, timezone

_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Composite directives in the "C" locale.
_COMPOSITE = {
    "c": "%a %b %e %H:%M:%S %Y",
    "x": "%m/%d/%y",
    "D": "%m/%d/%y",
    "X": "%H:%M:%S",
    "T": "%H:%M:%S",
    "r": "%I:%M:%S %p",
    "R": "%H:%M",
    "F": "%Y-%m-%d",
}


def _directive(code: str, moment: datetime) -> str:
    if code in _COMPOSITE:
        return _render(_COMPOSITE[code], moment)
    if code == "a":
        return _DAYS[moment.weekday()][:3]
    if code == "A":
        return _DAYS[moment.weekday()]
    if code in ("b", "h"):
        return _MONTHS[moment.month - 1][:3]
    if code == "B":
        return _MONTHS[moment.month - 1]
    if code == "p":
        return "AM" if moment.hour < 12 else "PM"
    if code == "e":
        return f"{moment.day:2d}"
    if code == "Z":
        return moment.tzname() or ""
    if code == "n":
        return "\n"
    if code == "t":
        return "\t"
    if code == "%":
        return "%"
    return moment.strftime("%" + code)


def _render(spec: str, moment: datetime) -> str:
    out: list[str] = []
    i = 0
    n = len(spec)
    while i < n:
        ch = spec[i]
        if ch != "%" or i + 1 >= n:
            out.append(ch)
            i += 1
            continue
        i += 1
        # The E and O modifiers select alternative representations; the C locale has none.
        if spec[i] in "EO" and i + 1 < n:
            i += 1
        out.append(_directive(spec[i], moment))
        i += 1
    return "".join(out)


def format_time(spec: str, moment: datetime) -> str:
    """Format ``moment`` in its own timezone with strftime directives.

    An empty spec gives an empty string. Naive datetimes are taken as UTC.
    """
    if not spec:
        return ""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return _render(spec, moment)
"""Timestamp rendering shared by the pattern and basic layouts.

Why
---
``%d`` directives and the basic layout accept the same small date-format
language (``yyyy-MM-dd hh:mm:ss.SSS`` and friends). Rendering it in one place
keeps both layouts in sync.

Contents
--------
* :data:`NAMED_DATE_FORMATS` – ``ISO8601``, ``ISO8601_WITH_TZ_OFFSET``,
  ``ABSOLUTE`` and ``DATE`` aliases.
* :func:`resolve_date_format` – map a ``%d{...}`` argument to a format.
* :func:`format_timestamp` – render a timestamp with a format.
* :func:`format_locale_time` – locale short time-of-day used by ``%r``.

System Role
-----------
Presentation helper for :mod:`lib_log_facade.adapters.layouts`.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

ISO8601_FORMAT = "yyyy-MM-dd hh:mm:ss.SSS"
ISO8601_WITH_TZ_OFFSET_FORMAT = "yyyy-MM-ddThh:mm:ssO"
ABSOLUTE_FORMAT = "hh:mm:ss.SSS"
DATE_FORMAT = "dd MMM yyyy hh:mm:ss.SSS"

NAMED_DATE_FORMATS: dict[str, str] = {
    "ISO8601": ISO8601_FORMAT,
    "ISO8601_WITH_TZ_OFFSET": ISO8601_WITH_TZ_OFFSET_FORMAT,
    "ABSOLUTE": ABSOLUTE_FORMAT,
    "DATE": DATE_FORMAT,
}

_MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
# Fixed English names; ``DATE`` output is locale-independent.

_DATE_TOKEN_RE = re.compile(r"yyyy|yy|MMM|MM|dd|hh|mm|ss|SSS|O")


def resolve_date_format(argument: str | None) -> str:
    """Return the date format selected by a ``%d`` argument.

    Examples
    --------
    >>> resolve_date_format(None)
    'yyyy-MM-dd hh:mm:ss.SSS'
    >>> resolve_date_format("ABSOLUTE")
    'hh:mm:ss.SSS'
    >>> resolve_date_format("dd/MM")
    'dd/MM'
    """

    if not argument:
        return ISO8601_FORMAT
    return NAMED_DATE_FORMATS.get(argument, argument)


def format_offset(timestamp: datetime) -> str:
    """Return the UTC offset of ``timestamp`` as ``+HHMM`` or ``-HHMM``.

    Naive timestamps are interpreted in the process-local timezone.
    """

    offset = timestamp.utcoffset()
    if offset is None:
        offset = timestamp.astimezone().utcoffset() or timedelta(0)
    minutes = int(offset.total_seconds() // 60)
    sign = "+" if minutes >= 0 else "-"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def format_timestamp(timestamp: datetime, date_format: str | None = None) -> str:
    """Render ``timestamp`` using the ``yyyy``/``MM``/``dd``/... token language.

    Characters outside the known tokens are copied verbatim. ``hh`` is the
    24-hour clock.

    Examples
    --------
    >>> from datetime import timezone
    >>> ts = datetime(2024, 3, 7, 14, 5, 9, 42000, tzinfo=timezone.utc)
    >>> format_timestamp(ts)
    '2024-03-07 14:05:09.042'
    >>> format_timestamp(ts, "dd MMM yy O")
    '07 Mar 24 +0000'
    """

    fields = {
        "yyyy": f"{timestamp.year:04d}",
        "yy": f"{timestamp.year % 100:02d}",
        "MMM": _MONTH_ABBREVIATIONS[timestamp.month - 1],
        "MM": f"{timestamp.month:02d}",
        "dd": f"{timestamp.day:02d}",
        "hh": f"{timestamp.hour:02d}",
        "mm": f"{timestamp.minute:02d}",
        "ss": f"{timestamp.second:02d}",
        "SSS": f"{timestamp.microsecond // 1000:03d}",
    }
    fmt = date_format or ISO8601_FORMAT

    def _replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token == "O":
            return format_offset(timestamp)
        return fields[token]

    return _DATE_TOKEN_RE.sub(_replace, fmt)


def format_locale_time(timestamp: datetime) -> str:
    """Return the locale's short time-of-day representation."""

    return timestamp.strftime("%X")


__all__ = [
    "ABSOLUTE_FORMAT",
    "DATE_FORMAT",
    "ISO8601_FORMAT",
    "ISO8601_WITH_TZ_OFFSET_FORMAT",
    "NAMED_DATE_FORMATS",
    "format_locale_time",
    "format_offset",
    "format_timestamp",
    "resolve_date_format",
]

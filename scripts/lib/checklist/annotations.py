"""
Icon-tagged date annotations inside checklist item text.

Supported forms (Obsidian Tasks plugin style):

    📅 2024-03-01            deadline, midnight
    📅2024-03-01 17:30:00    deadline with time
    ✅ 2024-03-05            completed

Only the first textual match of a form is considered. When it parses, every
copy of that exact literal is removed from the text.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from functools import lru_cache
from typing import Optional

logger = logging.getLogger(__name__)

DEADLINE_ICON = "📅"
COMPLETED_ICON = "✅"

_DATETIME_SUFFIX = r" *(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})"
_DATE_SUFFIX = r" *(\d{4})-(\d{2})-(\d{2})"


@lru_cache(maxsize=None)
def _pattern(icon: str, suffix: str) -> re.Pattern:
    return re.compile(re.escape(icon) + suffix, re.ASCII)


def _parse_iconed(
    text: str, icon: str, suffix: str
) -> Optional[tuple[datetime, str]]:
    match = _pattern(icon, suffix).search(text)
    if not match:
        return None

    try:
        when = datetime(*(int(part) for part in match.groups()))
    except ValueError:
        logger.debug("Ignoring invalid date annotation %r", match.group(0))
        return None

    # Broad replace: all copies of the matched literal go, not only this one
    return when, text.replace(match.group(0), "")


def parse_iconed_datetime(text: str, icon: str) -> Optional[tuple[datetime, str]]:
    """Find `<icon> YYYY-MM-DD HH:MM:SS` and strip it from text."""
    return _parse_iconed(text, icon, _DATETIME_SUFFIX)


def parse_iconed_date(text: str, icon: str) -> Optional[tuple[datetime, str]]:
    """Find `<icon> YYYY-MM-DD` and strip it; time is midnight."""
    return _parse_iconed(text, icon, _DATE_SUFFIX)


def parse_annotation(text: str, icon: str) -> Optional[tuple[datetime, str]]:
    """Try the date-time form, then the bare date form."""
    return parse_iconed_datetime(text, icon) or parse_iconed_date(text, icon)


def strip_annotation(text: str, icon: str) -> tuple[Optional[datetime], str]:
    """Return (timestamp, cleaned_text); (None, text) when nothing matched."""
    parsed = parse_annotation(text, icon)
    if parsed is None:
        return None, text
    return parsed

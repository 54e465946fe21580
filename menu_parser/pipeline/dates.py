"""
Column header to calendar date.

Headers read "Lundi 13 mars": the year is never printed, so it is taken from
the three years around today, keeping only the one where that day really is
the printed weekday and, of those, the nearest. Already numeric headers
("2024-03-13") are accepted as-is.
"""

import datetime
import logging

logger = logging.getLogger(__name__)

WEEKDAYS = {
    "lundi": 0,
    "mardi": 1,
    "mercredi": 2,
    "jeudi": 3,
    "vendredi": 4,
    "samedi": 5,
    "dimanche": 6,
}

MONTHS = {
    "janvier": 1,
    "février": 2, "fevrier": 2,
    "mars": 3,
    "avril": 4,
    "mai": 5,
    "juin": 6,
    "juillet": 7,
    "août": 8, "aout": 8,
    "septembre": 9,
    "octobre": 10,
    "novembre": 11,
    "décembre": 12, "decembre": 12,
}


def today_utc() -> datetime.date:
    return datetime.datetime.now(datetime.timezone.utc).date()


def _parse_numeric(text: str) -> datetime.date | None:
    parts = text.split("-")
    if len(parts) != 3:
        return None
    try:
        year, month, day = (int(p) for p in parts)
        return datetime.date(year, month, day)
    except ValueError:
        return None


def _parse_worded(text: str, today: datetime.date) -> datetime.date | None:
    tokens = text.split()
    if len(tokens) != 3:
        return None
    weekday_name, day_str, month_name = tokens

    weekday = WEEKDAYS.get(weekday_name.lower())
    month = MONTHS.get(month_name.lower())
    if weekday is None or month is None:
        return None
    try:
        day = int(day_str)
    except ValueError:
        return None

    candidates: list[datetime.date] = []
    for year in range(today.year - 1, today.year + 2):
        try:
            candidate = datetime.date(year, month, day)
        except ValueError:
            continue
        if candidate.weekday() == weekday:
            candidates.append(candidate)

    if not candidates:
        return None
    return min(candidates, key=lambda d: abs((d - today).days))


def resolve_date(text: str, today: datetime.date | None = None) -> datetime.date | None:
    """Return the date a header names, or None when it names none."""
    text = text.strip()
    if today is None:
        today = today_utc()

    if not any(ch.isalpha() for ch in text):
        resolved = _parse_numeric(text)
    else:
        resolved = _parse_worded(text, today)

    if resolved is None:
        logger.debug("Unresolvable header %r", text)
    return resolved

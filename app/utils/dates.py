from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[date, datetime, str]


def truncate_to_day(value: DateLike) -> date:
    """Schneidet die Uhrzeit ab, verglichen wird nur auf Kalendertag-Ebene."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(value).date()


def today() -> date:
    return date.today()


def overlaps(a: tuple[date, date], b: tuple[date, date]) -> bool:
    """
    Prüft ob sich zwei geschlossene Zeiträume [start, end] überschneiden.
    Ein gemeinsamer Randtag zählt als Überschneidung.
    """
    a_start, a_end = a
    b_start, b_end = b
    return a_start <= b_end and b_start <= a_end


# Wiederholung nur lesend auswerten: liegt der Tag in einem der Folge-Zeiträume?
def is_active_on(start: date, end: date, repeat_every: Optional[int], day: date) -> bool:
    if start <= day <= end:
        return True
    if not repeat_every or day < start:
        return False
    offset = (day - start).days % repeat_every
    return offset <= (end - start).days

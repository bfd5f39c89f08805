from __future__ import annotations
from datetime import date, datetime

DAY_INDEX = {
    "SUNDAY": 0,
    "MONDAY": 1,
    "TUESDAY": 2,
    "WEDNESDAY": 3,
    "THURSDAY": 4,
    "FRIDAY": 5,
    "SATURDAY": 6,
}

DAY_LABELS = (
    "Domingo",
    "Segunda-feira",
    "Terça-feira",
    "Quarta-feira",
    "Quinta-feira",
    "Sexta-feira",
    "Sábado",
)

def parse_iso_date(value: str | None) -> date | None:
    """Aceita ``YYYY-MM-DD`` ou um datetime ISO (``2025-07-06T00:00:00.000Z``)."""
    if not value:
        return None
    value = value.strip()
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None

def day_index(d: date) -> int:
    # date.weekday(): segunda=0; aqui domingo=0
    return (d.weekday() + 1) % 7

def is_weekend(d: date) -> bool:
    return d.weekday() >= 5

def same_iso_week(a: date, b: date) -> bool:
    return a.isocalendar()[:2] == b.isocalendar()[:2]

def same_month(a: date, b: date) -> bool:
    return (a.year, a.month) == (b.year, b.month)

def month_key(d: date) -> str:
    """Vigência no formato ``YYYY-MM``."""
    return f"{d.year:04d}-{d.month:02d}"

def within_submission_window(today: date, start_day: str, end_day: str) -> bool:
    current = day_index(today)
    start = DAY_INDEX[start_day]
    end = DAY_INDEX[end_day]
    if start <= end:
        return start <= current <= end
    # janela que atravessa o fim de semana (ex.: sexta a segunda)
    return current >= start or current <= end

def day_label(day: str) -> str:
    return DAY_LABELS[DAY_INDEX[day]]

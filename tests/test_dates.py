"""
Testes dos utilitários de data.

- conversão de datas ISO
- dia da semana com domingo = 0
- semana ISO e mês de vigência
- janela semanal de submissão, inclusive a que atravessa o domingo
"""

from datetime import date

import pytest

from trocas.utils.dates import (
    day_index,
    day_label,
    is_weekend,
    month_key,
    parse_iso_date,
    same_iso_week,
    same_month,
    within_submission_window,
)

# 2025-07-05 é sábado
SATURDAY = date(2025, 7, 5)
SUNDAY = date(2025, 7, 6)
MONDAY = date(2025, 7, 7)
WEDNESDAY = date(2025, 7, 9)
FRIDAY = date(2025, 7, 11)


class TestParseIsoDate:
    def test_plain_date(self):
        assert parse_iso_date("2025-07-06") == SUNDAY

    def test_datetime_with_zulu_suffix(self):
        assert parse_iso_date("2025-07-06T00:00:00.000Z") == SUNDAY

    def test_surrounding_spaces(self):
        assert parse_iso_date(" 2025-07-06 ") == SUNDAY

    @pytest.mark.parametrize("value", ["", None, "06/07/2025", "2025-13-01", "amanhã"])
    def test_invalid_values(self, value):
        assert parse_iso_date(value) is None


class TestWeekdays:
    def test_day_index_starts_on_sunday(self):
        assert day_index(SUNDAY) == 0
        assert day_index(MONDAY) == 1
        assert day_index(SATURDAY) == 6

    def test_is_weekend(self):
        assert is_weekend(SATURDAY)
        assert is_weekend(SUNDAY)
        assert not is_weekend(MONDAY)
        assert not is_weekend(FRIDAY)

    def test_day_label(self):
        assert day_label("MONDAY") == "Segunda-feira"
        assert day_label("SATURDAY") == "Sábado"


class TestWeeksAndMonths:
    def test_saturday_and_next_sunday_share_iso_week(self):
        assert same_iso_week(SATURDAY, SUNDAY)

    def test_sunday_and_next_monday_are_different_weeks(self):
        assert not same_iso_week(SUNDAY, MONDAY)

    def test_same_week_number_in_other_year(self):
        assert not same_iso_week(date(2025, 7, 5), date(2026, 7, 4))

    def test_same_month_requires_same_year(self):
        assert same_month(date(2025, 1, 4), date(2025, 1, 25))
        assert not same_month(date(2025, 1, 4), date(2026, 1, 3))
        assert not same_month(date(2025, 1, 25), date(2025, 2, 1))

    def test_month_key(self):
        assert month_key(date(2025, 3, 1)) == "2025-03"
        assert month_key(date(987, 11, 30)) == "0987-11"


class TestSubmissionWindow:
    """Janela semanal em que encarregados podem enviar solicitações."""

    def test_inside_regular_window(self):
        assert within_submission_window(MONDAY, "MONDAY", "WEDNESDAY")
        assert within_submission_window(WEDNESDAY, "MONDAY", "WEDNESDAY")

    def test_outside_regular_window(self):
        assert not within_submission_window(FRIDAY, "MONDAY", "WEDNESDAY")
        assert not within_submission_window(SUNDAY, "MONDAY", "WEDNESDAY")

    def test_single_day_window(self):
        assert within_submission_window(FRIDAY, "FRIDAY", "FRIDAY")
        assert not within_submission_window(SATURDAY, "FRIDAY", "FRIDAY")

    def test_window_wrapping_over_the_weekend(self):
        # sexta a segunda
        assert within_submission_window(FRIDAY, "FRIDAY", "MONDAY")
        assert within_submission_window(SUNDAY, "FRIDAY", "MONDAY")
        assert within_submission_window(MONDAY, "FRIDAY", "MONDAY")
        assert not within_submission_window(WEDNESDAY, "FRIDAY", "MONDAY")

import pytest

from fines import DailyFine, WeeklyFine


def test_daily_fine():
    assert DailyFine(2).calculate_fine(3) == 6

def test_daily_fine_zero_days():
    assert DailyFine(2.5).calculate_fine(0) == 0

def test_fines_are_floats():
    assert isinstance(DailyFine(2).calculate_fine(3), float)
    assert isinstance(WeeklyFine(10).calculate_fine(14), float)

@pytest.mark.parametrize("days, expected", [
    (0, 0),
    (6, 0),
    (7, 10),
    (13, 10),
    (14, 20),
    (20, 20),
    (21, 30),
])
def test_weekly_fine_charges_completed_weeks_only(days, expected):
    assert WeeklyFine(10).calculate_fine(days) == expected

@pytest.mark.parametrize("strategy", [DailyFine(1), WeeklyFine(1)])
def test_negative_days_rejected(strategy):
    with pytest.raises(ValueError, match="non-negative"):
        strategy.calculate_fine(-1)

@pytest.mark.parametrize("cls", [DailyFine, WeeklyFine])
@pytest.mark.parametrize("rate", [0, -2])
def test_non_positive_rate_rejected(cls, rate):
    with pytest.raises(ValueError, match="positive"):
        cls(rate)

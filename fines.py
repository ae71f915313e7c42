"""Overdue fine strategies.

A strategy maps a whole number of overdue days to a fine. Two are provided:
``DailyFine`` charges per day, ``WeeklyFine`` charges per *completed* week,
so anything short of seven days costs nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from utils.validators import NumberValidator


class FineStrategy(Protocol):
    def calculate_fine(self, overdue_days: int) -> float:
        ...


def _check_days(overdue_days: int) -> None:
    if not NumberValidator.is_non_negative_int(overdue_days):
        raise ValueError(f"Overdue days must be a non-negative integer, got {overdue_days!r}.")


def _check_rate(rate: float) -> None:
    if not NumberValidator.is_positive(rate):
        raise ValueError(f"Fine rate must be a positive number, got {rate!r}.")


@dataclass(frozen=True)
class DailyFine:
    rate_per_day: float

    def __post_init__(self) -> None:
        _check_rate(self.rate_per_day)
        object.__setattr__(self, "rate_per_day", float(self.rate_per_day))

    def calculate_fine(self, overdue_days: int) -> float:
        _check_days(overdue_days)
        return overdue_days * self.rate_per_day


@dataclass(frozen=True)
class WeeklyFine:
    rate_per_week: float

    def __post_init__(self) -> None:
        _check_rate(self.rate_per_week)
        object.__setattr__(self, "rate_per_week", float(self.rate_per_week))

    def calculate_fine(self, overdue_days: int) -> float:
        _check_days(overdue_days)
        # partial weeks are not charged
        return (overdue_days // 7) * self.rate_per_week

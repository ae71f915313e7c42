"""Return-with-fine orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from book import Book
from events import LibraryEvent
from fines import FineStrategy
from user import User
from utils.validators import NumberValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReturnReceipt:
    book: Book
    fine: float
    event: LibraryEvent

    @property
    def returned(self) -> bool:
        return self.event.ok

    @property
    def message(self) -> str:
        return f"Overdue fine for {self.book.title}: ${self.fine}"

    def to_dict(self) -> dict:
        return {
            "event": "fine_assessed",
            "title": self.book.title,
            "fine": self.fine,
            "returned": self.returned,
            "message": self.message,
        }


@dataclass(frozen=True)
class Transaction:
    """A single return of ``book`` by ``user``, ``overdue_days`` late."""

    user: User
    book: Book
    overdue_days: int
    fine_strategy: FineStrategy

    def __post_init__(self) -> None:
        if not NumberValidator.is_non_negative_int(self.overdue_days):
            raise ValueError(f"Overdue days must be a non-negative integer, got {self.overdue_days!r}.")

    def process_return(self) -> ReturnReceipt:
        """Compute the fine, attempt the return, and report both.

        The fine is computed before the return and reported whatever the
        outcome, so a refused return still carries a fine.
        """
        fine = self.fine_strategy.calculate_fine(self.overdue_days)
        event = self.user.return_book(self.book)
        if not event.ok:
            # known quirk: the fine stands even though nothing was returned
            logger.warning(
                f"Fine of {fine} reported for '{self.book.title}' although "
                f"{self.user.name} did not return it"
            )
        return ReturnReceipt(book=self.book, fine=fine, event=event)

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EventKind(str, Enum):
    BOOK_ADDED = "book_added"
    BORROWED = "borrowed"
    NOT_AVAILABLE = "not_available"
    RETURNED = "returned"
    NOT_BORROWED = "not_borrowed"


_SUCCESS_KINDS = {EventKind.BOOK_ADDED, EventKind.BORROWED, EventKind.RETURNED}


@dataclass(frozen=True)
class LibraryEvent:
    """Outcome of a catalog or loan operation.

    Refusals (an unavailable book, returning a book that was never borrowed)
    are events too; ``ok`` tells them apart from confirmations.
    """

    kind: EventKind
    message: str
    title: Optional[str] = None
    user: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind in _SUCCESS_KINDS

    def to_dict(self) -> dict:
        return {
            "event": self.kind.value,
            "ok": self.ok,
            "message": self.message,
            "title": self.title,
            "user": self.user,
        }

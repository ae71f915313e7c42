from __future__ import annotations

import logging
from typing import List, Tuple

from book import Book
from events import EventKind, LibraryEvent
from utils.validators import TextValidator

logger = logging.getLogger(__name__)


class User:
    """A library member and the books they currently hold.

    The user never owns a book: ``borrowed`` holds references to copies that
    belong to the library catalog. Membership checks compare identity, so two
    copies sharing a title are still different books.
    """

    def __init__(self, name: str) -> None:
        if not TextValidator.validate_name(name):
            raise ValueError(f"Invalid user name: {name!r}")
        self.name = name.strip()
        self._borrowed: List[Book] = []

    @property
    def borrowed_books(self) -> Tuple[Book, ...]:
        return tuple(self._borrowed)

    def has_borrowed(self, book: Book) -> bool:
        return any(held is book for held in self._borrowed)

    def borrow(self, book: Book) -> LibraryEvent:
        """Borrow ``book`` if it is available, otherwise report a refusal."""
        if not book.is_available():
            logger.info(f"{self.name} could not borrow '{book.title}': not available")
            return LibraryEvent(EventKind.NOT_AVAILABLE, f"{book.title} is not available.",
                                title=book.title, user=self.name)
        book.borrow()
        self._borrowed.append(book)
        logger.info(f"{self.name} borrowed '{book.title}'")
        return LibraryEvent(EventKind.BORROWED, f"{self.name} borrowed: {book.title}",
                            title=book.title, user=self.name)

    def return_book(self, book: Book) -> LibraryEvent:
        """Give ``book`` back if this user holds it, otherwise report a refusal."""
        if not self.has_borrowed(book):
            logger.info(f"{self.name} tried to return '{book.title}' without borrowing it")
            return LibraryEvent(EventKind.NOT_BORROWED, f"{self.name} did not borrow this book.",
                                title=book.title, user=self.name)
        book.give_back()
        self._borrowed = [held for held in self._borrowed if held is not book]
        logger.info(f"{self.name} returned '{book.title}'")
        return LibraryEvent(EventKind.RETURNED, f"{self.name} returned: {book.title}",
                            title=book.title, user=self.name)

    def list_borrowed(self) -> List[str]:
        return [book.describe() for book in self._borrowed]

    def __repr__(self) -> str:
        return f"User(name={self.name!r}, borrowed={len(self._borrowed)})"

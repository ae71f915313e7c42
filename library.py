import logging
from typing import List, Optional, Tuple

from book import Book
from events import EventKind, LibraryEvent

logger = logging.getLogger(__name__)


class Library:
    """Manages the in-memory book catalog."""

    def __init__(self) -> None:
        self._books: List[Book] = []

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> LibraryEvent:
        """Add a pre-constructed Book. The same copy cannot be added twice."""
        if any(existing is book for existing in self._books):
            raise ValueError(f"Book '{book.title}' is already in the catalog.")
        self._books.append(book)
        logger.info(f"Added to catalog: {book.title} ({book.kind})")
        return LibraryEvent(EventKind.BOOK_ADDED, f"{book.title} added to the library.", title=book.title)

    @property
    def books(self) -> Tuple[Book, ...]:
        return tuple(self._books)

    def available_books(self) -> List[Book]:
        return [book for book in self._books if book.is_available()]

    def list_available(self) -> List[str]:
        return [book.describe() for book in self.available_books()]

    def find_by_title(self, title: str) -> Optional[Book]:
        """Return the first available copy whose title matches, ignoring case.

        Borrowed copies are skipped even on an exact match. Returns None when
        nothing on the shelf matches.
        """
        wanted = (title or "").lower()
        for book in self._books:
            if book.title.lower() == wanted and book.is_available():
                return book
        logger.debug(f"No available copy titled '{title}'")
        return None

    def __len__(self) -> int:
        return len(self._books)

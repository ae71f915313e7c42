import pytest

from book import Book
from events import EventKind
from library import Library


def test_add_and_list_available():
    lib = Library()
    assert lib.list_available() == []

    event = lib.add_book(Book.printed("Ulysses", "James Joyce", 730))

    assert event.kind is EventKind.BOOK_ADDED
    assert event.message == "Ulysses added to the library."
    assert len(lib) == 1
    assert lib.list_available() == ["Printed Book: Ulysses | Author: James Joyce | Pages: 730"]

def test_add_same_copy_twice_rejected(lib, ebook):
    with pytest.raises(ValueError, match="already in the catalog"):
        lib.add_book(ebook)
    assert len(lib) == 2

def test_second_copy_with_same_title_is_allowed(lib):
    lib.add_book(Book.printed("Data Structures", "Robert Lafore", 600))
    assert len(lib) == 3

def test_list_available_in_catalog_order(lib, ebook, printed):
    assert lib.list_available() == [ebook.describe(), printed.describe()]

def test_borrowed_books_drop_out_of_listing(lib, alice, printed):
    alice.borrow(lib.find_by_title("Java Programming"))
    assert lib.list_available() == [printed.describe()]
    assert alice.list_borrowed() == ["E-Book: Java Programming | Author: James Gosling | Size: 5.2MB"]

def test_catalog_order_survives_borrow_and_return(lib, alice, ebook, printed):
    alice.borrow(ebook)
    alice.return_book(ebook)
    assert lib.books == (ebook, printed)
    assert lib.available_books() == [ebook, printed]

def test_find_by_title_is_case_insensitive(lib, ebook):
    assert lib.find_by_title("JAVA PROGRAMMING") is ebook
    assert lib.find_by_title("java programming") is ebook

def test_find_by_title_requires_exact_match(lib):
    assert lib.find_by_title("Java") is None
    assert lib.find_by_title("Java Programming 2nd Edition") is None

def test_find_by_title_skips_borrowed_copy(lib, alice, ebook):
    alice.borrow(ebook)
    assert lib.find_by_title("Java Programming") is None

def test_find_by_title_returns_next_available_copy(lib, alice, printed):
    spare = Book.printed("Data Structures", "Robert Lafore", 600)
    lib.add_book(spare)

    assert lib.find_by_title("data structures") is printed
    alice.borrow(printed)
    assert lib.find_by_title("data structures") is spare

def test_find_by_title_unknown(lib):
    assert lib.find_by_title("Moby Dick") is None

def test_find_by_title_does_not_trim_query(lib):
    assert lib.find_by_title("  Java Programming  ") is None
    assert lib.find_by_title("Java Programming ") is None

def test_find_by_title_does_not_fold_special_letters():
    lib = Library()
    lib.add_book(Book.printed("Straße", "Anna Weber", 120))
    assert lib.find_by_title("STRASSE") is None
    assert lib.find_by_title("STRAßE") is not None

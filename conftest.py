import pytest

from book import Book
from library import Library
from user import User
from utils.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # set_output_mode writes to os.environ; setenv here makes teardown undo it
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def ebook():
    return Book.electronic("Java Programming", "James Gosling", 5.2)


@pytest.fixture
def printed():
    return Book.printed("Data Structures", "Robert Lafore", 600)


@pytest.fixture
def lib(ebook, printed):
    # Same catalog the demo builds, in the same order
    lib = Library()
    lib.add_book(ebook)
    lib.add_book(printed)
    return lib


@pytest.fixture
def alice():
    return User("Alice")

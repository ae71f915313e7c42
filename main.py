import logging
from typing import Optional

import typer

from book import Book
from config import settings
from fines import DailyFine
from library import Library
from transaction import Transaction
from user import User
from utils.ui_helpers import set_output_mode, print_event, print_listing, print_fine

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.WARNING),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

AVAILABLE_HEADER = "Available Books in Library:"

# Fixed demo script
DEMO_USER = "Alice"
DEMO_TITLE = "Java Programming"
DEMO_OVERDUE_DAYS = 3
DEMO_DAILY_RATE = 2

app = typer.Typer(help=f"{settings.app_name}: scripted catalog, loan and fine walkthrough")


def run_demo() -> None:
    """Add two books, lend one, return it late and show the catalog around each step."""
    library = Library()

    ebook = Book.electronic(DEMO_TITLE, "James Gosling", 5.2)
    printed = Book.printed("Data Structures", "Robert Lafore", 600)
    for book in (ebook, printed):
        print_event(library.add_book(book))

    print_listing(AVAILABLE_HEADER, library.available_books())

    user = User(DEMO_USER)
    found = library.find_by_title(DEMO_TITLE)
    if found is not None:
        print_event(user.borrow(found))
    else:
        logger.info(f"'{DEMO_TITLE}' not on the shelf; skipping borrow")

    print_listing(f"{user.name}'s Borrowed Books:", list(user.borrowed_books))

    transaction = Transaction(user, ebook, DEMO_OVERDUE_DAYS, DailyFine(DEMO_DAILY_RATE))
    receipt = transaction.process_return()
    print_event(receipt.event)
    print_fine(receipt)

    print_listing(AVAILABLE_HEADER, library.available_books())


@app.command()
def demo(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Run the library walkthrough."""
    if output:
        set_output_mode(output)
    logger.debug(f"{settings.app_name} {settings.app_version} starting demo")
    run_demo()


if __name__ == "__main__":
    app()

"""Console driver for Library Desk.

A text menu over one ``Catalog`` instance. The driver only parses input,
calls catalog operations and formats their results; every rule lives in the
catalog. Input and output streams are injectable so the menu can be driven
from tests.

Run with ``library-desk`` or ``python -m library_desk.cli``.
"""

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from .catalog import Catalog
from .config import LibraryConfig
from .models import Book, Member
from .results import Result
from .seed import DEMO_MEMBER, seed_catalog

logger = logging.getLogger(__name__)

BANNER_WIDTH = 48


class _InputClosed(Exception):
    """Raised when the input stream reaches EOF."""


class MenuDriver:
    """Interactive text menu bound to a catalog."""

    def __init__(self, catalog: Catalog, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.catalog = catalog
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    # =========================================================================
    # I/O HELPERS
    # =========================================================================

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise _InputClosed
        return line.strip()

    def ask_choice(self, prompt: str = "Enter your choice: ") -> int | None:
        raw = self.ask(prompt)
        try:
            return int(raw)
        except ValueError:
            return None

    def report(self, result: Result, success_text: str | None = None) -> None:
        if result.ok:
            message = success_text or getattr(result.value, "message", "Done")
            self.say(f"✓ {message}")
        else:
            self.say(f"✗ Error: {result.message}")

    def banner(self, title: str) -> None:
        self.say("=" * BANNER_WIDTH)
        self.say(title.center(BANNER_WIDTH))
        self.say("=" * BANNER_WIDTH)

    # =========================================================================
    # MAIN LOOP
    # =========================================================================

    def run(self) -> None:
        """Show the main menu until the user exits or input ends."""
        self.banner("Welcome to Library Management System")
        try:
            while self.main_menu():
                pass
        except _InputClosed:
            logger.debug("Input closed, leaving menu")
        self.say("\nThank you for using Library Management System. Goodbye!")

    def main_menu(self) -> bool:
        """Handle one pass of the main menu. Returns False to exit."""
        self.say()
        self.banner("Main Menu")
        self.say("1. Book Management")
        self.say("2. Member Management")
        self.say("3. Issue/Return Books")
        self.say("4. View Library Information")
        self.say("5. Demo: Sample Operations")
        self.say("6. Exit")

        handlers = {
            1: self.book_management,
            2: self.member_management,
            3: self.issue_return_books,
            4: self.library_information,
            5: self.demo,
        }
        choice = self.ask_choice()
        if choice is None:
            self.say("✗ Invalid input. Please enter a valid option.")
            return True
        if choice == 6:
            return False
        handler = handlers.get(choice)
        if handler is None:
            self.say("✗ Invalid choice. Please try again.")
        else:
            handler()
        return True

    def _submenu(self, title: str, options: list[tuple[str, Callable[[], None]]]) -> None:
        self.say(f"\n--- {title} ---")
        for number, (label, _) in enumerate(options, start=1):
            self.say(f"{number}. {label}")
        choice = self.ask_choice()
        if choice is None or not 1 <= choice <= len(options):
            self.say("✗ Invalid choice.")
            return
        options[choice - 1][1]()

    # =========================================================================
    # SUBMENUS
    # =========================================================================

    def book_management(self) -> None:
        self._submenu(
            "Book Management",
            [
                ("View All Books", self.show_all_books),
                ("View Available Books", self.show_available_books),
                ("View Issued Books", self.show_issued_books),
                ("Add New Book", self.add_new_book),
            ],
        )

    def member_management(self) -> None:
        self._submenu(
            "Member Management",
            [
                ("View All Members", self.show_members),
                ("Register New Member", self.register_new_member),
            ],
        )

    def issue_return_books(self) -> None:
        self._submenu(
            "Issue/Return Books",
            [
                ("Issue Book", self.issue_book),
                ("Return Book", self.return_book),
            ],
        )

    def library_information(self) -> None:
        self._submenu(
            "Library Information",
            [
                ("View Statistics", self.show_statistics),
                ("View Member Details", self.show_member_details),
                ("View Book Details", self.show_book_details),
            ],
        )

    # =========================================================================
    # LISTINGS
    # =========================================================================

    def _show_books(
        self,
        heading: str,
        books: tuple[Book, ...],
        empty: str,
        line: Callable[[Book], str],
    ) -> None:
        self.say(f"\n=== {heading} ===")
        if not books:
            self.say(empty)
        for number, book in enumerate(books, start=1):
            self.say(f"{number}. {line(book)}")

    def show_all_books(self) -> None:
        self._show_books(
            f"All Books in {self.catalog.name}",
            self.catalog.list_all(),
            "Library has no books.",
            lambda book: f"{book.title} by {book.author} - Status: {book.status}",
        )

    def show_available_books(self) -> None:
        self._show_books(
            "Available Books",
            self.catalog.list_available(),
            "No available books.",
            str,
        )

    def show_issued_books(self) -> None:
        self._show_books(
            "Issued Books",
            self.catalog.list_issued(),
            "No issued books.",
            lambda book: f"{book.title} - Issued to: {book.holder} (Date: {book.issue_date})",
        )

    def show_members(self) -> None:
        self.say("\n=== All Members ===")
        members = self.catalog.list_members()
        if not members:
            self.say("No members registered.")
        for number, member in enumerate(members, start=1):
            self.say(
                f"{number}. {member.name} (ID: {member.id}) - Books Issued: {member.held_count}"
            )

    def show_statistics(self) -> None:
        stats = self.catalog.statistics()
        self.say("\n=== Library Statistics ===")
        self.say(f"Library Name: {stats.library_name}")
        self.say(f"Total Books: {stats.total_books}")
        self.say(f"Available Books: {stats.available}")
        self.say(f"Issued Books: {stats.issued}")
        self.say(f"Total Members: {stats.total_members}")

    def _show_details(self, heading: str, rows: list[tuple[str, str]]) -> None:
        self.say(f"\n--- {heading} ---")
        for label, value in rows:
            self.say(f"{label}: {value}")

    def show_member_details(self) -> None:
        member_id = self.ask("\nEnter Member ID: ")
        member: Member | None = self.catalog.find_member(member_id)
        if member is None:
            self.say(f"✗ Error: Member with ID {member_id} not found")
            return
        self._show_details("Member Information", member.details())
        self._show_books(
            f"Books Issued to {member.name}",
            member.held_books,
            "No books issued.",
            str,
        )

    def show_book_details(self) -> None:
        book_id = self.ask("\nEnter Book ID: ")
        book = self.catalog.find_book(book_id)
        if book is None:
            self.say(f"✗ Error: Book with ID {book_id} not found")
            return
        self._show_details("Book Details", book.details())

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add_new_book(self) -> None:
        self.say("\n--- Add New Book ---")
        book_id = self.ask("Enter Book ID: ")
        title = self.ask("Enter Title: ")
        author = self.ask("Enter Author: ")
        isbn = self.ask("Enter ISBN: ")
        result = self.catalog.register_book(book_id, title, author, isbn)
        self.report(result, f"Book '{title}' added to library" if result.ok else None)

    def register_new_member(self) -> None:
        self.say("\n--- Register New Member ---")
        member_id = self.ask("Enter Member ID: ")
        name = self.ask("Enter Name: ")
        email = self.ask("Enter Email: ")
        phone = self.ask("Enter Phone Number: ")
        result = self.catalog.register_member(member_id, name, email, phone)
        self.report(result, f"Member '{name}' registered successfully" if result.ok else None)

    def issue_book(self) -> None:
        self.say("\n--- Issue Book ---")
        member_id = self.ask("Enter Member ID: ")
        book_id = self.ask("Enter Book ID: ")
        self.report(self.catalog.issue_book(member_id, book_id))

    def return_book(self) -> None:
        self.say("\n--- Return Book ---")
        member_id = self.ask("Enter Member ID: ")
        book_id = self.ask("Enter Book ID: ")
        self.report(self.catalog.return_book(member_id, book_id))

    # =========================================================================
    # DEMO
    # =========================================================================

    def demo(self) -> None:
        """Walk through registering, issuing and returning on the sample data."""
        self.say("\n=== Demo: Sample Library Operations ===")
        member_id = DEMO_MEMBER["member_id"]

        self.say("\n1. Registering new member...")
        result = self.catalog.register_member(**DEMO_MEMBER)
        if not result.ok:
            self.say(f"✗ Error during demo: {result.message}")
            return
        self.report(result, f"Member '{DEMO_MEMBER['name']}' registered successfully")

        self.say("\n2. Issuing books to member...")
        for book_id in ("B001", "B002"):
            result = self.catalog.issue_book(member_id, book_id)
            if not result.ok:
                self.say(f"✗ Error during demo: {result.message}")
                return
            self.report(result)

        self.say("\n3. Library statistics after issuing books:")
        self.show_statistics()
        self.say("\n4. Available books:")
        self.show_available_books()
        self.say("\n5. Issued books:")
        self.show_issued_books()

        self.say("\n6. Returning a book...")
        result = self.catalog.return_book(member_id, "B001")
        if not result.ok:
            self.say(f"✗ Error during demo: {result.message}")
            return
        self.report(result)

        self.say("\n7. Final library statistics:")
        self.show_statistics()
        self.say("\n✓ Demo operations completed successfully!")


def console_log_level(config: LibraryConfig) -> str:
    """WARNING unless debug or an explicit log level was configured."""
    if config.debug or "log_level" in config.model_fields_set:
        return config.effective_log_level
    return "WARNING"


def configure_logging(config: LibraryConfig) -> None:
    """Log to stderr so the menu keeps stdout."""
    logging.basicConfig(
        level=console_log_level(config),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def main() -> None:
    """Entry point for the ``library-desk`` console script."""
    config = LibraryConfig()
    configure_logging(config)

    catalog = Catalog(config.library_name)
    if config.seed_sample_data:
        seed_catalog(catalog)

    try:
        MenuDriver(catalog).run()
    except KeyboardInterrupt:
        logger.info("Stopped by user")


if __name__ == "__main__":
    main()

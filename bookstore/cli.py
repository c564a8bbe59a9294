"""
Bookstore CLI - manage the book catalog from the terminal.

Runs the catalog service in-process against the configured database.

Usage:
    bookstore init-db
    bookstore list
    bookstore get 1
    bookstore find 9780132350884
    bookstore add --title "Clean Code" --author "Robert C. Martin" --isbn 0132350884 --year 2008
    bookstore update 1 --title "Clean Code" --author "Robert C. Martin" --isbn 0132350884 --year 2008
    bookstore delete 1
"""
import argparse
import asyncio
import sys
from typing import Optional

# Load environment variables before settings are read
from dotenv import load_dotenv
load_dotenv()

from bookstore.core.exceptions import AppException, ValidationError  # noqa: E402
from bookstore.database import AsyncSessionLocal, close_db, init_db  # noqa: E402
from bookstore.models.book import Book  # noqa: E402
from bookstore.schemas.book import BookSubmission  # noqa: E402
from bookstore.services.book_service import BookService  # noqa: E402


# ============================================================================
# COLORS AND FORMATTING
# ============================================================================

class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    END = '\033[0m'


def print_header(text: str):
    """Print a header."""
    print(f"\n{Colors.BOLD}{Colors.HEADER}{'='*70}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.HEADER}  {text}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.HEADER}{'='*70}{Colors.END}\n")


def print_success(text: str):
    print(f"{Colors.GREEN}✓ {text}{Colors.END}")


def print_error(text: str):
    print(f"{Colors.RED}✗ {text}{Colors.END}", file=sys.stderr)


def print_warning(text: str):
    print(f"{Colors.YELLOW}⚠ {text}{Colors.END}")


def print_book(book: Book):
    """Print a single book."""
    print(f"  {Colors.CYAN}[{book.id}]{Colors.END} {Colors.BOLD}{book.title}{Colors.END}")
    print(f"      Author: {book.author}")
    print(f"      ISBN:   {book.isbn}")
    print(f"      Year:   {book.publication_year}")
    print(f"      Updated: {book.updated_at}")


def print_failure(exc: AppException):
    """Print a typed failure with its category."""
    print_error(f"[{exc.error_code}] {exc.message}")
    if isinstance(exc, ValidationError):
        for violation in exc.violations:
            print(f"    - {violation.field}: {violation.message}", file=sys.stderr)


# ============================================================================
# COMMANDS
# ============================================================================

def _submission(args: argparse.Namespace) -> BookSubmission:
    return BookSubmission(
        title=args.title,
        author=args.author,
        isbn=args.isbn,
        publication_year=args.year,
    )


async def run_command(args: argparse.Namespace) -> int:
    """Execute one CLI command in its own unit of work."""
    if args.command == "init-db":
        await init_db()
        print_success("Database tables created")
        return 0

    async with AsyncSessionLocal() as session:
        service = BookService(session)
        try:
            if args.command == "list":
                books = await service.list_books()
                print_header(f"BOOKS ({len(books)})")
                if not books:
                    print_warning("Catalog is empty")
                for book in books:
                    print_book(book)
            elif args.command == "get":
                print_book(await service.get_book(args.id))
            elif args.command == "find":
                print_book(await service.get_book_by_isbn(args.isbn))
            elif args.command == "add":
                book = await service.create_book(_submission(args))
                await session.commit()
                print_success(f"Created book {book.id}")
                print_book(book)
            elif args.command == "update":
                book = await service.update_book(args.id, _submission(args))
                await session.commit()
                print_success(f"Updated book {book.id}")
                print_book(book)
            elif args.command == "delete":
                await service.delete_book(args.id)
                await session.commit()
                print_success(f"Deleted book {args.id}")
        except AppException as exc:
            await session.rollback()
            print_failure(exc)
            return 1
    return 0


# ============================================================================
# MAIN
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bookstore",
        description="Bookstore CLI - manage the book catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init-db", help="Create database tables")
    commands.add_parser("list", help="List all books")

    get_cmd = commands.add_parser("get", help="Show a book by ID")
    get_cmd.add_argument("id", type=int)

    find_cmd = commands.add_parser("find", help="Show a book by ISBN")
    find_cmd.add_argument("isbn")

    for name, help_text in (("add", "Create a book"), ("update", "Replace a book's fields")):
        cmd = commands.add_parser(name, help=help_text)
        if name == "update":
            cmd.add_argument("id", type=int)
        cmd.add_argument("-t", "--title")
        cmd.add_argument("-a", "--author")
        cmd.add_argument("-i", "--isbn")
        cmd.add_argument("-y", "--year", type=int, help="Publication year")

    delete_cmd = commands.add_parser("delete", help="Delete a book by ID")
    delete_cmd.add_argument("id", type=int)

    return parser


async def _main(args: argparse.Namespace) -> int:
    try:
        return await run_command(args)
    finally:
        await close_db()


def main(argv: Optional[list[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        sys.exit(asyncio.run(_main(args)))
    except KeyboardInterrupt:
        print(f"\n{Colors.YELLOW}Interrupted by user{Colors.END}")
        sys.exit(1)


if __name__ == "__main__":
    main()

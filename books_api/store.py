"""
In-memory book store.

Holds the ordered sequence of books for the lifetime of the process and
assigns ids on creation. All access goes through a single lock, since
FastAPI may run handlers on a worker thread pool.
"""

import threading
from typing import Iterable, List, Optional, Tuple

import structlog

from books_api.models import BookRecord

logger = structlog.get_logger(__name__)

SEED_BOOKS: Tuple[Tuple[str, str], ...] = (
    ("The Great Gatsby", "F. Scott Fitzgerald"),
    ("To Kill a Mockingbird", "Harper Lee"),
)


class BookStore:
    """
    Thread-safe in-memory store of book records.
    Records are kept in insertion order and never removed.
    """

    def __init__(self, seed: Iterable[Tuple[str, str]] = SEED_BOOKS):
        """
        Initialize the store.

        Args:
            seed: (title, author) pairs inserted in order with ids 1..N
        """
        self._books: List[BookRecord] = []
        self._next_id = 1
        self._lock = threading.Lock()

        for title, author in seed:
            self.create(title, author)

        logger.info("Book store initialized", books=len(self._books))

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def list(self) -> List[BookRecord]:
        """Return all books in insertion order."""
        with self._lock:
            return list(self._books)

    def get_by_id(self, book_id: int) -> Optional[BookRecord]:
        """
        Find a book by id.

        Args:
            book_id: Book identifier

        Returns:
            The matching book, or None if no book has this id
        """
        with self._lock:
            for book in self._books:
                if book.id == book_id:
                    return book
        return None

    def create(self, title: str, author: str) -> BookRecord:
        """
        Append a new book and assign it the next id.

        The strings are stored as given; payload validation happens
        before the store is reached.

        Args:
            title: Book title
            author: Book author

        Returns:
            The created book
        """
        with self._lock:
            book = BookRecord(id=self._next_id, title=title, author=author)
            self._books.append(book)
            self._next_id += 1

        logger.debug("Book stored", book_id=book.id)
        return book

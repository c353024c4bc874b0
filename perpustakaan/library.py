"""A library that ties the book catalog to the borrower queue and keeps a history."""

from __future__ import annotations

from dataclasses import dataclass

from perpustakaan.books import (
    MAX_TITLE_LENGTH,
    Book,
    BookNotFoundError,
    Catalog,
    OutOfStockError,
    StockFullError,
)
from perpustakaan.borrowers import MAX_NAME_LENGTH, Borrower, BorrowerQueue, Priority

DEFAULT_HISTORY_LIMIT = 100
DEFAULT_RECENT_COUNT = 5

ACTION_ADD = "Tambah buku"
ACTION_REGISTER = "Daftar pinjam"
ACTION_LEND = "Pinjam buku"
ACTION_RETURN = "Kembalikan buku"
ACTION_CANCEL = "Batalkan antrian"


class LibraryError(Exception):
    """Base class for errors raised by library operations."""


class NoBorrowerError(LibraryError, LookupError):
    """No matching request is waiting in the queue for the book."""

    def __init__(self, title: str, message: str | None = None) -> None:
        super().__init__(
            message or f"Tidak ada peminjam yang mengantri untuk buku '{title}'"
        )
        self.title = title


@dataclass(frozen=True)
class HistoryEntry:
    """One recorded activity."""

    action: str
    name: str
    title: str
    priority: Priority = Priority.UMUM

    def __str__(self) -> str:
        return f"{self.action}: {self.name} - {self.title}"


class Library:
    """Books, a queue of people waiting for them, and a bounded activity log."""

    def __init__(self, history_limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if history_limit < 0:
            raise ValueError("history_limit must not be negative")
        self.history_limit = history_limit
        self.catalog = Catalog()
        self.queue = BorrowerQueue()
        self._history: list[HistoryEntry] = []

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """Every recorded activity, oldest first."""
        return tuple(self._history)

    def _record(
        self, action: str, name: str, title: str, priority: Priority = Priority.UMUM
    ) -> None:
        if len(self._history) < self.history_limit:
            self._history.append(
                HistoryEntry(
                    action,
                    name[:MAX_NAME_LENGTH],
                    title[:MAX_TITLE_LENGTH],
                    Priority(priority),
                )
            )

    def _require_book(self, title: str) -> Book:
        book = self.catalog.find(title)
        if book is None:
            raise BookNotFoundError(title)
        return book

    def add_book(self, title: str, stock: int) -> Book:
        """Add a book to the catalog and record it."""
        book = self.catalog.add(title, stock)
        self._record(ACTION_ADD, "", title)
        return book

    def register(self, name: str, priority: Priority | int, title: str) -> Borrower:
        """Put a person in the queue for an existing book."""
        book = self._require_book(title)
        borrower = self.queue.enqueue(name, priority, book)
        self._record(ACTION_REGISTER, name, title, borrower.priority)
        return borrower

    def lend(self, title: str) -> Borrower:
        """Lend one copy to the highest-priority person waiting for it."""
        book = self._require_book(title)
        if book.available <= 0:
            raise OutOfStockError(title)
        borrower = self.queue.dequeue(book)
        if borrower is None:
            raise NoBorrowerError(title)
        try:
            self.catalog.borrow(title)
        except OutOfStockError:
            self.queue.enqueue(borrower.name, borrower.priority, borrower.book)
            raise
        self._record(ACTION_LEND, borrower.name, title, borrower.priority)
        return borrower

    def accept_return(self, name: str, title: str) -> Book:
        """Take back one copy of a book."""
        book = self._require_book(title)
        if book.available >= book.stock:
            raise StockFullError(title)
        self.catalog.give_back(title)
        self._record(ACTION_RETURN, name, title)
        return book

    def cancel_request(self, name: str, title: str) -> Borrower:
        """Withdraw a waiting request by name and book title."""
        book = self._require_book(title)
        try:
            borrower = self.queue.remove(name, book)
        except LookupError as exc:
            raise NoBorrowerError(title, str(exc)) from exc
        self._record(ACTION_CANCEL, name, title)
        return borrower

    def recent_history(self, count: int = DEFAULT_RECENT_COUNT) -> list[HistoryEntry]:
        """The last `count` recorded activities, oldest first."""
        if count <= 0:
            return []
        return self._history[-count:]

    def status(self) -> str:
        """Books, queue and recent history as shown to the user."""
        lines = ["", "=== STATUS PERPUSTAKAAN ===", "", "[Daftar Buku]"]
        if len(self.catalog) == 0:
            lines.append("Tidak ada buku terdaftar")
        else:
            lines.extend(f"- {book}" for book in self.catalog)

        lines += ["", "[Antrian Peminjam]"]
        if len(self.queue) == 0:
            lines.append("Tidak ada antrian peminjam")
        else:
            lines.extend(f"- {borrower}" for borrower in self.queue)

        lines += ["", "[History Terakhir]"]
        if not self._history:
            lines.append("Tidak ada history")
        else:
            lines.extend(f"- {entry}" for entry in self.recent_history())

        return "\n".join(lines) + "\n\n"
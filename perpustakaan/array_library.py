"""A library whose queue is keyed by title and whose history supports undo."""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass

from perpustakaan.array_queue import (
    DEFAULT_QUEUE_CAPACITY,
    MAX_FIELD_LENGTH,
    ArrayPriority,
    QueueFullError,
    Request,
    RequestQueue,
)
from perpustakaan.books import (
    DEFAULT_ARRAY_CAPACITY,
    MAX_TITLE_LENGTH,
    Book,
    BookError,
    BookNotFoundError,
    Catalog,
    OutOfStockError,
)
from perpustakaan.library import (
    ACTION_ADD,
    ACTION_LEND,
    ACTION_REGISTER,
    ACTION_RETURN,
    DEFAULT_HISTORY_LIMIT,
    LibraryError,
    NoBorrowerError,
)


@dataclass(frozen=True)
class ArrayHistoryEntry:
    """One recorded activity."""

    action: str
    name: str
    title: str

    def __str__(self) -> str:
        return f"{self.action}: {self.name} - {self.title}"


class ArrayLibrary:
    """Books, a single priority queue of requests and an undoable activity log."""

    def __init__(self, history_limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if history_limit < 0:
            raise ValueError("history_limit must not be negative")
        self.history_limit = history_limit
        self.catalog = Catalog(DEFAULT_ARRAY_CAPACITY)
        self.queue = RequestQueue(DEFAULT_QUEUE_CAPACITY)
        self._history: list[ArrayHistoryEntry] = []

    @property
    def history(self) -> tuple[ArrayHistoryEntry, ...]:
        """Every recorded activity, oldest first."""
        return tuple(self._history)

    def _record(self, action: str, name: str, title: str) -> None:
        if len(self._history) < self.history_limit:
            self._history.append(
                ArrayHistoryEntry(
                    action, name[:MAX_FIELD_LENGTH], title[:MAX_TITLE_LENGTH]
                )
            )

    def add_book(self, title: str, stock: int) -> Book:
        """Add a book to the catalog and record it."""
        book = self.catalog.add(title, stock)
        self._record(ACTION_ADD, "", title)
        return book

    def register(self, name: str, priority: ArrayPriority | int, title: str) -> Request:
        """Queue a request for a title; the title need not be in the catalog."""
        request = self.queue.enqueue(name, priority, title)
        self._record(ACTION_REGISTER, name, title)
        return request

    def lend(self, title: str) -> Request:
        """Serve the next request in the queue with one copy of this title.

        The served request is consumed even when it asks for another title.
        """
        book = self.catalog.find(title)
        if book is None:
            raise BookNotFoundError(title)
        if book.available <= 0:
            raise OutOfStockError(title)
        request = self.queue.dequeue()
        if request is None:
            raise NoBorrowerError(title, f"Tidak ada peminjam untuk buku {title}")
        if request.title != title:
            raise LibraryError("Peminjam tidak sesuai dengan buku yang diminta")
        self.catalog.borrow(title)
        self._record(ACTION_LEND, request.name, title)
        return request

    def accept_return(
        self, name: str, title: str
    ) -> tuple[Book, Request | LibraryError | BookError | None]:
        """Take back one copy, then lend it on if someone waits for the title.

        The second item is None when nobody waits, the served request when the
        copy was lent on, or the error that stopped lending it on.
        """
        book = self.catalog.give_back(title)
        self._record(ACTION_RETURN, name, title)
        follow_up: Request | LibraryError | BookError | None = None
        if self.queue.find_by_title(title) is not None:
            try:
                follow_up = self.lend(title)
            except (LibraryError, BookError) as exc:
                follow_up = exc
        return book, follow_up

    def undo(self) -> ArrayHistoryEntry:
        """Revert the last recorded activity and return its entry."""
        if not self._history:
            raise LibraryError("Tidak ada aktivitas untuk dibatalkan")
        entry = self._history.pop()
        if entry.action == ACTION_REGISTER:
            with suppress(LookupError):
                self.queue.remove(entry.name, entry.title)
        elif entry.action == ACTION_LEND:
            with suppress(QueueFullError):
                self.queue.enqueue(entry.name, ArrayPriority.DOSEN, entry.title)
            with suppress(BookError):
                self.catalog.give_back(entry.title)
        elif entry.action == ACTION_RETURN:
            with suppress(BookError):
                self.catalog.borrow(entry.title)
        else:
            raise LibraryError("Aktivitas terakhir tidak dapat dibatalkan")
        return entry

    def status(self) -> str:
        """Books and queue as shown to the user."""
        return (
            "\n=== Status Perpustakaan ===\n"
            + self.catalog.render()
            + self.queue.render()
            + "\n"
        )
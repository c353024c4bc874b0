"""Borrower queue in which each request is tied to a book in the catalog."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

from perpustakaan.books import Book

MAX_NAME_LENGTH = 99


class Priority(IntEnum):
    """Borrower priority; a lower value is served first."""

    DOSEN = 1
    MAHASISWA = 2
    UMUM = 3

    def label(self) -> str:
        """The name shown to the user."""
        return _LABELS[self]


_LABELS = {
    Priority.DOSEN: "Dosen",
    Priority.MAHASISWA: "Mahasiswa",
    Priority.UMUM: "Umum",
}


@dataclass
class Borrower:
    """A person waiting to borrow a particular book."""

    name: str
    priority: Priority
    book: Book

    def __str__(self) -> str:
        return (
            f"{self.name} (Prioritas: {self.priority.label()}) - "
            f"Buku: {self.book.title}"
        )


class BorrowerQueue:
    """Requests kept in arrival order, served by priority per book."""

    def __init__(self) -> None:
        self._waiting: list[Borrower] = []

    def enqueue(self, name: str, priority: Priority | int, book: Book) -> Borrower:
        """Add a request at the back; the name is cut to MAX_NAME_LENGTH characters."""
        borrower = Borrower(name[:MAX_NAME_LENGTH], Priority(priority), book)
        self._waiting.append(borrower)
        return borrower

    def dequeue(self, book: Book) -> Borrower | None:
        """Remove and return the earliest request with the best priority for this book."""
        candidates = [b for b in self._waiting if b.book is book]
        if not candidates:
            return None
        chosen = min(candidates, key=lambda b: b.priority)
        self._waiting.remove(chosen)
        return chosen

    def find_by_book(self, book: Book) -> Borrower | None:
        """The first waiting request for this book, or None."""
        return next((b for b in self._waiting if b.book is book), None)

    def remove(self, name: str, book: Book) -> Borrower:
        """Remove the first request by this name for this book."""
        for index, borrower in enumerate(self._waiting):
            if borrower.name == name and borrower.book is book:
                return self._waiting.pop(index)
        raise LookupError(
            "Peminjam tidak ditemukan dalam antrian untuk buku tersebut"
        )

    def render(self) -> str:
        """The queue as shown to the user."""
        lines = ["Antrian Peminjam:"]
        if not self._waiting:
            lines.append("Tidak ada peminjam dalam antrian")
        else:
            lines.extend(f"- {borrower}" for borrower in self._waiting)
        return "\n".join(lines) + "\n"

    def __iter__(self) -> Iterator[Borrower]:
        return iter(self._waiting)

    def __len__(self) -> int:
        return len(self._waiting)
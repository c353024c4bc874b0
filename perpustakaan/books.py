"""Book catalog: titles with a total stock and the number of copies on the shelf."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

MAX_TITLE_LENGTH = 99
DEFAULT_ARRAY_CAPACITY = 100


class BookError(Exception):
    """Base class for catalog errors."""


class BookNotFoundError(BookError, LookupError):
    """No book with the given title exists in the catalog."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Buku '{title}' tidak ditemukan!")
        self.title = title


class OutOfStockError(BookError):
    """Every copy of the book is already lent out."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Stok buku '{title}' habis!")
        self.title = title


class StockFullError(BookError):
    """Every copy of the book is already on the shelf."""

    def __init__(self, title: str) -> None:
        super().__init__(
            f"Stok buku '{title}' sudah penuh, tidak bisa menerima pengembalian"
        )
        self.title = title


class CatalogFullError(BookError):
    """The catalog has reached its capacity."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Katalog penuh ({capacity} buku)")
        self.capacity = capacity


@dataclass(eq=False)
class Book:
    """A title with its total stock and the copies currently available."""

    title: str
    stock: int
    available: int

    def __str__(self) -> str:
        return f"{self.title} (Stok: {self.stock}, Tersedia: {self.available})"


class Catalog:
    """An ordered collection of books, optionally limited in size."""

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._books: list[Book] = []

    def add(self, title: str, stock: int) -> Book:
        """Append a new book; its title is cut to MAX_TITLE_LENGTH characters."""
        if self.capacity is not None and len(self._books) >= self.capacity:
            raise CatalogFullError(self.capacity)
        book = Book(title[:MAX_TITLE_LENGTH], stock, stock)
        self._books.append(book)
        return book

    def find(self, title: str) -> Book | None:
        """Return the first book with exactly this title, or None."""
        return next((book for book in self._books if book.title == title), None)

    def _require(self, title: str) -> Book:
        book = self.find(title)
        if book is None:
            raise BookNotFoundError(title)
        return book

    def borrow(self, title: str) -> Book:
        """Take one copy off the shelf."""
        book = self._require(title)
        if book.available <= 0:
            raise OutOfStockError(title)
        book.available -= 1
        return book

    def give_back(self, title: str) -> Book:
        """Put one copy back on the shelf."""
        book = self._require(title)
        if book.available >= book.stock:
            raise StockFullError(title)
        book.available += 1
        return book

    def render(self) -> str:
        """The book list as shown to the user."""
        lines = ["Daftar Buku:"]
        lines.extend(f"- {book}" for book in self._books)
        return "\n".join(lines) + "\n"

    def clear(self) -> None:
        """Remove every book."""
        self._books.clear()

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)
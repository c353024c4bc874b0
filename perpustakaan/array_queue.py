"""Fixed-capacity request queue keyed by book title."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

MAX_FIELD_LENGTH = 99
DEFAULT_QUEUE_CAPACITY = 100


class QueueFullError(Exception):
    """The queue has used up all of its slots."""

    def __init__(self, capacity: int) -> None:
        super().__init__("Antrian peminjam penuh!")
        self.capacity = capacity


class ArrayPriority(IntEnum):
    """Request priority; a higher value is served first."""

    MAHASISWA = 0
    DOSEN = 1
    UMUM = 2

    def label(self) -> str:
        """The name shown to the user."""
        return _LABELS[self]


_LABELS = {
    ArrayPriority.MAHASISWA: "Mahasiswa",
    ArrayPriority.DOSEN: "Dosen",
    ArrayPriority.UMUM: "Umum",
}


@dataclass
class Request:
    """A person waiting to borrow a book identified by title."""

    name: str
    priority: ArrayPriority
    title: str

    def __str__(self) -> str:
        return f"{self.name} (Prioritas: {self.priority.label()}) - Buku: {self.title}"


class RequestQueue:
    """A queue whose slots are not reused once a request has been served.

    Serving a request swaps it with the front request before removing it,
    so the former front request takes its place in the order.
    """

    def __init__(self, capacity: int = DEFAULT_QUEUE_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._pending: list[Request] = []
        self._served = 0

    def enqueue(self, name: str, priority: ArrayPriority | int, title: str) -> Request:
        """Add a request at the back; name and title are cut to MAX_FIELD_LENGTH."""
        if self._served + len(self._pending) >= self.capacity:
            raise QueueFullError(self.capacity)
        request = Request(
            name[:MAX_FIELD_LENGTH], ArrayPriority(priority), title[:MAX_FIELD_LENGTH]
        )
        self._pending.append(request)
        return request

    def dequeue(self) -> Request | None:
        """Serve the earliest request with the highest priority, or return None."""
        if not self._pending:
            return None
        best = max(range(len(self._pending)), key=lambda i: (self._pending[i].priority, -i))
        self._pending[0], self._pending[best] = self._pending[best], self._pending[0]
        self._served += 1
        return self._pending.pop(0)

    def find_by_title(self, title: str) -> Request | None:
        """The first waiting request for this title, or None."""
        return next((r for r in self._pending if r.title == title), None)

    def remove(self, name: str, title: str) -> Request:
        """Remove the first request matching both name and title."""
        for index, request in enumerate(self._pending):
            if request.name == name and request.title == title:
                return self._pending.pop(index)
        raise LookupError(f"Tidak ada pendaftaran {title} oleh {name}")

    def render(self) -> str:
        """The queue as shown to the user."""
        lines = ["Antrian Peminjam:"]
        lines.extend(f"- {request}" for request in self._pending)
        return "\n".join(lines) + "\n"

    def __iter__(self) -> Iterator[Request]:
        return iter(self._pending)

    def __len__(self) -> int:
        return len(self._pending)
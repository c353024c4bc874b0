"""Interactive menu for the library whose queue is tied to catalog books."""

from __future__ import annotations

import argparse
import os
import re
import subprocess
import sys
from collections.abc import Callable
from enum import Enum
from typing import TextIO

from perpustakaan.books import BookError, BookNotFoundError
from perpustakaan.borrowers import Priority
from perpustakaan.library import Library, LibraryError

_INTEGER = re.compile(r"\s*([+-]?\d+)")
_RULE = "-" * 60


class Layout(Enum):
    """How the status display is drawn, and how strictly input is checked."""

    TABLE = "table"
    LIST = "list"

    @property
    def rejects_empty_fields(self) -> bool:
        """Whether an empty title or borrower name is refused."""
        return self is Layout.TABLE

    @property
    def highest_choice_hint(self) -> int:
        """The upper bound named in the invalid-choice message."""
        return 5 if self is Layout.TABLE else 6


class _EndOfInput(Exception):
    """Input ran out."""


class _Session:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def say(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput
        return line

    def read_text(self, prompt: str) -> str:
        self.write(prompt)
        return self.read_line().split("\n", 1)[0]

    def read_int(self, prompt: str) -> int | None:
        self.write(prompt)
        line = self.read_line()
        while not line.strip():
            line = self.read_line()
        match = _INTEGER.match(line)
        return int(match.group(1)) if match else None


def clear_screen() -> None:
    """Clear the terminal."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


def menu_text() -> str:
    """The main menu with its prompt."""
    return (
        "=== MENU UTAMA ===\n"
        "1. Tambah Buku Baru\n"
        "2. Daftarkan Peminjam\n"
        "3. Proses Peminjaman Buku\n"
        "4. Proses Pengembalian Buku\n"
        "5. Batalkan Antrian Peminjam\n"
        "0. Keluar\n"
        "Pilihan: "
    )


def render_display(library: Library, layout: Layout = Layout.TABLE) -> str:
    """The books and the waiting queue as shown above the menu."""
    lines = ["=== SISTEM PERPUSTAKAAN ===", "", "[Daftar Buku]"]
    if len(library.catalog) == 0:
        lines.append("Belum ada buku terdaftar")
    elif layout is Layout.TABLE:
        lines.append(f"{'Judul':<40} {'Total':<10} {'Tersedia':<10}")
        lines.append(_RULE)
        lines.extend(
            f"{book.title:<40} {book.stock:<10} {book.available:<10}"
            for book in library.catalog
        )
    else:
        lines.extend(
            f"- {book.title} (Total: {book.stock}, Tersedia: {book.available})"
            for book in library.catalog
        )

    lines += ["", "[Antrian Peminjam]"]
    if len(library.queue) == 0:
        lines.append("Tidak ada antrian peminjam")
    elif layout is Layout.TABLE:
        lines.append(f"{'Nama':<20} {'Prioritas':<15} {'Buku':<40}")
        lines.append(_RULE)
        lines.extend(
            f"{b.name:<20} {b.priority.label():<15} {b.book.title:<40}"
            for b in library.queue
        )
    else:
        lines.extend(f"- {borrower}" for borrower in library.queue)

    return "\n".join(lines) + "\n\n"


def _add_book(library: Library, session: _Session, layout: Layout) -> None:
    title = session.read_text("Masukkan judul buku: ")
    if layout.rejects_empty_fields and not title:
        session.say("Judul buku tidak boleh kosong!")
        return
    stock = session.read_int("Masukkan jumlah stok: ")
    if stock is None or stock <= 0:
        session.say("Stok harus bilangan positif!")
        return
    try:
        library.add_book(title, stock)
    except BookError:
        session.say("Gagal menambah buku. Mungkin stok penuh.")
        return
    session.say(f"Buku '{title}' berhasil ditambahkan dengan stok {stock}")


def _register(library: Library, session: _Session, layout: Layout) -> None:
    name = session.read_text("Masukkan nama peminjam: ")
    if layout.rejects_empty_fields and not name:
        session.say("Nama peminjam tidak boleh kosong!")
        return
    title = session.read_text("Masukkan judul buku yang ingin dipinjam: ")
    priority = session.read_int("Masukkan prioritas (1=Dosen, 2=Mahasiswa, 3=Umum): ")
    if priority is None:
        session.say("Input tidak valid!")
        return
    if not 1 <= priority <= 3:
        session.say("Prioritas harus antara 1-3!")
        return
    try:
        borrower = library.register(name, Priority(priority), title)
    except BookNotFoundError as exc:
        session.say(str(exc))
        return
    session.say(
        f"{name} berhasil didaftarkan untuk meminjam {title} "
        f"(Prioritas: {int(borrower.priority)})"
    )


def _lend(library: Library, session: _Session, layout: Layout) -> None:
    title = session.read_text("Masukkan judul buku yang akan dipinjam: ")
    try:
        borrower = library.lend(title)
    except (LibraryError, BookError) as exc:
        session.say(str(exc))
        return
    session.say(
        f"{borrower.name} (Prioritas: {borrower.priority.label()}) "
        f"berhasil meminjam buku {title}"
    )


def _accept_return(library: Library, session: _Session, layout: Layout) -> None:
    name = session.read_text("Masukkan nama peminjam: ")
    title = session.read_text("Masukkan judul buku yang dikembalikan: ")
    try:
        library.accept_return(name, title)
    except BookError as exc:
        session.say(str(exc))
        return
    session.say(f"{name} berhasil mengembalikan buku {title}")


def _cancel(library: Library, session: _Session, layout: Layout) -> None:
    name = session.read_text("Masukkan nama peminjam: ")
    title = session.read_text("Masukkan judul buku: ")
    try:
        library.cancel_request(name, title)
    except BookNotFoundError:
        session.say("Buku tidak ditemukan!")
        return
    except LibraryError as exc:
        session.say(str(exc))
        return
    session.say(f"Antrian peminjam {name} untuk buku {title} berhasil dibatalkan")


_ACTIONS = {
    1: _add_book,
    2: _register,
    3: _lend,
    4: _accept_return,
    5: _cancel,
}


def run(
    library: Library,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    layout: Layout = Layout.TABLE,
    clear: Callable[[], None] | None = None,
) -> None:
    """Run the menu until the user picks 0 or the input ends."""
    session = _Session(stdin or sys.stdin, stdout or sys.stdout)
    wipe = clear if clear is not None else clear_screen
    try:
        while True:
            wipe()
            session.write(render_display(library, layout))
            choice = session.read_int(menu_text())
            if choice is None:
                session.say("Input tidak valid! Harap masukkan angka.")
                continue

            wipe()
            session.write(render_display(library, layout))

            if choice == 0:
                session.say("Terima kasih telah menggunakan sistem perpustakaan!")
                return
            action = _ACTIONS.get(choice)
            if action is None:
                session.say(
                    "Pilihan tidak valid! Silakan pilih "
                    f"0-{layout.highest_choice_hint}."
                )
            else:
                action(library, session, layout)

            session.write("\nTekan Enter untuk kembali ke menu...")
            session.read_line()
    except _EndOfInput:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive library menu."""
    parser = argparse.ArgumentParser(
        prog="perpustakaan",
        description="Library with a per-book priority queue of borrowers.",
    )
    parser.add_argument(
        "--layout",
        choices=[layout.value for layout in Layout],
        default=Layout.TABLE.value,
        help="how the status display is drawn",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="do not clear the screen between steps",
    )
    args = parser.parse_args(argv)
    library = Library()
    run(
        library,
        sys.stdin,
        sys.stdout,
        Layout(args.layout),
        (lambda: None) if args.no_clear else clear_screen,
    )
    library.catalog.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())
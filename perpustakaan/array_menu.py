"""Interactive menu for the title-keyed library."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from perpustakaan.array_library import ArrayLibrary
from perpustakaan.array_queue import ArrayPriority, QueueFullError, Request
from perpustakaan.books import (
    BookError,
    BookNotFoundError,
    CatalogFullError,
    OutOfStockError,
)
from perpustakaan.library import ACTION_LEND, ACTION_REGISTER, ACTION_RETURN, LibraryError

_INTEGER = re.compile(r"\s*([+-]?\d+)")
_PENDING_FEATURE = "Fitur ini belum diimplementasikan"


class _EndOfInput(Exception):
    """Input ran out."""


class _Session:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout

    def say(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def read_text(self, prompt: str) -> str:
        self.stdout.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput
        return line.split("\n", 1)[0]

    def read_int(self, prompt: str) -> int | None:
        self.stdout.write(prompt)
        while True:
            line = self.stdin.readline()
            if not line:
                raise _EndOfInput
            if line.strip():
                break
        match = _INTEGER.match(line)
        return int(match.group(1)) if match else None


def menu_text() -> str:
    """The main menu with its prompt."""
    return (
        "\n=== PERPUSTAKAAN ===\n"
        "1. Insert Buku\n"
        "2. Display Buku (dan Antrean)\n"
        "3. Daftar yang Akan Meminjam\n"
        "4. Proses Pinjaman\n"
        "5. Batalkan Pinjaman\n"
        "6. Proses Pengembalian\n"
        "7. Lihat yang Sedang Meminjam\n"
        "0. Keluar\n"
        "Pilihan: "
    )


def _describe_lend(title: str, outcome: Request | Exception) -> str:
    if isinstance(outcome, Request):
        return (
            f"{outcome.name} (Prioritas: {int(outcome.priority)}) "
            f"berhasil meminjam buku {title}"
        )
    if isinstance(outcome, (BookNotFoundError, OutOfStockError)):
        return f"Tidak ada stok buku {title} yang tersedia"
    return str(outcome)


def _insert_book(library: ArrayLibrary, session: _Session) -> None:
    title = session.read_text("Masukkan judul buku: ")
    stock = session.read_int("Masukkan stok buku: ")
    if stock is None:
        session.say("Input tidak valid!")
        return
    try:
        library.add_book(title, stock)
    except CatalogFullError as exc:
        session.say(str(exc))
        return
    session.say("Buku berhasil ditambahkan!")


def _register(library: ArrayLibrary, session: _Session) -> None:
    name = session.read_text("Masukkan nama peminjam: ")
    title = session.read_text("Masukkan judul buku: ")
    priority = session.read_int("Masukkan prioritas (0=Dosen, 1=Mahasiswa, 2=Umum): ")
    if priority is None or not 0 <= priority <= 2:
        session.say("Prioritas tidak valid!")
        return
    try:
        library.register(name, ArrayPriority(priority), title)
    except QueueFullError as exc:
        session.say(str(exc))
        return
    session.say("Peminjam berhasil didaftarkan!")


def _lend(library: ArrayLibrary, session: _Session) -> None:
    title = session.read_text("Masukkan judul buku yang akan dipinjam: ")
    outcome: Request | Exception
    try:
        outcome = library.lend(title)
    except (LibraryError, BookError) as exc:
        outcome = exc
    session.say(_describe_lend(title, outcome))


def _undo(library: ArrayLibrary, session: _Session) -> None:
    try:
        entry = library.undo()
    except LibraryError as exc:
        session.say(str(exc))
        return
    if entry.action == ACTION_REGISTER:
        session.say(f"Pendaftaran peminjaman {entry.title} oleh {entry.name} dibatalkan")
    elif entry.action == ACTION_LEND:
        session.say(f"Peminjaman {entry.title} oleh {entry.name} dibatalkan")
    elif entry.action == ACTION_RETURN:
        session.say(f"Pengembalian {entry.title} oleh {entry.name} dibatalkan")


def _give_back(library: ArrayLibrary, session: _Session) -> None:
    name = session.read_text("Masukkan nama peminjam: ")
    title = session.read_text("Masukkan judul buku yang dikembalikan: ")
    try:
        _, follow_up = library.accept_return(name, title)
    except BookError:
        session.say(f"Gagal mengembalikan buku {title}")
        return
    session.say(f"{name} berhasil mengembalikan buku {title}")
    if follow_up is not None:
        session.say(f"Memproses peminjaman berikutnya untuk buku {title}...")
        session.say(_describe_lend(title, follow_up))


def run(
    library: ArrayLibrary,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Run the menu until the user picks 0 or the input ends."""
    session = _Session(stdin or sys.stdin, stdout or sys.stdout)
    actions = {
        1: _insert_book,
        3: _register,
        4: _lend,
        5: _undo,
        6: _give_back,
    }
    try:
        while True:
            choice = session.read_int(menu_text())
            if choice == 0:
                session.say("Terima kasih!")
                return
            if choice == 2:
                session.stdout.write(library.status())
            elif choice == 7:
                session.say(_PENDING_FEATURE)
            elif choice in actions:
                actions[choice](library, session)
            else:
                session.say("Pilihan tidak valid!")
    except _EndOfInput:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive library menu."""
    parser = argparse.ArgumentParser(
        prog="perpustakaan-array",
        description="Library with a title-keyed borrower queue and undo.",
    )
    parser.parse_args(argv)
    run(ArrayLibrary(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
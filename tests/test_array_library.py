import pytest

from perpustakaan.array_library import ArrayHistoryEntry, ArrayLibrary
from perpustakaan.array_queue import MAX_FIELD_LENGTH, ArrayPriority, Request
from perpustakaan.books import BookNotFoundError, OutOfStockError, StockFullError
from perpustakaan.library import LibraryError, NoBorrowerError


@pytest.fixture
def library():
    return ArrayLibrary()


def test_add_book_records_history(library):
    book = library.add_book("Kalkulus", 3)
    assert library.catalog.find("Kalkulus") is book
    assert book.available == book.stock
    assert library.history == (ArrayHistoryEntry("Tambah buku", "", "Kalkulus"),)


def test_register_does_not_need_book(library):
    request = library.register("Budi", ArrayPriority.DOSEN, "Fisika")
    assert list(library.queue) == [request]
    assert library.history[-1].action == "Daftar pinjam"
    assert library.history[-1].name == "Budi"


def test_lend_serves_request(library):
    library.add_book("A", 1)
    library.register("Budi", ArrayPriority.DOSEN, "A")
    request = library.lend("A")
    assert request.name == "Budi"
    assert library.catalog.find("A").available == 0
    assert len(library.queue) == 0
    assert library.history[-1] == ArrayHistoryEntry("Pinjam buku", "Budi", "A")


def test_lend_serves_highest_priority_first(library):
    library.add_book("A", 2)
    library.register("Ani", ArrayPriority.MAHASISWA, "A")
    library.register("Budi", ArrayPriority.UMUM, "A")
    assert library.lend("A").name == "Budi"
    assert library.lend("A").name == "Ani"


def test_lend_missing_book(library):
    library.register("Budi", ArrayPriority.DOSEN, "A")
    with pytest.raises(BookNotFoundError):
        library.lend("A")
    assert len(library.queue) == 1


def test_lend_out_of_stock(library):
    library.add_book("A", 0)
    library.register("Budi", ArrayPriority.DOSEN, "A")
    with pytest.raises(OutOfStockError):
        library.lend("A")


def test_lend_without_borrower(library):
    library.add_book("A", 1)
    with pytest.raises(NoBorrowerError) as info:
        library.lend("A")
    assert str(info.value) == "Tidak ada peminjam untuk buku A"


def test_lend_mismatch_consumes_request(library):
    library.add_book("A", 1)
    library.register("Budi", ArrayPriority.DOSEN, "B")
    with pytest.raises(LibraryError, match="Peminjam tidak sesuai"):
        library.lend("A")
    assert len(library.queue) == 0
    assert library.catalog.find("A").available == library.catalog.find("A").stock


def test_return_without_waiting(library):
    book = library.add_book("A", 1)
    library.register("Budi", ArrayPriority.DOSEN, "A")
    library.lend("A")
    returned, follow_up = library.accept_return("Budi", "A")
    assert returned is book
    assert follow_up is None
    assert book.available == book.stock
    assert library.history[-1] == ArrayHistoryEntry("Kembalikan buku", "Budi", "A")


def test_return_lends_to_next(library):
    book = library.add_book("A", 1)
    library.register("Ani", ArrayPriority.DOSEN, "A")
    library.register("Budi", ArrayPriority.DOSEN, "A")
    library.lend("A")
    _, follow_up = library.accept_return("Ani", "A")
    assert isinstance(follow_up, Request)
    assert follow_up.name == "Budi"
    assert book.available == 0


def test_return_follow_up_mismatch(library):
    book = library.add_book("A", 1)
    library.register("Ani", ArrayPriority.MAHASISWA, "A")
    library.lend("A")
    library.register("Citra", ArrayPriority.MAHASISWA, "A")
    library.register("Dedi", ArrayPriority.UMUM, "B")
    _, follow_up = library.accept_return("Ani", "A")
    assert isinstance(follow_up, LibraryError)
    assert [r.name for r in library.queue] == ["Citra"]
    assert book.available == book.stock


def test_return_errors(library):
    library.add_book("A", 1)
    with pytest.raises(StockFullError):
        library.accept_return("Budi", "A")
    with pytest.raises(BookNotFoundError):
        library.accept_return("Budi", "Z")


def test_undo_empty(library):
    with pytest.raises(LibraryError, match="Tidak ada aktivitas"):
        library.undo()


def test_undo_register(library):
    library.register("Budi", ArrayPriority.UMUM, "A")
    entry = library.undo()
    assert entry.action == "Daftar pinjam"
    assert len(library.queue) == 0
    assert library.history == ()


def test_undo_lend_requeues_as_dosen(library):
    book = library.add_book("A", 1)
    library.register("Budi", ArrayPriority.UMUM, "A")
    library.lend("A")
    library.undo()
    assert book.available == book.stock
    (request,) = list(library.queue)
    assert request.name == "Budi"
    assert request.priority is ArrayPriority.DOSEN


def test_undo_return(library):
    book = library.add_book("A", 1)
    library.register("Budi", ArrayPriority.UMUM, "A")
    library.lend("A")
    library.accept_return("Budi", "A")
    library.undo()
    assert book.available == 0


def test_undo_add_book_is_refused_but_popped(library):
    library.add_book("A", 1)
    with pytest.raises(LibraryError, match="tidak dapat dibatalkan"):
        library.undo()
    assert library.history == ()
    assert len(library.catalog) == 1


def test_history_limit():
    library = ArrayLibrary(history_limit=1)
    library.add_book("A", 1)
    library.add_book("B", 1)
    assert [e.title for e in library.history] == ["A"]
    assert len(library.catalog) == 2


def test_negative_history_limit():
    with pytest.raises(ValueError):
        ArrayLibrary(history_limit=-1)


def test_history_truncates_name(library):
    library.register("x" * 150, ArrayPriority.UMUM, "A")
    assert len(library.history[-1].name) == MAX_FIELD_LENGTH


def test_status(library):
    library.add_book("A", 2)
    library.register("Budi", ArrayPriority.UMUM, "A")
    text = library.status()
    assert text.startswith("\n=== Status Perpustakaan ===\n")
    assert "- A (Stok: 2, Tersedia: 2)" in text
    assert "- Budi (Prioritas: Umum) - Buku: A" in text
    assert text.endswith("\n\n")
import pytest

from perpustakaan.books import Catalog
from perpustakaan.borrowers import Borrower, BorrowerQueue, Priority


@pytest.fixture
def books():
    catalog = Catalog()
    return catalog.add("Algoritma", 2), catalog.add("Basis Data", 1)


def test_priority_labels():
    assert Priority.DOSEN.label() == "Dosen"
    assert Priority.MAHASISWA.label() == "Mahasiswa"
    assert Priority.UMUM.label() == "Umum"


def test_enqueue_keeps_arrival_order(books):
    algo, _ = books
    queue = BorrowerQueue()
    queue.enqueue("Ani", Priority.UMUM, algo)
    queue.enqueue("Budi", 1, algo)
    assert [b.name for b in queue] == ["Ani", "Budi"]
    assert len(queue) == 2
    assert list(queue)[1].priority is Priority.DOSEN


def test_enqueue_rejects_unknown_priority(books):
    algo, _ = books
    with pytest.raises(ValueError):
        BorrowerQueue().enqueue("Ani", 7, algo)


def test_name_is_truncated(books):
    algo, _ = books
    borrower = BorrowerQueue().enqueue("x" * 150, Priority.UMUM, algo)
    assert len(borrower.name) == 99


def test_dequeue_prefers_lowest_priority_value(books):
    algo, _ = books
    queue = BorrowerQueue()
    queue.enqueue("Ani", Priority.UMUM, algo)
    queue.enqueue("Budi", Priority.MAHASISWA, algo)
    queue.enqueue("Citra", Priority.DOSEN, algo)
    served = queue.dequeue(algo)
    assert served.name == "Citra"
    assert [b.name for b in queue] == ["Ani", "Budi"]


def test_dequeue_ties_go_to_earliest(books):
    algo, _ = books
    queue = BorrowerQueue()
    queue.enqueue("Ani", Priority.MAHASISWA, algo)
    queue.enqueue("Budi", Priority.MAHASISWA, algo)
    assert queue.dequeue(algo).name == "Ani"
    assert queue.dequeue(algo).name == "Budi"
    assert queue.dequeue(algo) is None


def test_dequeue_only_matches_the_same_book(books):
    algo, basis = books
    queue = BorrowerQueue()
    queue.enqueue("Ani", Priority.DOSEN, basis)
    queue.enqueue("Budi", Priority.UMUM, algo)
    assert queue.dequeue(algo).name == "Budi"
    assert queue.dequeue(algo) is None
    assert len(queue) == 1


def test_dequeue_empty_returns_none(books):
    algo, _ = books
    assert BorrowerQueue().dequeue(algo) is None


def test_find_by_book(books):
    algo, basis = books
    queue = BorrowerQueue()
    queue.enqueue("Ani", Priority.UMUM, algo)
    queue.enqueue("Budi", Priority.DOSEN, algo)
    found = queue.find_by_book(algo)
    assert found == Borrower("Ani", Priority.UMUM, algo)
    assert queue.find_by_book(basis) is None


def test_remove(books):
    algo, basis = books
    queue = BorrowerQueue()
    queue.enqueue("Ani", Priority.UMUM, algo)
    queue.enqueue("Ani", Priority.UMUM, basis)
    removed = queue.remove("Ani", basis)
    assert removed.book is basis
    assert [b.book for b in queue] == [algo]


def test_remove_missing_raises(books):
    algo, basis = books
    queue = BorrowerQueue()
    queue.enqueue("Ani", Priority.UMUM, algo)
    with pytest.raises(LookupError):
        queue.remove("Ani", basis)
    with pytest.raises(LookupError):
        queue.remove("Budi", algo)
    assert len(queue) == 1


def test_render_empty():
    assert BorrowerQueue().render() == (
        "Antrian Peminjam:\nTidak ada peminjam dalam antrian\n"
    )


def test_render_entries(books):
    algo, _ = books
    queue = BorrowerQueue()
    queue.enqueue("Ani", Priority.DOSEN, algo)
    assert queue.render() == (
        "Antrian Peminjam:\n- Ani (Prioritas: Dosen) - Buku: Algoritma\n"
    )
# perpustakaan

A small library lending system for the terminal. It keeps a catalogue of
books with their stock, a queue of people waiting to borrow a title, and a
history of what has happened. The prompts and messages are in Indonesian.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## The main menu

```
perpustakaan [--layout {table,list}] [--no-clear]
```

Before each step the screen is cleared and the current books and waiting
queue are shown above the menu:

- `1` add a new book with its stock (the stock must be positive)
- `2` register a borrower for a title already in the catalogue, with a
  priority: 1 = Dosen, 2 = Mahasiswa, 3 = Umum. A lower number goes first.
- `3` lend one copy of a title to the best-priority borrower waiting for
  that title (the earliest one among equals)
- `4` take a copy of a book back
- `5` cancel a borrower's place in the queue for a title
- `0` quit

`--layout table` (the default) draws the books and queue as columns and
refuses an empty title or borrower name. `--layout list` draws them as
bullet lists. `--no-clear` leaves the screen alone between steps.

## The fixed-capacity menu

```
perpustakaan-array
```

This variant holds at most 100 books and 100 queue slots. Its queue is
keyed by title rather than by catalogue entry, so a request can be made for
a title that is not in the catalogue.

- `1` add a book
- `2` show the books and the queue
- `3` register a borrower for a title with a priority number 0, 1 or 2;
  the request with the highest number is served first
- `4` lend a copy of a title to the next request in the whole queue; if
  that request is for another title it is used up and nothing is lent
- `5` undo the last activity: a registration, a loan or a return
- `6` take a copy back; if someone is waiting for that title, a loan is
  attempted straight away
- `7` not available yet: it only prints a notice
- `0` quit

## Using it from Python

```python
from perpustakaan.library import Library
from perpustakaan.borrowers import Priority

library = Library(100)
library.add_book("Algoritma", 2)
library.register("Budi", Priority.MAHASISWA, "Algoritma")
library.register("Sari", Priority.DOSEN, "Algoritma")
library.lend("Algoritma")          # returns Sari's request
print(library.status())
```

- `perpustakaan.books.Catalog` holds the books. `borrow` and `give_back`
  raise `BookNotFoundError`, `OutOfStockError` or `StockFullError` when the
  request cannot be met; a catalogue with a capacity raises
  `CatalogFullError` when full.
- `perpustakaan.library.Library` offers `add_book`, `register`, `lend`,
  `accept_return`, `cancel_request`, `recent_history` and `status`. `lend`
  and `cancel_request` raise `NoBorrowerError` when no matching request is
  waiting.
- `perpustakaan.array_library.ArrayLibrary` is the title-keyed variant with
  `undo`; its queue is `perpustakaan.array_queue.RequestQueue`, which raises
  `QueueFullError` when its slots are used up.

## What it does not do

Everything is kept in memory only. Books, queue and history are lost when
the menu exits; there is no saving or loading. Neither menu lists who
currently has a book out.
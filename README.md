# perpustakaan

A small library (perpustakaan) lending system for the console. Members ask
to borrow a book and wait in a priority queue. Lecturers (Dosen) are served
before students (Mahasiswa), and students are served before the general public
(Masyarakat Umum). Members of equal priority are served in the order they
asked. A request can be cancelled, and a returned book is offered to the next
member waiting for it.

The same system comes in three variants:

| Subpackage         | What it keeps                                                  | Command              |
|--------------------|----------------------------------------------------------------|----------------------|
| `perpustakaan.sll` | books, members, one loan list for all books, a loan history    | `perpustakaan-sll`   |
| `perpustakaan.dll` | books with total and available stock, one borrower queue, an activity stack | `perpustakaan-dll` |
| `perpustakaan.arr` | a catalogue of up to 100 books, each with its own queue of up to 100 borrowers | `perpustakaan-array` |

## Installation

```
pip install .
```

The package needs Python 3.10 or later and has no other dependencies.

## Running the consoles

Each variant has its own interactive console. The menus are in Indonesian.

```
perpustakaan-sll
perpustakaan-dll
perpustakaan-array
```

The three consoles differ as follows:

- **`perpustakaan-sll`** has three sub-menus:
  - books: add, remove, change stock, list
  - members: add with priority 1–3, remove, list
  - loans: queue a request, lend, return, cancel the member's latest request, list all requests, list one book's queue

  A returned book is lent straight away to the next member waiting for it.
- **`perpustakaan-dll`** has three sub-menus:
  - books: add, list
  - members: queue a member for a book as 1 = Mahasiswa, 2 = Dosen or 3 = Umum, show a book's queue
  - loans: lend to the first waiting borrower, return, undo the latest recorded activity

  It clears the terminal before each menu by running `clear`, or `cls` on Windows. After every action it waits for Enter.
- **`perpustakaan-array`** has one flat menu:
  - add a book with a stock of at least 1
  - queue a borrower at level 0 = Umum, 1 = Mahasiswa or 2 = Dosen
  - lend
  - return
  - cancel a request
  - show every book with its queue

Every console also has a built-in test scenario, which runs these steps:

1. It adds `Buku1` and `Buku2` with one copy each.
2. It queues `Anggota1` (student), `Dosen1` (lecturer) and `Umum1` (general public) for `Buku1`, and `Umum1` for `Buku2`.
3. It lends `Buku1`, which goes to `Dosen1`.
4. It takes `Buku1` back from `Dosen1`.
5. It cancels `Umum1`'s request for `Buku2`.

After the return in step 4, the `sll` console lends the book on to `Anggota1`. The other two consoles only name `Anggota1` as the next borrower. The `arr` scenario empties the catalogue before it starts. The other two scenarios add to the data already present.

Choose `0` in the main menu to quit. The consoles also stop when input ends.

## Using the data structures directly

The consoles are thin layers over plain Python classes, which you can also use on their own. Here is the book list of the `sll` variant:

```python
from perpustakaan.sll.books import BookList, OutOfStockError

books = BookList()
books.add("Buku1", 1)
books.decrease_stock("Buku1")      # lend the only copy
try:
    books.decrease_stock("Buku1")
except OutOfStockError:
    print("no copies left")
books.increase_stock("Buku1")      # copy returned
print(books.render())
```

Loans in the same variant go through `LoanList` and `LoanHistory` from `perpustakaan.sll.loans`:

```python
from perpustakaan.sll.books import BookList
from perpustakaan.sll.loans import LoanHistory, LoanList
from perpustakaan.sll.members import Priority

books = BookList()
books.add("Buku1", 1)
loans, history = LoanList(), LoanHistory()
loans.add("Buku1", "Anggota1", Priority.MAHASISWA, books, history)
loans.add("Buku1", "Dosen1", Priority.DOSEN, books, history)
print(loans.process("Buku1", books).member_name)   # Dosen1
```

Here is the catalogue of the `arr` variant, where every `Book` carries a `BorrowerQueue`:

```python
from perpustakaan.arr.books import BookCatalog
from perpustakaan.arr.borrowers import Level

catalog = BookCatalog()
book = catalog.add("Buku1", 1)
book.queue.add("Anggota1", Level.MAHASISWA)
book.queue.add("Dosen1", Level.DOSEN)
print(book.queue.peek_highest().name)   # Dosen1
book.take()
book.give_back()
print(catalog.render())
```

Failures are raised as exceptions. Each exception belongs to the module that owns the structure. Some examples:

- `BookNotFoundError` in `sll.books` and in `dll.books`
- `MemberNotFoundError` in `sll.members`
- `LoanError` in `sll.loans`
- `DuplicateBorrowerError` in `dll.borrowers`
- `QueueFullError` in `arr.borrowers`
- `DuplicateBookError` and `CatalogFullError` in `arr.books`

## What it does not do

All data lives in memory only. Nothing is saved to disk, and every console starts empty each time it is run.

## Running the tests

```
pip install ".[test]"
pytest
```
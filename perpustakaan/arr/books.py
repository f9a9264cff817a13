"""Fixed-capacity book catalogue where every book has its own borrower queue."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from perpustakaan.arr.borrowers import BorrowerQueue

MAX_BOOKS = 100
MAX_TITLE = 50


class CatalogFullError(Exception):
    """Raised when the catalogue already holds its maximum number of books."""

    def __init__(self) -> None:
        super().__init__("Daftar buku penuh, tidak dapat menambahkan buku baru.")


class DuplicateBookError(ValueError):
    """Raised when a book with the same title is already catalogued."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f'Buku dengan judul "{title}" sudah ada dalam daftar.')


@dataclass(eq=False)
class Book:
    """A title, its available stock and the borrowers waiting for it."""

    title: str
    stock: int
    queue: BorrowerQueue = field(default_factory=BorrowerQueue)

    def take(self) -> None:
        """Lend one copy; fails when none are left."""
        if self.stock <= 0:
            raise ValueError(f"Stok buku '{self.title}' habis")
        self.stock -= 1

    def give_back(self) -> None:
        """Put one copy back on the shelf."""
        self.stock += 1

    def render(self) -> str:
        """Return title, stock and queue length as text."""
        return (
            f"Judul: {self.title}\n"
            f"Stok: {self.stock}\n"
            f"Jumlah antrian peminjam: {len(self.queue)}\n"
        )


class BookCatalog:
    """Books in the order they were added, up to a fixed capacity."""

    def __init__(self, capacity: int = MAX_BOOKS) -> None:
        self.capacity = capacity
        self._books: list[Book] = []

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def add(self, title: str, stock: int) -> Book:
        """Add a book with an empty borrower queue and return it."""
        if len(self._books) >= self.capacity:
            raise CatalogFullError()
        if self.find(title) is not None:
            raise DuplicateBookError(title)
        book = Book(title[: MAX_TITLE - 1], stock)
        self._books.append(book)
        return book

    def find(self, title: str) -> Book | None:
        """Return the book with this title, or None."""
        return next((book for book in self._books if book.title == title), None)

    def clear(self) -> None:
        """Drop every book together with its queue."""
        self._books.clear()

    def render(self) -> str:
        """Return every book's details as text."""
        if not self._books:
            return "Daftar buku kosong.\n"
        parts = ["\n===== DAFTAR BUKU =====\n"]
        parts.extend(
            f"\n[{number}] {book.render()}"
            for number, book in enumerate(self._books, start=1)
        )
        parts.append("======================\n")
        return "".join(parts)
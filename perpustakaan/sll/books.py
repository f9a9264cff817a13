"""Book catalogue kept in insertion order, each title with its own stock."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

_RULE = "=" * 45


class BookNotFoundError(LookupError):
    """Raised when no book with the requested title is in the list."""

    def __init__(self, title: str, message: str | None = None) -> None:
        self.title = title
        super().__init__(message or f"Buku '{title}' tidak ditemukan")


class OutOfStockError(Exception):
    """Raised when a book is requested but none are left in stock."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"Stok buku '{title}' sudah habis")


@dataclass
class Book:
    """A title and how many copies of it the library holds."""

    title: str
    stock: int


class BookList:
    """Ordered collection of books; new books go to the end."""

    def __init__(self) -> None:
        self._books: list[Book] = []

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def add(self, title: str, stock: int) -> Book:
        """Append a new book and return it."""
        book = Book(title, stock)
        self._books.append(book)
        return book

    def find(self, title: str) -> Book | None:
        """Return the first book with this title, or None."""
        return next((book for book in self._books if book.title == title), None)

    def _require(self, title: str) -> Book:
        book = self.find(title)
        if book is None:
            raise BookNotFoundError(title)
        return book

    def remove(self, title: str) -> Book:
        """Remove and return the first book with this title."""
        if not self._books:
            raise BookNotFoundError(title, "List buku kosong")
        for index, book in enumerate(self._books):
            if book.title == title:
                return self._books.pop(index)
        raise BookNotFoundError(title)

    def update_stock(self, title: str, stock: int) -> Book:
        """Set the stock of a book to a new value."""
        book = self._require(title)
        book.stock = stock
        return book

    def decrease_stock(self, title: str) -> Book:
        """Take one copy out of stock, as when it is lent."""
        book = self._require(title)
        if book.stock <= 0:
            raise OutOfStockError(title)
        book.stock -= 1
        return book

    def increase_stock(self, title: str) -> Book:
        """Put one copy back into stock, as when it is returned."""
        book = self._require(title)
        book.stock += 1
        return book

    def clear(self) -> None:
        """Drop every book."""
        self._books.clear()

    def render(self) -> str:
        """Return the book table as text."""
        if not self._books:
            return "List buku kosong\n"
        lines = [
            "",
            _RULE,
            "|               DAFTAR BUKU                 |",
            _RULE,
            "| No |          Judul          |    Stok    |",
            "-" * 45,
        ]
        lines.extend(
            f"| {number:<2} | {book.title:<23} | {book.stock:<10} |"
            for number, book in enumerate(self._books, start=1)
        )
        lines.append(_RULE)
        return "\n".join(lines) + "\n\n"
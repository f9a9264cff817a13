"""Book list that can grow or shrink at either end, tracking available copies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

_RULE = "-------------------------------------------------------"


class BookNotFoundError(LookupError):
    """Raised when no book with the requested title is in the list."""

    def __init__(self, title: str, message: str | None = None) -> None:
        self.title = title
        super().__init__(
            message or f'Buku dengan judul "{title}" tidak ditemukan.'
        )


class EmptyListError(LookupError):
    """Raised when a book is removed from an empty list."""

    def __init__(self) -> None:
        super().__init__("List buku kosong, tidak ada yang dapat dihapus.")


@dataclass
class Book:
    """A title, its total stock and how many copies are on the shelf."""

    title: str
    stock: int
    available: int = field(default=-1)

    def __post_init__(self) -> None:
        if self.available < 0:
            self.available = self.stock


class BookList:
    """Ordered books; supports insertion and removal at both ends."""

    def __init__(self) -> None:
        self._books: list[Book] = []

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def _index_of(self, title: str) -> int:
        for index, book in enumerate(self._books):
            if book.title == title:
                return index
        raise BookNotFoundError(title)

    def add_first(self, title: str, stock: int) -> Book:
        """Put a new book at the front of the list."""
        book = Book(title, stock)
        self._books.insert(0, book)
        return book

    def add_last(self, title: str, stock: int) -> Book:
        """Put a new book at the end of the list."""
        book = Book(title, stock)
        self._books.append(book)
        return book

    def insert_after(self, after_title: str, title: str, stock: int) -> Book:
        """Put a new book right after the book titled ``after_title``."""
        index = self._index_of(after_title)
        book = Book(title, stock)
        self._books.insert(index + 1, book)
        return book

    def remove_first(self) -> Book:
        """Remove and return the first book."""
        if not self._books:
            raise EmptyListError()
        return self._books.pop(0)

    def remove_last(self) -> Book:
        """Remove and return the last book."""
        if not self._books:
            raise EmptyListError()
        return self._books.pop()

    def remove_after(self, after_title: str) -> Book:
        """Remove and return the book right after the one titled ``after_title``."""
        try:
            index = self._index_of(after_title)
        except BookNotFoundError:
            raise BookNotFoundError(
                after_title, "Tidak ada node yang dapat dihapus."
            ) from None
        if index + 1 >= len(self._books):
            raise BookNotFoundError(after_title, "Tidak ada node yang dapat dihapus.")
        return self._books.pop(index + 1)

    def find(self, title: str) -> Book | None:
        """Return the first book with this title, or None."""
        return next((book for book in self._books if book.title == title), None)

    def update_available(self, title: str, delta: int) -> Book:
        """Change the number of copies on the shelf by ``delta``."""
        book = self.find(title)
        if book is None:
            raise BookNotFoundError(title)
        book.available += delta
        return book

    def render(self) -> str:
        """Return the book table as text."""
        if not self._books:
            return "List buku kosong.\n"
        lines = [
            "",
            "===== DAFTAR BUKU =====",
            f"{'No.':<5} {'Judul Buku':<30} {'Stok Total':<15} {'Stok Tersedia':<15}",
            _RULE,
        ]
        lines.extend(
            f"{number:<5} {book.title:<30} {book.stock:<15} {book.available:<15}"
            for number, book in enumerate(self._books, start=1)
        )
        lines.append(_RULE)
        return "\n".join(lines) + "\n"
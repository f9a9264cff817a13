"""Priority queue of borrowers across books, and a stack of recorded activity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator


class BorrowerType(IntEnum):
    """Borrower category; a higher value is served first."""

    MASYARAKAT_UMUM = 0
    MAHASISWA = 1
    DOSEN = 2

    def label(self) -> str:
        """Short human-readable name of the category."""
        return _LABELS[self]


_LABELS = {
    BorrowerType.DOSEN: "Dosen",
    BorrowerType.MAHASISWA: "Mahasiswa",
    BorrowerType.MASYARAKAT_UMUM: "Umum",
}


class DuplicateBorrowerError(ValueError):
    """Raised when a borrower is already queued for the same book."""

    def __init__(self, name: str, book_title: str) -> None:
        self.name = name
        self.book_title = book_title
        super().__init__(
            f'{name} sudah ada dalam antrian peminjaman buku "{book_title}".'
        )


class BorrowerNotFoundError(LookupError):
    """Raised when a borrower is not queued for the given book."""

    def __init__(self, name: str, book_title: str) -> None:
        self.name = name
        self.book_title = book_title
        super().__init__(
            f'{name} tidak ditemukan dalam antrian peminjaman buku "{book_title}".'
        )


class EmptyQueueError(LookupError):
    """Raised when something is taken from an empty queue or history."""

    def __init__(
        self, message: str = "List peminjam kosong, tidak ada yang dapat dihapus."
    ) -> None:
        super().__init__(message)


@dataclass
class Borrower:
    """A person waiting for, or currently holding, a book."""

    name: str
    kind: BorrowerType
    book_title: str
    borrowing: bool = False

    @property
    def status(self) -> str:
        return "Meminjam" if self.borrowing else "Menunggu"


@dataclass(frozen=True)
class Activity:
    """A recorded action of a borrower on a book."""

    name: str
    book_title: str


class BorrowerQueue:
    """Borrowers for all books, ordered by category."""

    def __init__(self) -> None:
        self._items: list[Borrower] = []

    def __iter__(self) -> Iterator[Borrower]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, name: str, kind: BorrowerType, book_title: str) -> Borrower:
        """Queue a borrower for a book according to their category."""
        borrower = Borrower(name, BorrowerType(kind), book_title)
        if not self._items:
            self._items.append(borrower)
            return borrower
        if self.find(name, book_title) is not None:
            raise DuplicateBorrowerError(name, book_title)
        position = 0
        for current in self._items:
            if current.kind > borrower.kind or (
                current.kind == borrower.kind and current.book_title == book_title
            ):
                position += 1
            else:
                break
        self._items.insert(position, borrower)
        return borrower

    def remove_first(self) -> Borrower:
        """Remove and return the borrower at the front."""
        if not self._items:
            raise EmptyQueueError()
        return self._items.pop(0)

    def remove_last(self) -> Borrower:
        """Remove and return the borrower at the back."""
        if not self._items:
            raise EmptyQueueError()
        return self._items.pop()

    def remove(self, name: str, book_title: str) -> Borrower:
        """Remove and return this borrower's entry for this book."""
        if not self._items:
            raise EmptyQueueError()
        for index, borrower in enumerate(self._items):
            if borrower.name == name and borrower.book_title == book_title:
                return self._items.pop(index)
        raise BorrowerNotFoundError(name, book_title)

    def find(self, name: str, book_title: str) -> Borrower | None:
        """Return this borrower's entry for this book, or None."""
        return next(
            (
                b
                for b in self._items
                if b.name == name and b.book_title == book_title
            ),
            None,
        )

    def next_for(self, book_title: str) -> Borrower | None:
        """Return the first waiting borrower for this book, or None."""
        return next(
            (
                b
                for b in self._items
                if b.book_title == book_title and not b.borrowing
            ),
            None,
        )

    def render(self) -> str:
        """Return the table of all borrowers as text."""
        if not self._items:
            return "List peminjam kosong.\n"
        rule = "-------------------------------------------------------------------------------"
        lines = [
            "",
            "===== DAFTAR PEMINJAM =====",
            f"{'No.':<5} {'Nama':<20} {'Tipe':<15} {'Judul Buku':<30} {'Status':<15}",
            rule,
        ]
        lines.extend(
            f"{number:<5} {b.name:<20} {b.kind.label():<15} "
            f"{b.book_title:<30} {b.status:<15}"
            for number, b in enumerate(self._items, start=1)
        )
        lines.append(rule)
        return "\n".join(lines) + "\n"

    def render_for_book(self, book_title: str) -> str:
        """Return the table and queue picture for one book as text."""
        if not self._items:
            return "List peminjam kosong.\n"
        rule = "-----------------------------------------------------"
        matching = [b for b in self._items if b.book_title == book_title]
        lines = [
            "",
            f'===== DAFTAR PEMINJAM BUKU "{book_title}" =====',
            f"{'No.':<5} {'Nama':<20} {'Tipe':<15} {'Status':<15}",
            rule,
        ]
        lines.extend(
            f"{number:<5} {b.name:<20} {b.kind.label():<15} {b.status:<15}"
            for number, b in enumerate(matching, start=1)
        )
        if not matching:
            lines.append(f'Tidak ada peminjam untuk buku "{book_title}".')
        lines.append(rule)
        if matching:
            chain = "".join(f"<- [{b.name} ({b.kind.label()})] " for b in matching)
            lines.extend(
                [
                    "",
                    "===== VISUALISASI ANTRIAN PRIORITAS =====",
                    f"[HEAD] {chain}<- [TAIL]",
                    "------------------------------------------",
                ]
            )
        return "\n".join(lines) + "\n"


class ActivityHistory:
    """Stack of recorded activities, newest on top."""

    def __init__(self) -> None:
        self._entries: list[Activity] = []

    def __iter__(self) -> Iterator[Activity]:
        """Iterate from the newest activity to the oldest."""
        return reversed(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, name: str, book_title: str) -> Activity:
        """Record an activity and return it."""
        activity = Activity(name, book_title)
        self._entries.append(activity)
        return activity

    def pop(self) -> Activity:
        """Remove and return the newest activity."""
        if not self._entries:
            raise EmptyQueueError(
                "Stack riwayat kosong, tidak ada yang dapat dihapus."
            )
        return self._entries.pop()

    def render(self) -> str:
        """Return the history table as text, newest first."""
        if not self._entries:
            return "Stack riwayat kosong.\n"
        rule = "--------------------------------------------------"
        lines = [
            "",
            "===== RIWAYAT AKTIVITAS =====",
            f"{'No.':<5} {'Nama':<20} {'Judul Buku':<30}",
            rule,
        ]
        lines.extend(
            f"{number:<5} {a.name:<20} {a.book_title:<30}"
            for number, a in enumerate(self, start=1)
        )
        lines.append(rule)
        return "\n".join(lines) + "\n"
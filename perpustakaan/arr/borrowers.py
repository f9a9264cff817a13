"""Bounded priority queue of borrowers waiting for one book."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

MAX_NAME = 50
MAX_BORROWERS = 100


class Level(IntEnum):
    """Borrower level; a higher value is served first."""

    UMUM = 0
    MAHASISWA = 1
    DOSEN = 2

    def label(self) -> str:
        """Human-readable name of the level."""
        return _LABELS[self]


_LABELS = {
    Level.DOSEN: "Dosen",
    Level.MAHASISWA: "Mahasiswa",
    Level.UMUM: "Masyarakat Umum",
}


class QueueFullError(Exception):
    """Raised when the queue already holds its maximum number of borrowers."""

    def __init__(self) -> None:
        super().__init__(
            "Antrian peminjam penuh, tidak dapat menambahkan peminjam baru."
        )


class QueueEmptyError(LookupError):
    """Raised when a borrower is requested from an empty queue."""

    def __init__(self) -> None:
        super().__init__("Antrian peminjam kosong.")


@dataclass(frozen=True)
class Borrower:
    """Someone waiting to borrow a book."""

    name: str
    level: Level


class BorrowerQueue:
    """Borrowers ordered by level, first come first served within a level."""

    def __init__(self, capacity: int = MAX_BORROWERS) -> None:
        self.capacity = capacity
        self._items: list[Borrower] = []

    def __iter__(self) -> Iterator[Borrower]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        """True when no more borrowers fit."""
        return len(self._items) >= self.capacity

    def add(self, name: str, level: Level) -> Borrower:
        """Queue a borrower behind everyone of the same or higher level."""
        if self.is_full():
            raise QueueFullError()
        borrower = Borrower(name[: MAX_NAME - 1], Level(level))
        position = len(self._items)
        while position > 0 and self._items[position - 1].level < borrower.level:
            position -= 1
        self._items.insert(position, borrower)
        return borrower

    def peek_highest(self) -> Borrower:
        """Return the borrower at the front without removing them."""
        if not self._items:
            raise QueueEmptyError()
        return self._items[0]

    def pop_highest(self) -> Borrower:
        """Remove and return the borrower at the front."""
        if not self._items:
            raise QueueEmptyError()
        return self._items.pop(0)

    def remove(self, name: str) -> Borrower:
        """Remove and return the first borrower with this name."""
        for index, borrower in enumerate(self._items):
            if borrower.name == name:
                return self._items.pop(index)
        raise KeyError(name)

    def render(self) -> str:
        """Return the queue table as text."""
        if not self._items:
            return "Antrian peminjam kosong.\n"
        lines = [
            "",
            "===== ANTRIAN PEMINJAM =====",
            f"| {'No':<5} | {'Nama':<20} | {'Level':<15} |",
            "|-------|----------------------|---------------|",
        ]
        lines.extend(
            f"| {number:<5} | {borrower.name:<20} | {borrower.level.label():<15} |"
            for number, borrower in enumerate(self._items, start=1)
        )
        lines.append("===========================")
        return "\n".join(lines) + "\n"
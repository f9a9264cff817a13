"""Loan requests queued by member priority, with an undo history."""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, replace
from typing import Iterator

from perpustakaan.sll.books import BookList, BookNotFoundError, OutOfStockError
from perpustakaan.sll.members import Priority

MAX_HISTORY = 100
_RULE = "=" * 64


class LoanError(Exception):
    """Raised when a loan operation cannot be carried out."""


class HistoryFullError(LoanError):
    """Raised when the loan history cannot hold another entry."""

    def __init__(self) -> None:
        super().__init__("Stack peminjaman penuh, tidak bisa menyimpan history")


class HistoryEmptyError(LoanError):
    """Raised when the loan history holds nothing to take back."""

    def __init__(self, message: str = "Stack peminjaman kosong, tidak ada history") -> None:
        super().__init__(message)


@dataclass
class Loan:
    """A member's request for a book, either waiting or currently lent."""

    book_title: str
    member_name: str
    priority: Priority
    borrowed: bool = False

    @property
    def status(self) -> str:
        return "Dipinjam" if self.borrowed else "Antri"


class LoanHistory:
    """Bounded stack of loan requests as they were made, newest on top."""

    def __init__(self, capacity: int = MAX_HISTORY) -> None:
        self.capacity = capacity
        self._entries: list[Loan] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Loan]:
        """Iterate from the oldest entry to the newest."""
        return iter(self._entries)

    def is_full(self) -> bool:
        """True when no more entries fit."""
        return len(self._entries) >= self.capacity

    def push(self, loan: Loan) -> None:
        """Record a snapshot of a loan request."""
        if self.is_full():
            raise HistoryFullError()
        self._entries.append(replace(loan))

    def pop(self) -> Loan:
        """Remove and return the newest entry."""
        if not self._entries:
            raise HistoryEmptyError()
        return self._entries.pop()

    def remove_latest_for(self, member_name: str) -> Loan:
        """Remove and return the newest entry made by this member."""
        if not self._entries:
            raise HistoryEmptyError("Tidak ada peminjaman yang dapat dibatalkan")
        for index in reversed(range(len(self._entries))):
            if self._entries[index].member_name == member_name:
                return self._entries.pop(index)
        raise LoanError(f"Tidak ada peminjaman terakhir dari anggota '{member_name}'")


class LoanList:
    """Loan requests for all books, kept in priority-driven order."""

    def __init__(self) -> None:
        self._loans: list[Loan] = []

    def __iter__(self) -> Iterator[Loan]:
        return iter(self._loans)

    def __len__(self) -> int:
        return len(self._loans)

    def find(self, book_title: str, member_name: str) -> Loan | None:
        """Return the request of this member for this book, or None."""
        return next(
            (
                loan
                for loan in self._loans
                if loan.book_title == book_title and loan.member_name == member_name
            ),
            None,
        )

    def find_active(self, book_title: str) -> Loan | None:
        """Return the loan currently holding this book, or None."""
        return next(
            (
                loan
                for loan in self._loans
                if loan.book_title == book_title and loan.borrowed
            ),
            None,
        )

    def add(
        self,
        book_title: str,
        member_name: str,
        priority: Priority,
        books: BookList,
        history: LoanHistory,
    ) -> Loan:
        """Queue a request for a book and record it in the history.

        A full history does not stop the request from being queued.
        """
        if books.find(book_title) is None:
            raise LoanError(f"Buku '{book_title}' tidak tersedia di perpustakaan")
        if self.find(book_title, member_name) is not None:
            raise LoanError(
                f"Anggota '{member_name}' sudah dalam antrian peminjaman buku '{book_title}'"
            )
        loan = Loan(book_title, member_name, Priority(priority))
        with suppress(HistoryFullError):
            history.push(loan)

        if not self._loans or loan.priority > self._loans[0].priority:
            self._loans.insert(0, loan)
            return loan

        position = 0
        while position < len(self._loans) and loan.priority <= self._loans[position].priority:
            current = self._loans[position]
            if current.book_title != book_title or current.priority == loan.priority:
                position += 1
            else:
                break
        self._loans.insert(position, loan)
        return loan

    def remove(self, book_title: str, member_name: str) -> Loan:
        """Remove and return the request of this member for this book."""
        if not self._loans:
            raise LoanError("List peminjaman kosong")
        for index, loan in enumerate(self._loans):
            if loan.book_title == book_title and loan.member_name == member_name:
                return self._loans.pop(index)
        raise LoanError(
            f"Peminjaman buku '{book_title}' oleh '{member_name}' tidak ditemukan"
        )

    def cancel_latest(self, member_name: str, history: LoanHistory) -> Loan:
        """Take back the member's most recent request and return its record."""
        latest = history.remove_latest_for(member_name)
        with suppress(LoanError):
            self.remove(latest.book_title, latest.member_name)
        return latest

    def process(self, book_title: str, books: BookList) -> Loan:
        """Lend the book to the highest-priority waiting member."""
        book = books.find(book_title)
        if book is None:
            raise LoanError(f"Buku '{book_title}' tidak tersedia di perpustakaan")
        if book.stock <= 0:
            raise OutOfStockError(book_title)
        active = self.find_active(book_title)
        if active is not None:
            raise LoanError(
                f"Buku '{book_title}' sedang dipinjam oleh '{active.member_name}'"
            )

        chosen: Loan | None = None
        for loan in self._loans:
            if (
                loan.book_title == book_title
                and not loan.borrowed
                and (chosen is None or loan.priority > chosen.priority)
            ):
                chosen = loan
        if chosen is None:
            raise LoanError(f"Tidak ada antrian peminjaman untuk buku '{book_title}'")

        chosen.borrowed = True
        books.decrease_stock(book_title)
        return chosen

    def return_book(
        self, book_title: str, member_name: str, books: BookList
    ) -> tuple[Loan, Loan | None]:
        """Take a book back and lend it to the next in line.

        Returns the finished loan and the new loan, or None if nobody got it.
        """
        loan = self.find(book_title, member_name)
        if loan is None or not loan.borrowed:
            raise LoanError(
                f"Buku '{book_title}' tidak sedang dipinjam oleh '{member_name}'"
            )
        loan.borrowed = False
        with suppress(BookNotFoundError):
            books.increase_stock(book_title)
        self.remove(book_title, member_name)

        try:
            following = self.process(book_title, books)
        except (LoanError, OutOfStockError):
            following = None
        return loan, following

    def clear(self) -> None:
        """Drop every request."""
        self._loans.clear()

    def render(self) -> str:
        """Return the table of all requests as text."""
        if not self._loans:
            return "List peminjaman kosong\n"
        lines = [
            "",
            _RULE,
            "|                     DAFTAR PEMINJAMAN                         |",
            _RULE,
            "| No |    Judul Buku   |   Nama Anggota  | Prioritas |  Status  |",
            "-" * 64,
        ]
        lines.extend(
            f"| {number:<2} | {loan.book_title:<15} | {loan.member_name:<15} "
            f"| {loan.priority.label():<9} | {loan.status:<8} |"
            for number, loan in enumerate(self._loans, start=1)
        )
        lines.append(_RULE)
        return "\n".join(lines) + "\n\n"

    def render_queue(self, book_title: str) -> str:
        """Return the table of requests for one book as text."""
        if not self._loans:
            return "List peminjaman kosong\n"
        lines = [
            "",
            _RULE,
            f"|             DAFTAR ANTRIAN PEMINJAMAN BUKU '{book_title}'               |",
            _RULE,
            "| No |   Nama Anggota  | Prioritas |  Status  |",
            "-" * 64,
        ]
        matching = [loan for loan in self._loans if loan.book_title == book_title]
        lines.extend(
            f"| {number:<2} | {loan.member_name:<15} | {loan.priority.label():<9} "
            f"| {loan.status:<8} |"
            for number, loan in enumerate(matching, start=1)
        )
        if not matching:
            lines.append(
                "|            Tidak ada antrian untuk buku ini                  |"
            )
        lines.append(_RULE)
        return "\n".join(lines) + "\n\n"
"""Interactive console for the library whose books each keep a borrower queue."""

from __future__ import annotations

import re
import sys
from typing import Callable, TextIO

from perpustakaan.arr.books import (
    Book,
    BookCatalog,
    CatalogFullError,
    DuplicateBookError,
)
from perpustakaan.arr.borrowers import Level

_WELCOME = "Selamat datang di Sistem Perpustakaan Perguruan Tinggi\n"

_MAIN_MENU = (
    "\n========================================\n"
    "   SISTEM PERPUSTAKAAN PERGURUAN TINGGI\n"
    "========================================\n"
    "1. Tambah Buku\n"
    "2. Tambah Peminjam ke Buku\n"
    "3. Proses Peminjaman Buku\n"
    "4. Pengembalian Buku\n"
    "5. Batalkan Permintaan Peminjaman\n"
    "6. Tampilkan Daftar Buku dan Antrian\n"
    "7. Jalankan Skenario Pengujian\n"
    "0. Keluar\n"
    "----------------------------------------\n"
    "Pilihan Anda: "
)

_QUEUE_FULL = "Antrian peminjam penuh, tidak dapat menambahkan peminjam baru.\n"

_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _level_label(level: object) -> str:
    return Level(level).label()


class LibraryConsole:
    """Text menu over a book catalogue with per-book priority queues."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.catalog = BookCatalog()

    # ----------------------------------------------------------------- I/O

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _next_nonblank(self) -> str:
        while True:
            line = self._in.readline()
            if not line:
                raise EOFError
            if line.strip():
                return line.split("\n", 1)[0]

    def _read_text(self, prompt: str) -> str:
        self._write(prompt)
        return self._next_nonblank().lstrip()

    def _read_int(self, prompt: str) -> int | None:
        self._write(prompt)
        match = _INTEGER.match(self._next_nonblank())
        return int(match.group(1)) if match else None

    # ---------------------------------------------------------- operations

    def _add_to_catalog(self, title: str, stock: int) -> bool:
        try:
            self.catalog.add(title, stock)
        except (CatalogFullError, DuplicateBookError) as error:
            self._write(f"{error}\n")
            return False
        self._write(f'Buku "{title}" berhasil ditambahkan dengan stok {stock}.\n')
        return True

    def _enqueue(self, book: Book, name: str, level: Level) -> bool:
        if book.queue.is_full():
            self._write(_QUEUE_FULL)
            return False
        book.queue.add(name, level)
        return True

    def _lend(self, book: Book) -> bool:
        if not len(book.queue):
            return False
        borrower = book.queue.pop_highest()
        book.take()
        self._write(
            f"[BERHASIL] {borrower.name} ({_level_label(borrower.level)}) meminjam buku\n"
        )
        return True

    def _announce_next(self, book: Book) -> None:
        if len(book.queue):
            borrower = book.queue.peek_highest()
            self._write(
                f"Peminjam berikutnya: {borrower.name} ({_level_label(borrower.level)})\n"
            )

    def _withdraw(self, book: Book, name: str) -> bool:
        if not any(borrower.name == name for borrower in book.queue):
            return False
        book.queue.remove(name)
        return True

    def _pick_book(self) -> Book | None:
        """Show the catalogue and ask for a title; None if nothing was chosen."""
        self._write(self.catalog.render())
        if not len(self.catalog):
            return None
        title = self._read_text("Masukkan judul buku: ")
        book = self.catalog.find(title)
        if book is None:
            self._write("Buku tidak ditemukan!\n")
        return book

    # --------------------------------------------------------------- menus

    def run(self) -> None:
        """Show the menu until the user chooses to leave or input ends."""
        self._write(_WELCOME)
        try:
            while True:
                if not self.handle(self._read_int(_MAIN_MENU)):
                    return
        except EOFError:
            return

    def handle(self, choice: int | None) -> bool:
        """Carry out one menu choice; False means the user wants to leave."""
        actions: dict[int, Callable[[], None]] = {
            1: self.add_book,
            2: self.add_borrower,
            3: self.process_loan,
            4: self.return_book,
            5: self.cancel_request,
            6: self.show_all,
            7: self.run_scenario,
        }
        if choice == 0:
            self._write("\nTerima kasih telah menggunakan sistem!\n")
            return False
        action = actions.get(choice) if choice is not None else None
        if action is None:
            self._write("\nPilihan tidak valid!\n")
        else:
            action()
        return True

    def add_book(self) -> None:
        """Ask for a title and stock and add the book."""
        self._write("\n=== TAMBAH BUKU BARU ===\n")
        title = self._read_text("Masukkan judul buku: ")
        stock = self._read_int("Masukkan stok awal: ")
        if stock is None or stock < 1:
            self._write("Error: Stok minimal 1\n")
            return
        if self._add_to_catalog(title, stock):
            self._write("Buku berhasil ditambahkan!\n")
            self._write(self.catalog.render())

    def add_borrower(self) -> None:
        """Queue a borrower of a chosen level for a book."""
        self._write("\n=== TAMBAH PEMINJAM ===\n")
        book = self._pick_book()
        if book is None:
            return
        name = self._read_text("Nama peminjam: ")
        choice = self._read_int("Level (0=Umum, 1=Mahasiswa, 2=Dosen): ")
        if choice in (0, 1, 2):
            level = Level(choice)
        else:
            self._write("Input invalid! Default ke Umum\n")
            level = Level(0)
        if self._enqueue(book, name, level):
            self._write("Peminjam berhasil ditambahkan!\n")
            self._write(book.queue.render())

    def process_loan(self) -> None:
        """Lend a book to the highest-priority borrower waiting for it."""
        self._write("\n=== PROSES PEMINJAMAN ===\n")
        book = self._pick_book()
        if book is None:
            return
        if book.stock < 1:
            self._write("Stok buku habis!\n")
            return
        if self._lend(book):
            self._write(f"Stok tersisa: {book.stock}\n")
        else:
            self._write("Tidak ada antrian peminjam!\n")

    def return_book(self) -> None:
        """Put a copy back and name who is next in line."""
        self._write("\n=== PENGEMBALIAN BUKU ===\n")
        book = self._pick_book()
        if book is None:
            return
        book.give_back()
        self._write(f"Stok diperbarui: {book.stock}\n")
        self._announce_next(book)

    def cancel_request(self) -> None:
        """Remove a borrower from a book's queue."""
        self._write("\n=== PEMBATALAN PEMINJAMAN ===\n")
        book = self._pick_book()
        if book is None:
            return
        name = self._read_text("Masukkan nama peminjam: ")
        if self._withdraw(book, name):
            self._write("Pembatalan berhasil!\n")
            self._write(book.queue.render())
        else:
            self._write("Peminjam tidak ditemukan!\n")

    def show_all(self) -> None:
        """Print every book followed by every queue."""
        self._write("\n=== DATA PERPUSTAKAAN ===\n")
        self._write(self.catalog.render())
        for book in self.catalog:
            self._write(f"\nAntrian untuk {book.title}:\n")
            self._write(book.queue.render())

    def run_scenario(self) -> None:
        """Reset the data and play the fixed test scenario of the case study."""
        self._write("\n=== MENJALANKAN SKENARIO PENGUJIAN ===\n")
        self.catalog.clear()

        self._write("\na) Tambah Buku1 dan Buku2\n")
        self._add_to_catalog("Buku1", 1)
        self._add_to_catalog("Buku2", 1)
        self._write(self.catalog.render())

        first = self.catalog.find("Buku1")
        second = self.catalog.find("Buku2")
        if first is None or second is None:
            self._write("\n=== SKENARIO SELESAI ===\n")
            return

        self._write("\nb) Tambah Anggota1 (Mahasiswa) ke Buku1\n")
        self._enqueue(first, "Anggota1", Level(1))
        self._write("Antrian Buku1:\n")
        self._write(first.queue.render())

        self._write("\nc) Tambah Dosen1 ke Buku1\n")
        self._enqueue(first, "Dosen1", Level(2))
        self._write("Antrian Buku1 (Dosen1 harus di depan):\n")
        self._write(first.queue.render())

        self._write("\nd) Tambah Umum1 ke Buku1\n")
        self._enqueue(first, "Umum1", Level(0))
        self._write("Antrian Buku1 (Urutan: Dosen1 > Anggota1 > Umum1):\n")
        self._write(first.queue.render())

        self._write("\ne) Tambah Umum1 ke Buku2\n")
        self._enqueue(second, "Umum1", Level(0))
        self._write("Antrian Buku2:\n")
        self._write(second.queue.render())

        self._write("\nf) Proses peminjaman Buku1\n")
        if self._lend(first):
            self._write(f"Stok Buku1: {first.stock}\n")
        self._write("Antrian Buku1 setelah peminjaman:\n")
        self._write(first.queue.render())

        self._write("\ng) Pengembalian Buku1\n")
        first.give_back()
        self._write(f"Stok Buku1: {first.stock}\n")
        self._announce_next(first)

        self._write("\nh) Batalkan peminjaman Umum1 di Buku2\n")
        self._withdraw(second, "Umum1")
        self._write("Antrian Buku2 setelah pembatalan:\n")
        self._write(second.queue.render())

        self._write("\n=== SKENARIO SELESAI ===\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive console on standard input and output."""
    LibraryConsole(sys.stdin, sys.stdout).run()
    return 0
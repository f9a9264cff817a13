"""Interactive console for the library with a category-ordered borrower queue."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from typing import Callable, TextIO

from perpustakaan.dll.books import BookList, BookNotFoundError
from perpustakaan.dll.borrowers import (
    ActivityHistory,
    BorrowerNotFoundError,
    BorrowerQueue,
    BorrowerType,
    DuplicateBorrowerError,
    EmptyQueueError,
)

_MAIN_MENU = (
    "===========================================\n"
    "|        PERPUSTAKAAN POLBAN JTK          |\n"
    "===========================================\n"
    "| 1. Manajemen Buku                       |\n"
    "| 2. Manajemen Anggota                    |\n"
    "| 3. Manajemen Peminjaman                 |\n"
    "| 4. Jalankan Skenario Pengujian          |\n"
    "| 0. Keluar                               |\n"
    "===========================================\n"
    "Pilihan: "
)

_BOOK_MENU = (
    "==== Manajemen Buku ====\n"
    "1. Tambah Buku\n"
    "2. Tampilkan Daftar Buku\n"
    "0. Kembali\n"
    "Pilihan: "
)

_MEMBER_MENU = (
    "==== Manajemen Anggota ====\n"
    "1. Tambah Anggota ke Buku\n"
    "2. Tampilkan Antrian Peminjam Buku\n"
    "0. Kembali\n"
    "Pilihan: "
)

_LOAN_MENU = (
    "==== Manajemen Peminjaman ====\n"
    "1. Proses Peminjaman Buku\n"
    "2. Pengembalian Buku\n"
    "3. Pembatalan Peminjaman\n"
    "0. Kembali\n"
    "Pilihan: "
)

_INVALID_CHOICE = "Pilihan tidak valid. Silakan coba lagi."

_TYPE_CHOICES = {
    1: BorrowerType.MAHASISWA,
    2: BorrowerType.DOSEN,
    3: BorrowerType.MASYARAKAT_UMUM,
}

_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _clear_terminal() -> None:
    command = "cls" if os.name == "nt" else "clear"
    subprocess.run(command, shell=True, check=False)


class LibraryConsole:
    """Text menus over books, the borrower queue and the activity history."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear_screen: Callable[[], None] | None = None,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._clear = clear_screen if clear_screen is not None else _clear_terminal
        self.books = BookList()
        self.borrowers = BorrowerQueue()
        self.history = ActivityHistory()

    # ----------------------------------------------------------------- I/O

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _say(self, line: str = "") -> None:
        self._out.write(line + "\n")

    def _read_line(self, prompt: str) -> str:
        self._write(prompt)
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.split("\n", 1)[0]

    def _read_int(self, prompt: str) -> int | None:
        match = _INTEGER.match(self._read_line(prompt))
        return int(match.group(1)) if match else None

    def _pause(self) -> None:
        self._write("\nTekan Enter untuk melanjutkan...")
        self._in.readline()

    # ---------------------------------------------------------- operations

    def _insert_book(self, title: str, stock: int) -> None:
        self.books.add_last(title, stock)
        self._say(f'Buku "{title}" berhasil ditambahkan dengan stok {stock}.')

    def _update_available(self, title: str, delta: int) -> None:
        try:
            book = self.books.update_available(title, delta)
        except BookNotFoundError as error:
            self._say(str(error))
        else:
            self._say(
                f'Stok buku "{title}" berhasil diupdate. '
                f"Stok tersedia sekarang: {book.available}"
            )

    def _enqueue(self, name: str, kind: BorrowerType, title: str) -> None:
        try:
            borrower = self.borrowers.add(name, kind, title)
        except DuplicateBorrowerError as error:
            self._say(str(error))
        else:
            self._say(
                f"{name} ({borrower.kind.label()}) berhasil ditambahkan ke antrian "
                f'peminjaman buku "{title}".'
            )

    def _record(self, name: str, title: str) -> None:
        self.history.push(name, title)
        self._say(f'Aktivitas {name} untuk buku "{title}" berhasil dicatat dalam riwayat.')

    def _dequeue(self, name: str, title: str) -> None:
        try:
            self.borrowers.remove(name, title)
        except (EmptyQueueError, BorrowerNotFoundError) as error:
            self._say(str(error))
        else:
            self._say(f'{name} dihapus dari antrian peminjaman buku "{title}".')

    # --------------------------------------------------------------- menus

    def run(self) -> None:
        """Show the main menu until the user chooses to leave or input ends."""
        try:
            while True:
                self._clear()
                choice = self._read_int(_MAIN_MENU)
                if choice == 0:
                    self._say("Terima kasih telah menggunakan sistem perpustakaan!")
                    return
                if choice == 1:
                    self.book_menu()
                elif choice == 2:
                    self.member_menu()
                elif choice == 3:
                    self.loan_menu()
                elif choice == 4:
                    self.run_scenario()
                    self._pause()
                else:
                    self._say(_INVALID_CHOICE)
                    self._pause()
        except EOFError:
            return

    def _submenu(self, text: str, actions: dict[int, Callable[[], None]]) -> None:
        while True:
            self._clear()
            choice = self._read_int(text)
            if choice == 0:
                return
            action = actions.get(choice) if choice is not None else None
            if action is None:
                self._say(_INVALID_CHOICE)
            else:
                action()
            self._pause()

    def book_menu(self) -> None:
        """Add and list books."""
        self._submenu(_BOOK_MENU, {1: self.add_book, 2: self.show_books})

    def add_book(self) -> None:
        """Ask for a title and stock and add the book if it is new."""
        title = self._read_line("Masukkan judul buku: ")
        stock = self._read_int("Masukkan jumlah stok: ")
        if stock is None:
            self._say("Input tidak valid.")
            return
        if self.books.find(title) is not None:
            self._say(f'Buku dengan judul "{title}" sudah ada dalam daftar.')
            return
        self._insert_book(title, stock)
        self.visualize()

    def show_books(self) -> None:
        """Print the book table."""
        self._write(self.books.render())
        self.visualize()

    def member_menu(self) -> None:
        """Queue members for books and show the queues."""
        self._submenu(
            _MEMBER_MENU, {1: self.add_member_to_book, 2: self.show_queue}
        )

    def add_member_to_book(self) -> None:
        """Queue a member of a chosen category for a book."""
        name = self._read_line("Masukkan nama anggota: ")
        title = self._read_line("Masukkan judul buku yang ingin dipinjam: ")
        if self.books.find(title) is None:
            self._say(f'Buku dengan judul "{title}" tidak ditemukan.')
            return
        choice = self._read_int(
            "Pilih tipe anggota:\n1. Mahasiswa\n2. Dosen\n3. Masyarakat Umum\nPilihan: "
        )
        kind = _TYPE_CHOICES.get(choice) if choice is not None else None
        if kind is None:
            self._say("Tipe anggota tidak valid.")
            return
        self._enqueue(name, kind, title)
        self._record(name, title)
        self.visualize()

    def show_queue(self) -> None:
        """Print the borrowers waiting for one book."""
        title = self._read_line("Masukkan judul buku: ")
        if self.books.find(title) is None:
            self._say(f'Buku dengan judul "{title}" tidak ditemukan.')
            return
        self._write(self.borrowers.render_for_book(title))
        self.visualize()

    def loan_menu(self) -> None:
        """Lend, take back and cancel."""
        self._submenu(
            _LOAN_MENU,
            {1: self.process_loan, 2: self.return_book, 3: self.cancel_loan},
        )

    def process_loan(self) -> None:
        """Lend a book to the first waiting borrower."""
        title = self._read_line("Masukkan judul buku yang akan diproses peminjaman: ")
        book = self.books.find(title)
        if book is None:
            self._say(f'Buku dengan judul "{title}" tidak ditemukan.')
            return
        if book.available <= 0:
            self._say(f'Buku "{title}" tidak tersedia stoknya saat ini.')
            return
        borrower = self.borrowers.next_for(title)
        if borrower is None:
            self._say(f'Tidak ada peminjam yang menunggu untuk buku "{title}".')
            return
        borrower.borrowing = True
        self._update_available(title, -1)
        self._say(
            f'\nPeminjaman buku "{title}" oleh {borrower.name} '
            f"({borrower.kind.label()}) berhasil diproses."
        )
        self.visualize()

    def return_book(self) -> None:
        """Take a book back from the borrower holding it."""
        title = self._read_line("Masukkan judul buku yang dikembalikan: ")
        name = self._read_line("Masukkan nama peminjam yang mengembalikan: ")
        book = self.books.find(title)
        borrower = self.borrowers.find(name, title)
        if book is None or borrower is None or not borrower.borrowing:
            self._say(
                "[ERROR] Data tidak valid atau peminjam tidak sedang meminjam buku ini."
            )
            return
        self._update_available(title, 1)
        self._dequeue(name, title)
        self._say(f'Pengembalian buku "{title}" oleh {name} berhasil.')
        following = self.borrowers.next_for(title)
        if following is not None:
            self._say(
                f"Peminjam berikutnya: {following.name} ({following.kind.label()})"
            )
        self._record(name, title)
        self.visualize()

    def cancel_loan(self) -> None:
        """Undo the most recent recorded activity."""
        if not len(self.history):
            self._say("[INFO] Tidak ada aktivitas yang dapat dibatalkan.")
            return
        activity = self.history.pop()
        self._say(
            f'Riwayat aktivitas {activity.name} untuk buku "{activity.book_title}" dihapus.'
        )
        if self.borrowers.find(activity.name, activity.book_title) is not None:
            self._dequeue(activity.name, activity.book_title)
            self._say(
                f'Pembatalan peminjaman "{activity.book_title}" oleh '
                f"{activity.name} berhasil."
            )
        else:
            self._say(f"Peminjam {activity.name} tidak ditemukan dalam antrian.")
        self.visualize()

    def run_scenario(self) -> None:
        """Play the fixed test scenario of the case study."""
        self._clear()
        self._write("===== SKENARIO PENGUJIAN =====\n\n")

        self._say('a) Insert elemen "Buku1" dan "Buku2" (stok 1):')
        self._insert_book("Buku1", 1)
        self._insert_book("Buku2", 1)
        self._write(self.books.render())
        self.visualize()
        self._say()

        steps = [
            ('b) Insert elemen "Anggota1" (Mahasiswa) ke peminjaman "Buku1":',
             "Anggota1", BorrowerType.MAHASISWA, "Buku1"),
            ('c) Insert elemen "Dosen1" (Dosen) ke peminjaman "Buku1":',
             "Dosen1", BorrowerType.DOSEN, "Buku1"),
            ('d) Insert elemen "Umum1" (Umum) ke peminjaman "Buku1":',
             "Umum1", BorrowerType.MASYARAKAT_UMUM, "Buku1"),
            ('e) Insert elemen "Umum1" (Umum) ke peminjaman "Buku2":',
             "Umum1", BorrowerType.MASYARAKAT_UMUM, "Buku2"),
        ]
        for heading, name, kind, title in steps:
            self._say(heading)
            self._enqueue(name, kind, title)
            self._record(name, title)
            self._write(self.borrowers.render_for_book(title))
            self.visualize()
            self._say()

        self._say('f) Proses peminjaman "Buku1" (pastikan Dosen1 dipilih):')
        book = self.books.find("Buku1")
        if book is not None and book.available > 0:
            borrower = self.borrowers.next_for("Buku1")
            if borrower is not None:
                borrower.borrowing = True
                self._update_available("Buku1", -1)
                self._say(
                    f"Peminjaman berhasil oleh: {borrower.name} ({borrower.kind.label()})"
                )
        else:
            self._say("Buku1 tidak tersedia atau tidak ada peminjam.")
        self.visualize()
        self._say()

        self._say("g) Pengembalian Buku1 oleh Dosen1:")
        lecturer = self.borrowers.find("Dosen1", "Buku1")
        if lecturer is not None and lecturer.borrowing:
            self._dequeue("Dosen1", "Buku1")
            self._update_available("Buku1", 1)
            self._say("Pengembalian berhasil oleh: Dosen1")
            following = self.borrowers.next_for("Buku1")
            if following is not None:
                self._say(
                    f"Peminjam berikutnya: {following.name} ({following.kind.label()})"
                )
        self.visualize()
        self._say()

        self._say("h) Umum1 membatalkan peminjaman Buku2:")
        self._dequeue("Umum1", "Buku2")
        self.visualize()
        self._say()

    def visualize(self) -> None:
        """Print books, borrowers and the activity history."""
        self._write("\n=== VISUALISASI STRUCT ===\n")
        self._write(self.books.render())
        self._write(self.borrowers.render())
        self._write(self.history.render())


def main(argv: list[str] | None = None) -> int:
    """Start the interactive console on standard input and output."""
    LibraryConsole(sys.stdin, sys.stdout).run()
    return 0
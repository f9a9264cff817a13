"""Interactive console for the library with a priority loan queue."""

from __future__ import annotations

import re
import sys
from typing import Callable, TextIO

from perpustakaan.sll.books import BookList, BookNotFoundError, OutOfStockError
from perpustakaan.sll.loans import HistoryFullError, LoanError, LoanHistory, LoanList
from perpustakaan.sll.members import MemberList, MemberNotFoundError, Priority

_BANNER = (
    "===================================================\n"
    "|   SISTEM MANAJEMEN PERPUSTAKAAN POLBAN JTK      |\n"
    "===================================================\n"
)

_MAIN_MENU = (
    "\n===========================================\n"
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
    "\n===========================================\n"
    "|            MANAJEMEN BUKU              |\n"
    "===========================================\n"
    "| 1. Tambah Buku                         |\n"
    "| 2. Hapus Buku                          |\n"
    "| 3. Ubah Stok Buku                      |\n"
    "| 4. Tampilkan Daftar Buku               |\n"
    "| 0. Kembali                             |\n"
    "===========================================\n"
    "Pilihan: "
)

_MEMBER_MENU = (
    "\n===========================================\n"
    "|           MANAJEMEN ANGGOTA            |\n"
    "===========================================\n"
    "| 1. Tambah Anggota                      |\n"
    "| 2. Hapus Anggota                       |\n"
    "| 3. Tampilkan Daftar Anggota            |\n"
    "| 0. Kembali                             |\n"
    "===========================================\n"
    "Pilihan: "
)

_LOAN_MENU = (
    "\n===========================================\n"
    "|         MANAJEMEN PEMINJAMAN           |\n"
    "===========================================\n"
    "| 1. Tambah Antrian Peminjaman           |\n"
    "| 2. Proses Peminjaman                   |\n"
    "| 3. Proses Pengembalian                 |\n"
    "| 4. Batalkan Peminjaman                 |\n"
    "| 5. Tampilkan Daftar Peminjaman         |\n"
    "| 6. Tampilkan Antrian Peminjaman        |\n"
    "| 0. Kembali                             |\n"
    "===========================================\n"
    "Pilihan: "
)

_INTEGER = re.compile(r"\s*([+-]?\d+)")


class LibraryConsole:
    """Text menus over books, members and the loan queue."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.books = BookList()
        self.members = MemberList()
        self.loans = LoanList()
        self.history = LoanHistory()

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

    # ---------------------------------------------------------- operations

    def _add_book(self, title: str, stock: int) -> None:
        self.books.add(title, stock)
        self._say(f"Buku '{title}' dengan stok {stock} berhasil ditambahkan")

    def _remove_book(self, title: str) -> None:
        try:
            self.books.remove(title)
        except BookNotFoundError as error:
            self._say(str(error))
        else:
            self._say(f"Buku '{title}' berhasil dihapus")

    def _update_stock(self, title: str, stock: int) -> None:
        try:
            self.books.update_stock(title, stock)
        except BookNotFoundError as error:
            self._say(str(error))
        else:
            self._say(f"Stok buku '{title}' berhasil diubah menjadi {stock}")

    def _add_member(self, name: str, priority: Priority) -> None:
        member = self.members.add(name, priority)
        self._say(
            f"Anggota '{name}' dengan prioritas {member.priority.label()} berhasil ditambahkan"
        )

    def _remove_member(self, name: str) -> None:
        try:
            self.members.remove(name)
        except MemberNotFoundError as error:
            self._say(str(error))
        else:
            self._say(f"Anggota '{name}' berhasil dihapus")

    def _add_loan(self, title: str, name: str, priority: Priority) -> None:
        history_was_full = self.history.is_full()
        try:
            loan = self.loans.add(title, name, priority, self.books, self.history)
        except LoanError as error:
            self._say(str(error))
            return
        if history_was_full:
            self._say(str(HistoryFullError()))
        self._say(
            f"Peminjaman buku '{title}' oleh '{name}' ({loan.priority.label()}) "
            "berhasil ditambahkan ke antrian"
        )

    def _process(self, title: str) -> None:
        try:
            loan = self.loans.process(title, self.books)
        except OutOfStockError as error:
            self._say(f"Stok buku '{error.title}' habis")
            return
        except LoanError as error:
            self._say(str(error))
            return
        book = self.books.find(title)
        if book is not None:
            self._say(f"Stok buku '{title}' berkurang menjadi {book.stock}")
        self._say(
            f"Buku '{title}' berhasil dipinjam oleh '{loan.member_name}' "
            f"({loan.priority.label()})"
        )

    def _return(self, title: str, name: str) -> None:
        loan = self.loans.find(title, name)
        if loan is None or not loan.borrowed:
            self._say(f"Buku '{title}' tidak sedang dipinjam oleh '{name}'")
            return
        loan.borrowed = False
        try:
            book = self.books.increase_stock(title)
        except BookNotFoundError as error:
            self._say(str(error))
        else:
            self._say(f"Stok buku '{title}' bertambah menjadi {book.stock}")
        self.loans.remove(title, name)
        self._say(f"Peminjaman buku '{title}' oleh '{name}' berhasil dihapus")
        self._say(f"Buku '{title}' berhasil dikembalikan oleh '{name}'")
        self._say(f"Memeriksa antrian peminjaman untuk buku '{title}'...")
        self._process(title)

    def _cancel(self, name: str) -> None:
        try:
            latest = self.history.remove_latest_for(name)
        except LoanError as error:
            self._say(str(error))
            return
        try:
            self.loans.remove(latest.book_title, latest.member_name)
        except LoanError as error:
            self._say(str(error))
        else:
            self._say(
                f"Peminjaman buku '{latest.book_title}' oleh '{latest.member_name}' "
                "berhasil dihapus"
            )
        self._say(
            f"Pembatalan peminjaman buku '{latest.book_title}' oleh "
            f"'{latest.member_name}' berhasil"
        )

    # --------------------------------------------------------------- menus

    def run(self) -> None:
        """Show the main menu until the user chooses to leave or input ends."""
        self._write(_BANNER)
        actions: dict[int, Callable[[], None]] = {
            1: self.book_menu,
            2: self.member_menu,
            3: self.loan_menu,
            4: self.run_scenario,
        }
        try:
            while True:
                choice = self._read_int(_MAIN_MENU)
                if choice == 0:
                    self._say("Terima kasih. Program selesai.")
                    return
                action = actions.get(choice) if choice is not None else None
                if action is None:
                    self._say("Pilihan tidak valid!")
                else:
                    action()
        except EOFError:
            return

    def book_menu(self) -> None:
        """Add, remove, restock and list books."""
        while True:
            choice = self._read_int(_BOOK_MENU)
            if choice == 0:
                return
            if choice == 1:
                self._say("\nTambah Buku")
                title = self._read_line("Judul: ")
                stock = self._read_int("Stok: ")
                if stock is None:
                    self._say("Input tidak valid")
                else:
                    self._add_book(title, stock)
            elif choice == 2:
                self._say("\nHapus Buku")
                self._remove_book(self._read_line("Judul: "))
            elif choice == 3:
                self._say("\nUbah Stok Buku")
                title = self._read_line("Judul: ")
                stock = self._read_int("Stok Baru: ")
                if stock is None:
                    self._say("Input tidak valid")
                else:
                    self._update_stock(title, stock)
            elif choice == 4:
                self._write(self.books.render())
            else:
                self._say("Pilihan tidak valid")

    def member_menu(self) -> None:
        """Add, remove and list members."""
        while True:
            choice = self._read_int(_MEMBER_MENU)
            if choice == 0:
                return
            if choice == 1:
                self._say("\nTambah Anggota")
                name = self._read_line("Nama: ")
                level = self._read_int(
                    "Prioritas (1=Masyarakat Umum, 2=Mahasiswa, 3=Dosen): "
                )
                if level is not None and 1 <= level <= 3:
                    self._add_member(name, Priority(level))
                else:
                    self._say("Prioritas tidak valid")
            elif choice == 2:
                self._say("\nHapus Anggota")
                self._remove_member(self._read_line("Nama: "))
            elif choice == 3:
                self._write(self.members.render())
            else:
                self._say("Pilihan tidak valid")

    def loan_menu(self) -> None:
        """Queue, lend, return and cancel loans."""
        while True:
            choice = self._read_int(_LOAN_MENU)
            if choice == 0:
                return
            if choice == 1:
                self._say("\nTambah Antrian Peminjaman")
                title = self._read_line("Judul Buku: ")
                name = self._read_line("Nama Anggota: ")
                member = self.members.find(name)
                if member is None:
                    self._say(f"Anggota '{name}' tidak terdaftar")
                else:
                    self._add_loan(title, name, member.priority)
            elif choice == 2:
                self._say("\nProses Peminjaman")
                self._process(self._read_line("Judul Buku: "))
            elif choice == 3:
                self._say("\nProses Pengembalian")
                title = self._read_line("Judul Buku: ")
                name = self._read_line("Nama Anggota: ")
                self._return(title, name)
            elif choice == 4:
                self._say("\nBatalkan Peminjaman")
                self._cancel(self._read_line("Nama Anggota: "))
            elif choice == 5:
                self._write(self.loans.render())
            elif choice == 6:
                self._say("\nTampilkan Antrian Peminjaman")
                self._write(self.loans.render_queue(self._read_line("Judul Buku: ")))
            else:
                self._say("Pilihan tidak valid")

    def run_scenario(self) -> None:
        """Play the fixed test scenario of the case study."""
        self._write(
            "\n=================================================================\n"
            "|                    SKENARIO PENGUJIAN                          |\n"
            "=================================================================\n"
        )
        self._say(
            '\nSkenario a) 2 X insert elemen "Buku1" dan "Buku2" di list Buku '
            "dimana stok buku masing masing 1"
        )
        self._add_book("Buku1", 1)
        self._add_book("Buku2", 1)
        self._write(self.books.render())

        self._say(
            '\nSkenario b) 1 X insert elemen "Anggota1" sebagai mahasiswa di list '
            'peminjaman "Buku1"'
        )
        self._add_member("Anggota1", Priority.MAHASISWA)
        self._add_loan("Buku1", "Anggota1", Priority.MAHASISWA)

        self._say(
            '\nSkenario c) 1 X insert elemen "Dosen1" sebagai dosen di list '
            'peminjaman "Buku1"'
        )
        self._add_member("Dosen1", Priority.DOSEN)
        self._add_loan("Buku1", "Dosen1", Priority.DOSEN)

        self._say(
            '\nSkenario d) 1 X insert elemen "Umum1" sebagai masyarakat umum di list '
            'peminjaman "Buku1"'
        )
        self._add_member("Umum1", Priority.MASYARAKAT_UMUM)
        self._add_loan("Buku1", "Umum1", Priority.MASYARAKAT_UMUM)

        self._say(
            '\nSkenario e) 1 X insert elemen "Umum1" sebagai masyarakat umum di list '
            'peminjaman "Buku2"'
        )
        self._add_loan("Buku2", "Umum1", Priority.MASYARAKAT_UMUM)
        self._write(self.loans.render())

        self._say(
            '\nSkenario f) Proses peminjaman "Buku1". Pastikan "Dosen1" yang '
            "mendapatkan proses peminjaman."
        )
        self._process("Buku1")
        self._write(self.loans.render())

        self._say(
            '\nSkenario g) Proses pengembalian "Buku1" oleh "Dosen1". Pastikan potensi '
            'selanjutnya yang akan mendapatkan fasilitas peminjaman adalah "Anggota1" '
            'di list peminjaman "Buku1".'
        )
        self._return("Buku1", "Dosen1")
        self._write(self.loans.render())

        self._say(
            '\nSkenario h) Elemen "Umum1" melakukan pembatalan aktivitas peminjaman '
            "buku (berdasarkan aktivitas terakhir, pembatalan terjadi untuk list "
            'peminjaman "Buku2").'
        )
        self._cancel("Umum1")
        self._write(self.loans.render())

        self._write(
            "\n=================================================================\n"
            "                     SKENARIO PENGUJIAN SELESAI                    \n"
            "==================================================================\n\n"
        )


def main(argv: list[str] | None = None) -> int:
    """Start the interactive console on standard input and output."""
    LibraryConsole(sys.stdin, sys.stdout).run()
    return 0
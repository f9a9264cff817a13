import io

from perpustakaan.arr.borrowers import Level
from perpustakaan.arr.menu import LibraryConsole


def make_console(text: str = "") -> tuple[LibraryConsole, io.StringIO]:
    out = io.StringIO()
    return LibraryConsole(io.StringIO(text), out), out


def test_handle_zero_leaves():
    console, out = make_console()
    assert console.handle(0) is False
    assert "Terima kasih telah menggunakan sistem!" in out.getvalue()


def test_handle_invalid_choice_continues():
    console, out = make_console()
    assert console.handle(42) is True
    assert "Pilihan tidak valid!" in out.getvalue()


def test_run_stops_at_end_of_input():
    console, out = make_console("1\nBukuA\n3\n")
    console.run()
    text = out.getvalue()
    assert text.startswith("Selamat datang di Sistem Perpustakaan Perguruan Tinggi")
    assert console.catalog.find("BukuA").stock == 3


def test_run_exits_on_zero():
    console, out = make_console("0\n1\nIgnored\n1\n")
    console.run()
    assert len(console.catalog) == 0
    assert "Terima kasih telah menggunakan sistem!" in out.getvalue()


def test_add_book_rejects_low_stock():
    console, out = make_console("BukuA\n0\n")
    console.add_book()
    assert "Error: Stok minimal 1" in out.getvalue()
    assert len(console.catalog) == 0


def test_add_book_rejects_duplicate():
    console, out = make_console("BukuA\n2\nBukuA\n5\n")
    console.add_book()
    console.add_book()
    assert len(console.catalog) == 1
    assert console.catalog.find("BukuA").stock == 2
    assert 'Buku dengan judul "BukuA" sudah ada dalam daftar.' in out.getvalue()


def test_add_borrower_with_invalid_level_defaults_to_public():
    console, out = make_console("BukuA\nPeminjam\n9\n")
    console.catalog.add("BukuA", 1)
    console.add_borrower()
    book = console.catalog.find("BukuA")
    assert len(book.queue) == 1
    assert Level(book.queue.peek_highest().level) == Level(0)
    assert "Input invalid! Default ke Umum" in out.getvalue()


def test_add_borrower_unknown_book():
    console, out = make_console("Lain\n")
    console.catalog.add("BukuA", 1)
    console.add_borrower()
    assert "Buku tidak ditemukan!" in out.getvalue()
    assert len(console.catalog.find("BukuA").queue) == 0


def test_process_loan_serves_highest_level():
    console, out = make_console("BukuA\n")
    book = console.catalog.add("BukuA", 1)
    book.queue.add("Mhs", Level(1))
    book.queue.add("Dsn", Level(2))
    console.process_loan()
    assert "[BERHASIL] Dsn (Dosen) meminjam buku" in out.getvalue()
    assert book.stock == 0
    assert len(book.queue) == 1


def test_process_loan_without_queue():
    console, out = make_console("BukuA\n")
    book = console.catalog.add("BukuA", 1)
    console.process_loan()
    assert "Tidak ada antrian peminjam!" in out.getvalue()
    assert book.stock == 1


def test_process_loan_out_of_stock():
    console, out = make_console("BukuA\n")
    book = console.catalog.add("BukuA", 1)
    book.stock = 0
    book.queue.add("Mhs", Level(1))
    console.process_loan()
    assert "Stok buku habis!" in out.getvalue()
    assert len(book.queue) == 1


def test_return_book_names_next_borrower():
    console, out = make_console("BukuA\n")
    book = console.catalog.add("BukuA", 1)
    book.queue.add("Mhs", Level(1))
    console.return_book()
    assert book.stock == 2
    assert "Peminjam berikutnya: Mhs (Mahasiswa)" in out.getvalue()


def test_cancel_request_removes_borrower():
    console, out = make_console("BukuA\nMhs\nBukuA\nMhs\n")
    book = console.catalog.add("BukuA", 1)
    book.queue.add("Mhs", Level(1))
    console.cancel_request()
    assert len(book.queue) == 0
    assert "Pembatalan berhasil!" in out.getvalue()
    console.cancel_request()
    assert "Peminjam tidak ditemukan!" in out.getvalue()


def test_menus_do_nothing_on_empty_catalog():
    console, out = make_console("")
    console.process_loan()
    assert "Daftar buku kosong." in out.getvalue()
    assert len(console.catalog) == 0


def test_show_all_lists_each_queue():
    console, out = make_console()
    console.catalog.add("BukuA", 1)
    console.catalog.add("BukuB", 2)
    console.show_all()
    text = out.getvalue()
    assert "Antrian untuk BukuA:" in text
    assert text.index("Antrian untuk BukuA:") < text.index("Antrian untuk BukuB:")


def test_scenario_outcome():
    console, out = make_console()
    console.catalog.add("Lama", 4)
    console.run_scenario()
    text = out.getvalue()
    assert console.catalog.find("Lama") is None
    assert [book.title for book in console.catalog] == ["Buku1", "Buku2"]
    assert "[BERHASIL] Dosen1 (Dosen) meminjam buku" in text
    assert "Peminjam berikutnya: Anggota1 (Mahasiswa)" in text
    first = console.catalog.find("Buku1")
    assert first.stock == 1
    assert [b.name for b in first.queue] == ["Anggota1", "Umum1"]
    assert len(console.catalog.find("Buku2").queue) == 0
    assert text.rstrip().endswith("=== SKENARIO SELESAI ===")
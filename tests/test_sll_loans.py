import pytest

from perpustakaan.sll.books import BookList, OutOfStockError
from perpustakaan.sll.loans import (
    HistoryEmptyError,
    HistoryFullError,
    Loan,
    LoanError,
    LoanHistory,
    LoanList,
)
from perpustakaan.sll.members import Priority


@pytest.fixture
def books():
    catalogue = BookList()
    catalogue.add("Buku1", 1)
    catalogue.add("Buku2", 1)
    return catalogue


@pytest.fixture
def history():
    return LoanHistory()


@pytest.fixture
def scenario(books, history):
    loans = LoanList()
    loans.add("Buku1", "Anggota1", Priority.MAHASISWA, books, history)
    loans.add("Buku1", "Dosen1", Priority.DOSEN, books, history)
    loans.add("Buku1", "Umum1", Priority.MASYARAKAT_UMUM, books, history)
    loans.add("Buku2", "Umum1", Priority.MASYARAKAT_UMUM, books, history)
    return loans


def pairs(loans):
    return [(loan.member_name, loan.book_title) for loan in loans]


def test_add_unknown_book_raises(books, history):
    loans = LoanList()
    with pytest.raises(LoanError):
        loans.add("Missing", "Anggota1", Priority.MAHASISWA, books, history)
    assert len(loans) == 0
    assert len(history) == 0


def test_add_duplicate_raises_and_keeps_history(scenario, books, history):
    before = len(history)
    with pytest.raises(LoanError):
        scenario.add("Buku1", "Dosen1", Priority.DOSEN, books, history)
    assert len(history) == before
    assert len(scenario) == 4


def test_add_records_snapshot_in_history(books, history):
    loans = LoanList()
    loan = loans.add("Buku1", "Anggota1", Priority.MAHASISWA, books, history)
    loan.borrowed = True
    recorded = list(history)
    assert len(recorded) == 1
    assert recorded[0].member_name == "Anggota1"
    assert recorded[0].borrowed is False


def test_higher_priority_goes_to_front(books, history):
    loans = LoanList()
    loans.add("Buku1", "Anggota1", Priority.MAHASISWA, books, history)
    loans.add("Buku1", "Dosen1", Priority.DOSEN, books, history)
    assert next(iter(loans)).member_name == "Dosen1"


def test_scenario_contains_every_request(scenario):
    assert sorted(pairs(scenario)) == sorted(
        [
            ("Anggota1", "Buku1"),
            ("Dosen1", "Buku1"),
            ("Umum1", "Buku1"),
            ("Umum1", "Buku2"),
        ]
    )
    assert all(not loan.borrowed for loan in scenario)


def test_process_picks_dosen(scenario, books):
    loan = scenario.process("Buku1", books)
    assert loan.member_name == "Dosen1"
    assert loan.borrowed is True
    assert books.find("Buku1").stock == 0
    assert scenario.find_active("Buku1") is loan


def test_process_without_stock_raises(scenario, books):
    scenario.process("Buku1", books)
    with pytest.raises(OutOfStockError):
        scenario.process("Buku1", books)


def test_process_while_lent_raises(books, history):
    books.update_stock("Buku1", 2)
    loans = LoanList()
    loans.add("Buku1", "Anggota1", Priority.MAHASISWA, books, history)
    loans.add("Buku1", "Dosen1", Priority.DOSEN, books, history)
    loans.process("Buku1", books)
    with pytest.raises(LoanError):
        loans.process("Buku1", books)
    assert books.find("Buku1").stock == 1


def test_process_without_queue_raises(books):
    loans = LoanList()
    with pytest.raises(LoanError):
        loans.process("Buku1", books)
    assert books.find("Buku1").stock == 1


def test_process_unknown_book_raises(scenario, books):
    with pytest.raises(LoanError):
        scenario.process("Missing", books)


def test_return_passes_book_to_anggota(scenario, books):
    scenario.process("Buku1", books)
    returned, following = scenario.return_book("Buku1", "Dosen1", books)
    assert returned.member_name == "Dosen1"
    assert returned.borrowed is False
    assert scenario.find("Buku1", "Dosen1") is None
    assert following is not None
    assert following.member_name == "Anggota1"
    assert following.borrowed is True
    assert books.find("Buku1").stock == 0


def test_return_without_next_borrower(books, history):
    loans = LoanList()
    loans.add("Buku2", "Umum1", Priority.MASYARAKAT_UMUM, books, history)
    loans.process("Buku2", books)
    _, following = loans.return_book("Buku2", "Umum1", books)
    assert following is None
    assert books.find("Buku2").stock == 1
    assert len(loans) == 0


def test_return_not_borrowed_raises(scenario, books):
    with pytest.raises(LoanError):
        scenario.return_book("Buku1", "Anggota1", books)
    assert books.find("Buku1").stock == 1


def test_cancel_latest_removes_last_request_of_member(scenario, history):
    cancelled = scenario.cancel_latest("Umum1", history)
    assert cancelled.book_title == "Buku2"
    assert scenario.find("Buku2", "Umum1") is None
    assert scenario.find("Buku1", "Umum1") is not None
    assert len(history) == 3


def test_cancel_latest_with_empty_history_raises():
    loans = LoanList()
    with pytest.raises(HistoryEmptyError):
        loans.cancel_latest("Umum1", LoanHistory())


def test_cancel_latest_unknown_member_raises(scenario, history):
    with pytest.raises(LoanError):
        scenario.cancel_latest("Nobody", history)
    assert len(history) == 4


def test_remove_from_empty_list_raises():
    with pytest.raises(LoanError):
        LoanList().remove("Buku1", "Anggota1")


def test_remove_missing_raises(scenario):
    with pytest.raises(LoanError):
        scenario.remove("Buku2", "Dosen1")
    assert len(scenario) == 4


def test_remove_returns_loan(scenario):
    removed = scenario.remove("Buku1", "Anggota1")
    assert removed.member_name == "Anggota1"
    assert scenario.find("Buku1", "Anggota1") is None


def test_history_is_lifo():
    history = LoanHistory()
    history.push(Loan("Buku1", "A", Priority.MAHASISWA))
    history.push(Loan("Buku2", "B", Priority.DOSEN))
    assert history.pop().member_name == "B"
    assert history.pop().member_name == "A"
    with pytest.raises(HistoryEmptyError):
        history.pop()


def test_history_full_raises():
    history = LoanHistory(capacity=1)
    history.push(Loan("Buku1", "A", Priority.MAHASISWA))
    assert history.is_full()
    with pytest.raises(HistoryFullError):
        history.push(Loan("Buku2", "B", Priority.DOSEN))
    assert len(history) == 1


def test_default_history_capacity_is_100():
    history = LoanHistory()
    for number in range(100):
        history.push(Loan("Buku1", str(number), Priority.MAHASISWA))
    assert history.is_full()


def test_add_still_queues_when_history_full(books):
    history = LoanHistory(capacity=1)
    loans = LoanList()
    loans.add("Buku1", "A", Priority.MAHASISWA, books, history)
    loans.add("Buku1", "B", Priority.DOSEN, books, history)
    assert len(loans) == 2
    assert len(history) == 1


def test_remove_latest_for_keeps_other_entries():
    history = LoanHistory()
    history.push(Loan("Buku1", "A", Priority.MAHASISWA))
    history.push(Loan("Buku2", "A", Priority.MAHASISWA))
    history.push(Loan("Buku1", "B", Priority.DOSEN))
    removed = history.remove_latest_for("A")
    assert removed.book_title == "Buku2"
    assert [(e.member_name, e.book_title) for e in history] == [
        ("A", "Buku1"),
        ("B", "Buku1"),
    ]


def test_render_empty():
    loans = LoanList()
    assert loans.render() == "List peminjaman kosong\n"
    assert loans.render_queue("Buku1") == "List peminjaman kosong\n"


def test_render_shows_status(scenario, books):
    scenario.process("Buku1", books)
    text = scenario.render()
    assert "DAFTAR PEMINJAMAN" in text
    assert text.count("Dipinjam") == 1
    assert text.count("Antri") == 3


def test_render_queue_filters_by_book(scenario):
    text = scenario.render_queue("Buku2")
    assert "Umum1" in text
    assert "Dosen1" not in text
    missing = scenario.render_queue("Buku9")
    assert "Tidak ada antrian untuk buku ini" in missing


def test_clear(scenario):
    scenario.clear()
    assert len(scenario) == 0
    assert list(scenario) == []
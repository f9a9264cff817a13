import pytest

from perpustakaan.arr.borrowers import (
    MAX_BORROWERS,
    MAX_NAME,
    Borrower,
    BorrowerQueue,
    Level,
    QueueEmptyError,
    QueueFullError,
)


@pytest.fixture
def scenario_queue():
    queue = BorrowerQueue()
    queue.add("Anggota1", Level.MAHASISWA)
    queue.add("Dosen1", Level.DOSEN)
    queue.add("Umum1", Level.UMUM)
    return queue


def test_level_values_and_labels():
    assert Level.UMUM == 0
    assert Level.DOSEN.label() == "Dosen"
    assert Level.MAHASISWA.label() == "Mahasiswa"
    assert Level.UMUM.label() == "Masyarakat Umum"


def test_scenario_order(scenario_queue):
    assert [b.name for b in scenario_queue] == ["Dosen1", "Anggota1", "Umum1"]
    assert len(scenario_queue) == 3


def test_same_level_is_fifo():
    queue = BorrowerQueue()
    queue.add("A", Level.MAHASISWA)
    queue.add("B", Level.MAHASISWA)
    queue.add("C", Level.DOSEN)
    queue.add("D", Level.MAHASISWA)
    assert [b.name for b in queue] == ["C", "A", "B", "D"]


def test_levels_are_non_increasing_front_to_back(scenario_queue):
    scenario_queue.add("Dosen2", Level.DOSEN)
    scenario_queue.add("Umum2", Level.UMUM)
    levels = [b.level for b in scenario_queue]
    assert levels == sorted(levels, reverse=True)


def test_peek_does_not_remove(scenario_queue):
    assert scenario_queue.peek_highest() == Borrower("Dosen1", Level.DOSEN)
    assert len(scenario_queue) == 3


def test_pop_highest_then_next(scenario_queue):
    assert scenario_queue.pop_highest().name == "Dosen1"
    assert scenario_queue.peek_highest().name == "Anggota1"
    assert len(scenario_queue) == 2


def test_empty_queue_errors():
    queue = BorrowerQueue()
    with pytest.raises(QueueEmptyError):
        queue.pop_highest()
    with pytest.raises(QueueEmptyError):
        queue.peek_highest()


def test_remove_by_name(scenario_queue):
    removed = scenario_queue.remove("Anggota1")
    assert removed.name == "Anggota1"
    assert [b.name for b in scenario_queue] == ["Dosen1", "Umum1"]


def test_remove_only_borrower_leaves_empty():
    queue = BorrowerQueue()
    queue.add("Umum1", Level.UMUM)
    queue.remove("Umum1")
    assert len(queue) == 0
    with pytest.raises(QueueEmptyError):
        queue.peek_highest()


def test_remove_missing_raises(scenario_queue):
    with pytest.raises(KeyError):
        scenario_queue.remove("Tidak Ada")
    assert len(scenario_queue) == 3


def test_capacity_limit():
    queue = BorrowerQueue()
    for number in range(MAX_BORROWERS):
        queue.add(f"P{number}", Level.UMUM)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.add("Lagi", Level.DOSEN)
    queue.pop_highest()
    assert not queue.is_full()
    queue.add("Lagi", Level.DOSEN)
    assert queue.peek_highest().name == "Lagi"


def test_long_name_is_truncated():
    queue = BorrowerQueue()
    borrower = queue.add("x" * 80, Level.UMUM)
    assert len(borrower.name) == MAX_NAME - 1


def test_render_empty():
    assert BorrowerQueue().render() == "Antrian peminjam kosong.\n"


def test_render_lists_in_queue_order(scenario_queue):
    lines = scenario_queue.render().splitlines()
    assert "===== ANTRIAN PEMINJAM =====" in lines
    assert "| No    | Nama                 | Level           |" in lines
    rows = [line for line in lines if line.startswith("| ") and "No" not in line]
    assert [row.split("|")[2].strip() for row in rows] == ["Dosen1", "Anggota1", "Umum1"]
    assert rows[2].split("|")[3].strip() == "Masyarakat Umum"
import threading

from bookapi.schemas.book import Book
from bookapi.services.memory_store import MemoryBookStore


def test_initialize_seeds_one_book():
    store = MemoryBookStore()
    store.initialize()

    books = store.list_all()
    assert len(books) == 1
    assert books[0] == Book(id=1, title="1984", author="George Orwell", isbn="10239", year=1994)
    assert store.create(Book(title="Next")).id == 2


def test_create_ignores_caller_id_and_assigns_increasing_ids(memory_store):
    ids = [memory_store.create(Book(id=99, title=f"t{i}")).id for i in range(5)]
    assert ids == [2, 3, 4, 5, 6]
    assert memory_store.get_by_id(99) is None


def test_get_after_create_returns_equal_record(memory_store):
    created = memory_store.create(Book(title="Dune", author="Herbert", isbn="42", year=1965))
    assert memory_store.get_by_id(created.id) == created


def test_returned_records_do_not_alias_stored_state(memory_store):
    book = memory_store.get_by_id(1)
    book.title = "changed"
    assert memory_store.get_by_id(1).title == "1984"


def test_update_replaces_everything_but_id(memory_store):
    updated = memory_store.update(1, Book(id=7, title="Animal Farm", author="Orwell", isbn="x", year=1945))
    assert updated == Book(id=1, title="Animal Farm", author="Orwell", isbn="x", year=1945)
    assert memory_store.get_by_id(1) == updated
    assert memory_store.get_by_id(7) is None


def test_update_missing_id_leaves_store_unchanged(memory_store):
    before = memory_store.list_all()
    assert memory_store.update(404, Book(title="ghost")) is None
    assert memory_store.list_all() == before


def test_delete_then_get_reports_not_found(memory_store):
    assert memory_store.delete(1) is True
    assert memory_store.get_by_id(1) is None
    assert memory_store.delete(1) is False


def test_clear_all_restarts_ids():
    store = MemoryBookStore()
    store.initialize()
    store.create(Book(title="a"))
    store.clear_all()

    assert store.list_all() == []
    assert store.create(Book(title="b")).id == 1


def test_concurrent_creates_get_unique_ids():
    store = MemoryBookStore()
    results = []
    results_lock = threading.Lock()

    def worker():
        for _ in range(50):
            b = store.create(Book(title="t"))
            with results_lock:
                results.append(b.id)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(results) == list(range(1, 401))
    assert len(store.list_all()) == 400

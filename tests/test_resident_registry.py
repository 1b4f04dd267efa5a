"""Resident registry unit tests - id assignment, ordering, removal, locking."""

from concurrent.futures import ThreadPoolExecutor

from resident_api.schemas.resident import Resident, ResidentCreate
from resident_api.services.resident_registry import ResidentRegistry


def _create(registry: ResidentRegistry, name: str = "Jane", age: int = 30) -> Resident:
    return registry.create(ResidentCreate(name=name, age=age))


def test_new_registry_is_empty():
    registry = ResidentRegistry()
    assert registry.list_all() == []
    assert len(registry) == 0


def test_ids_start_at_one_and_increase():
    registry = ResidentRegistry()
    assert [_create(registry).id for _ in range(3)] == [1, 2, 3]


def test_delete_removes_only_the_match_and_keeps_counter():
    registry = ResidentRegistry()
    first, second, third = (_create(registry, name) for name in ("A", "B", "C"))

    assert registry.delete(second.id) is True
    assert registry.list_all() == [first, third]
    assert registry.delete(second.id) is False
    assert _create(registry, "D").id == 4


def test_delete_missing_id_leaves_state_unchanged():
    registry = ResidentRegistry()
    resident = _create(registry)
    assert registry.delete(9999) is False
    assert registry.list_all() == [resident]


def test_list_all_returns_a_snapshot():
    registry = ResidentRegistry()
    _create(registry)
    snapshot = registry.list_all()
    snapshot.clear()
    assert len(registry) == 1


def test_registries_are_independent():
    one, two = ResidentRegistry(), ResidentRegistry()
    _create(one)
    assert _create(two).id == 1


def test_concurrent_creates_get_unique_sequential_ids():
    registry = ResidentRegistry()
    with ThreadPoolExecutor(max_workers=8) as pool:
        created = list(pool.map(lambda i: _create(registry, f"R{i}", i), range(200)))

    assert sorted(r.id for r in created) == list(range(1, 201))
    assert [r.id for r in registry.list_all()] == sorted(r.id for r in registry.list_all())


def test_concurrent_deletes_remove_each_resident_once():
    registry = ResidentRegistry()
    for i in range(50):
        _create(registry, f"R{i}", i)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(registry.delete, [i for i in range(1, 51)] * 2))

    assert results.count(True) == 50
    assert registry.list_all() == []

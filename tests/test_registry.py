import pytest

from core.process import ProcessRecord, ValidationError, create_record_copy
from core.registry import REGISTRY_LOG_SIZE


def test_add_appends_in_insertion_order(registry):
    assert registry.add(ProcessRecord("A", 4, 0)) == 0
    assert registry.add(ProcessRecord("B", 2, 3)) == 1
    assert [r.name for r in registry.snapshot()] == ["A", "B"]


def test_add_assigns_increasing_ids(registry):
    registry.add(ProcessRecord("A", 1, 0))
    registry.add(ProcessRecord("A", 1, 0))
    first, second = registry.snapshot()
    assert first.record_id < second.record_id


@pytest.mark.parametrize("burst, arrival", [(-1, 0), (0, -1), (-5, -5)])
def test_record_rejects_negative_times(burst, arrival):
    with pytest.raises(ValidationError):
        ProcessRecord("P", burst, arrival)


def test_record_rejects_empty_name():
    with pytest.raises(ValidationError) as excinfo:
        ProcessRecord("   ", 1, 0)
    assert excinfo.value.field == "name"


def test_record_rejects_bool_and_float():
    with pytest.raises(ValidationError):
        ProcessRecord("P", True, 0)
    with pytest.raises(ValidationError):
        ProcessRecord("P", 1, 2.5)


def test_zero_times_are_accepted(registry):
    registry.add(ProcessRecord("idle", 0, 0))
    assert len(registry) == 1


def test_add_negative_leaves_registry_unchanged(registry):
    registry.add(ProcessRecord("A", 1, 0))
    bad = ProcessRecord("B", 1, 0)
    bad.burst_time = -3
    with pytest.raises(ValidationError):
        registry.add(bad)
    assert [r.name for r in registry.snapshot()] == ["A"]


def test_update_replaces_in_place_and_keeps_id(registry):
    registry.add(ProcessRecord("A", 1, 0))
    registry.add(ProcessRecord("B", 2, 0))
    old_id = registry[1].record_id

    registry.update(1, ProcessRecord("B2", 7, 4))

    updated = registry[1]
    assert (updated.name, updated.burst_time, updated.arrival_time) == ("B2", 7, 4)
    assert updated.record_id == old_id
    assert registry[0].name == "A"


def test_update_invalid_leaves_registry_unchanged(registry):
    registry.add(ProcessRecord("A", 1, 0))
    bad = ProcessRecord("A", 1, 0)
    bad.arrival_time = -1
    with pytest.raises(ValidationError):
        registry.update(0, bad)
    assert registry[0].arrival_time == 0


@pytest.mark.parametrize("index", [1, 5, -1])
def test_update_out_of_bounds(registry, index):
    registry.add(ProcessRecord("A", 1, 0))
    with pytest.raises(IndexError):
        registry.update(index, ProcessRecord("X", 1, 0))
    assert registry[0].name == "A"


def test_remove_shifts_later_indices(registry):
    for name in "ABC":
        registry.add(ProcessRecord(name, 1, 0))

    removed = registry.remove_at(0)

    assert removed.name == "A"
    assert [r.name for r in registry.snapshot()] == ["B", "C"]
    assert registry[0].name == "B"
    assert registry[1].name == "C"


@pytest.mark.parametrize("index", [0, -1])
def test_remove_out_of_bounds_on_empty(registry, index):
    with pytest.raises(IndexError):
        registry.remove_at(index)


def test_remove_out_of_bounds_keeps_contents(registry):
    registry.add(ProcessRecord("A", 1, 0))
    with pytest.raises(IndexError):
        registry.remove_at(3)
    assert len(registry) == 1


def test_clear(registry):
    registry.add(ProcessRecord("A", 1, 0))
    registry.add(ProcessRecord("B", 1, 0))
    registry.clear()
    assert len(registry) == 0
    assert registry.snapshot() == []
    registry.clear()
    assert len(registry) == 0


def test_snapshot_is_independent_of_later_mutation(registry):
    registry.add(ProcessRecord("A", 1, 0))
    snap = registry.snapshot()

    snap[0].name = "mutated"
    registry.add(ProcessRecord("B", 1, 0))

    assert len(snap) == 1
    assert registry[0].name == "A"


def test_stored_record_is_not_the_callers_object(registry):
    record = ProcessRecord("A", 1, 0)
    registry.add(record)
    record.name = "changed"
    assert registry[0].name == "A"
    assert record.record_id is None


def test_reorder_requires_permutation(registry):
    registry.add(ProcessRecord("A", 1, 0))
    registry.add(ProcessRecord("B", 1, 0))
    snap = registry.snapshot()

    registry.reorder(list(reversed(snap)))
    assert [r.name for r in registry.snapshot()] == ["B", "A"]

    with pytest.raises(ValueError):
        registry.reorder(snap[:1])
    with pytest.raises(ValueError):
        registry.reorder([snap[0], create_record_copy(snap[0])])
    assert [r.name for r in registry.snapshot()] == ["B", "A"]


def test_index_of_follows_structural_changes(registry):
    registry.add(ProcessRecord("A", 1, 0))
    registry.add(ProcessRecord("B", 1, 0))
    b_id = registry[1].record_id

    registry.remove_at(0)

    assert registry.index_of(b_id) == 0
    with pytest.raises(KeyError):
        registry.index_of(999)


def test_event_log_records_mutations(registry):
    registry.add(ProcessRecord("A", 1, 0))
    registry.remove_at(0)
    assert len(registry.event_log) == 2
    assert "Added 'A'" in registry.event_log[0]
    assert "Removed 'A'" in registry.event_log[1]


def test_event_log_keeps_only_recent_lines(registry):
    registry.add(ProcessRecord("A", 1, 0))
    for _ in range(REGISTRY_LOG_SIZE * 3):
        registry.reorder(registry.snapshot())

    events = registry.recent_events()
    assert len(events) == REGISTRY_LOG_SIZE
    assert "Reordered" in events[-1]
    assert all("Added 'A'" not in line for line in events)

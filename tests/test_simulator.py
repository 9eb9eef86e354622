import threading

import pytest

from core.process import ValidationError
from core.registry import ProcessRegistry, REGISTRY_LOG_SIZE
from core.simulator import SchedulingSimulator


def registry_names(simulator):
    return [r.name for r in simulator.processes()]


def test_add_returns_index(simulator):
    assert simulator.add("A", 1, 0) == 0
    assert simulator.add("B", 1, 0) == 1


def test_add_negative_is_rejected(simulator):
    simulator.add("A", 1, 0)
    with pytest.raises(ValidationError):
        simulator.add("B", -1, 0)
    with pytest.raises(ValidationError):
        simulator.add("B", 1, -1)
    assert registry_names(simulator) == ["A"]


def test_update_and_remove_errors(simulator):
    simulator.add("A", 1, 0)
    with pytest.raises(IndexError):
        simulator.update(2, "X", 1, 0)
    with pytest.raises(ValidationError):
        simulator.update(0, "X", -2, 0)
    with pytest.raises(IndexError):
        simulator.remove_at(1)
    assert registry_names(simulator) == ["A"]


def test_run_fcfs_totals(textbook_simulator):
    run = textbook_simulator.run_fcfs()
    assert SchedulingSimulator.total_waiting(run.results) == 10
    assert SchedulingSimulator.total_turnaround(run.results) == 26


def test_run_sjf_totals(textbook_simulator):
    run = textbook_simulator.run_sjf()
    assert SchedulingSimulator.total_waiting(run.results) == 11
    assert SchedulingSimulator.total_turnaround(run.results) == 27


def test_fcfs_reorders_registry(simulator):
    simulator.add("A", 1, 5)
    simulator.add("B", 1, 2)
    simulator.add("C", 1, 2)

    simulator.run_fcfs()

    assert registry_names(simulator) == ["B", "C", "A"]


def test_fcfs_without_reorder_is_a_pure_query(simulator):
    simulator.add("A", 1, 5)
    simulator.add("B", 1, 2)

    run = simulator.run_fcfs(reorder_registry=False)

    assert [r.name for r in run.results] == ["B", "A"]
    assert registry_names(simulator) == ["A", "B"]


def test_sjf_never_reorders(simulator):
    simulator.add("long", 9, 0)
    simulator.add("short", 1, 3)
    simulator.add("mid", 4, 1)

    for _ in range(3):
        simulator.run_sjf()
        simulator.run_sjf_arrival()

    assert registry_names(simulator) == ["long", "short", "mid"]


def test_indices_after_fcfs_refer_to_new_order(simulator):
    simulator.add("late", 1, 9)
    simulator.add("early", 1, 0)
    simulator.run_fcfs()

    simulator.remove_at(0)

    assert registry_names(simulator) == ["late"]


def test_empty_registry(simulator):
    for run in (simulator.run_fcfs(), simulator.run_sjf()):
        assert run.results == []
        assert run.timeline == []
        assert SchedulingSimulator.total_waiting(run.results) == 0
        assert SchedulingSimulator.total_turnaround(run.results) == 0


def test_remove_then_rerun(textbook_simulator):
    textbook_simulator.run_sjf()

    removed = textbook_simulator.remove_at(1)
    run = textbook_simulator.rerun()

    assert removed.name == "P2"
    assert [r.name for r in run.results] == ["P1", "P3"]
    assert run.algorithm == "SJF"
    assert textbook_simulator.processes()[1].name == "P3"


def test_rerun_before_any_run(simulator):
    simulator.add("A", 1, 0)
    assert simulator.rerun() is None


def test_clear_then_run(textbook_simulator):
    textbook_simulator.clear()
    run = textbook_simulator.run_fcfs()
    assert run.results == []


def test_unknown_algorithm(simulator):
    with pytest.raises(ValueError):
        simulator.run("RR")


def test_compare_leaves_order_untouched(simulator):
    simulator.add("A", 1, 5)
    simulator.add("B", 1, 2)

    runs = simulator.compare(["FCFS", "SJF", "SJF-Arrival"])

    assert [run.algorithm for run in runs] == ["FCFS", "SJF", "SJF-Arrival"]
    assert registry_names(simulator) == ["A", "B"]


def test_simulators_are_independent():
    first = SchedulingSimulator()
    second = SchedulingSimulator()
    first.add("A", 1, 0)
    assert second.processes() == []


def test_injected_registry_is_used():
    registry = ProcessRegistry()
    simulator = SchedulingSimulator(registry)
    simulator.add("A", 1, 0)
    assert len(registry) == 1


def test_concurrent_adds_and_runs_keep_registry_consistent(simulator):
    def worker(offset):
        for i in range(50):
            simulator.add(f"P{offset}-{i}", i % 7, (i * 3) % 11)
            simulator.run_fcfs()

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    records = simulator.processes()
    assert len(records) == 200
    assert len({r.record_id for r in records}) == 200


def test_compare_does_not_change_rerun_policy(textbook_simulator):
    textbook_simulator.run_sjf()
    textbook_simulator.compare(["FCFS", "SJF-Arrival"])
    assert textbook_simulator.rerun().algorithm == "SJF"


def test_repeated_fcfs_runs_do_not_grow_registry_log(simulator):
    simulator.add("A", 1, 0)
    for _ in range(1000):
        simulator.run_fcfs()
    assert len(simulator.registry.event_log) == REGISTRY_LOG_SIZE

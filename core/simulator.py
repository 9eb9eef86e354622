"""
스케줄링 시뮬레이터: 표현 계층(CLI, GUI, 웹)이 사용하는 진입점
레지스트리 변경 → 스케줄링 → 집계를 하나의 작업 단위로 묶는다
"""

from typing import List, Optional
from .process import ProcessRecord
from .registry import ProcessRegistry
from .scheduler_base import (ScheduleResult, ScheduleRun,
                             total_waiting_time, total_turnaround_time)
from schedulers import ALGORITHM_MAP


class SchedulingSimulator:
    """
    레지스트리 하나를 소유하는 시뮬레이터

    여러 시뮬레이터 인스턴스는 서로 상태를 공유하지 않는다.
    """

    def __init__(self, registry: Optional[ProcessRegistry] = None):
        self.registry = registry if registry is not None else ProcessRegistry()
        self.last_algorithm: Optional[str] = None

    # ---- 레지스트리 조작 ----

    def add(self, name: str, burst_time: int, arrival_time: int) -> int:
        """프로세스 추가 후 인덱스 반환"""
        return self.registry.add(ProcessRecord(name, burst_time, arrival_time))

    def update(self, index: int, name: str, burst_time: int, arrival_time: int):
        self.registry.update(index, ProcessRecord(name, burst_time, arrival_time))

    def remove_at(self, index: int) -> ProcessRecord:
        return self.registry.remove_at(index)

    def clear(self):
        self.registry.clear()

    def processes(self) -> List[ProcessRecord]:
        return self.registry.snapshot()

    # ---- 스케줄링 ----

    def _execute(self, algorithm: str, reorder_registry: bool, verbose: bool) -> ScheduleRun:
        if algorithm not in ALGORITHM_MAP:
            raise ValueError(f"Unknown algorithm: {algorithm}")

        algo_info = ALGORITHM_MAP[algorithm]

        # 재정렬이 끝날 때까지 다른 호출자는 레지스트리에 접근할 수 없음
        with self.registry.lock:
            scheduler = algo_info['class'](self.registry.snapshot())
            result = scheduler.run(verbose=verbose)

            if algo_info['reorders_registry'] and reorder_registry:
                self.registry.reorder(scheduler.ordered_records)

        return result

    def run(self, algorithm: str, reorder_registry: bool = True,
            verbose: bool = False) -> ScheduleRun:
        """
        선택한 정책으로 스케줄링 실행

        Args:
            algorithm: 정책 ID ('FCFS', 'SJF', 'SJF-Arrival')
            reorder_registry: FCFS 실행 시 정렬 결과를 레지스트리 순서로 반영할지 여부
            verbose: 이벤트 로그 출력 여부

        Raises:
            ValueError: 알 수 없는 정책
        """
        result = self._execute(algorithm, reorder_registry, verbose)
        self.last_algorithm = algorithm
        return result

    def run_fcfs(self, reorder_registry: bool = True) -> ScheduleRun:
        """FCFS 실행 (기본값: 레지스트리를 도착 시간 순으로 재정렬)"""
        return self.run('FCFS', reorder_registry=reorder_registry)

    def run_sjf(self) -> ScheduleRun:
        """SJF 실행 (레지스트리 순서 불변)"""
        return self.run('SJF')

    def run_sjf_arrival(self) -> ScheduleRun:
        return self.run('SJF-Arrival')

    def rerun(self, reorder_registry: bool = True) -> Optional[ScheduleRun]:
        """마지막으로 선택된 정책을 다시 실행 (없으면 None)"""
        if self.last_algorithm is None:
            return None
        return self.run(self.last_algorithm, reorder_registry=reorder_registry)

    def compare(self, algorithms: List[str]) -> List[ScheduleRun]:
        """
        같은 스냅샷에 대해 여러 정책 실행
        비교 중에는 FCFS 재정렬을 적용하지 않는다
        """
        with self.registry.lock:
            return [self._execute(algorithm, False, False) for algorithm in algorithms]

    # ---- 집계 ----

    @staticmethod
    def total_waiting(results: List[ScheduleResult]) -> int:
        return total_waiting_time(results)

    @staticmethod
    def total_turnaround(results: List[ScheduleResult]) -> int:
        return total_turnaround_time(results)

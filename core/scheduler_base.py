"""
스케줄러 기본 프레임워크: 결과, 타임라인, 통계 집계
"""

from typing import List, Dict
from dataclasses import dataclass, field, asdict
from .process import ProcessRecord, create_record_copy


@dataclass(frozen=True)
class ScheduleResult:
    """프로세스별 스케줄링 결과"""
    name: str
    burst_time: int
    arrival_time: int
    waiting_time: int
    turnaround_time: int  # = waiting_time + burst_time


@dataclass(frozen=True)
class TimelineEntry:
    """타임라인(Gantt) 엔트리"""
    name: str
    start_offset: int
    duration: int

    @property
    def end_offset(self) -> int:
        return self.start_offset + self.duration


def total_waiting_time(results: List[ScheduleResult]) -> int:
    """전체 대기 시간 합계"""
    return sum(r.waiting_time for r in results)


def total_turnaround_time(results: List[ScheduleResult]) -> int:
    """전체 반환 시간 합계"""
    return sum(r.turnaround_time for r in results)


class SchedulerStats:
    """스케줄링 통계"""

    def __init__(self):
        self.total_waiting_time = 0
        self.total_turnaround_time = 0
        self.cpu_busy_time = 0
        self.makespan = 0
        self.process_count = 0

    def calculate_averages(self) -> Dict:
        """합계 및 평균 계산 (평균은 표시용 파생 값)"""
        if self.process_count == 0:
            return {
                'total_waiting_time': 0,
                'total_turnaround_time': 0,
                'avg_waiting_time': 0,
                'avg_turnaround_time': 0,
                'makespan': 0,
                'cpu_utilization': 0
            }

        return {
            'total_waiting_time': self.total_waiting_time,
            'total_turnaround_time': self.total_turnaround_time,
            'avg_waiting_time': self.total_waiting_time / self.process_count,
            'avg_turnaround_time': self.total_turnaround_time / self.process_count,
            'makespan': self.makespan,
            'cpu_utilization': (self.cpu_busy_time / self.makespan * 100)
                               if self.makespan > 0 else 0
        }


@dataclass
class ScheduleRun:
    """한 번의 스케줄링 실행 결과"""
    algorithm: str
    results: List[ScheduleResult]
    timeline: List[TimelineEntry]
    statistics: Dict
    event_log: List[str] = field(default_factory=list)

    @property
    def total_waiting_time(self) -> int:
        return total_waiting_time(self.results)

    @property
    def total_turnaround_time(self) -> int:
        return total_turnaround_time(self.results)

    def as_dict(self) -> Dict:
        return {
            'algorithm': self.algorithm,
            'results': [asdict(r) for r in self.results],
            'timeline': [asdict(t) for t in self.timeline],
            'statistics': self.statistics,
            'event_log': list(self.event_log)
        }


class BaseScheduler:
    """
    기본 스케줄러 클래스
    모든 비선점형 스케줄링 알고리즘의 공통 기능 제공

    스케줄러는 레코드의 복사본만 다루며 레지스트리를 직접 변경하지 않는다.
    """

    def __init__(self, records: List[ProcessRecord], name: str = "Base Scheduler"):
        self.records = [create_record_copy(r) for r in records]
        self.name = name
        self.current_time = 0
        self.results: List[ScheduleResult] = []
        self.timeline: List[TimelineEntry] = []
        self.stats = SchedulerStats()
        self.event_log: List[str] = []

    def log_event(self, message: str):
        """이벤트 로그 기록"""
        log_entry = f"[T={self.current_time:3d}] {message}"
        self.event_log.append(log_entry)

    def add_to_timeline(self, name: str, start: int, duration: int):
        """타임라인에 엔트리 추가 (길이 0인 프로세스도 기록)"""
        self.timeline.append(TimelineEntry(name, start, duration))

    def add_result(self, record: ProcessRecord, waiting_time: int):
        """결과 기록: 반환 시간 = 대기 시간 + 버스트 시간"""
        turnaround_time = waiting_time + record.burst_time
        self.results.append(ScheduleResult(
            name=record.name,
            burst_time=record.burst_time,
            arrival_time=record.arrival_time,
            waiting_time=waiting_time,
            turnaround_time=turnaround_time
        ))
        self.log_event(f"{record.name} → Terminated (WT={waiting_time}, TT={turnaround_time})")

    def update_statistics(self):
        """최종 통계 업데이트"""
        self.stats.process_count = len(self.results)
        self.stats.total_waiting_time = total_waiting_time(self.results)
        self.stats.total_turnaround_time = total_turnaround_time(self.results)
        self.stats.cpu_busy_time = sum(entry.duration for entry in self.timeline)
        self.stats.makespan = max((entry.end_offset for entry in self.timeline), default=0)

    def order_records(self) -> List[ProcessRecord]:
        """
        처리 후보 순서 (기본값: 레지스트리 순서 그대로)
        하위 클래스가 정렬 기준을 재정의한다
        """
        return list(self.records)

    def simulate(self):
        """
        시뮬레이션 본체 (하위 클래스에서 구현)
        self.results와 self.timeline을 채워야 함
        """
        raise NotImplementedError("Subclasses must implement simulate()")

    def run(self, verbose: bool = False) -> ScheduleRun:
        """
        스케줄링 시뮬레이션 실행

        Args:
            verbose: 상세 로그 출력 여부

        Returns:
            실행 결과
        """
        self.log_event(f"===== {self.name} Scheduling Started =====")
        self.simulate()
        self.log_event(f"===== {self.name} Scheduling Completed =====")

        if verbose:
            for log in self.event_log:
                print(log)

        return self.get_results()

    def get_results(self) -> ScheduleRun:
        """시뮬레이션 결과 반환"""
        self.update_statistics()

        return ScheduleRun(
            algorithm=self.name,
            results=list(self.results),
            timeline=list(self.timeline),
            statistics=self.stats.calculate_averages(),
            event_log=list(self.event_log)
        )

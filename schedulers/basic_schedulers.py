"""
기본 스케줄링 알고리즘 구현 (모두 비선점형)
- FCFS (First-Come, First-Served)
- SJF (Shortest Job First - 도착 시간 무시)
- SJF-Arrival (도착 시간을 고려하는 교과서형 SJF)
"""

from typing import List
from core.process import ProcessRecord
from core.scheduler_base import BaseScheduler


class FCFSScheduler(BaseScheduler):
    """
    FCFS (First-Come, First-Served) 스케줄러
    비선점형: 먼저 도착한 프로세스를 먼저 처리

    도착 시간이 같으면 기존(삽입) 순서를 유지한다 (안정 정렬).
    정렬 결과는 ordered_records로 노출되며, 호출자가 이를 레지스트리의
    새 정규 순서로 반영할 수 있다.
    """

    def __init__(self, records: List[ProcessRecord]):
        super().__init__(records, "FCFS")
        self.ordered_records: List[ProcessRecord] = []

    def order_records(self) -> List[ProcessRecord]:
        """도착 시간 오름차순 (안정 정렬)"""
        return sorted(self.records, key=lambda r: r.arrival_time)

    def simulate(self):
        self.ordered_records = self.order_records()

        for record in self.ordered_records:
            if record.arrival_time > self.current_time:
                self.log_event(f"CPU idle until T={record.arrival_time}")

            waiting_time = max(0, self.current_time - record.arrival_time)
            service_start = max(self.current_time, record.arrival_time)

            self.current_time = service_start
            self.log_event(f"{record.name} → Running (burst={record.burst_time})")
            self.add_to_timeline(record.name, service_start, record.burst_time)

            self.current_time = service_start + record.burst_time
            self.add_result(record, waiting_time)


class SJFScheduler(BaseScheduler):
    """
    SJF (Shortest Job First) 스케줄러 - 비선점형, 도착 시간 무시

    모든 프로세스가 시각 0에 이미 도착해 있다고 가정하고
    버스트 시간 오름차순으로 처리한다. 버스트가 같으면 기존 순서 유지.
    """

    def __init__(self, records: List[ProcessRecord]):
        super().__init__(records, "SJF")

    def order_records(self) -> List[ProcessRecord]:
        """버스트 시간 오름차순 (안정 정렬)"""
        return sorted(self.records, key=lambda r: r.burst_time)

    def simulate(self):
        for record in self.order_records():
            # 도착 시간은 참조하지 않음
            waiting_time = self.current_time
            self.log_event(f"{record.name} → Running (burst={record.burst_time})")
            self.add_to_timeline(record.name, self.current_time, record.burst_time)

            self.current_time += record.burst_time
            self.add_result(record, waiting_time)


class SJFArrivalScheduler(BaseScheduler):
    """
    도착 시간을 고려하는 비선점형 SJF 스케줄러

    결정 시점마다 이미 도착한 프로세스 중 버스트가 가장 짧은 것을 선택.
    동률: 도착 시간이 빠른 것, 그 다음 레지스트리 순서.
    도착한 프로세스가 없으면 다음 도착 시각까지 CPU 유휴.
    """

    def __init__(self, records: List[ProcessRecord]):
        super().__init__(records, "SJF-Arrival")

    def simulate(self):
        pending = list(enumerate(self.order_records()))

        while pending:
            arrived = [item for item in pending if item[1].arrival_time <= self.current_time]
            if not arrived:
                next_arrival = min(record.arrival_time for _, record in pending)
                self.log_event(f"CPU idle until T={next_arrival}")
                self.current_time = next_arrival
                continue

            chosen = min(arrived, key=lambda item: (item[1].burst_time,
                                                    item[1].arrival_time,
                                                    item[0]))
            pending.remove(chosen)
            record = chosen[1]

            waiting_time = self.current_time - record.arrival_time
            self.log_event(f"{record.name} → Running (burst={record.burst_time})")
            self.add_to_timeline(record.name, self.current_time, record.burst_time)

            self.current_time += record.burst_time
            self.add_result(record, waiting_time)

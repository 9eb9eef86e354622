"""
프로세스 레지스트리 모듈
등록된 프로세스 레코드를 삽입 순서대로 관리 (스케줄링 지식 없음)
"""

import threading
from collections import deque
from typing import Deque, List, Iterator
from .process import ProcessRecord, validate_record_fields, create_record_copy

# 보관할 최근 변경 로그 줄 수
REGISTRY_LOG_SIZE = 100


class ProcessRegistry:
    """
    프로세스 레코드의 순서 있는 컬렉션

    수정/삭제 대상은 연산 시점의 위치 인덱스로 식별한다.
    구조 변경(삭제, FCFS 재정렬) 후에는 호출자가 인덱스를 다시 구해야 한다.
    모든 연산은 원자적: 성공하거나, 실패 시 레지스트리를 전혀 바꾸지 않는다.
    """

    def __init__(self):
        self._records: List[ProcessRecord] = []
        self._next_id = 1
        # 스케줄러가 재정렬 중인 상태를 다른 호출자가 관찰하지 못하도록 보호
        self.lock = threading.RLock()
        self.event_log: Deque[str] = deque(maxlen=REGISTRY_LOG_SIZE)
        self._op_count = 0

    def log_event(self, message: str):
        """레지스트리 변경 로그 기록 (최근 REGISTRY_LOG_SIZE줄만 유지)"""
        self._op_count += 1
        self.event_log.append(f"[#{self._op_count:3d}] {message}")

    def _check_index(self, index: int):
        # 음수 인덱스의 파이썬식 역방향 접근은 허용하지 않음
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexError(f"Process index must be an integer, got {index!r}")
        if not 0 <= index < len(self._records):
            raise IndexError(f"Process index {index} out of range [0, {len(self._records)})")

    def add(self, record: ProcessRecord) -> int:
        """
        레코드를 끝에 추가

        Returns:
            추가된 레코드의 인덱스
        """
        validate_record_fields(record.name, record.burst_time, record.arrival_time)
        with self.lock:
            stored = create_record_copy(record)
            stored.record_id = self._next_id
            self._next_id += 1
            self._records.append(stored)
            index = len(self._records) - 1
            self.log_event(f"Added '{stored.name}' (burst={stored.burst_time}, "
                           f"arrival={stored.arrival_time}) at index {index}")
            return index

    def update(self, index: int, record: ProcessRecord):
        """지정 위치의 레코드를 교체 (record_id는 유지)"""
        validate_record_fields(record.name, record.burst_time, record.arrival_time)
        with self.lock:
            self._check_index(index)
            stored = create_record_copy(record)
            stored.record_id = self._records[index].record_id
            self._records[index] = stored
            self.log_event(f"Updated index {index} → '{stored.name}' "
                           f"(burst={stored.burst_time}, arrival={stored.arrival_time})")

    def remove_at(self, index: int) -> ProcessRecord:
        """지정 위치의 레코드 삭제 (이후 인덱스는 하나씩 당겨짐)"""
        with self.lock:
            self._check_index(index)
            removed = self._records.pop(index)
            self.log_event(f"Removed '{removed.name}' from index {index}")
            return removed

    def clear(self):
        """레지스트리 비우기"""
        with self.lock:
            count = len(self._records)
            self._records.clear()
            self.log_event(f"Cleared {count} process(es)")

    def snapshot(self) -> List[ProcessRecord]:
        """현재 순서의 레코드 복사본 목록 (이후 변경과 독립)"""
        with self.lock:
            return [create_record_copy(r) for r in self._records]

    def reorder(self, records: List[ProcessRecord]):
        """
        저장 순서를 주어진 순열로 교체 (FCFS 정규화용)

        Raises:
            ValueError: 현재 레코드의 순열이 아닌 경우
        """
        with self.lock:
            current = {r.record_id: r for r in self._records}
            new_ids = [r.record_id for r in records]
            if len(new_ids) != len(current) or set(new_ids) != set(current):
                raise ValueError("Reorder must be a permutation of the registered processes")
            self._records = [current[record_id] for record_id in new_ids]
            self.log_event("Reordered → [" + ", ".join(r.name for r in self._records) + "]")

    def recent_events(self) -> List[str]:
        """최근 변경 로그 복사본"""
        with self.lock:
            return list(self.event_log)

    def index_of(self, record_id: int) -> int:
        """record_id의 현재 인덱스 조회"""
        with self.lock:
            for index, record in enumerate(self._records):
                if record.record_id == record_id:
                    return index
        raise KeyError(f"No process with id {record_id}")

    def __getitem__(self, index: int) -> ProcessRecord:
        with self.lock:
            self._check_index(index)
            return create_record_copy(self._records[index])

    def __len__(self):
        return len(self._records)

    def __iter__(self) -> Iterator[ProcessRecord]:
        return iter(self.snapshot())

    def __repr__(self):
        return f"ProcessRegistry({self._records!r})"

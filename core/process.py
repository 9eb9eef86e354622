"""
프로세스 레코드 및 입력 검증 모듈
"""

from typing import Optional
from copy import deepcopy


class ValidationError(ValueError):
    """
    잘못된 프로세스 입력 (음수 시간, 빈 이름 등)
    레지스트리에 반영되기 전에 발생하며, 레지스트리는 변경되지 않음
    """

    def __init__(self, field: str, value, message: str):
        super().__init__(message)
        self.field = field
        self.value = value


def _check_time(field: str, value) -> int:
    # bool은 int의 하위 클래스이므로 별도로 거부
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, value, f"{field} must be an integer, got {value!r}")
    if value < 0:
        raise ValidationError(field, value, f"{field} must be non-negative, got {value}")
    return value


def validate_record_fields(name: str, burst_time: int, arrival_time: int):
    """
    프로세스 필드 검증

    Args:
        name: 표시 이름 (비어있으면 안 됨)
        burst_time: CPU 버스트 시간 (0 이상)
        arrival_time: 도착 시간 (0 이상)

    Raises:
        ValidationError: 검증 실패 시
    """
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name", name, "Process name must be a non-empty string")
    _check_time("burst_time", burst_time)
    _check_time("arrival_time", arrival_time)


class ProcessRecord:
    """
    사용자가 등록한 프로세스 정보
    이름은 고유하지 않아도 됨 (식별은 레지스트리 위치 또는 record_id로)
    """

    def __init__(self, name: str, burst_time: int, arrival_time: int,
                 record_id: Optional[int] = None):
        validate_record_fields(name, burst_time, arrival_time)
        self.name = name
        self.burst_time = burst_time
        self.arrival_time = arrival_time
        # 레지스트리가 add 시점에 부여하는 불투명 식별자
        self.record_id = record_id

    def to_dict(self) -> dict:
        return {
            'id': self.record_id,
            'name': self.name,
            'burst_time': self.burst_time,
            'arrival_time': self.arrival_time,
        }

    def __eq__(self, other):
        if not isinstance(other, ProcessRecord):
            return NotImplemented
        return (self.name, self.burst_time, self.arrival_time, self.record_id) == \
               (other.name, other.burst_time, other.arrival_time, other.record_id)

    def __repr__(self):
        return f"{self.name}[burst={self.burst_time}, arrival={self.arrival_time}]"

    def __str__(self):
        return f"Process {self.name}: Burst={self.burst_time}, Arrival={self.arrival_time}"


def create_record_copy(record: ProcessRecord) -> ProcessRecord:
    """
    레코드의 독립 복사본 생성
    스케줄러가 레지스트리 상태를 건드리지 않고 시뮬레이션하기 위함
    """
    return deepcopy(record)

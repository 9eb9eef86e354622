"""
Core modules for Process Scheduling Simulator
"""

from .process import ProcessRecord, ValidationError, validate_record_fields, create_record_copy
from .registry import ProcessRegistry
from .scheduler_base import (BaseScheduler, SchedulerStats, ScheduleResult, TimelineEntry,
                             ScheduleRun, total_waiting_time, total_turnaround_time)

__all__ = [
    'ProcessRecord',
    'ValidationError',
    'validate_record_fields',
    'create_record_copy',
    'ProcessRegistry',
    'BaseScheduler',
    'SchedulerStats',
    'ScheduleResult',
    'TimelineEntry',
    'ScheduleRun',
    'total_waiting_time',
    'total_turnaround_time'
]

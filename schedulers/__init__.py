"""
CPU Scheduling Algorithms
"""

from .basic_schedulers import FCFSScheduler, SJFScheduler, SJFArrivalScheduler

# 알고리즘 매핑 (정책 ID → 스케줄러)
ALGORITHM_MAP = {
    'FCFS': {
        'class': FCFSScheduler,
        'name': 'FCFS (First-Come, First-Served)',
        'reorders_registry': True
    },
    'SJF': {
        'class': SJFScheduler,
        'name': 'SJF (Shortest Job First - Non-preemptive)',
        'reorders_registry': False
    },
    'SJF-Arrival': {
        'class': SJFArrivalScheduler,
        'name': 'SJF (Non-preemptive, Arrival-aware)',
        'reorders_registry': False
    },
}

__all__ = [
    'FCFSScheduler',
    'SJFScheduler',
    'SJFArrivalScheduler',
    'ALGORITHM_MAP'
]

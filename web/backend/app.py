"""
프로세스 스케줄링 시뮬레이터 - FastAPI 백엔드
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional, Dict
import logging

from core.process import ValidationError
from core.simulator import SchedulingSimulator
from schedulers import ALGORITHM_MAP

logger = logging.getLogger(__name__)


# Pydantic 모델
class ProcessInput(BaseModel):
    name: str = Field(..., min_length=1)
    burst_time: int = Field(..., ge=0)
    arrival_time: int = Field(..., ge=0)


class ProcessOutput(BaseModel):
    index: int
    id: int
    name: str
    burst_time: int
    arrival_time: int


class ScheduleRequest(BaseModel):
    algorithm: str = 'FCFS'
    reorder_registry: bool = True


class CompareRequest(BaseModel):
    algorithms: List[str]


class ScheduleResultModel(BaseModel):
    name: str
    burst_time: int
    arrival_time: int
    waiting_time: int
    turnaround_time: int


class TimelineEntryModel(BaseModel):
    name: str
    start_offset: int
    duration: int


class StatisticsModel(BaseModel):
    total_waiting_time: int
    total_turnaround_time: int
    avg_waiting_time: float
    avg_turnaround_time: float
    makespan: int
    cpu_utilization: float


class SimulationResult(BaseModel):
    algorithm: str
    results: List[ScheduleResultModel]
    timeline: List[TimelineEntryModel]
    statistics: StatisticsModel
    event_log: List[str]
    processes: Optional[List[ProcessOutput]] = None


def list_processes(simulator: SchedulingSimulator) -> List[Dict]:
    """레지스트리의 현재 순서를 인덱스와 함께 반환"""
    return [
        {'index': index, **record.to_dict()}
        for index, record in enumerate(simulator.processes())
    ]


def create_app(simulator: Optional[SchedulingSimulator] = None) -> FastAPI:
    """
    앱 생성

    Args:
        simulator: 사용할 시뮬레이터 (None이면 새로 생성)
    """
    app = FastAPI(
        title="Process Scheduling Simulator",
        description="비선점형 CPU 스케줄링 (FCFS / SJF) 시뮬레이터",
        version="1.0.0"
    )

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.simulator = simulator if simulator is not None else SchedulingSimulator()

    def get_simulator() -> SchedulingSimulator:
        return app.state.simulator

    @app.get("/")
    async def root():
        return {"message": "Process Scheduling Simulator API", "version": "1.0.0"}

    @app.get("/algorithms")
    async def get_algorithms():
        """사용 가능한 알고리즘 목록 반환"""
        return {
            "algorithms": [
                {"id": key, "name": info['name'], "preemptive": False,
                 "reorders_registry": info['reorders_registry']}
                for key, info in ALGORITHM_MAP.items()
            ]
        }

    @app.get("/processes")
    async def get_processes():
        simulator = get_simulator()
        return {
            "processes": list_processes(simulator),
            "event_log": simulator.registry.recent_events()
        }

    @app.post("/processes", status_code=201)
    async def add_process(process: ProcessInput):
        """프로세스 추가"""
        try:
            index = get_simulator().add(process.name, process.burst_time, process.arrival_time)
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=str(e))
        logger.info("Added process %r at index %d", process.name, index)
        return {"index": index, "processes": list_processes(get_simulator())}

    @app.put("/processes/{index}")
    async def update_process(index: int, process: ProcessInput):
        """프로세스 수정"""
        try:
            get_simulator().update(index, process.name, process.burst_time, process.arrival_time)
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=str(e))
        except IndexError as e:
            raise HTTPException(status_code=404, detail=str(e))
        logger.info("Updated process at index %d", index)
        return {"index": index, "processes": list_processes(get_simulator())}

    @app.delete("/processes/{index}")
    async def delete_process(index: int):
        """프로세스 삭제 후 마지막 정책으로 재계산"""
        simulator = get_simulator()
        try:
            removed = simulator.remove_at(index)
        except IndexError as e:
            raise HTTPException(status_code=404, detail=str(e))
        logger.info("Removed process %r from index %d", removed.name, index)

        rerun = simulator.rerun()
        return {
            "removed": removed.to_dict(),
            "processes": list_processes(simulator),
            "result": rerun.as_dict() if rerun is not None else None
        }

    @app.delete("/processes")
    async def clear_processes():
        get_simulator().clear()
        logger.info("Cleared all processes")
        return {"processes": [], "total_waiting_time": 0, "total_turnaround_time": 0}

    @app.post("/schedule", response_model=SimulationResult)
    async def schedule(request: ScheduleRequest):
        """스케줄링 실행"""
        simulator = get_simulator()
        try:
            run = simulator.run(request.algorithm, reorder_registry=request.reorder_registry)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        logger.info("Ran %s on %d process(es)", request.algorithm, len(run.results))
        return {**run.as_dict(), "processes": list_processes(simulator)}

    @app.post("/schedule/compare")
    async def compare(request: CompareRequest):
        """여러 알고리즘 비교 (레지스트리 순서 불변)"""
        try:
            runs = get_simulator().compare(request.algorithms)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        comparison = {
            'algorithms': [run.algorithm for run in runs],
            'total_waiting_time': [run.total_waiting_time for run in runs],
            'total_turnaround_time': [run.total_turnaround_time for run in runs],
            'avg_waiting_time': [run.statistics['avg_waiting_time'] for run in runs],
            'avg_turnaround_time': [run.statistics['avg_turnaround_time'] for run in runs],
        }
        return {
            "success": True,
            "results": [run.as_dict() for run in runs],
            "comparison": comparison
        }

    @app.get("/sample-processes")
    async def get_sample_processes():
        """샘플 프로세스 데이터 반환"""
        return {
            "samples": [
                {
                    "name": "기본 테스트 (3개 프로세스)",
                    "processes": [
                        {"name": "P1", "burst_time": 5, "arrival_time": 0},
                        {"name": "P2", "burst_time": 3, "arrival_time": 1},
                        {"name": "P3", "burst_time": 8, "arrival_time": 2}
                    ]
                },
                {
                    "name": "동시 도착 (모두 0)",
                    "processes": [
                        {"name": "A", "burst_time": 6, "arrival_time": 0},
                        {"name": "B", "burst_time": 2, "arrival_time": 0},
                        {"name": "C", "burst_time": 4, "arrival_time": 0}
                    ]
                },
                {
                    "name": "CPU 유휴 구간 포함",
                    "processes": [
                        {"name": "P1", "burst_time": 2, "arrival_time": 0},
                        {"name": "P2", "burst_time": 3, "arrival_time": 6}
                    ]
                }
            ]
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

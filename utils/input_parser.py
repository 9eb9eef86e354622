"""
입력 데이터 파서 및 프로세스 생성 모듈
"""

import csv
import random
from typing import List
from core.process import ProcessRecord, ValidationError


class InputParser:
    """입력 파일 파서"""

    @staticmethod
    def parse_file(filename: str) -> List[ProcessRecord]:
        """
        CSV 파일에서 프로세스 정보 읽기

        파일 형식: 이름,버스트시간,도착시간
        예: P1,5,0

        Args:
            filename: 입력 파일 경로

        Returns:
            프로세스 리스트 (잘못된 라인은 건너뜀)

        Raises:
            FileNotFoundError: 파일이 없는 경우
        """
        processes = []

        with open(filename, 'r', encoding='utf-8', newline='') as f:
            lines = [line for line in f if line.strip() and not line.lstrip().startswith('#')]

        for row in csv.reader(lines):
            try:
                processes.append(InputParser.create_record_from_parts(row))
            except ValueError as e:
                print(f"경고: 라인 파싱 실패: {','.join(row)}")
                print(f"오류: {e}")

        print(f"{filename}에서 {len(processes)}개의 프로세스를 성공적으로 로드했습니다")
        return processes

    @staticmethod
    def create_record_from_parts(parts: List[str]) -> ProcessRecord:
        """파싱된 부분에서 프로세스 레코드 생성"""
        if len(parts) < 3:
            raise ValueError(f"잘못된 형식: 3개 필드가 필요하지만 {len(parts)}개만 있습니다")

        name = parts[0].strip()
        try:
            burst_time = int(parts[1])
            arrival_time = int(parts[2])
        except ValueError as e:
            raise ValidationError("burst_time/arrival_time", parts[1:3],
                                  f"숫자 필드 변환 오류: {e}")

        return ProcessRecord(name, burst_time, arrival_time)

    @staticmethod
    def generate_random_processes(num_processes: int = 5,
                                  max_arrival: int = 10,
                                  max_burst: int = 10,
                                  seed: int = None) -> List[ProcessRecord]:
        """
        랜덤 프로세스 생성

        Args:
            num_processes: 생성할 프로세스 수
            max_arrival: 최대 도착 시간
            max_burst: 최대 CPU 버스트 시간
            seed: 랜덤 시드

        Returns:
            프로세스 리스트
        """
        rng = random.Random(seed)

        processes = [
            ProcessRecord(f"P{i}", rng.randint(1, max_burst), rng.randint(0, max_arrival))
            for i in range(1, num_processes + 1)
        ]

        print(f"{num_processes}개의 랜덤 프로세스를 생성했습니다")
        return processes

    @staticmethod
    def save_processes_to_file(processes: List[ProcessRecord], filename: str):
        """프로세스 리스트를 파일로 저장"""
        with open(filename, 'w', encoding='utf-8', newline='') as f:
            f.write("# Process Scheduling Simulator Input Data\n")
            f.write("# Format: Name,BurstTime,ArrivalTime\n")
            writer = csv.writer(f)
            for process in processes:
                writer.writerow([process.name, process.burst_time, process.arrival_time])

        print(f"{len(processes)}개의 프로세스를 {filename}에 성공적으로 저장했습니다")

    @staticmethod
    def print_process_summary(processes: List[ProcessRecord]):
        """프로세스 요약 정보 출력"""
        print("\n" + "="*60)
        print("프로세스 요약")
        print("="*60)
        print(f"{'#':<5} {'이름':<20} {'버스트':>10} {'도착시간':>10}")
        print("-"*60)

        for index, p in enumerate(processes):
            print(f"{index:<5} {p.name:<20} {p.burst_time:>10} {p.arrival_time:>10}")

        print("="*60)
        print(f"전체 프로세스: {len(processes)}개")
        print(f"  - 총 버스트 시간: {sum(p.burst_time for p in processes)}\n")

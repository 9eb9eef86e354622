#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
프로세스 스케줄링 시뮬레이터 - 메인 실행 파일
프로세스 등록/수정/삭제 및 알고리즘 선택 기능 포함
"""

import sys
import os
import re

# 모듈 임포트
from core.process import ValidationError
from core.simulator import SchedulingSimulator
from schedulers import ALGORITHM_MAP
from utils.input_parser import InputParser
from utils.visualization import Visualizer

DEFAULT_OUTPUT_DIR = "simulation_results"

# 메뉴 번호 → 정책 ID
RUN_CHOICES = {
    '7': 'FCFS',
    '8': 'SJF',
    '9': 'SJF-Arrival',
}


def print_banner():
    """배너 출력"""
    print("\n" + "="*80)
    print(" "*22 + "프로세스 스케줄링 시뮬레이터 (FCFS / SJF)")
    print("="*80 + "\n")


def print_menu():
    """메뉴 출력"""
    print("\n" + "="*80)
    print("메뉴")
    print("="*80)
    print("\n[프로세스 관리]")
    print("  1. 프로세스 추가")
    print("  2. 프로세스 수정")
    print("  3. 프로세스 삭제")
    print("  4. 전체 삭제")
    print("  5. 파일에서 불러오기")
    print("  6. 랜덤 프로세스 생성")
    print("\n[스케줄링]")
    for key, algorithm in RUN_CHOICES.items():
        print(f"  {key}. {ALGORITHM_MAP[algorithm]['name']}")
    print("  all. 모든 알고리즘 비교")
    print("  0. 종료")
    print("="*80)


def read_int(prompt: str) -> int:
    """정수 입력 (형식 오류 시 ValueError)"""
    raw = input(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"정수가 아닙니다: {raw!r}")


def read_process_fields():
    """이름, 버스트 시간, 도착 시간 입력"""
    name = input("프로세스 이름: ").strip()
    burst_time = read_int("버스트 시간: ")
    arrival_time = read_int("도착 시간: ")
    return name, burst_time, arrival_time


def show_processes(simulator: SchedulingSimulator):
    InputParser.print_process_summary(simulator.processes())


def add_process(simulator: SchedulingSimulator):
    name, burst_time, arrival_time = read_process_fields()
    index = simulator.add(name, burst_time, arrival_time)
    print(f"[완료] '{name}' 추가됨 (인덱스 {index})")


def edit_process(simulator: SchedulingSimulator):
    show_processes(simulator)
    index = read_int("수정할 인덱스: ")
    current = simulator.registry[index]
    print(f"현재 값: {current}")
    name, burst_time, arrival_time = read_process_fields()
    simulator.update(index, name, burst_time, arrival_time)
    print(f"[완료] 인덱스 {index} 수정됨")


def delete_process(simulator: SchedulingSimulator, visualizer: Visualizer):
    show_processes(simulator)
    index = read_int("삭제할 인덱스: ")
    target = simulator.registry[index]
    confirm = input(f"'{target.name}'을(를) 삭제하시겠습니까? (y/n): ").strip().lower()
    if confirm != 'y':
        print("[건너뜀] 삭제 취소")
        return

    removed = simulator.remove_at(index)
    print(f"[완료] '{removed.name}' 삭제됨")

    # 삭제 후 마지막 정책으로 재계산
    run = simulator.rerun()
    if run is not None:
        visualizer.print_results_table(run)


def load_from_file(simulator: SchedulingSimulator):
    filename = input("입력 파일 경로: ").strip()
    records = InputParser.parse_file(filename)
    for record in records:
        simulator.registry.add(record)


def generate_random(simulator: SchedulingSimulator):
    count = read_int("생성할 프로세스 수: ")
    for record in InputParser.generate_random_processes(num_processes=count):
        simulator.registry.add(record)


def run_single_algorithm(simulator: SchedulingSimulator, algorithm: str, verbose=True):
    """단일 알고리즘 실행"""
    print(f"\n{'='*80}")
    print(f"실행 중: {ALGORITHM_MAP[algorithm]['name']}")
    print(f"{'='*80}\n")

    run = simulator.run(algorithm, verbose=verbose)
    if algorithm == 'FCFS':
        print("[정보] 프로세스 목록이 도착 시간 순으로 재정렬되었습니다")
    return run


def run_all_algorithms(simulator: SchedulingSimulator, verbose=True):
    """모든 알고리즘 비교 실행"""
    print("\n" + "="*80)
    print("모든 스케줄링 알고리즘 실행")
    print("="*80 + "\n")

    runs = simulator.compare(list(ALGORITHM_MAP))
    if verbose:
        for run in runs:
            for log in run.event_log:
                print(log)
    return runs


def safe_filename(name: str) -> str:
    """알고리즘 이름을 파일명으로 변환"""
    safe = name.replace(' ', '_').replace('/', '-')
    safe = safe.replace('(', '').replace(')', '')
    safe = re.sub(r'_+', '_', safe)
    return safe.strip('_')


def save_results(runs, output_dir=DEFAULT_OUTPUT_DIR, show=False):
    """결과 저장"""
    os.makedirs(output_dir, exist_ok=True)

    visualizer = Visualizer()

    print("\n" + "="*80)
    print("결과")
    print("="*80 + "\n")
    for run in runs:
        visualizer.print_results_table(run)
    visualizer.print_statistics_table(runs)

    # 타임라인 차트 생성
    print("타임라인 차트 생성 중...")
    for run in runs:
        save_path = os.path.join(output_dir, f"timeline_{safe_filename(run.algorithm)}.png")
        visualizer.draw_timeline(run, save_path=save_path, show=show)

    # 비교 그래프 (2개 이상일 때만)
    if len(runs) > 1:
        comparison_path = os.path.join(output_dir, "comparison.png")
        visualizer.compare_algorithms(runs, save_path=comparison_path, show=show)

    results_file = os.path.join(output_dir, "results.txt")
    save_results_to_file(runs, results_file)

    print(f"\n결과가 '{output_dir}/' 디렉토리에 저장되었습니다")


def save_results_to_file(runs, filename):
    """결과를 텍스트 파일로 저장"""
    with open(filename, 'w', encoding='utf-8') as f:
        f.write("="*80 + "\n")
        f.write("프로세스 스케줄링 시뮬레이션 결과\n")
        f.write("="*80 + "\n\n")

        for run in runs:
            f.write(f"알고리즘: {run.algorithm}\n")
            f.write("-"*80 + "\n")
            f.write(f"{'이름':<20} {'버스트':>8} {'도착':>8} {'시작':>8} {'대기':>8} {'반환':>8}\n")
            f.write("-"*80 + "\n")

            for result, entry in zip(run.results, run.timeline):
                f.write(f"{result.name:<20} "
                        f"{result.burst_time:>8} "
                        f"{result.arrival_time:>8} "
                        f"{entry.start_offset:>8} "
                        f"{result.waiting_time:>8} "
                        f"{result.turnaround_time:>8}\n")

            f.write("-"*80 + "\n")
            f.write(f"Total Waiting Time: {run.total_waiting_time}\n")
            f.write(f"Total Turnaround Time: {run.total_turnaround_time}\n\n")

    print(f"[완료] 결과가 {filename}에 저장되었습니다")


def handle_choice(choice: str, simulator: SchedulingSimulator, visualizer: Visualizer):
    """메뉴 선택 처리 (입력 오류는 호출자에게 전파)"""
    if choice == '1':
        add_process(simulator)
    elif choice == '2':
        edit_process(simulator)
    elif choice == '3':
        delete_process(simulator, visualizer)
    elif choice == '4':
        simulator.clear()
        print("[완료] 전체 삭제됨")
        print("Total Waiting Time: 0")
        print("Total Turnaround Time: 0")
    elif choice == '5':
        load_from_file(simulator)
    elif choice == '6':
        generate_random(simulator)
    elif choice in RUN_CHOICES:
        run = run_single_algorithm(simulator, RUN_CHOICES[choice])
        save_results([run])
    elif choice == 'all':
        save_results(run_all_algorithms(simulator, verbose=False))
    else:
        print("[오류] 잘못된 선택입니다. 다시 시도하세요.")
        return

    if choice in ('1', '2', '3', '5', '6'):
        show_processes(simulator)


def main():
    """메인 함수"""
    print_banner()

    simulator = SchedulingSimulator()
    visualizer = Visualizer()

    while True:
        print_menu()
        choice = input("\n선택하세요: ").strip()

        if choice == '0':
            print("\n프로세스 스케줄링 시뮬레이터를 사용해 주셔서 감사합니다!")
            print("="*80 + "\n")
            break

        try:
            handle_choice(choice, simulator, visualizer)
        except ValidationError as e:
            print(f"[오류] 입력 검증 실패 ({e.field}): {e}")
        except IndexError as e:
            print(f"[오류] 잘못된 인덱스: {e}")
        except FileNotFoundError as e:
            print(f"[오류] 파일을 찾을 수 없습니다: {e.filename}")
        except ValueError as e:
            print(f"[오류] {e}")


def select_mode():
    """실행 모드 선택 (CLI 또는 GUI)"""
    print("실행 모드를 선택하세요:")
    print("  1. CLI 모드 (콘솔)")
    print("  2. GUI 모드 (그래픽 인터페이스)")
    print()

    while True:
        choice = input("선택 (1 또는 2): ").strip()
        if choice == '1':
            return 'cli'
        elif choice == '2':
            return 'gui'
        else:
            print("[오류] 1 또는 2를 입력하세요.")


if __name__ == "__main__":
    try:
        mode = select_mode()

        if mode == 'gui':
            print("\nGUI 모드를 시작합니다...\n")
            from gui import SchedulerGUI
            app = SchedulerGUI()
            app.run()
        else:
            print("\nCLI 모드를 시작합니다...\n")
            main()

    except KeyboardInterrupt:
        print("\n\n사용자에 의해 시뮬레이션이 중단되었습니다.")
        print("="*80 + "\n")
        sys.exit(0)

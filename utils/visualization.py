"""
시각화 모듈: 타임라인(Gantt) 차트 및 통계 그래프 생성
"""

import matplotlib.pyplot as plt
from typing import List
from core.scheduler_base import ScheduleRun


class Visualizer:
    """스케줄링 결과 시각화"""

    def __init__(self):
        # 프로세스별 색상 설정
        self.colors = plt.cm.Set3.colors
        self.bar_color = '#3B82F6'

    def draw_timeline(self, run: ScheduleRun, save_path: str = None, show: bool = True):
        """
        타임라인 그리기 (프로세스당 한 줄, 막대 폭 = 버스트 시간)

        Args:
            run: 스케줄링 실행 결과
            save_path: 저장 경로 (None이면 저장 안 함)
            show: 화면에 표시할지 여부
        """
        if not run.timeline:
            print(f"{run.algorithm}에 대한 타임라인 데이터가 없습니다")
            return

        fig, ax = plt.subplots(figsize=(14, max(3, len(run.timeline) * 0.6)))

        # 이름이 중복될 수 있으므로 실행 순서를 y축으로 사용
        for y_pos, entry in enumerate(run.timeline):
            color = self.colors[y_pos % len(self.colors)]
            ax.barh(y_pos, entry.duration, left=entry.start_offset, height=0.8,
                    color=color, edgecolor='black', linewidth=0.5)

            if entry.duration > 0:
                ax.text(entry.start_offset + entry.duration / 2, y_pos, entry.name,
                        ha='center', va='center', fontsize=8, fontweight='bold')

        ax.set_yticks(range(len(run.timeline)))
        ax.set_yticklabels([entry.name for entry in run.timeline])
        ax.invert_yaxis()
        ax.set_xlabel('Time', fontsize=12)
        ax.set_ylabel('Process', fontsize=12)
        ax.set_title(f'Timeline - {run.algorithm} '
                     f'(Total WT={run.total_waiting_time}, Total TT={run.total_turnaround_time})',
                     fontsize=13, fontweight='bold')
        ax.grid(axis='x', alpha=0.3)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"타임라인 차트가 {save_path}에 저장되었습니다")

        if show:
            plt.show()
        else:
            plt.close(fig)

    def compare_algorithms(self, runs: List[ScheduleRun], save_path: str = None, show: bool = True):
        """
        여러 알고리즘의 대기/반환 시간 비교 그래프

        Args:
            runs: 각 알고리즘의 실행 결과 리스트
            save_path: 저장 경로
            show: 화면에 표시할지 여부
        """
        if not runs:
            print("비교할 결과가 없습니다")
            return

        algorithms = [r.algorithm for r in runs]
        panels = [
            ('Total Waiting Time', [r.statistics['total_waiting_time'] for r in runs], 'skyblue', '{:d}'),
            ('Total Turnaround Time', [r.statistics['total_turnaround_time'] for r in runs], 'lightcoral', '{:d}'),
            ('Average Waiting Time', [r.statistics['avg_waiting_time'] for r in runs], 'lightgreen', '{:.2f}'),
            ('Average Turnaround Time', [r.statistics['avg_turnaround_time'] for r in runs], 'plum', '{:.2f}'),
        ]

        fig, axes = plt.subplots(2, 2, figsize=(14, 10))
        fig.suptitle('Scheduling Algorithms Performance Comparison',
                     fontsize=16, fontweight='bold')

        for ax, (title, values, color, fmt) in zip(axes.flat, panels):
            bars = ax.bar(range(len(algorithms)), values, color=color, edgecolor='black')
            ax.set_xticks(range(len(algorithms)))
            ax.set_xticklabels(algorithms, rotation=20, ha='right', fontsize=9)
            ax.set_ylabel(title, fontsize=11)
            ax.set_title(f'{title} Comparison', fontsize=12, fontweight='bold')
            ax.grid(axis='y', alpha=0.3)

            # 값 표시
            for bar, value in zip(bars, values):
                ax.text(bar.get_x() + bar.get_width() / 2., bar.get_height(),
                        fmt.format(value), ha='center', va='bottom', fontsize=9)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"비교 차트가 {save_path}에 저장되었습니다")

        if show:
            plt.show()
        else:
            plt.close(fig)

    def print_statistics_table(self, runs: List[ScheduleRun]):
        """
        통계를 표 형식으로 출력

        Args:
            runs: 각 알고리즘의 실행 결과 리스트
        """
        print("\n" + "="*100)
        print("스케줄링 알고리즘 성능 비교")
        print("="*100)
        print(f"{'알고리즘':<20} {'총 대기':>10} {'총 반환':>10} {'평균 대기':>12} "
              f"{'평균 반환':>12} {'완료 시각':>10} {'CPU 이용률(%)':>15}")
        print("-"*100)

        for run in runs:
            stats = run.statistics
            print(f"{run.algorithm:<20} "
                  f"{stats['total_waiting_time']:>10} "
                  f"{stats['total_turnaround_time']:>10} "
                  f"{stats['avg_waiting_time']:>12.2f} "
                  f"{stats['avg_turnaround_time']:>12.2f} "
                  f"{stats['makespan']:>10} "
                  f"{stats['cpu_utilization']:>15.2f}")

        print("="*100 + "\n")

    def print_results_table(self, run: ScheduleRun):
        """
        개별 프로세스의 결과 출력

        Args:
            run: 알고리즘 실행 결과
        """
        print(f"\n{'='*70}")
        print(f"프로세스 결과 - {run.algorithm}")
        print(f"{'='*70}")
        print(f"{'이름':<20} {'버스트':>8} {'도착':>8} {'시작':>8} {'대기':>8} {'반환':>8}")
        print(f"{'-'*70}")

        for result, entry in zip(run.results, run.timeline):
            print(f"{result.name:<20} "
                  f"{result.burst_time:>8} "
                  f"{result.arrival_time:>8} "
                  f"{entry.start_offset:>8} "
                  f"{result.waiting_time:>8} "
                  f"{result.turnaround_time:>8}")

        print(f"{'-'*70}")
        print(f"Total Waiting Time: {run.total_waiting_time}")
        print(f"Total Turnaround Time: {run.total_turnaround_time}")
        print(f"{'='*70}\n")

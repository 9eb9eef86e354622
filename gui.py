#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
프로세스 스케줄링 시뮬레이터 - GUI 버전
Tkinter 기반 그래픽 사용자 인터페이스
"""

import tkinter as tk
from tkinter import ttk, messagebox, scrolledtext
from typing import Optional

from core.process import ValidationError
from core.scheduler_base import ScheduleRun
from core.simulator import SchedulingSimulator
from schedulers import ALGORITHM_MAP

# 타임라인 1 시간 단위당 픽셀 수
TIMELINE_UNIT_PX = 20
TIMELINE_BAR_HEIGHT = 30


class SchedulerGUI:
    """프로세스 스케줄링 시뮬레이터 GUI"""

    def __init__(self, simulator: Optional[SchedulingSimulator] = None):
        self.root = tk.Tk()
        self.root.title("프로세스 스케줄링 시뮬레이터")
        self.root.geometry("1000x760")
        self.root.resizable(True, True)

        self.simulator = simulator if simulator is not None else SchedulingSimulator()

        # 입력 변수
        self.name_var = tk.StringVar()
        self.burst_var = tk.StringVar()
        self.arrival_var = tk.StringVar()
        self.algorithm_var = tk.StringVar(value='FCFS')

        # 수정 중인 인덱스 (None이면 추가 모드)
        self.edit_index: Optional[int] = None

        self.create_widgets()

    def create_widgets(self):
        """위젯 생성"""
        main_frame = ttk.Frame(self.root, padding="10")
        main_frame.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))

        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)
        main_frame.columnconfigure(0, weight=1)
        main_frame.rowconfigure(1, weight=1)

        # === 1. 입력 폼 ===
        form_frame = ttk.LabelFrame(main_frame, text="📝 프로세스 입력", padding="10")
        form_frame.grid(row=0, column=0, sticky=(tk.W, tk.E), pady=(0, 10))

        ttk.Label(form_frame, text="이름:").grid(row=0, column=0, sticky=tk.W, padx=(0, 5))
        ttk.Entry(form_frame, textvariable=self.name_var, width=16).grid(row=0, column=1, padx=5)
        ttk.Label(form_frame, text="버스트:").grid(row=0, column=2, sticky=tk.W, padx=(10, 5))
        ttk.Entry(form_frame, textvariable=self.burst_var, width=8).grid(row=0, column=3, padx=5)
        ttk.Label(form_frame, text="도착:").grid(row=0, column=4, sticky=tk.W, padx=(10, 5))
        ttk.Entry(form_frame, textvariable=self.arrival_var, width=8).grid(row=0, column=5, padx=5)

        ttk.Label(form_frame, text="알고리즘:").grid(row=0, column=6, sticky=tk.W, padx=(10, 5))
        ttk.Combobox(form_frame, textvariable=self.algorithm_var, values=list(ALGORITHM_MAP),
                     state='readonly', width=12).grid(row=0, column=7, padx=5)

        self.submit_button = ttk.Button(form_frame, text="추가", command=self.submit)
        self.submit_button.grid(row=0, column=8, padx=5)
        ttk.Button(form_frame, text="전체 삭제", command=self.clear_all).grid(row=0, column=9, padx=5)

        # === 2. 프로세스 목록 / 결과 ===
        tables_frame = ttk.Frame(main_frame)
        tables_frame.grid(row=1, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))
        tables_frame.columnconfigure(0, weight=1)
        tables_frame.columnconfigure(1, weight=1)
        tables_frame.rowconfigure(0, weight=1)

        process_frame = ttk.LabelFrame(tables_frame, text="📋 프로세스 목록", padding="5")
        process_frame.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S), padx=(0, 5))
        process_frame.columnconfigure(0, weight=1)
        process_frame.rowconfigure(0, weight=1)

        self.process_tree = ttk.Treeview(process_frame, columns=('name', 'burst', 'arrival'),
                                         show='headings', height=10)
        for column, heading in (('name', '이름'), ('burst', '버스트'), ('arrival', '도착')):
            self.process_tree.heading(column, text=heading)
            self.process_tree.column(column, width=100, anchor=tk.CENTER)
        self.process_tree.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))

        button_frame = ttk.Frame(process_frame)
        button_frame.grid(row=1, column=0, pady=(5, 0))
        ttk.Button(button_frame, text="수정", command=self.edit_selected).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="삭제", command=self.delete_selected).pack(side=tk.LEFT, padx=5)

        result_frame = ttk.LabelFrame(tables_frame, text="📊 스케줄링 결과", padding="5")
        result_frame.grid(row=0, column=1, sticky=(tk.W, tk.E, tk.N, tk.S), padx=(5, 0))
        result_frame.columnconfigure(0, weight=1)
        result_frame.rowconfigure(0, weight=1)

        self.result_tree = ttk.Treeview(result_frame, columns=('name', 'waiting', 'turnaround'),
                                        show='headings', height=10)
        for column, heading in (('name', '이름'), ('waiting', '대기 시간'), ('turnaround', '반환 시간')):
            self.result_tree.heading(column, text=heading)
            self.result_tree.column(column, width=100, anchor=tk.CENTER)
        self.result_tree.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))

        self.total_waiting_label = ttk.Label(result_frame, text="Total Waiting Time: 0")
        self.total_waiting_label.grid(row=1, column=0, sticky=tk.W)
        self.total_turnaround_label = ttk.Label(result_frame, text="Total Turnaround Time: 0")
        self.total_turnaround_label.grid(row=2, column=0, sticky=tk.W)

        # === 3. 타임라인 ===
        timeline_frame = ttk.LabelFrame(main_frame, text="⏱ 타임라인", padding="5")
        timeline_frame.grid(row=2, column=0, sticky=(tk.W, tk.E), pady=(10, 0))
        timeline_frame.columnconfigure(0, weight=1)

        self.timeline_canvas = tk.Canvas(timeline_frame, height=TIMELINE_BAR_HEIGHT + 30,
                                         background='white')
        self.timeline_canvas.grid(row=0, column=0, sticky=(tk.W, tk.E))

        # === 4. 로그 ===
        log_frame = ttk.LabelFrame(main_frame, text="📝 실행 로그", padding="5")
        log_frame.grid(row=3, column=0, sticky=(tk.W, tk.E), pady=(10, 0))
        log_frame.columnconfigure(0, weight=1)

        self.log_text = scrolledtext.ScrolledText(log_frame, wrap=tk.WORD,
                                                  height=8, font=("Consolas", 9))
        self.log_text.grid(row=0, column=0, sticky=(tk.W, tk.E))
        self.log_text.tag_config("success", foreground="green")
        self.log_text.tag_config("error", foreground="red")
        self.log_text.tag_config("info", foreground="blue")

        self.log("프로세스 스케줄링 시뮬레이터 GUI 시작", "info")

    def parse_form(self):
        """폼 입력을 (이름, 버스트, 도착)으로 변환"""
        try:
            burst_time = int(self.burst_var.get())
            arrival_time = int(self.arrival_var.get())
        except ValueError:
            raise ValidationError("burst_time/arrival_time",
                                  (self.burst_var.get(), self.arrival_var.get()),
                                  "Burst Time and Arrival Time must be integers.")
        return self.name_var.get().strip(), burst_time, arrival_time

    def reset_form(self):
        self.name_var.set("")
        self.burst_var.set("")
        self.arrival_var.set("")
        self.edit_index = None
        self.submit_button.config(text="추가")

    def submit(self):
        """추가 또는 수정 후 선택한 알고리즘으로 재계산"""
        try:
            name, burst_time, arrival_time = self.parse_form()
            if self.edit_index is not None:
                self.simulator.update(self.edit_index, name, burst_time, arrival_time)
                self.log(f"✓ 인덱스 {self.edit_index} 수정: {name}", "success")
            else:
                index = self.simulator.add(name, burst_time, arrival_time)
                self.log(f"✓ '{name}' 추가 (인덱스 {index})", "success")
        except (ValidationError, IndexError) as e:
            messagebox.showerror("오류", str(e))
            self.log(f"✗ {e}", "error")
            return

        self.reset_form()
        self.run_selected()

    def selected_index(self) -> Optional[int]:
        selection = self.process_tree.selection()
        if not selection:
            messagebox.showwarning("경고", "먼저 프로세스를 선택하세요!")
            return None
        return self.process_tree.index(selection[0])

    def edit_selected(self):
        """선택한 프로세스를 폼으로 불러오기"""
        index = self.selected_index()
        if index is None:
            return
        record = self.simulator.registry[index]
        self.name_var.set(record.name)
        self.burst_var.set(str(record.burst_time))
        self.arrival_var.set(str(record.arrival_time))
        self.edit_index = index
        self.submit_button.config(text="수정 저장")

    def delete_selected(self):
        """선택한 프로세스 삭제 후 재계산"""
        index = self.selected_index()
        if index is None:
            return
        if not messagebox.askyesno("확인", "Are you sure you want to delete this process?"):
            return

        removed = self.simulator.remove_at(index)
        self.log(f"✓ '{removed.name}' 삭제", "success")
        self.reset_form()
        run = self.simulator.rerun()
        if run is not None:
            self.display_run(run)
        self.refresh_process_table()

    def clear_all(self):
        self.simulator.clear()
        self.reset_form()
        self.refresh_process_table()
        self.result_tree.delete(*self.result_tree.get_children())
        self.timeline_canvas.delete('all')
        self.total_waiting_label.config(text="Total Waiting Time: 0")
        self.total_turnaround_label.config(text="Total Turnaround Time: 0")
        self.log("전체 삭제", "info")

    def run_selected(self):
        run = self.simulator.run(self.algorithm_var.get())
        self.display_run(run)
        self.refresh_process_table()

    def refresh_process_table(self):
        self.process_tree.delete(*self.process_tree.get_children())
        for record in self.simulator.processes():
            self.process_tree.insert('', tk.END,
                                     values=(record.name, record.burst_time, record.arrival_time))

    def display_run(self, run: ScheduleRun):
        """결과 표, 합계, 타임라인 표시"""
        self.result_tree.delete(*self.result_tree.get_children())
        for result in run.results:
            self.result_tree.insert('', tk.END,
                                    values=(result.name, result.waiting_time, result.turnaround_time))

        self.total_waiting_label.config(text=f"Total Waiting Time: {run.total_waiting_time}")
        self.total_turnaround_label.config(text=f"Total Turnaround Time: {run.total_turnaround_time}")

        self.timeline_canvas.delete('all')
        for entry in run.timeline:
            x0 = 10 + entry.start_offset * TIMELINE_UNIT_PX
            x1 = x0 + entry.duration * TIMELINE_UNIT_PX
            self.timeline_canvas.create_rectangle(x0, 10, x1, 10 + TIMELINE_BAR_HEIGHT,
                                                  fill='#3B82F6', outline='black')
            self.timeline_canvas.create_text((x0 + x1) / 2, 10 + TIMELINE_BAR_HEIGHT / 2,
                                             text=entry.name, fill='white')
            self.timeline_canvas.create_text(x0, 20 + TIMELINE_BAR_HEIGHT,
                                             text=str(entry.start_offset), anchor=tk.N)

        for log_entry in run.event_log:
            self.log(f"  {log_entry}")

    def log(self, message, tag=None):
        """로그 출력"""
        self.log_text.insert(tk.END, message + "\n", tag)
        self.log_text.see(tk.END)

    def run(self):
        """GUI 실행"""
        self.root.mainloop()


def main():
    """메인 함수"""
    app = SchedulerGUI()
    app.run()


if __name__ == "__main__":
    main()

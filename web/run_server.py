"""
웹 서버 실행 스크립트
백엔드 API 서버를 시작합니다.
"""

import os

import uvicorn

HOST = os.environ.get("SCHEDULER_HOST", "0.0.0.0")
PORT = int(os.environ.get("SCHEDULER_PORT", "8000"))


def main():
    print("=" * 60)
    print("  프로세스 스케줄링 시뮬레이터 - 웹 서버")
    print("=" * 60)
    print()
    print(f"API 문서: http://localhost:{PORT}/docs")
    print("종료하려면 Ctrl+C를 누르세요.")
    print("-" * 60)

    uvicorn.run("web.backend.app:app", host=HOST, port=PORT, log_level="info")


if __name__ == "__main__":
    main()

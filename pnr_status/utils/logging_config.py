"""로깅 설정

콘솔(stderr) + 파일 로깅을 구성한다.
리포트 출력(stdout)과 로그가 섞이지 않도록 콘솔 로그는 stderr로 보낸다.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path


_COLORS = {
    "DEBUG": "\033[36m",     # Cyan
    "INFO": "\033[32m",      # Green
    "WARNING": "\033[33m",   # Yellow
    "ERROR": "\033[31m",     # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(name)s │ %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ColorFormatter(logging.Formatter):
    """컬러 로그 포매터 (레코드 원본은 수정하지 않음)"""

    def format(self, record: logging.LogRecord) -> str:
        color = _COLORS.get(record.levelname, "")
        reset = _COLORS["RESET"]
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname:<8}{reset}"
        return super().format(colored)


def setup_logging(
    level: str = "WARNING",
    log_file: str | Path | None = None,
    color: bool | None = None,
) -> None:
    """로깅 초기화

    Args:
        level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
        log_file: 로그 파일 경로 (None이면 콘솔만)
        color: 컬러 출력 여부 (None이면 터미널일 때만)
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # 기존 핸들러 제거
    root.handlers.clear()

    if color is None:
        color = sys.stderr.isatty()

    console = logging.StreamHandler(sys.stderr)
    formatter_cls = ColorFormatter if color else logging.Formatter
    console.setFormatter(formatter_cls(fmt=CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(console)

    # 파일 핸들러 (선택)
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(
            fmt=FILE_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root.addHandler(fh)

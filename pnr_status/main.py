"""PNR 상태 리포트 - CLI 진입점

사용 예시:
    python -m pnr_status.main booking.json
    cat booking.json | python -m pnr_status.main --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from pnr_status.models.config import ReportConfig
from pnr_status.processor import PNRStatusProcessor
from pnr_status.utils.logging_config import setup_logging

logger = logging.getLogger("pnr.cli")

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="철도 PNR 상태 리포트",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "예시:\n"
            "  python -m pnr_status.main booking.json\n"
            "  cat booking.json | python -m pnr_status.main --json"
        ),
    )
    p.add_argument(
        "input",
        nargs="?",
        default="-",
        help="PNR JSON 파일 경로 (기본: stdin)",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="텍스트 대신 JSON으로 출력",
    )
    p.add_argument(
        "--name-width",
        type=int,
        default=20,
        help="승객 이름 최소 폭 (기본: 20)",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    p.add_argument("--log-file", default=None, help="로그 파일 경로")
    return p


def load_booking(source: str) -> Any:
    """파일 경로 또는 '-'(stdin)에서 JSON 로드"""
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    return json.loads(text)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        config = ReportConfig(name_width=args.name_width)
    except ValueError as e:
        parser.error(str(e))

    try:
        data = load_booking(args.input)
    except (OSError, ValueError) as e:
        logger.error("입력을 읽을 수 없습니다: %s", e)
        print(f"[오류] 입력을 읽을 수 없습니다: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    report = PNRStatusProcessor(config).process(data)
    if report is None:
        print("[오류] 유효하지 않은 PNR 데이터입니다", file=sys.stderr)
        return EXIT_REJECTED

    if args.json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(report.display())
    logger.info("리포트 출력 완료: %s", report.pnr_formatted)
    return EXIT_OK


def cli_entry() -> None:
    """CLI 진입점 (pyproject.toml scripts에서 호출)"""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()

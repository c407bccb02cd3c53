"""PNR 상태 리포트 패키지

  process_railway_pnr - 원본 PNR 데이터 → PNRReport | None
  PNRStatusProcessor  - 설정을 받는 처리기
"""

from pnr_status.models.config import ReportConfig
from pnr_status.models.report import (
    PassengerReport,
    PNRReport,
    PNRSummary,
    StatusLabel,
)
from pnr_status.processor import PNRStatusProcessor, process_railway_pnr
from pnr_status.skills.classifier import classify_status

__all__ = [
    "ReportConfig",
    "PassengerReport",
    "PNRReport",
    "PNRSummary",
    "StatusLabel",
    "PNRStatusProcessor",
    "process_railway_pnr",
    "classify_status",
]

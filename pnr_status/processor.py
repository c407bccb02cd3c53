"""PNR 상태 처리기

스킬 구성: ValidationSkill → ClassifierSkill → FormatterSkill / SummarySkill
단일 호출, 동기, 무상태. 입력 데이터는 수정하지 않는다.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pnr_status.models.booking import BookingRecord, PassengerRecord
from pnr_status.models.config import ReportConfig
from pnr_status.models.report import PassengerReport, PNRReport
from pnr_status.skills.classifier import ClassifierSkill
from pnr_status.skills.formatter import FormatterSkill
from pnr_status.skills.summary import SummarySkill
from pnr_status.skills.validation import ValidationSkill

logger = logging.getLogger("pnr.processor")


class PNRStatusProcessor:
    """원본 PNR 데이터 → PNRReport (검증 실패 시 None)"""

    __slots__ = ("_validator", "_classifier", "_formatter", "_summary")

    def __init__(self, config: Optional[ReportConfig] = None) -> None:
        self._validator = ValidationSkill()
        self._classifier = ClassifierSkill()
        self._formatter = FormatterSkill(config)
        self._summary = SummarySkill()

    def process(self, data: Any) -> Optional[PNRReport]:
        booking = self._validator.validate_booking(data)
        if booking is None:
            return None
        return self.build_report(booking)

    def build_report(self, booking: BookingRecord) -> PNRReport:
        passengers = tuple(self._passenger_report(p) for p in booking.passengers)
        summary = self._summary.summarize(passengers)

        report = PNRReport(
            pnr_formatted=self._formatter.format_pnr(booking.pnr),
            train_info=self._formatter.format_train_info(booking),
            passengers=passengers,
            summary=summary,
            chart_prepared=self._summary.is_chart_prepared(passengers),
        )
        if summary.unclassified:
            logger.warning(
                "PNR %s: 분류할 수 없는 승객 %d명",
                report.pnr_formatted, summary.unclassified,
            )
        logger.debug(
            "PNR %s 처리 완료: 승객 %d명, 확정 %d명",
            report.pnr_formatted, summary.total_passengers, summary.confirmed,
        )
        return report

    def _passenger_report(self, passenger: PassengerRecord) -> PassengerReport:
        return PassengerReport(
            formatted_name=self._formatter.format_name(passenger),
            booking_status=passenger.booking,
            current_status=passenger.current,
            status_label=self._classifier.execute(passenger.current),
        )


_default_processor = PNRStatusProcessor()


def process_railway_pnr(data: Any) -> Optional[PNRReport]:
    """기본 설정으로 PNR 데이터 처리"""
    return _default_processor.process(data)

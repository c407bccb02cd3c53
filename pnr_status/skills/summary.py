"""집계 스킬

승객별 리포트 목록을 요약 카운트와 차트 확정 여부로 축약한다.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from pnr_status.models.report import PassengerReport, PNRSummary, StatusLabel
from pnr_status.skills.base import BaseSkill


class SummarySkill(BaseSkill[Sequence[PassengerReport], PNRSummary]):
    """승객 상태 집계 스킬"""

    @property
    def name(self) -> str:
        return "summary"

    def execute(self, input_data: Sequence[PassengerReport]) -> PNRSummary:
        return self.summarize(input_data)

    @staticmethod
    def summarize(passengers: Sequence[PassengerReport]) -> PNRSummary:
        counts = Counter(p.status_label for p in passengers)
        return PNRSummary(
            total_passengers=len(passengers),
            confirmed=counts[StatusLabel.CONFIRMED],
            waiting=counts[StatusLabel.WAITING],
            cancelled=counts[StatusLabel.CANCELLED],
            rac=counts[StatusLabel.RAC],
            all_confirmed=all(p.is_confirmed for p in passengers),
            any_waiting=counts[StatusLabel.WAITING] > 0,
        )

    @staticmethod
    def is_chart_prepared(passengers: Sequence[PassengerReport]) -> bool:
        """취소되지 않은 승객이 모두 확정이면 True (전원 취소 시에도 True)"""
        return all(
            p.is_confirmed
            for p in passengers
            if p.status_label is not StatusLabel.CANCELLED
        )

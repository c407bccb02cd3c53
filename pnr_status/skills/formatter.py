"""표시 문자열 포맷 스킬

PNR 분할, 열차 정보 한 줄, 승객 이름 정렬을 담당한다.
"""

from __future__ import annotations

from pnr_status.models.booking import BookingRecord, PassengerRecord
from pnr_status.models.config import ReportConfig
from pnr_status.skills.base import BaseSkill


def _text(value: object) -> str:
    """표시용 문자열 변환

    None → 빈 문자열, bool → true/false, 정수값 float(60.0) → "60".
    JSON에서 읽은 숫자가 입력 형태와 같게 보이도록 한다.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class FormatterSkill(BaseSkill[PassengerRecord, str]):
    """표시 문자열 포맷 스킬

    execute()는 승객 이름 포맷이다. PNR / 열차 정보 포맷은
    예약 단위로 한 번만 쓰이므로 별도 메서드로 둔다.
    """

    __slots__ = ("_config",)

    def __init__(self, config: ReportConfig | None = None) -> None:
        self._config = config or ReportConfig()

    @property
    def name(self) -> str:
        return "formatter"

    def execute(self, input_data: PassengerRecord) -> str:
        return self.format_name(input_data)

    def format_pnr(self, pnr: str) -> str:
        """1234567890 → 123-456-7890"""
        parts: list[str] = []
        pos = 0
        for size in self._config.pnr_groups:
            parts.append(pnr[pos:pos + size])
            pos += size
        return self._config.pnr_separator.join(parts)

    @staticmethod
    def format_train_info(booking: BookingRecord) -> str:
        """Train: {번호} - {이름} | {출발} → {도착} | Class: {등급}

        열차 필드나 classBooked가 없으면(None) 빈 문자열로 표시한다.
        """
        t = booking.train
        return (
            f"Train: {_text(t.number)} - {_text(t.name)} | "
            f"{_text(t.origin)} → {_text(t.destination)} | "
            f"Class: {_text(booking.class_booked)}"
        )

    def format_name(self, passenger: PassengerRecord) -> str:
        """이름을 최소 폭까지 오른쪽 공백 채움 + (나이/성별). 긴 이름은 자르지 않음"""
        name = _text(passenger.name).ljust(self._config.name_width)
        return f"{name}({_text(passenger.age)}/{_text(passenger.gender)})"

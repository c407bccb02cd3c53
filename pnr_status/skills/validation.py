"""입력 검증 스킬

PNR 원본 데이터의 구조를 검증하고 BookingRecord를 생성한다.
검증 실패는 예외가 아니라 None으로 알린다.

승객 항목의 필드 타입은 검사하지 않는다 (알려진 느슨함).
분류 불가능한 승객은 status_label=None으로 리포트에 남는다.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Optional

from pnr_status.models.booking import BookingRecord, PassengerRecord, TrainDetails
from pnr_status.skills.base import BaseSkill

logger = logging.getLogger("pnr.skill.validation")

# ASCII 숫자 10자리 (str.isdigit은 유니코드 숫자도 허용하므로 사용하지 않음)
_PNR_PATTERN = re.compile(r"[0-9]{10}")


class ValidationSkill(BaseSkill[Any, Optional[BookingRecord]]):
    """PNR 구조 검증 스킬"""

    @property
    def name(self) -> str:
        return "validation"

    def execute(self, input_data: Any) -> Optional[BookingRecord]:
        return self.validate_booking(input_data)

    def validate_booking(self, data: Any) -> Optional[BookingRecord]:
        """순서대로 검사하고 첫 실패에서 None 반환"""

        if not isinstance(data, Mapping):
            return self._reject("입력이 dict가 아닙니다: %s", type(data).__name__)

        pnr = data.get("pnr")
        if not self.is_valid_pnr(pnr):
            return self._reject("PNR 형식 오류: %r", pnr)

        train = data.get("train")
        if not isinstance(train, Mapping):
            return self._reject("열차 정보가 없거나 dict가 아닙니다")

        passengers = data.get("passengers")
        if not isinstance(passengers, (list, tuple)) or not passengers:
            return self._reject("승객 목록이 없거나 비어 있습니다")

        return BookingRecord(
            pnr=pnr,
            train=TrainDetails.from_mapping(train),
            class_booked=data.get("classBooked"),
            passengers=tuple(PassengerRecord.from_raw(p) for p in passengers),
        )

    @staticmethod
    def is_valid_pnr(pnr: object) -> bool:
        """PNR은 정확히 10자리 숫자 문자열"""
        return isinstance(pnr, str) and _PNR_PATTERN.fullmatch(pnr) is not None

    @staticmethod
    def _reject(msg: str, *args: object) -> None:
        logger.debug("예약 거부: " + msg, *args)
        return None

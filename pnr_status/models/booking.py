"""데이터 모델: 예약(PNR) 입력 레코드

검증을 통과한 입력만 BookingRecord로 만들어진다.
승객 필드는 타입 검사 없이 원본 값을 그대로 보관한다.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class TrainDetails:
    """열차 정보 (자유 형식 문자열)"""

    number: Any = None
    name: Any = None
    origin: Any = None
    destination: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TrainDetails:
        return cls(
            number=data.get("number"),
            name=data.get("name"),
            origin=data.get("from"),
            destination=data.get("to"),
        )


@dataclass(frozen=True, slots=True)
class PassengerRecord:
    """승객 원본 레코드"""

    name: Any = None
    age: Any = None
    gender: Any = None
    booking: Any = None
    current: Any = None

    @classmethod
    def from_raw(cls, entry: object) -> PassengerRecord:
        """승객 항목 → PassengerRecord. dict가 아니면 빈 레코드."""
        if not isinstance(entry, Mapping):
            return cls()
        return cls(
            name=entry.get("name"),
            age=entry.get("age"),
            gender=entry.get("gender"),
            booking=entry.get("booking"),
            current=entry.get("current"),
        )


@dataclass(frozen=True, slots=True)
class BookingRecord:
    """검증된 불변 예약 레코드"""

    pnr: str
    train: TrainDetails
    class_booked: Any
    passengers: tuple[PassengerRecord, ...]

    def __post_init__(self) -> None:
        if not self.passengers:
            raise ValueError("승객이 최소 1명 이상이어야 합니다")

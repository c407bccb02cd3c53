"""데이터 모델: 상태 라벨, 승객별 리포트, 요약, 최종 PNR 리포트

모든 모델은 frozen=True + slots=True로 불변성을 보장한다.
to_dict()는 camelCase 키를 사용하는 직렬화 형태를 반환한다.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class StatusLabel(str, Enum):
    """현재 좌석 코드의 의미 라벨"""

    CONFIRMED = "CONFIRMED"
    WAITING = "WAITING"
    CANCELLED = "CANCELLED"
    RAC = "RAC"


@dataclass(frozen=True, slots=True)
class PassengerReport:
    """승객 한 명의 파생 결과"""

    formatted_name: str
    booking_status: Any
    current_status: Any
    status_label: Optional[StatusLabel]

    @property
    def is_confirmed(self) -> bool:
        return self.status_label is StatusLabel.CONFIRMED

    def to_dict(self) -> dict[str, Any]:
        return {
            "formattedName": self.formatted_name,
            "bookingStatus": self.booking_status,
            "currentStatus": self.current_status,
            "statusLabel": (
                self.status_label.value if self.status_label else None
            ),
            "isConfirmed": self.is_confirmed,
        }

    def display(self) -> str:
        label = self.status_label.value if self.status_label else "UNKNOWN"
        return (
            f"{self.formatted_name}  "
            f"{self.booking_status} → {self.current_status}  [{label}]"
        )


@dataclass(frozen=True, slots=True)
class PNRSummary:
    """승객 상태 집계"""

    total_passengers: int
    confirmed: int
    waiting: int
    cancelled: int
    rac: int
    all_confirmed: bool
    any_waiting: bool

    @property
    def unclassified(self) -> int:
        return self.total_passengers - (
            self.confirmed + self.waiting + self.cancelled + self.rac
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalPassengers": self.total_passengers,
            "confirmed": self.confirmed,
            "waiting": self.waiting,
            "cancelled": self.cancelled,
            "rac": self.rac,
            "allConfirmed": self.all_confirmed,
            "anyWaiting": self.any_waiting,
        }


@dataclass(frozen=True, slots=True)
class PNRReport:
    """PNR 상태 리포트 (호출마다 새로 생성)"""

    pnr_formatted: str
    train_info: str
    passengers: tuple[PassengerReport, ...]
    summary: PNRSummary
    chart_prepared: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "pnrFormatted": self.pnr_formatted,
            "trainInfo": self.train_info,
            "passengers": [p.to_dict() for p in self.passengers],
            "summary": self.summary.to_dict(),
            "chartPrepared": self.chart_prepared,
        }

    def display(self) -> str:
        s = self.summary
        lines = [
            f"PNR: {self.pnr_formatted}",
            self.train_info,
            "",
        ]
        lines.extend(f"  {p.display()}" for p in self.passengers)
        counts = [
            f"Confirmed {s.confirmed}",
            f"Waiting {s.waiting}",
            f"RAC {s.rac}",
            f"Cancelled {s.cancelled}",
        ]
        if s.unclassified:
            counts.append(f"Unknown {s.unclassified}")
        lines.append("")
        lines.append(f"Passengers: {s.total_passengers} ({' / '.join(counts)})")
        lines.append(
            f"Chart: {'PREPARED' if self.chart_prepared else 'NOT PREPARED'}"
        )
        return "\n".join(lines)

"""승객 상태 분류 스킬

현재 좌석 코드 → StatusLabel. 위에서부터 먼저 일치한 규칙이 이긴다.
어휘를 확장할 때도 이 우선순위를 유지해야 한다.
"""

from __future__ import annotations

from typing import Optional

from pnr_status.models.report import StatusLabel
from pnr_status.skills.base import BaseSkill

# (규칙, 라벨) 우선순위 순서
_RULES: tuple[tuple[str, tuple[str, ...], StatusLabel], ...] = (
    ("prefix", ("B", "S"), StatusLabel.CONFIRMED),   # 좌석/침대 배정
    ("prefix", ("WL",), StatusLabel.WAITING),
    ("exact", ("CAN",), StatusLabel.CANCELLED),
    ("prefix", ("RAC",), StatusLabel.RAC),
)


def classify_status(code: object) -> Optional[StatusLabel]:
    """좌석 코드 분류. 일치하는 규칙이 없으면 None"""
    if not isinstance(code, str):
        return None
    for kind, values, label in _RULES:
        if kind == "exact":
            if code in values:
                return label
        elif code.startswith(values):
            return label
    return None


class ClassifierSkill(BaseSkill[object, Optional[StatusLabel]]):
    """승객 상태 분류 스킬"""

    @property
    def name(self) -> str:
        return "classifier"

    def execute(self, input_data: object) -> Optional[StatusLabel]:
        return classify_status(input_data)

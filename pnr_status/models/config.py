"""리포트 출력 설정 모델"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportConfig:
    """리포트 포맷 파라미터 (기본값이 표준 출력 형식)"""

    # 승객 이름 최소 폭 (초과 시 자르지 않음)
    name_width: int = 20

    # PNR 10자리 분할: 123-456-7890
    pnr_groups: tuple[int, ...] = (3, 3, 4)
    pnr_separator: str = "-"

    def __post_init__(self) -> None:
        if self.name_width < 1:
            raise ValueError("이름 폭은 1 이상이어야 합니다")
        if any(g < 1 for g in self.pnr_groups):
            raise ValueError("PNR 분할 길이는 1 이상이어야 합니다")
        if sum(self.pnr_groups) != 10:
            raise ValueError("PNR 분할 길이의 합은 10이어야 합니다")

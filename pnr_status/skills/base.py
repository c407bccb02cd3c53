"""스킬 기본 인터페이스

모든 스킬은 BaseSkill을 상속하여 단일 책임 원칙을 따른다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T_In = TypeVar("T_In")
T_Out = TypeVar("T_Out")


class BaseSkill(ABC, Generic[T_In, T_Out]):
    """스킬 기본 인터페이스

    규칙:
    - 단일 책임: 하나의 명확한 변환만 수행
    - 무상태: 호출 간 상태를 보관하지 않음
    - 입력 불변: 전달받은 데이터를 수정하지 않음
    - 테스트 가능: 모든 스킬에 단위 테스트 필수
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """스킬 고유 이름"""

    @abstractmethod
    def execute(self, input_data: T_In) -> T_Out:
        """스킬 실행"""

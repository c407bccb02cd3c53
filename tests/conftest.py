"""pytest 공통 픽스처

모든 테스트에서 공유하는 샘플 PNR 데이터를 제공한다.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import pytest

PassengerFactory = Callable[..., dict[str, Any]]


def _passenger(
    name: str = "Rahul",
    age: int = 28,
    gender: str = "M",
    booking: str = "B1",
    current: str = "B1",
) -> dict[str, Any]:
    return {
        "name": name,
        "age": age,
        "gender": gender,
        "booking": booking,
        "current": current,
    }


@pytest.fixture
def make_passenger() -> PassengerFactory:
    """승객 dict 생성 헬퍼"""
    return _passenger


@pytest.fixture
def sample_train() -> dict[str, str]:
    """표준 테스트용 열차 (Rajdhani, NDLS → HWH)"""
    return {
        "number": "12301",
        "name": "Rajdhani Express",
        "from": "NDLS",
        "to": "HWH",
    }


@pytest.fixture
def make_pnr_data(sample_train: dict[str, str]) -> Callable[..., dict[str, Any]]:
    """current 코드 목록으로 PNR dict 생성"""

    def _make(*currents: str, pnr: str = "1234567890") -> dict[str, Any]:
        return {
            "pnr": pnr,
            "train": dict(sample_train),
            "classBooked": "3A",
            "passengers": [
                _passenger(name=f"Passenger {i}", current=code)
                for i, code in enumerate(currents, start=1)
            ],
        }

    return _make


@pytest.fixture
def sample_pnr_data(sample_train: dict[str, str]) -> dict[str, Any]:
    """확정 / 대기 → 확정 / 대기 승객 3명"""
    return {
        "pnr": "1234567890",
        "train": sample_train,
        "classBooked": "3A",
        "passengers": [
            _passenger("Rahul Kumar", 28, "M", "B1", "B1"),
            _passenger("Priya Sharma", 25, "F", "WL5", "B3"),
            _passenger("Amit Singh", 60, "M", "WL12", "WL8"),
        ],
    }


@pytest.fixture
def confirmed_pnr_data(sample_train: dict[str, str]) -> dict[str, Any]:
    """승객 1명, 확정"""
    return {
        "pnr": "1234567890",
        "train": sample_train,
        "classBooked": "3A",
        "passengers": [_passenger("Rahul", 28, "M", "B1", "B1")],
    }


@pytest.fixture
def restore_root_logger():
    """setup_logging이 바꾼 루트 로거 핸들러/레벨 복원"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)

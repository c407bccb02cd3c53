"""리포트 모델 / 설정 모델 테스트"""

import pytest

from pnr_status.models.booking import BookingRecord, TrainDetails
from pnr_status.models.config import ReportConfig
from pnr_status.models.report import (
    PassengerReport,
    PNRReport,
    PNRSummary,
    StatusLabel,
)


def _passenger(label):
    return PassengerReport(
        formatted_name="Rahul" + " " * 15 + "(28/M)",
        booking_status="WL5",
        current_status="B3",
        status_label=label,
    )


class TestPassengerReport:
    def test_is_confirmed(self):
        assert _passenger(StatusLabel.CONFIRMED).is_confirmed is True
        assert _passenger(StatusLabel.RAC).is_confirmed is False
        assert _passenger(None).is_confirmed is False

    def test_to_dict(self):
        assert _passenger(StatusLabel.CONFIRMED).to_dict() == {
            "formattedName": "Rahul" + " " * 15 + "(28/M)",
            "bookingStatus": "WL5",
            "currentStatus": "B3",
            "statusLabel": "CONFIRMED",
            "isConfirmed": True,
        }

    def test_to_dict_unclassified(self):
        d = _passenger(None).to_dict()
        assert d["statusLabel"] is None
        assert d["isConfirmed"] is False

    def test_frozen(self):
        p = _passenger(None)
        with pytest.raises(AttributeError):
            p.status_label = StatusLabel.RAC

    def test_display(self):
        d = _passenger(StatusLabel.CONFIRMED).display()
        assert "WL5 → B3" in d
        assert "[CONFIRMED]" in d
        assert "[UNKNOWN]" in _passenger(None).display()


class TestPNRReport:
    def _report(self, label=StatusLabel.WAITING, chart=False):
        summary = PNRSummary(
            total_passengers=1, confirmed=0, waiting=1, cancelled=0, rac=0,
            all_confirmed=False, any_waiting=True,
        )
        return PNRReport(
            pnr_formatted="123-456-7890",
            train_info="Train: 12301 - Rajdhani Express | NDLS → HWH | Class: 3A",
            passengers=(_passenger(label),),
            summary=summary,
            chart_prepared=chart,
        )

    def test_to_dict_keys(self):
        d = self._report().to_dict()
        assert list(d) == [
            "pnrFormatted", "trainInfo", "passengers", "summary", "chartPrepared",
        ]
        assert d["summary"] == {
            "totalPassengers": 1,
            "confirmed": 0,
            "waiting": 1,
            "cancelled": 0,
            "rac": 0,
            "allConfirmed": False,
            "anyWaiting": True,
        }
        assert isinstance(d["passengers"], list)

    def test_display(self):
        text = self._report().display()
        assert text.splitlines()[0] == "PNR: 123-456-7890"
        assert "Rajdhani Express" in text
        assert "Passengers: 1 (Confirmed 0 / Waiting 1 / RAC 0 / Cancelled 0)" in text
        assert text.endswith("Chart: NOT PREPARED")

    def test_display_unknown_count(self):
        report = PNRReport(
            pnr_formatted="123-456-7890",
            train_info="t",
            passengers=(_passenger(None),),
            summary=PNRSummary(1, 0, 0, 0, 0, False, False),
            chart_prepared=False,
        )
        assert "Unknown 1" in report.display()


class TestBookingRecord:
    def test_empty_passengers_invalid(self):
        with pytest.raises(ValueError, match="승객"):
            BookingRecord(
                pnr="1234567890",
                train=TrainDetails(),
                class_booked="3A",
                passengers=(),
            )


class TestReportConfig:
    def test_defaults(self):
        c = ReportConfig()
        assert c.name_width == 20
        assert c.pnr_groups == (3, 3, 4)
        assert c.pnr_separator == "-"

    def test_bad_width(self):
        with pytest.raises(ValueError, match="이름 폭"):
            ReportConfig(name_width=0)

    def test_groups_must_cover_pnr(self):
        with pytest.raises(ValueError, match="합"):
            ReportConfig(pnr_groups=(3, 3, 3))

    def test_zero_group(self):
        with pytest.raises(ValueError, match="분할 길이"):
            ReportConfig(pnr_groups=(0, 10))

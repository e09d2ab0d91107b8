"""
Tests for services/metrics.py — 계산 필드, 진행률, D-Day, 단가
"""
from datetime import date

import pytest

from models import ProgramStatus
from services.metrics import (
    calculate_completion_rate,
    calculate_dday,
    calculate_progress_rate,
    calculate_recruitment_rate,
    dday_urgency,
    derive_fields,
    determine_status,
    extract_school_code,
    get_unit_price,
    make_quarter_key,
    program_detail,
    project_revenue,
    quarter_sort_key,
    round_half_up,
)


class TestRounding:
    def test_half_up_not_bankers(self):
        assert round_half_up(0.25) == 0.3
        assert round_half_up(2.5, 0) == 3.0
        assert round_half_up(33.333) == 33.3


class TestRecruitmentRate:
    def test_basic(self):
        assert calculate_recruitment_rate(24, 60) == 40.0
        assert calculate_recruitment_rate(2, 3) == 66.7

    @pytest.mark.parametrize("confirmed,capacity", [(None, 60), (0, 60), (10, 0), (10, -5)])
    def test_insufficient_inputs_are_zero(self, confirmed, capacity):
        assert calculate_recruitment_rate(confirmed, capacity) == 0.0


class TestCompletionRate:
    def test_override_wins(self):
        assert calculate_completion_rate(14, 60, 58.3) == 58.3

    def test_override_zero_still_wins(self):
        assert calculate_completion_rate(14, 60, 0.0) == 0.0

    def test_computed_from_counts(self):
        assert calculate_completion_rate(14, 60) == 23.3

    def test_missing_completed_count(self):
        assert calculate_completion_rate(None, 60) == 0.0
        assert calculate_completion_rate(10, 0) == 0.0


class TestStatus:
    today = date(2025, 9, 1)

    def test_after_end_date_is_completed(self):
        assert determine_status(date(2025, 8, 31), None, None, self.today) == ProgramStatus.COMPLETED

    def test_on_end_date_is_in_progress(self):
        assert determine_status(date(2025, 9, 1), None, None, self.today) == ProgramStatus.IN_PROGRESS

    def test_early_completion_with_data(self):
        status = determine_status(date(2026, 1, 1), 20, 4.5, self.today)
        assert status == ProgramStatus.COMPLETED

    def test_completion_count_without_satisfaction(self):
        status = determine_status(date(2026, 1, 1), 20, None, self.today)
        assert status == ProgramStatus.IN_PROGRESS

    def test_no_end_date(self):
        assert determine_status(None, None, None, self.today) == ProgramStatus.IN_PROGRESS


class TestQuarterKey:
    def test_key(self):
        assert make_quarter_key(2024, "3Q") == "2024 3Q"

    def test_sort_is_chronological(self):
        keys = ["2025 1Q", "2024 4Q", "2024 3Q", "2025 3Q"]
        assert sorted(keys, key=quarter_sort_key) == ["2024 3Q", "2024 4Q", "2025 1Q", "2025 3Q"]


class TestDeriveFields:
    def test_recomputes_all(self, make_program):
        record = make_program(confirmed_count=24, completed_count=14, satisfaction_score=4.2)
        again = derive_fields(record, date(2025, 9, 1))
        assert again == record
        assert record.recruitment_rate == 40.0
        assert record.completion_rate == 23.3
        assert record.quarter_key == "2024 3Q"


class TestProgressRate:
    start = date(2025, 1, 1)
    end = date(2025, 1, 11)

    def test_no_end_date(self):
        assert calculate_progress_rate(self.start, None, date(2025, 1, 5)) == 0

    def test_before_or_on_start(self):
        assert calculate_progress_rate(self.start, self.end, date(2024, 12, 1)) == 0
        assert calculate_progress_rate(self.start, self.end, self.start) == 0

    def test_after_end(self):
        assert calculate_progress_rate(self.start, self.end, self.end) == 100
        assert calculate_progress_rate(self.start, self.end, date(2025, 2, 1)) == 100

    def test_midway(self):
        assert calculate_progress_rate(self.start, self.end, date(2025, 1, 6)) == 50
        assert calculate_progress_rate(self.start, date(2025, 1, 4), date(2025, 1, 2)) == 33


class TestDDay:
    today = date(2025, 9, 1)

    def test_labels(self):
        assert calculate_dday(None, self.today) == "-"
        assert calculate_dday(date(2025, 8, 31), self.today) == "진행완료"
        assert calculate_dday(self.today, self.today) == "D-DAY"
        assert calculate_dday(date(2025, 9, 11), self.today) == "D-10"

    @pytest.mark.parametrize("label,expected", [
        ("D-DAY", "done"),
        ("진행완료", "done"),
        ("D-3", "urgent"),
        ("D-30", "soon"),
        ("D-90", "normal"),
        ("-", "normal"),
    ])
    def test_urgency(self, label, expected):
        assert dday_urgency(label) == expected


class TestUnitPrice:
    @pytest.mark.parametrize("code,school", [
        ("KDT_B_AIW_0001", "AIW"),
        ("KDT_B_UGM_0002", "UGM"),
        ("KDT_B_GM_0001", "GM"),
        ("KDT_B_BEPY_0012", "BEBY"),
        ("KDT_B_CLD_0002", "CLOUD"),
        ("KDT_B_BEJV_0013", "BEJ"),
        ("KDT_B_UXUID_0004", "UXUID"),
        ("kdt_b_fe_0011", "FE"),
    ])
    def test_school_extraction(self, code, school):
        assert extract_school_code(code) == school

    def test_unknown_school_price_is_zero(self):
        assert extract_school_code("KDT_B_BC_0006") is None
        assert get_unit_price("KDT_B_BC_0006") == 0
        assert get_unit_price("KDT_B_iOS_0007") == 0

    def test_prices(self):
        assert get_unit_price("KDT_B_UGM_0002") == 16_698_000
        assert get_unit_price("KDT_B_GM_0001") == 11_035_200
        assert get_unit_price("KDT_B_CLD_0002") == 14_520_000


class TestRevenue:
    def test_projection(self, make_program):
        record = make_program(course_code="KDT_B_DA_0003", confirmed_count=53)
        revenue = project_revenue(record)
        assert revenue["unit_price"] == 13_794_000
        assert revenue["current_revenue"] == 13_794_000 * 53
        assert revenue["expected_revenue"] == 13_794_000 * 60

    def test_missing_confirmed_count(self, make_program):
        assert project_revenue(make_program())["current_revenue"] == 0

    def test_completed_program_detail(self, make_program):
        detail = program_detail(make_program(), date(2025, 9, 1))
        assert detail["progress_rate"] == 100
        assert detail["dday"] == "진행완료"
        assert detail["key"] == "KDT_B_AIW_0001_1"

    def test_in_progress_program_detail(self, make_program):
        record = make_program(
            start_date=date(2025, 8, 1), end_date=date(2025, 9, 11), year=2025, quarter="3Q",
        )
        detail = program_detail(record, date(2025, 9, 1))
        assert detail["dday"] == "D-10"
        assert detail["dday_urgency"] == "soon"
        assert 0 < detail["progress_rate"] < 100

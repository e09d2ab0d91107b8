"""
KDT Dashboard 테스트 공용 fixture
"""
import sys
from datetime import date
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from services.data_parser import load_builtin_programs
from services.program_store import ProgramStore, build_program
from services.storage_service import LocalJsonStorage

TODAY = date(2025, 9, 1)

HEADER = (
    "과정구분,과정코드,회차,교육시간,개강,종강,년도,분기,HRD 만족도,정원,전체 지원,지원완료,"
    "HRD 전환률,HRD 확정,이탈,수료,근로자,산정 제외,제외 수료율,취창업,취업률,제외 취업률,최소 매출(수료 인원)"
)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def csv_header():
    return HEADER


@pytest.fixture
def builtin_programs():
    return load_builtin_programs(TODAY).records


@pytest.fixture
def storage(tmp_path):
    return LocalJsonStorage(filepath=str(tmp_path / "user_programs.json"))


@pytest.fixture
def store(builtin_programs, storage):
    s = ProgramStore(builtin_programs, storage, clock=lambda: TODAY)
    s.load()
    return s


@pytest.fixture
def program_input():
    """생성/수정 API 입력 dict 팩토리"""
    def _make(**overrides):
        data = {
            "category_name": "테스트",
            "course_code": "X",
            "cohort_number": 1,
            "training_hours": 920,
            "start_date": "2025-08-01",
            "end_date": "2026-01-30",
            "year": 2025,
            "quarter": "3Q",
            "capacity": 100,
            "confirmed_count": 50,
            "completed_count": None,
        }
        data.update(overrides)
        return data
    return _make


@pytest.fixture
def make_program():
    """계산 필드가 채워진 ProgramRecord 팩토리"""
    def _make(today=TODAY, **overrides):
        fields = {
            "category_name": "AI웹",
            "course_code": "KDT_B_AIW_0001",
            "cohort_number": 1,
            "training_hours": 920,
            "start_date": date(2024, 7, 10),
            "end_date": date(2025, 1, 3),
            "year": 2024,
            "quarter": "3Q",
            "capacity": 60,
        }
        fields.update(overrides)
        return build_program(fields, today)
    return _make

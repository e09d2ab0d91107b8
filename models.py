"""
KDT Dashboard - 데이터 모델
"""
from dataclasses import dataclass, field, fields, replace
from datetime import date
from enum import Enum
from typing import List, Optional


class ProgramStatus(str, Enum):
    """과정 진행상태 (저장값이 아니라 항상 계산값)"""
    IN_PROGRESS = '진행중'
    COMPLETED = '완료'


@dataclass
class ProgramRecord:
    """KDT 과정 회차 1건"""
    # 기본 정보
    category_name: str             # "AI웹"
    course_code: str               # "KDT_B_AIW_0001"
    cohort_number: int             # 회차
    training_hours: int            # 교육시간
    start_date: date               # 개강
    end_date: Optional[date]       # 종강 (None = 종강일 미정)
    year: int                      # 년도
    quarter: str                   # "3Q"
    capacity: int                  # 정원

    # 성과 지표 (None = 아직 집계되지 않음, 0과 구분)
    satisfaction_score: Optional[float] = None       # HRD 만족도 (0~5)
    total_applicants: Optional[int] = None           # 전체 지원
    applications_completed: Optional[int] = None     # 지원완료
    conversion_rate: Optional[float] = None          # HRD 전환률 (%)
    confirmed_count: Optional[int] = None            # HRD 확정
    dropouts: Optional[int] = None                   # 이탈
    completed_count: Optional[int] = None            # 수료
    employed_while_enrolled: Optional[int] = None    # 근로자
    excluded_from_calc: Optional[int] = None         # 산정 제외
    completion_rate_excl: Optional[float] = None     # 제외 수료율 (%)
    employment_transitions: Optional[int] = None     # 취창업
    employment_rate: Optional[float] = None          # 취업률 (%)
    employment_rate_excl: Optional[float] = None     # 제외 취업률 (%)
    minimum_revenue: Optional[int] = None            # 최소 매출 (원)

    # 계산 필드
    status: ProgramStatus = ProgramStatus.IN_PROGRESS
    recruitment_rate: float = 0.0                    # 모객율
    completion_rate: float = 0.0                     # 수료율
    quarter_key: str = ''                            # "2024 3Q"

    @property
    def key(self):
        """과정코드_회차 (저장소 내 식별자)"""
        return f"{self.course_code}_{self.cohort_number}"

    def to_dict(self):
        d = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, date):
                value = value.isoformat()
            elif isinstance(value, ProgramStatus):
                value = value.value
            d[f.name] = value
        return d

    @classmethod
    def from_dict(cls, d):
        """to_dict() 결과로부터 복원 (날짜는 date 타입으로)"""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in d.items() if k in known}
        values['start_date'] = date.fromisoformat(values['start_date'])
        end = values.get('end_date')
        values['end_date'] = date.fromisoformat(end) if end else None
        if 'status' in values:
            values['status'] = ProgramStatus(values['status'])
        return cls(**values)

    def copy_with(self, **changes):
        return replace(self, **changes)


@dataclass
class FilterCriteria:
    """대시보드 필터 (지정된 조건만 AND 적용)"""
    year: Optional[int] = None
    quarter: Optional[str] = None
    month: Optional[int] = None          # 개강 월 (1~12)
    category_name: Optional[str] = None
    status: Optional[str] = None         # '진행중' | '완료' | '전체'


@dataclass
class RowError:
    """원천 데이터 행 파싱 오류"""
    line_number: int
    message: str
    raw: str = ""


@dataclass
class ParseResult:
    """파싱 결과 (정상 레코드 + 행 단위 오류)"""
    records: List[ProgramRecord] = field(default_factory=list)
    errors: List[RowError] = field(default_factory=list)

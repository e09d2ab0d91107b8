"""
KDT 과정 CSV 파서
"""
import csv
import logging
from datetime import date

from config import Config
from models import ParseResult, ProgramRecord, RowError
from services.kdt_dataset import RAW_CSV
from services.metrics import derive_fields, discard_out_of_range_rates
from utils.error_handlers import DataParseError

logger = logging.getLogger(__name__)

# 열 순서 고정: (필드명, 타입)
# int     : 구조 필드 - 없으면 0
# count   : 인원/금액 - 없으면 None
# percent : "24.5%" - 없으면 None
# score   : 만족도 - 없으면 None
COLUMNS = [
    ('category_name', 'text'),
    ('course_code', 'text'),
    ('cohort_number', 'int'),
    ('training_hours', 'int'),
    ('start_date', 'date'),
    ('end_date', 'date'),
    ('year', 'int'),
    ('quarter', 'text'),
    ('satisfaction_score', 'score'),
    ('capacity', 'int'),
    ('total_applicants', 'count'),
    ('applications_completed', 'count'),
    ('conversion_rate', 'percent'),
    ('confirmed_count', 'count'),
    ('dropouts', 'count'),
    ('completed_count', 'count'),
    ('employed_while_enrolled', 'count'),
    ('excluded_from_calc', 'count'),
    ('completion_rate_excl', 'percent'),
    ('employment_transitions', 'count'),
    ('employment_rate', 'percent'),
    ('employment_rate_excl', 'percent'),
    ('minimum_revenue', 'count'),
]


def _is_null_token(value):
    return value is None or value.strip() in Config.NULL_TOKENS


def parse_percentage(value):
    """'24.5%' → 24.5, '-' / '진행중' / '' → None"""
    if _is_null_token(value):
        return None
    try:
        return float(value.strip().rstrip('%'))
    except ValueError:
        return None


def parse_number(value):
    """'1,234' → 1234.0, '-' / '진행중' / '' → None"""
    if _is_null_token(value):
        return None
    try:
        return float(value.strip().replace(',', ''))
    except ValueError:
        return None


def parse_count(value):
    """인원/금액 필드 (정수)"""
    num = parse_number(value)
    if num is None:
        return None
    return int(num) if num.is_integer() else num


def parse_satisfaction(value):
    if _is_null_token(value):
        return None
    try:
        return float(value.strip())
    except ValueError:
        return None


def parse_int(value):
    """구조 필드 (회차, 교육시간, 년도, 정원): 해석 불가 시 0"""
    num = parse_number(value)
    return int(num) if num is not None else 0


def parse_date(value):
    """'2024-07-10' → date, 없거나 해석 불가 시 None"""
    if _is_null_token(value):
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


_CONVERTERS = {
    'text': lambda v: (v or '').strip(),
    'int': parse_int,
    'count': parse_count,
    'percent': parse_percentage,
    'score': parse_satisfaction,
    'date': parse_date,
}


def parse_row(values, line_number=None, today=None):
    """CSV 한 행 → ProgramRecord (부족한 뒤쪽 필드는 기본값)"""
    raw = {}
    for idx, (name, kind) in enumerate(COLUMNS):
        value = values[idx] if idx < len(values) else None
        raw[name] = _CONVERTERS[kind](value)

    if not raw['course_code']:
        raise DataParseError("과정코드가 비어 있습니다.", line_number)
    if raw['start_date'] is None:
        value = values[4] if len(values) > 4 else ''
        raise DataParseError(f"개강일을 해석할 수 없습니다: '{value}'", line_number)
    if raw['end_date'] is not None and raw['end_date'] < raw['start_date']:
        raise DataParseError(
            f"종강일({raw['end_date']})이 개강일({raw['start_date']})보다 빠릅니다.", line_number
        )

    record = ProgramRecord(**raw)
    record = discard_out_of_range_rates(record)
    return derive_fields(record, today)


def _split_line(line):
    """한 줄 → 필드 목록 (따옴표는 줄을 넘어가지 않음)"""
    return next(csv.reader([line]), [])


def parse_programs(text, today=None):
    """CSV 텍스트 → ParseResult (잘못된 행은 건너뛰고 오류로 기록)"""
    result = ParseResult()
    lines = text.strip().splitlines()
    if not lines:
        logger.warning("빈 데이터입니다.")
        return result

    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        try:
            record = parse_row(_split_line(line), line_number, today)
        except (DataParseError, csv.Error) as e:
            logger.warning(f"  {line_number}행 건너뜀: {e}")
            result.errors.append(RowError(line_number, str(e), line))
            continue
        result.records.append(record)
        logger.debug(f"  {record.key} | {record.category_name} | {record.quarter_key}")

    logger.info(f"총 {len(result.records)}개 과정 파싱 완료 (오류 {len(result.errors)}건)")
    return result


def load_builtin_programs(today=None):
    """내장 데이터셋 파싱"""
    return parse_programs(RAW_CSV, today)

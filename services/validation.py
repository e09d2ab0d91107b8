"""
과정 생성/수정 입력 검증
"""
import re
from datetime import date

from config import Config
from utils.error_handlers import ValidationError

DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')
MAX_TEXT_LEN = 50

REQUIRED_TEXT = ('category_name', 'course_code')
REQUIRED_POSITIVE_INT = ('cohort_number', 'training_hours', 'capacity')

OPTIONAL_COUNTS = (
    'total_applicants', 'applications_completed', 'confirmed_count', 'dropouts',
    'completed_count', 'employed_while_enrolled', 'excluded_from_calc',
    'employment_transitions', 'minimum_revenue',
)
# (필드, 최소, 최대)
OPTIONAL_RANGES = (
    ('satisfaction_score', 0, 5),
    ('conversion_rate', 0, 100),
    ('completion_rate_excl', 0, 100),
    ('employment_rate', 0, 100),
    ('employment_rate_excl', 0, 100),
)


def _sanitize_text(value):
    return str(value).strip() if value is not None else ''


def _to_int(value):
    if isinstance(value, bool):
        raise ValueError
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError
        return int(value)
    return int(str(value).strip())


def _to_float(value):
    if isinstance(value, bool):
        raise ValueError
    return float(str(value).strip().rstrip('%'))


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def _to_date(value):
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not DATE_RE.match(text):
        raise ValueError
    return date.fromisoformat(text)


def validate_program_input(data):
    """입력 dict → ProgramRecord 생성용 필드 dict (실패 시 ValidationError)"""
    if not isinstance(data, dict):
        raise ValidationError({"_": "요청 데이터가 없습니다."})

    errors = {}
    cleaned = {}

    for name in REQUIRED_TEXT:
        text = _sanitize_text(data.get(name))
        if not text:
            errors[name] = "필수 항목입니다."
        elif len(text) > MAX_TEXT_LEN:
            errors[name] = f"{MAX_TEXT_LEN}자 이하로 입력해주세요."
        cleaned[name] = text

    for name in REQUIRED_POSITIVE_INT:
        try:
            value = _to_int(data.get(name))
            if value < 1:
                errors[name] = "1 이상이어야 합니다."
            cleaned[name] = value
        except (TypeError, ValueError):
            errors[name] = "정수를 입력해주세요."

    try:
        cleaned['start_date'] = _to_date(data.get('start_date'))
    except (TypeError, ValueError):
        errors['start_date'] = "개강일을 선택하세요. (YYYY-MM-DD)"

    if _is_blank(data.get('end_date')):
        cleaned['end_date'] = None
    else:
        try:
            cleaned['end_date'] = _to_date(data['end_date'])
        except (TypeError, ValueError):
            errors['end_date'] = "종강일 형식이 올바르지 않습니다. (YYYY-MM-DD)"
    if cleaned.get('start_date') and cleaned.get('end_date') and cleaned['end_date'] < cleaned['start_date']:
        errors['end_date'] = "종강일은 개강일 이후여야 합니다."

    try:
        year = _to_int(data.get('year'))
        if not (Config.MIN_YEAR <= year <= Config.MAX_YEAR):
            errors['year'] = f"{Config.MIN_YEAR}~{Config.MAX_YEAR} 사이로 입력해주세요."
        cleaned['year'] = year
    except (TypeError, ValueError):
        errors['year'] = "년도를 입력해주세요."

    quarter = _sanitize_text(data.get('quarter'))
    if quarter not in Config.QUARTERS:
        errors['quarter'] = f"분기는 {', '.join(Config.QUARTERS)} 중 하나여야 합니다."
    cleaned['quarter'] = quarter

    for name in OPTIONAL_COUNTS:
        value = data.get(name)
        if _is_blank(value):
            cleaned[name] = None
            continue
        try:
            number = _to_int(value)
            if number < 0:
                errors[name] = "0 이상이어야 합니다."
            cleaned[name] = number
        except (TypeError, ValueError):
            errors[name] = "정수를 입력해주세요."

    for name, low, high in OPTIONAL_RANGES:
        value = data.get(name)
        if _is_blank(value):
            cleaned[name] = None
            continue
        try:
            number = _to_float(value)
            if not (low <= number <= high):
                errors[name] = f"{low}~{high} 사이로 입력해주세요."
            cleaned[name] = number
        except (TypeError, ValueError):
            errors[name] = "숫자를 입력해주세요."

    if errors:
        raise ValidationError(errors)
    return cleaned

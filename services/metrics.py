"""
과정 계산 필드 서비스

모객율 / 수료율 / 진행상태 / 분기키는 입력받지 않고 항상 여기서 계산한다.
진행률, D-Day, 단가, 매출은 화면 요청 시 저장 필드로부터 계산한다.
"""
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from config import Config
from models import ProgramStatus


def round_half_up(value, digits=1):
    """사사오입 반올림 (round()의 은행가 반올림 대신)"""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate_recruitment_rate(confirmed_count, capacity):
    """모객율 = 확정 / 정원 * 100"""
    if not confirmed_count or not capacity or capacity <= 0:
        return 0.0
    return round_half_up(confirmed_count / capacity * 100)


def calculate_completion_rate(completed_count, capacity, completion_rate_excl=None):
    """수료율: 제외 수료율이 있으면 그 값, 없으면 수료 / 정원 * 100"""
    if completion_rate_excl is not None:
        return float(completion_rate_excl)
    if completed_count is None or not capacity or capacity <= 0:
        return 0.0
    return round_half_up(completed_count / capacity * 100)


def determine_status(end_date, completed_count, satisfaction_score, today=None):
    """
    진행상태 판단
    - 오늘이 종강일 이후 → 완료
    - 수료 인원과 HRD 만족도가 모두 있으면 종강 전이라도 완료 (조기 완료)
    - 그 외 → 진행중
    """
    today = today or date.today()
    if end_date is not None and today > end_date:
        return ProgramStatus.COMPLETED
    if completed_count is not None and isinstance(satisfaction_score, (int, float)):
        return ProgramStatus.COMPLETED
    return ProgramStatus.IN_PROGRESS


def make_quarter_key(year, quarter):
    return f"{year} {quarter}"


def quarter_sort_key(quarter_key):
    """'2024 3Q' → (2024, 3), 해석 불가 시 맨 뒤"""
    parts = str(quarter_key).split()
    if len(parts) != 2:
        return (9999, 9)
    year, quarter = parts
    digits = ''.join(ch for ch in quarter if ch.isdigit())
    try:
        return (int(year), int(digits) if digits else 9)
    except ValueError:
        return (9999, 9)


def _out_of_range(value):
    return value is not None and not (0 <= value <= 100)


def discard_out_of_range_rates(record):
    """취업률 / 제외 취업률이 0~100 밖이면 None (분모 중복 집계 등 원천 데이터 오류)"""
    changes = {}
    if _out_of_range(record.employment_rate):
        changes['employment_rate'] = None
    if _out_of_range(record.employment_rate_excl):
        changes['employment_rate_excl'] = None
    return record.copy_with(**changes) if changes else record


def derive_fields(record, today=None):
    """계산 필드를 다시 채운 새 레코드 반환"""
    return record.copy_with(
        recruitment_rate=calculate_recruitment_rate(record.confirmed_count, record.capacity),
        completion_rate=calculate_completion_rate(
            record.completed_count, record.capacity, record.completion_rate_excl
        ),
        status=determine_status(
            record.end_date, record.completed_count, record.satisfaction_score, today
        ),
        quarter_key=make_quarter_key(record.year, record.quarter),
    )


def calculate_progress_rate(start_date, end_date, today=None):
    """교육과정 진행률 (0~100)"""
    if end_date is None:
        return 0
    today = today or date.today()
    total = (end_date - start_date).days
    elapsed = (today - start_date).days
    if elapsed <= 0:
        return 0
    if elapsed >= total:
        return 100
    return int(round_half_up(elapsed / total * 100, 0))


def calculate_dday(end_date, today=None):
    """종강일까지 D-Day 문자열"""
    if end_date is None:
        return Config.DDAY_NO_END
    today = today or date.today()
    diff_days = (end_date - today).days
    if diff_days < 0:
        return Config.DDAY_COMPLETED
    if diff_days == 0:
        return Config.DDAY_TODAY
    return f"D-{diff_days}"


def dday_urgency(dday):
    """D-Day 긴급도: done / urgent(7일 이내) / soon(30일 이내) / normal"""
    if dday in (Config.DDAY_TODAY, Config.DDAY_COMPLETED):
        return 'done'
    if dday.startswith('D-') and dday[2:].isdigit():
        days = int(dday[2:])
        if days <= 7:
            return 'urgent'
        if days <= 30:
            return 'soon'
    return 'normal'


def extract_school_code(course_code):
    """과정코드에서 스쿨 코드 추출 ('KDT_B_BEPY_0012' → 'BEBY')"""
    code = (course_code or '').upper()
    for school in Config.SCHOOL_CODE_PRIORITY:
        if school in code:
            return school
    for alias, school in Config.SCHOOL_CODE_ALIASES.items():
        if alias in code:
            return school
    return None


def get_unit_price(course_code):
    """스쿨 단가 (매칭 안 되면 0)"""
    school = extract_school_code(course_code)
    return Config.SCHOOL_UNIT_PRICES.get(school, 0) if school else 0


def project_revenue(record):
    """현재 매출(단가 * 확정) / 기대 매출(단가 * 정원)"""
    unit_price = get_unit_price(record.course_code)
    confirmed = record.confirmed_count or 0
    return {
        "unit_price": unit_price,
        "confirmed_count": confirmed,
        "current_revenue": unit_price * confirmed,
        "expected_revenue": unit_price * record.capacity,
    }


def program_detail(record, today=None):
    """화면용 과정 상세 (진행 완료 과정은 진행률 100, D-Day '진행완료')"""
    if record.status == ProgramStatus.COMPLETED:
        progress_rate, dday = 100, Config.DDAY_COMPLETED
    else:
        progress_rate = calculate_progress_rate(record.start_date, record.end_date, today)
        dday = calculate_dday(record.end_date, today)
    detail = record.to_dict()
    detail["key"] = record.key
    detail.update(project_revenue(record))
    detail["progress_rate"] = progress_rate
    detail["dday"] = dday
    detail["dday_urgency"] = dday_urgency(dday)
    return detail

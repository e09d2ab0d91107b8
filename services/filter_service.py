"""
대시보드 필터 서비스
"""
from config import Config
from models import FilterCriteria, ProgramStatus


def _matches(program, criteria):
    if criteria.year is not None and program.year != criteria.year:
        return False
    if criteria.quarter and program.quarter != criteria.quarter:
        return False
    if criteria.month is not None and program.start_date.month != criteria.month:
        return False
    if criteria.category_name and program.category_name != criteria.category_name:
        return False
    if criteria.status and criteria.status != Config.STATUS_ALL and program.status != criteria.status:
        return False
    return True


def filter_programs(programs, criteria=None):
    """조건에 맞는 과정만 반환 (입력 순서 유지, 조건은 AND)"""
    if criteria is None:
        return list(programs)
    return [p for p in programs if _matches(p, criteria)]


def criteria_from_args(args):
    """쿼리 파라미터 → FilterCriteria (잘못된 숫자는 ValueError)"""
    def _int_arg(name):
        value = args.get(name)
        if value in (None, ''):
            return None
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"'{name}' 값이 올바르지 않습니다: {value}")

    month = _int_arg('month')
    if month is not None and not (1 <= month <= 12):
        raise ValueError(f"'month' 값은 1~12 사이여야 합니다: {month}")

    return FilterCriteria(
        year=_int_arg('year'),
        quarter=args.get('quarter') or None,
        month=month,
        category_name=args.get('category') or None,
        status=args.get('status') or None,
    )


def get_filter_options(programs):
    """필터 선택지 (년도 내림차순, 분기, 과정구분)"""
    years = sorted({p.year for p in programs}, reverse=True)
    quarters = [q for q in Config.QUARTERS if any(p.quarter == q for p in programs)]
    categories = sorted({p.category_name for p in programs})
    return {
        "years": years,
        "quarters": quarters,
        "categories": categories,
        "statuses": [Config.STATUS_ALL] + [s.value for s in ProgramStatus],
    }

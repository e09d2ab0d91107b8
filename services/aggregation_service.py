"""
KPI 집계 서비스

모든 함수는 부수효과가 없고, 빈 입력이면 0을 반환한다.
"""
from collections import defaultdict

from config import Config
from models import ProgramStatus
from services.metrics import program_detail, project_revenue, quarter_sort_key, round_half_up


def _mean(values):
    values = list(values)
    return sum(values) / len(values) if values else 0.0


def _completed(programs):
    return [p for p in programs if p.status == ProgramStatus.COMPLETED]


def average_recruitment_rate(programs):
    """평균 모객율 (전체 과정)"""
    return _mean(p.recruitment_rate for p in programs)


def average_employment_rate(programs):
    """평균 취업률 (완료 과정, 취업률 없음은 0으로 합산)"""
    return _mean(p.employment_rate or 0 for p in _completed(programs))


def average_satisfaction(programs):
    """평균 HRD 만족도 (만족도가 있는 과정만)"""
    return _mean(p.satisfaction_score for p in programs if p.satisfaction_score is not None)


def average_completion_rate(programs):
    """평균 수료율 (완료 과정)"""
    return _mean(p.completion_rate for p in _completed(programs))


def calculate_kpi(programs):
    """대시보드 상단 KPI (소수점 첫째 자리)"""
    return {
        "avg_recruitment_rate": round_half_up(average_recruitment_rate(programs)),
        "avg_employment_rate": round_half_up(average_employment_rate(programs)),
        "avg_satisfaction": round_half_up(average_satisfaction(programs)),
        "avg_completion_rate": round_half_up(average_completion_rate(programs)),
        "total_programs": len(programs),
        "completed_programs": len(_completed(programs)),
    }


def kpi_cards(programs):
    """KPI + 목표 대비 상태"""
    kpi = calculate_kpi(programs)
    metrics = [
        ("평균 모객율", "avg_recruitment_rate", "recruitment_rate", "%"),
        ("평균 취업률", "avg_employment_rate", "employment_rate", "%"),
        ("평균 HRD 만족도", "avg_satisfaction", "satisfaction_score", "/5.0"),
        ("평균 수료율", "avg_completion_rate", "completion_rate", "%"),
    ]
    cards = []
    for title, kpi_key, target_key, unit in metrics:
        value = kpi[kpi_key]
        target = Config.KPI_TARGETS[target_key]
        cards.append({
            "title": title,
            "value": value,
            "target": target,
            "unit": unit,
            "status": "success" if value >= target else "danger",
        })
    return cards


def group_by(programs, key_func):
    """key_func 값별로 과정 묶기 (처음 등장한 순서 유지)"""
    groups = defaultdict(list)
    for p in programs:
        groups[key_func(p)].append(p)
    return dict(groups)


def group_by_quarter(programs):
    return group_by(programs, lambda p: p.quarter_key)


def group_by_category(programs):
    return group_by(programs, lambda p: p.category_name)


def quarterly_trend(programs):
    """분기키별 KPI 추이 (시간순). 만족도는 100점 환산"""
    trend = []
    for quarter_key, group in group_by_quarter(programs).items():
        trend.append({
            "name": quarter_key,
            "recruitment_rate": round_half_up(average_recruitment_rate(group)),
            "employment_rate": round_half_up(average_employment_rate(group)),
            "satisfaction": round_half_up(average_satisfaction(group) * 20),
            "completion_rate": round_half_up(average_completion_rate(group)),
            "program_count": len(group),
        })
    trend.sort(key=lambda t: quarter_sort_key(t["name"]))
    return trend


def category_summary(programs):
    """과정구분별 KPI + 최소 매출 합계"""
    summary = []
    for category, group in group_by_category(programs).items():
        kpi = calculate_kpi(group)
        kpi.update({
            "category_name": category,
            "total_minimum_revenue": sum(p.minimum_revenue or 0 for p in group),
            "total_completed": sum(p.completed_count or 0 for p in group),
        })
        summary.append(kpi)
    return summary


def quarter_summary(programs, year, quarter, today=None):
    """특정 년도/분기의 매출 및 모집 현황"""
    quarter_programs = [p for p in programs if p.year == year and p.quarter == quarter]
    revenues = [project_revenue(p) for p in quarter_programs]
    return {
        "year": year,
        "quarter": quarter,
        "programs": [program_detail(p, today) for p in quarter_programs],
        "total_courses": len(quarter_programs),
        "total_revenue": sum(r["current_revenue"] for r in revenues),
        "expected_revenue": sum(r["expected_revenue"] for r in revenues),
        "average_recruitment_rate": round_half_up(average_recruitment_rate(quarter_programs)),
        "total_capacity": sum(p.capacity for p in quarter_programs),
        "total_confirmed": sum(r["confirmed_count"] for r in revenues),
    }


def quarterly_breakdown(programs, year, today=None):
    """1Q~4Q 분기별 현황"""
    return [quarter_summary(programs, year, q, today) for q in Config.QUARTERS]


def previous_quarter(year, quarter):
    """직전 분기 (1Q → 전년도 4Q)"""
    idx = Config.QUARTERS.index(quarter)
    if idx == 0:
        return year - 1, Config.QUARTERS[-1]
    return year, Config.QUARTERS[idx - 1]


def calculate_change(current, previous):
    """전분기 대비 증감률 (%)"""
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return round_half_up((current - previous) / previous * 100)


def quarter_comparison(programs, year, quarter, today=None):
    """선택 분기 현황 + 전분기 대비 증감"""
    current = quarter_summary(programs, year, quarter, today)
    prev_year, prev_quarter = previous_quarter(year, quarter)
    previous = quarter_summary(programs, prev_year, prev_quarter, today)
    if previous["total_courses"] == 0:
        return {"current": current, "previous": None, "changes": {}}

    changes = {
        key: calculate_change(current[key], previous[key])
        for key in ("total_revenue", "expected_revenue", "total_courses",
                    "average_recruitment_rate", "total_confirmed")
    }
    return {"current": current, "previous": previous, "changes": changes}


def business_kpi(programs):
    """사업 운영 KPI"""
    total_revenue = sum(p.minimum_revenue or 0 for p in programs)
    target_revenue = total_revenue * Config.REVENUE_TARGET_RATIO
    budget_execution = total_revenue / target_revenue * 100 if target_revenue else 0.0

    completed = len(_completed(programs))
    progress_rate = completed / len(programs) * 100 if programs else 0.0

    targets = Config.KPI_TARGETS
    achieved = 0
    for p in programs:
        achieved += p.recruitment_rate >= targets['recruitment_rate']
        achieved += (p.employment_rate or 0) >= targets['employment_rate']
        achieved += p.completion_rate >= targets['completion_rate']
        achieved += (p.satisfaction_score or 0) >= targets['satisfaction_score']
    target_achievement = achieved / (len(programs) * len(targets)) * 100 if programs else 0.0

    return {
        "budget_execution": round_half_up(budget_execution),
        "progress_rate": round_half_up(progress_rate),
        "target_achievement_rate": round_half_up(target_achievement),
        "total_revenue": total_revenue,
        "target_revenue": target_revenue,
        "total_participants": sum(p.completed_count or 0 for p in programs),
    }

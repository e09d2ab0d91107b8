"""
KDT Dashboard - 라우트 정의
"""
import logging
from flask import Blueprint, current_app, jsonify, request

from config import Config
from services.aggregation_service import (
    business_kpi, calculate_kpi, category_summary, kpi_cards,
    quarter_comparison, quarterly_breakdown, quarterly_trend,
)
from services.filter_service import criteria_from_args, filter_programs, get_filter_options
from services.metrics import program_detail
from services.program_store import find_by_key
from utils.error_handlers import ProgramNotFoundError, handle_errors

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__, url_prefix='/api')


def get_store():
    return current_app.extensions['program_store']


def _filtered_programs():
    """쿼리 파라미터 필터가 적용된 전체 과정 (기본 + 사용자)"""
    store = get_store()
    criteria = criteria_from_args(request.args)
    return filter_programs(store.all_programs(), criteria)


def _program_json(record):
    store = get_store()
    d = record.to_dict()
    d["key"] = record.key
    d["editable"] = store.is_user_record(record)
    return d


# ===== 과정 목록 / CRUD =====

@api_bp.route('/programs', methods=['GET'])
@handle_errors
def get_programs():
    """필터된 과정 목록 (기본 데이터 → 사용자 과정 순)"""
    programs = _filtered_programs()
    return jsonify({
        "success": True,
        "count": len(programs),
        "programs": [_program_json(p) for p in programs],
    })


@api_bp.route('/programs/<key>', methods=['GET'])
@handle_errors
def get_program(key):
    """과정 상세 (진행률, D-Day, 단가, 매출 포함)"""
    store = get_store()
    program = find_by_key(store.all_programs(), key)
    if program is None:
        return jsonify({"success": False, "error": "과정을 찾을 수 없습니다."}), 404
    detail = program_detail(program, store.today())
    detail["editable"] = store.is_user_record(program)
    return jsonify({"success": True, "program": detail})


@api_bp.route('/programs', methods=['POST'])
@handle_errors
def create_program():
    """사용자 과정 추가"""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({"success": False, "error": "요청 데이터가 없습니다."}), 400

    record = get_store().create(data)
    return jsonify({
        "success": True,
        "message": f"'{record.category_name}' {record.cohort_number}회차 과정이 추가되었습니다.",
        "program": _program_json(record),
    }), 201


@api_bp.route('/programs/<key>', methods=['PUT'])
@handle_errors
def update_program(key):
    """사용자 과정 수정 (기본 데이터는 수정 불가)"""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({"success": False, "error": "요청 데이터가 없습니다."}), 400

    record = get_store().edit(key, data)
    if record is None:
        raise ProgramNotFoundError(key)
    return jsonify({
        "success": True,
        "message": "과정 정보가 수정되었습니다.",
        "program": _program_json(record),
    })


@api_bp.route('/programs/<key>', methods=['DELETE'])
@handle_errors
def delete_program(key):
    """사용자 과정 삭제 (기본 데이터는 삭제 불가)"""
    if not get_store().delete(key):
        raise ProgramNotFoundError(key)
    return jsonify({"success": True, "message": "과정이 삭제되었습니다."})


# ===== 집계 =====

@api_bp.route('/kpi', methods=['GET'])
@handle_errors
def get_kpi():
    """상단 KPI 카드"""
    programs = _filtered_programs()
    return jsonify({"success": True, "kpi": calculate_kpi(programs), "cards": kpi_cards(programs)})


@api_bp.route('/trends/quarterly', methods=['GET'])
@handle_errors
def get_quarterly_trend():
    """분기별 KPI 추이"""
    return jsonify({"success": True, "trend": quarterly_trend(_filtered_programs())})


@api_bp.route('/quarterly', methods=['GET'])
@handle_errors
def get_quarterly():
    """년도별 1Q~4Q 현황, quarter 지정 시 전분기 대비 증감 포함"""
    store = get_store()
    programs = store.all_programs()
    year = criteria_from_args(request.args).year or store.today().year
    quarter = request.args.get('quarter')
    if quarter:
        if quarter not in Config.QUARTERS:
            raise ValueError(f"분기는 {', '.join(Config.QUARTERS)} 중 하나여야 합니다.")
        return jsonify({"success": True, **quarter_comparison(programs, year, quarter, store.today())})
    return jsonify({
        "success": True,
        "year": year,
        "quarters": quarterly_breakdown(programs, year, store.today()),
    })


@api_bp.route('/categories', methods=['GET'])
@handle_errors
def get_categories():
    """과정구분별 현황 (최소 매출 내림차순)"""
    summary = category_summary(_filtered_programs())
    summary.sort(key=lambda s: s["total_minimum_revenue"], reverse=True)
    return jsonify({"success": True, "categories": summary})


@api_bp.route('/business', methods=['GET'])
@handle_errors
def get_business():
    """사업 운영 KPI"""
    return jsonify({"success": True, "business": business_kpi(_filtered_programs())})


@api_bp.route('/filters', methods=['GET'])
@handle_errors
def get_filters():
    """필터 선택지"""
    return jsonify({"success": True, **get_filter_options(get_store().all_programs())})

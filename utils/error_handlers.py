import logging
from functools import wraps
from flask import jsonify

logger = logging.getLogger(__name__)


class DataParseError(ValueError):
    """원천 데이터의 한 행을 해석할 수 없음"""

    def __init__(self, message, line_number=None):
        super().__init__(message)
        self.line_number = line_number


class ValidationError(ValueError):
    """입력값 검증 실패 (필드별 메시지)"""

    def __init__(self, errors):
        self.errors = dict(errors)
        super().__init__(", ".join(f"{k}: {v}" for k, v in self.errors.items()))


class ProgramNotFoundError(LookupError):
    """수정/삭제 대상 사용자 과정이 없음 (기본 데이터 포함)"""


class PersistenceError(RuntimeError):
    """사용자 과정 저장 실패"""


def handle_errors(f):
    """API 엔드포인트 에러 핸들링 데코레이터"""
    @wraps(f)
    def decorated(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ValidationError as e:
            logger.warning(f"입력값 검증 실패: {e}")
            return jsonify({"success": False, "error": "입력값을 확인해주세요.", "errors": e.errors}), 400
        except ProgramNotFoundError as e:
            logger.warning(f"과정을 찾을 수 없음: {e}")
            return jsonify({"success": False, "error": "수정 가능한 과정을 찾을 수 없습니다."}), 404
        except PersistenceError as e:
            logger.error(f"저장 실패: {e}", exc_info=True)
            return jsonify({"success": False, "error": "과정 저장에 실패했습니다."}), 500
        except ValueError as e:
            logger.warning(f"잘못된 값: {e}")
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception as e:
            logger.error(f"서버 오류: {e}", exc_info=True)
            return jsonify({"success": False, "error": "서버 내부 오류가 발생했습니다."}), 500
    return decorated

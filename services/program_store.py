"""
과정 저장소

기본 데이터(읽기 전용)와 사용자 과정(추가/수정/삭제 가능)을 하나로 묶는다.
수정/삭제는 사용자 과정에만 적용되며, 사용자 과정 목록 전체가 저장 단위다.
"""
import logging
import threading
from datetime import date

from models import ProgramRecord
from services.metrics import derive_fields, discard_out_of_range_rates
from services.validation import validate_program_input
from utils.error_handlers import PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def make_program_key(course_code, cohort_number):
    return f"{course_code}_{cohort_number}"


def merge_programs(builtin_programs, user_programs):
    """기본 데이터 뒤에 사용자 과정 (중복 제거 없음)"""
    return list(builtin_programs) + list(user_programs)


def find_by_key(programs, key):
    """과정코드_회차로 첫 번째 과정 검색 (없으면 None)"""
    for p in programs:
        if p.key == key:
            return p
    return None


def build_program(fields, today=None):
    """검증된 입력 → 계산 필드가 채워진 ProgramRecord"""
    record = ProgramRecord(**fields)
    record = discard_out_of_range_rates(record)
    return derive_fields(record, today)


class ProgramStore:
    """
    기본 데이터 + 사용자 과정 저장소

    변경(추가/수정/삭제)은 lock 안에서 목록 교체 → 저장 → 실패 시 복구 순으로 처리한다.
    """

    def __init__(self, builtin_programs, storage, clock=None):
        self._builtin = list(builtin_programs)
        self._user = []
        self._storage = storage
        self._clock = clock or date.today
        self._lock = threading.Lock()

    @property
    def builtin_programs(self):
        return list(self._builtin)

    @property
    def user_programs(self):
        return list(self._user)

    def all_programs(self):
        return merge_programs(self._builtin, self._user)

    def today(self):
        return self._clock()

    def load(self):
        """저장된 사용자 과정 복원 (손상된 항목은 건너뜀)"""
        today = self.today()
        loaded = []
        seen = set()
        for raw in self._storage.load_programs():
            try:
                record = ProgramRecord.from_dict(raw)
                record = derive_fields(discard_out_of_range_rates(record), today)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"사용자 과정 복원 실패, 건너뜀: {e}")
                continue
            if record.key in seen:
                logger.warning(f"중복된 사용자 과정 건너뜀: {record.key}")
                continue
            seen.add(record.key)
            loaded.append(record)
        with self._lock:
            self._user = loaded
        logger.info(f"사용자 과정 {len(loaded)}개 로드")
        return self.user_programs

    def save(self):
        """사용자 과정 목록 전체 저장 (실패 시 PersistenceError)"""
        with self._lock:
            self._save()

    def _save(self):
        self._storage.save_programs([p.to_dict() for p in self._user])

    def _user_index(self, key):
        for idx, p in enumerate(self._user):
            if p.key == key:
                return idx
        return None

    def _commit(self, new_user):
        # lock을 잡은 상태에서만 호출
        previous = self._user
        self._user = new_user
        try:
            self._save()
        except PersistenceError:
            self._user = previous
            raise

    def create(self, data):
        """사용자 과정 추가"""
        fields = validate_program_input(data)
        key = make_program_key(fields['course_code'], fields['cohort_number'])
        record = build_program(fields, self.today())

        with self._lock:
            if self._user_index(key) is not None:
                raise ValidationError({"course_code": f"이미 등록된 과정입니다: {key}"})
            self._commit(self._user + [record])
        logger.info(f"과정 추가: {record.key} ({record.category_name})")
        return record

    def edit(self, key, data):
        """사용자 과정 수정 (기본 데이터이거나 없으면 None)"""
        with self._lock:
            idx = self._user_index(key)
            if idx is None:
                logger.warning(f"수정 대상 사용자 과정 없음: {key}")
                return None

            fields = validate_program_input(data)
            new_key = make_program_key(fields['course_code'], fields['cohort_number'])
            if new_key != key and self._user_index(new_key) is not None:
                raise ValidationError({"course_code": f"이미 등록된 과정입니다: {new_key}"})

            record = build_program(fields, self.today())
            new_user = list(self._user)
            new_user[idx] = record
            self._commit(new_user)
        logger.info(f"과정 수정: {key} → {record.key}")
        return record

    def delete(self, key):
        """사용자 과정 삭제 (기본 데이터이거나 없으면 False)"""
        with self._lock:
            idx = self._user_index(key)
            if idx is None:
                logger.warning(f"삭제 대상 사용자 과정 없음: {key}")
                return False
            self._commit(self._user[:idx] + self._user[idx + 1:])
        logger.info(f"과정 삭제: {key}")
        return True

    def is_user_record(self, record):
        """기본 데이터와 키가 같아도 해당 레코드 자체가 사용자 과정인지 판단"""
        return any(p is record for p in self._user)

"""
Tests for services/program_store.py — 사용자 과정 CRUD 및 저장
"""
import threading
import time
from datetime import date

import pytest

from models import ProgramRecord, ProgramStatus
from services.program_store import ProgramStore, find_by_key, merge_programs
from services.storage_service import LocalJsonStorage
from utils.error_handlers import PersistenceError, ValidationError

TODAY = date(2025, 9, 1)


class FailingStorage:
    """쓰기만 실패하는 저장소"""

    def load_programs(self):
        return []

    def save_programs(self, programs):
        raise PersistenceError("disk full")


class SlowFailingStorage:
    """첫 저장은 release 될 때까지 멈췄다가 실패, 이후 저장은 성공"""

    def __init__(self):
        self.entered = threading.Event()
        self.release = threading.Event()
        self.calls = 0
        self.saved = []

    def load_programs(self):
        return list(self.saved)

    def save_programs(self, programs):
        self.calls += 1
        if self.calls == 1:
            self.entered.set()
            self.release.wait(timeout=5)
            raise PersistenceError("timeout")
        self.saved = list(programs)


class TestCreate:
    def test_create_derives_fields(self, store, program_input):
        record = store.create(program_input())
        assert record.recruitment_rate == 50.0
        assert record.completion_rate == 0
        assert record.status == ProgramStatus.IN_PROGRESS
        assert record.quarter_key == "2025 3Q"
        assert store.user_programs == [record]

    def test_create_persists(self, store, storage, program_input):
        store.create(program_input())
        assert [p["course_code"] for p in storage.load_programs()] == ["X"]

    def test_create_ignores_derived_input(self, store, program_input):
        record = store.create(program_input(recruitment_rate=99.9, status="완료"))
        assert record.recruitment_rate == 50.0
        assert record.status == ProgramStatus.IN_PROGRESS

    def test_out_of_range_employment_rate_rejected(self, store, program_input):
        with pytest.raises(ValidationError) as exc:
            store.create(program_input(employment_rate=120.0, employment_rate_excl=80.0))
        assert set(exc.value.errors) == {"employment_rate"}
        assert store.user_programs == []

    def test_duplicate_user_key_rejected(self, store, program_input):
        store.create(program_input())
        with pytest.raises(ValidationError):
            store.create(program_input(category_name="다른 이름"))
        assert len(store.user_programs) == 1

    def test_builtin_key_collision_allowed(self, store, program_input):
        record = store.create(program_input(course_code="KDT_B_AIW_0001", cohort_number=1))
        merged = store.all_programs()
        assert [p.key for p in merged].count("KDT_B_AIW_0001_1") == 2
        # 기본 데이터가 먼저
        assert find_by_key(merged, record.key) is store.builtin_programs[0]

    def test_invalid_input_does_not_mutate(self, store, storage, program_input):
        with pytest.raises(ValidationError) as exc:
            store.create(program_input(capacity=0, quarter="5Q"))
        assert set(exc.value.errors) == {"capacity", "quarter"}
        assert store.user_programs == []
        assert storage.load_programs() == []


class TestEdit:
    def test_edit_builtin_is_not_found(self, store, program_input):
        original = store.builtin_programs[0]
        result = store.edit(original.key, program_input(course_code="KDT_B_AIW_0001"))
        assert result is None
        assert store.builtin_programs[0] == original
        assert store.user_programs == []

    def test_edit_replaces_record(self, store, program_input):
        store.create(program_input())
        record = store.edit("X_1", program_input(completed_count=40, satisfaction_score=4.5))
        assert record.completion_rate == 40.0
        # 수료 + 만족도 → 조기 완료
        assert record.status == ProgramStatus.COMPLETED
        assert store.user_programs == [record]

    def test_edit_can_change_key(self, store, program_input):
        store.create(program_input())
        record = store.edit("X_1", program_input(cohort_number=2))
        assert record.key == "X_2"
        assert find_by_key(store.user_programs, "X_1") is None

    def test_edit_key_conflict_rejected(self, store, program_input):
        store.create(program_input())
        store.create(program_input(cohort_number=2))
        with pytest.raises(ValidationError):
            store.edit("X_2", program_input(cohort_number=1))
        assert [p.key for p in store.user_programs] == ["X_1", "X_2"]


class TestDelete:
    def test_delete_user_only(self, store, program_input):
        store.create(program_input())
        assert store.delete("X_1") is True
        assert find_by_key(store.all_programs(), "X_1") is None

    def test_delete_shadowing_user_record_keeps_builtin(self, store, program_input):
        builtin = store.builtin_programs[0]
        store.create(program_input(course_code=builtin.course_code, cohort_number=builtin.cohort_number))
        assert store.delete(builtin.key) is True
        assert find_by_key(store.all_programs(), builtin.key) == builtin

    def test_delete_builtin_is_not_found(self, store):
        key = store.builtin_programs[0].key
        assert store.delete(key) is False
        assert len(store.builtin_programs) == 37

    def test_delete_missing(self, store):
        assert store.delete("NOPE_1") is False


class TestPersistence:
    def test_reload_round_trip(self, builtin_programs, storage, program_input):
        store = ProgramStore(builtin_programs, storage, clock=lambda: TODAY)
        store.create(program_input())
        store.create(program_input(course_code="Y", end_date=None))

        reloaded = ProgramStore(builtin_programs, storage, clock=lambda: TODAY)
        reloaded.load()
        assert reloaded.user_programs == store.user_programs
        assert isinstance(reloaded.user_programs[0].start_date, date)
        assert reloaded.user_programs[1].end_date is None

    def test_empty_list_round_trip(self, storage):
        store = ProgramStore([], storage, clock=lambda: TODAY)
        store.save()
        assert store.load() == []

    def test_corrupt_file_loads_empty(self, tmp_path):
        path = tmp_path / "user_programs.json"
        path.write_text("{not json", encoding="utf-8")
        store = ProgramStore([], LocalJsonStorage(filepath=str(path)), clock=lambda: TODAY)
        assert store.load() == []

    def test_bad_items_skipped(self, storage, program_input):
        store = ProgramStore([], storage, clock=lambda: TODAY)
        good = store.create(program_input())
        storage.save_programs([good.to_dict(), {"course_code": "broken"}, good.to_dict()])
        assert store.load() == [good]

    def test_load_discards_out_of_range_employment_rates(self, storage, program_input):
        store = ProgramStore([], storage, clock=lambda: TODAY)
        raw = store.create(program_input()).to_dict()
        raw.update(employment_rate=150.0, employment_rate_excl=-5.0, conversion_rate=24.5)
        storage.save_programs([raw])
        record = store.load()[0]
        assert record.employment_rate is None
        assert record.employment_rate_excl is None
        assert record.conversion_rate == 24.5

    def test_write_failure_surfaces_and_rolls_back(self, program_input):
        store = ProgramStore([], FailingStorage(), clock=lambda: TODAY)
        with pytest.raises(PersistenceError):
            store.create(program_input())
        assert store.user_programs == []

    def test_concurrent_create_after_failed_save(self, program_input):
        storage = SlowFailingStorage()
        store = ProgramStore([], storage, clock=lambda: TODAY)
        failures = []

        def create_first():
            try:
                store.create(program_input(course_code="A"))
            except PersistenceError as e:
                failures.append(e)

        first = threading.Thread(target=create_first)
        first.start()
        assert storage.entered.wait(timeout=5)
        second = threading.Thread(target=lambda: store.create(program_input(course_code="B")))
        second.start()
        time.sleep(0.05)
        storage.release.set()
        first.join(timeout=5)
        second.join(timeout=5)

        assert len(failures) == 1
        assert [p.key for p in store.user_programs] == ["B_1"]
        assert [p["course_code"] for p in storage.load_programs()] == ["B"]

    def test_user_keys_stay_unique(self, store, program_input):
        store.create(program_input())
        store.create(program_input(cohort_number=2))
        store.edit("X_2", program_input(cohort_number=3))
        store.create(program_input(cohort_number=2))
        store.delete("X_1")
        keys = [p.key for p in store.user_programs]
        assert len(keys) == len(set(keys))


def test_merge_is_builtin_first(make_program):
    a = make_program(course_code="A")
    b = make_program(course_code="B")
    assert merge_programs([a], [b]) == [a, b]


def test_record_dict_round_trip(make_program):
    record = make_program(end_date=None, satisfaction_score=4.2, minimum_revenue=233772000)
    restored = ProgramRecord.from_dict(record.to_dict())
    assert restored == record
    assert restored.end_date is None
    assert restored.status is record.status

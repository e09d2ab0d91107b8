"""
사용자 과정 저장 서비스 - Azure Cosmos DB 또는 로컬 JSON fallback

사용자 과정 목록 전체를 하나의 항목으로 읽고 쓴다.
- 읽기 실패(파일 없음, 손상) → 빈 목록
- 쓰기 실패 → PersistenceError
"""
import os
import json
import logging
from config import Config
from utils.error_handlers import PersistenceError

logger = logging.getLogger(__name__)


def create_storage():
    """설정에 맞는 저장소 생성"""
    if Config.use_cosmos_db():
        return CosmosStorage()
    return LocalJsonStorage()


class LocalJsonStorage:
    """로컬 JSON 파일 기반 저장소 (개발용 fallback)"""

    def __init__(self, filepath=None, key=None):
        self.filepath = filepath or Config.USER_PROGRAMS_FILE
        self.key = key or Config.USER_PROGRAMS_KEY
        logger.info(f"로컬 JSON 저장소 초기화 완료: {self.filepath}")

    def load_programs(self):
        """저장된 사용자 과정 dict 목록 반환"""
        if not os.path.exists(self.filepath):
            return []
        try:
            with open(self.filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning(f"사용자 과정 파일을 읽을 수 없음, 빈 목록 사용: {e}")
            return []

        programs = data.get(self.key) if isinstance(data, dict) else None
        if not isinstance(programs, list):
            logger.warning("사용자 과정 데이터 형식이 올바르지 않음, 빈 목록 사용")
            return []
        return programs

    def save_programs(self, programs):
        """사용자 과정 목록 전체 저장"""
        try:
            os.makedirs(os.path.dirname(self.filepath) or '.', exist_ok=True)
            tmp_path = f"{self.filepath}.tmp"
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump({self.key: programs}, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.filepath)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"사용자 과정 저장 실패: {e}")
            raise PersistenceError(f"사용자 과정 저장에 실패했습니다: {e}") from e
        logger.info(f"사용자 과정 {len(programs)}개 저장")


class CosmosStorage:
    """Azure Cosmos DB 기반 저장소 (사용자 과정 목록을 문서 1개로 저장)"""

    DOC_TYPE = 'user_programs'

    def __init__(self, container=None):
        if container is None:
            from azure.cosmos import CosmosClient, PartitionKey
            self.client = CosmosClient(Config.COSMOS_DB_ENDPOINT, Config.COSMOS_DB_KEY)
            self.database = self.client.create_database_if_not_exists(id=Config.COSMOS_DATABASE_NAME)
            container = self.database.create_container_if_not_exists(
                id=Config.COSMOS_CONTAINER_NAME,
                partition_key=PartitionKey(path="/type")
            )
        self.container = container
        self.doc_id = Config.USER_PROGRAMS_KEY
        logger.info("Azure Cosmos DB 저장소 초기화 완료")

    def load_programs(self):
        """저장된 사용자 과정 dict 목록 반환"""
        query = "SELECT * FROM c WHERE c.type = @type AND c.id = @id"
        try:
            items = list(self.container.query_items(
                query=query,
                parameters=[
                    {"name": "@type", "value": self.DOC_TYPE},
                    {"name": "@id", "value": self.doc_id},
                ],
                enable_cross_partition_query=True
            ))
        except Exception as e:
            logger.warning(f"사용자 과정 조회 실패, 빈 목록 사용: {e}")
            return []

        if not items:
            return []
        programs = items[0].get('programs')
        if not isinstance(programs, list):
            logger.warning("사용자 과정 문서 형식이 올바르지 않음, 빈 목록 사용")
            return []
        return programs

    def save_programs(self, programs):
        """사용자 과정 목록 전체 저장 (upsert)"""
        doc = {
            "id": self.doc_id,
            "type": self.DOC_TYPE,
            "programs": programs,
        }
        try:
            self.container.upsert_item(body=doc)
        except Exception as e:
            logger.error(f"사용자 과정 저장 실패: {e}")
            raise PersistenceError(f"사용자 과정 저장에 실패했습니다: {e}") from e
        logger.info(f"사용자 과정 {len(programs)}개 저장 (Cosmos DB)")

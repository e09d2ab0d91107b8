import os


class Config:
    """애플리케이션 설정"""

    # 보안
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'kdt-dashboard-secret-key'

    # 로컬 JSON 저장 (Cosmos DB fallback) - 사용자 추가/수정 과정
    DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')
    USER_PROGRAMS_FILE = os.path.join(DATA_DIR, 'user_programs.json')
    USER_PROGRAMS_KEY = 'kdt_user_programs'

    # Azure Cosmos DB
    COSMOS_DB_ENDPOINT = os.environ.get('COSMOS_DB_ENDPOINT')
    COSMOS_DB_KEY = os.environ.get('COSMOS_DB_KEY')
    COSMOS_DATABASE_NAME = 'KDTDashboardDB'
    COSMOS_CONTAINER_NAME = 'UserPrograms'

    # 분기 / 연도
    QUARTERS = ('1Q', '2Q', '3Q', '4Q')
    MIN_YEAR = 2000
    MAX_YEAR = 2100

    # 원천 데이터 sentinel ("값 없음")
    NULL_TOKENS = {'', '-', '진행중'}

    # 진행상태 필터의 "전체" 값
    STATUS_ALL = '전체'

    # D-Day 표시
    DDAY_NO_END = '-'
    DDAY_COMPLETED = '진행완료'
    DDAY_TODAY = 'D-DAY'

    # KPI 목표치 (모객율 85%, 취업률 75%, 수료율 90%, 만족도 4.3)
    KPI_TARGETS = {
        'recruitment_rate': 85.0,
        'employment_rate': 75.0,
        'completion_rate': 90.0,
        'satisfaction_score': 4.3,
    }

    # 목표 매출 = 최소 매출 합계 * 1.2
    REVENUE_TARGET_RATIO = 1.2

    # 스쿨별 단가표 (원)
    SCHOOL_UNIT_PRICES = {
        'FE': 16_698_000,
        'BEBY': 16_698_000,
        'AOS': 15_972_000,
        'UXUID': 13_068_000,
        'CLOUD': 14_520_000,
        'AIW': 16_698_000,
        'DA': 13_794_000,
        'UGM': 16_698_000,
        'BEJ': 17_424_000,
        'GM': 11_035_200,
    }

    # 긴 코드부터 매칭 (UGM이 GM보다 먼저)
    SCHOOL_CODE_PRIORITY = ('UXUID', 'CLOUD', 'BEBY', 'AIW', 'UGM', 'BEJ', 'AOS', 'FE', 'DA', 'GM')

    # 과정코드 표기가 다른 스쿨
    SCHOOL_CODE_ALIASES = {
        'BEPY': 'BEBY',
        'CLD': 'CLOUD',
        'BEJV': 'BEJ',
    }

    # 로그
    LOG_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'logs')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # 서버
    HOST = '0.0.0.0'
    PORT = int(os.environ.get('PORT', 5000))
    DEBUG = os.environ.get('FLASK_ENV') == 'development'

    @classmethod
    def use_cosmos_db(cls):
        """Cosmos DB 사용 여부 판단"""
        return bool(cls.COSMOS_DB_ENDPOINT and cls.COSMOS_DB_KEY)

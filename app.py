"""
KDT Dashboard - KDT 과정 모객/수료/취업/매출 대시보드 API
"""
import os
import logging
from datetime import date
from dotenv import load_dotenv

load_dotenv()

from flask import Flask
from config import Config
from routes import api_bp
from services.data_parser import load_builtin_programs
from services.program_store import ProgramStore
from services.storage_service import create_storage

logger = logging.getLogger(__name__)


def configure_logging():
    """콘솔 + 파일 로그 설정"""
    os.makedirs(Config.LOG_DIR, exist_ok=True)
    root = logging.getLogger()
    if root.handlers:
        return
    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s')
    file_handler = logging.FileHandler(os.path.join(Config.LOG_DIR, 'app.log'), encoding='utf-8')
    file_handler.setFormatter(formatter)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(file_handler)
    root.addHandler(console_handler)
    root.setLevel(Config.LOG_LEVEL)


def create_store(storage=None, clock=None):
    """기본 데이터 파싱 + 사용자 과정 로드"""
    clock = clock or date.today
    result = load_builtin_programs(clock())
    if result.errors:
        logger.warning(f"기본 데이터 {len(result.errors)}개 행을 건너뛰었습니다.")
    store = ProgramStore(result.records, storage or create_storage(), clock)
    store.load()
    return store


def create_app(store=None):
    """Flask 애플리케이션 팩토리"""
    app = Flask(__name__)
    app.config.from_object(Config)

    app.extensions['program_store'] = store or create_store()

    # Blueprint 등록
    app.register_blueprint(api_bp)

    # 보안 헤더
    @app.after_request
    def set_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response

    return app


def main():
    """메인 실행 함수"""
    configure_logging()
    app = create_app()
    print("=" * 50)
    print("  KDT Dashboard")
    print("=" * 50)
    print(f"  http://localhost:{Config.PORT}/api/kpi")
    storage = "Azure Cosmos DB" if Config.use_cosmos_db() else "로컬 JSON 파일"
    print(f"  저장소: {storage}")
    print("=" * 50)

    if Config.DEBUG:
        app.run(debug=True, host=Config.HOST, port=Config.PORT)
    else:
        from waitress import serve
        print(f"Waitress 서버 시작 (포트: {Config.PORT})")
        serve(app, host=Config.HOST, port=Config.PORT)


if __name__ == '__main__':
    main()

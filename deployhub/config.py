# deployhub/config.py
import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "deployhub"

    # 데이터베이스 연결 문자열 (기본값은 로컬 SQLite 파일)
    database_url: str = "sqlite:///deployhub.db"

    # 프로젝트 목록 한 페이지에 표시할 개수
    items_per_page: int = 10

    # Celery settings
    celery_broker_url: str = "redis://localhost:6379/0"
    celery_result_backend: str | None = None
    celery_task_serializer: str = "json"
    celery_result_serializer: str = "json"

    # 프로젝트 생성/복제 후 실행되는 셋업 작업
    setup_project_task: str = "deployhub.setup_project"
    setup_project_queue: str = "setup"

    host: str = ""
    port: int = 8000
    log_level: str = "INFO"


settings = Settings()


def configure_logging(level: str | None = None):
    """설정된 로그 레벨로 루트 로거를 초기화합니다."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

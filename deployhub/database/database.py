from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from deployhub.config import settings


def build_engine(database_url: str):
    """
    주어진 연결 문자열로 SQLAlchemy 엔진을 생성합니다.
    connect_args는 SQLite에서만 필요합니다. (thread-safe 설정)
    """
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, connect_args=connect_args)


engine = build_engine(settings.database_url)

# autocommit=False, autoflush=False로 설정하여, 명시적으로 commit을 호출해야 DB에 반영됩니다.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 모든 모델 클래스가 상속받을 Base 클래스
Base = declarative_base()

# SQLite/PostgreSQL INTEGER(BIGINT) 컬럼이 담을 수 있는 최대값
MAX_INTEGER = 2 ** 63 - 1


def fits_integer_column(value) -> bool:
    """정수 컬럼에 바인딩할 수 있는 양의 ID인지 확인합니다. 범위를 벗어나면 DB 드라이버가 OverflowError를 냅니다."""
    return isinstance(value, int) and 1 <= value <= MAX_INTEGER

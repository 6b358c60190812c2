# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from deployhub.database.database import Base
from deployhub.database import models


@pytest.fixture
def db_engine():
    """테스트마다 새로 만드는 인메모리 SQLite 엔진. 모든 세션이 같은 연결을 공유합니다."""
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def default_group(db_session) -> models.ProjectGroup:
    group = models.ProjectGroup(name="Projects", order=0)
    db_session.add(group)
    db_session.commit()
    return group

import logging

from .database import engine, SessionLocal, Base
from .models import ProjectGroup
from deployhub.config import configure_logging

logger = logging.getLogger(__name__)


def initialize_db(bind=engine, session_factory=SessionLocal):
    """
    DB 테이블을 생성하고, 기본 프로젝트 그룹을 삽입합니다.
    이미 그룹이 존재하면 기본 데이터 삽입은 건너뜁니다.
    """
    logger.info("Initializing database tables...")

    # 모든 테이블을 생성합니다. (이미 존재하면 생성하지 않음)
    Base.metadata.create_all(bind=bind)

    db = session_factory()
    try:
        if db.query(ProjectGroup).first():
            logger.info("Default data already present, skipping seed.")
            return

        db.add(ProjectGroup(name="Projects", order=0))
        db.commit()
        logger.info("Default project group created.")

    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == '__main__':
    configure_logging()
    initialize_db()

# tests/test_db_init.py
from deployhub.database import models
from deployhub.database.db_init import initialize_db


def test_initialize_db_seeds_default_group_once(db_engine, session_factory, db_session):
    initialize_db(bind=db_engine, session_factory=session_factory)
    initialize_db(bind=db_engine, session_factory=session_factory)

    groups = db_session.query(models.ProjectGroup).all()
    assert [(g.name, g.order) for g in groups] == [("Projects", 0)]

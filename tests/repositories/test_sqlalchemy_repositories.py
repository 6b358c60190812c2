# tests/repositories/test_sqlalchemy_repositories.py
from deployhub.database import models
from deployhub.repositories.sqlalchemy.sqlalchemy_project_repository import SqlalchemyProjectRepository
from deployhub.repositories.sqlalchemy.sqlalchemy_project_group_repository import SqlalchemyProjectGroupRepository
from deployhub.repositories.sqlalchemy.sqlalchemy_key_repository import SqlalchemyKeyRepository
from deployhub.repositories.sqlalchemy.sqlalchemy_deploy_template_repository import SqlalchemyDeployTemplateRepository


def _add_projects(db_session, group, *names):
    for name in names:
        db_session.add(models.Project(name=name, repository=f"git@example.com:{name}.git", group_id=group.id))
    db_session.commit()

# ===================================================================
#  정렬 테스트 (삽입 순서와 무관하게 정렬되어야 함)
# ===================================================================

def test_lookup_lists_are_ordered(db_session):
    db_session.add_all([
        models.ProjectGroup(name="Zeta", order=2),
        models.ProjectGroup(name="Alpha", order=3),
        models.ProjectGroup(name="Mid", order=1),
        models.Key(name="staging"),
        models.Key(name="production"),
        models.DeployTemplate(name="symfony"),
        models.DeployTemplate(name="laravel"),
    ])
    db_session.commit()

    groups = SqlalchemyProjectGroupRepository(db_session).list_all()
    keys = SqlalchemyKeyRepository(db_session).list_all()
    templates = SqlalchemyDeployTemplateRepository(db_session).list_all()

    assert [g.name for g in groups] == ["Mid", "Zeta", "Alpha"]
    assert [k.name for k in keys] == ["production", "staging"]
    assert [t.name for t in templates] == ["laravel", "symfony"]


def test_paginate_orders_by_name(db_session, default_group):
    _add_projects(db_session, default_group, "charlie", "alpha", "echo", "bravo", "delta")
    repo = SqlalchemyProjectRepository(db_session)

    first = repo.paginate(1, 2)
    last = repo.paginate(3, 2)

    assert [p.name for p in first.items] == ["alpha", "bravo"]
    assert first.total == 5
    assert first.last_page == 3
    assert [p.name for p in last.items] == ["echo"]


def test_paginate_empty(db_session):
    page = SqlalchemyProjectRepository(db_session).paginate(0, 10)

    assert page.items == []
    assert page.page == 1
    assert page.last_page == 1

# ===================================================================
#  생성/수정/삭제 테스트
# ===================================================================

def test_create_applies_column_defaults(db_session, default_group):
    repo = SqlalchemyProjectRepository(db_session)

    project = repo.create(models.Project(name="api", repository="git@example.com:api.git", group_id=default_group.id))

    assert project.id is not None
    assert project.branch == "master"
    assert project.builds_to_keep == 10
    assert project.allow_other_branch is True
    assert project.need_approve is False
    assert project.to_dict()["created_at"] is not None


def test_update_persists_values(db_session, default_group):
    repo = SqlalchemyProjectRepository(db_session)
    project = repo.create(models.Project(name="api", repository="r", group_id=default_group.id))

    repo.update(project, {"name": "api-v2", "builds_to_keep": 3})

    reloaded = repo.find_by_id(project.id)
    assert reloaded.name == "api-v2"
    assert reloaded.builds_to_keep == 3


def test_delete_removes_record(db_session, default_group):
    repo = SqlalchemyProjectRepository(db_session)
    project = repo.create(models.Project(name="api", repository="r", group_id=default_group.id))
    project_id = project.id

    assert repo.delete(project) is True
    assert repo.find_by_id(project_id) is None
    assert repo.delete(None) is False


def test_template_create_and_find(db_session):
    repo = SqlalchemyDeployTemplateRepository(db_session)

    template = repo.create(models.DeployTemplate(name="base"))

    assert repo.find_by_id(template.id).name == "base"
    assert repo.find_by_id(template.id + 100) is None


def test_out_of_range_ids_resolve_to_nothing(db_session):
    """정수 컬럼 범위를 벗어난 ID는 OverflowError 없이 None으로 조회되는지 테스트합니다."""
    assert SqlalchemyProjectRepository(db_session).find_by_id(10 ** 20) is None
    assert SqlalchemyProjectRepository(db_session).find_by_id(0) is None
    assert SqlalchemyDeployTemplateRepository(db_session).find_by_id(10 ** 20) is None


def test_paginate_beyond_integer_range_returns_empty_page(db_session, default_group):
    _add_projects(db_session, default_group, "alpha")

    page = SqlalchemyProjectRepository(db_session).paginate(10 ** 20, 10)

    assert page.items == []
    assert page.total == 1
    assert page.page == 10 ** 20

# tests/tasks/test_celery_task_queue.py
import pytest
from unittest.mock import MagicMock

from deployhub.database import models
from deployhub.tasks.celery_task_queue import CeleryTaskQueue
from deployhub.tasks.interfaces import SetupProjectTask, describe_record


@pytest.fixture
def mock_celery_app() -> MagicMock:
    """send_task만 흉내 내는 Celery 앱. 브로커에 연결하지 않습니다."""
    app = MagicMock()
    app.send_task.return_value = MagicMock(id="task-123")
    return app


def test_enqueue_sends_task_by_name(mock_celery_app):
    queue = CeleryTaskQueue(app=mock_celery_app, task_name="deployhub.setup_project", queue="setup")
    task = SetupProjectTask(
        target=models.Project(id=7, name="api"),
        skeleton=models.DeployTemplate(id=5, name="base"),
    )

    task_id = queue.enqueue(task)

    assert task_id == "task-123"
    mock_celery_app.send_task.assert_called_once_with(
        "deployhub.setup_project",
        kwargs={"target": {"type": "project", "id": 7}, "skeleton": {"type": "template", "id": 5}},
        queue="setup",
    )


def test_enqueue_without_skeleton(mock_celery_app):
    queue = CeleryTaskQueue(app=mock_celery_app)

    queue.enqueue(SetupProjectTask(target=models.DeployTemplate(id=2, name="t")))

    kwargs = mock_celery_app.send_task.call_args.kwargs["kwargs"]
    assert kwargs == {"target": {"type": "template", "id": 2}, "skeleton": None}


def test_enqueue_propagates_broker_errors(mock_celery_app):
    mock_celery_app.send_task.side_effect = ConnectionError("broker unreachable")
    queue = CeleryTaskQueue(app=mock_celery_app)

    with pytest.raises(ConnectionError):
        queue.enqueue(SetupProjectTask(target=models.Project(id=1, name="api")))


def test_describe_record_rejects_unknown_types():
    assert describe_record(None) is None
    with pytest.raises(TypeError):
        describe_record(models.Key(id=1, name="k"))

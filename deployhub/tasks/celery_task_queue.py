import logging
from typing import Optional

from celery import Celery

from deployhub.config import settings
from deployhub.tasks.celery_app import get_celery_app
from deployhub.tasks.interfaces import ITaskQueue, SetupProjectTask

logger = logging.getLogger(__name__)


class CeleryTaskQueue(ITaskQueue):
    """셋업 작업을 이름으로 Celery 브로커에 전송합니다. 작업 구현은 워커 쪽에 있습니다."""

    def __init__(self, app: Optional[Celery] = None, task_name: Optional[str] = None, queue: Optional[str] = None):
        self.app = app or get_celery_app()
        self.task_name = task_name or settings.setup_project_task
        self.queue = queue or settings.setup_project_queue

    def enqueue(self, task: SetupProjectTask) -> Optional[str]:
        payload = task.to_payload()
        result = self.app.send_task(self.task_name, kwargs=payload, queue=self.queue)
        logger.info(
            f"Dispatched {self.task_name} for {payload['target']['type']} "
            f"{payload['target']['id']} (task id: {result.id})"
        )
        return result.id

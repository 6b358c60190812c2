from celery import Celery

from deployhub.config import settings


def _build_result_backend() -> str:
    if settings.celery_result_backend:
        return settings.celery_result_backend
    return settings.celery_broker_url


celery_app = Celery(
    settings.app_name,
    broker=settings.celery_broker_url,
    backend=_build_result_backend(),
)

celery_app.conf.update(
    task_serializer=settings.celery_task_serializer,
    result_serializer=settings.celery_result_serializer,
    accept_content=[settings.celery_task_serializer],
    timezone="UTC",
    enable_utc=True,
    task_routes={
        settings.setup_project_task: {"queue": settings.setup_project_queue},
    },
)


def get_celery_app() -> Celery:
    return celery_app

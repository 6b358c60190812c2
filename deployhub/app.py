# deployhub/app.py
from wsgiref.simple_server import make_server
from urllib.parse import parse_qs
import json
import logging
import re
import sys

from deployhub.config import settings, configure_logging
from deployhub.database.database import SessionLocal
from deployhub.repositories.sqlalchemy.sqlalchemy_project_repository import SqlalchemyProjectRepository
from deployhub.repositories.sqlalchemy.sqlalchemy_project_group_repository import SqlalchemyProjectGroupRepository
from deployhub.repositories.sqlalchemy.sqlalchemy_key_repository import SqlalchemyKeyRepository
from deployhub.repositories.sqlalchemy.sqlalchemy_deploy_template_repository import SqlalchemyDeployTemplateRepository
from deployhub.services.project_admin_service import ProjectAdminService
from deployhub.services.exceptions import ProjectNotFoundError, ValidationError
from deployhub.tasks.celery_task_queue import CeleryTaskQueue
from deployhub.validators import validate_store_project, validate_clone_project

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------
## 요청 처리 유틸리티 함수
# --------------------------------------------------------------------------

def get_request_data(environ):
    try:
        content_length = int(environ.get("CONTENT_LENGTH") or 0)
        return json.loads(environ["wsgi.input"].read(content_length)) if content_length > 0 else {}
    except (ValueError, json.JSONDecodeError):
        raise ValueError("Invalid or missing JSON body.")


def get_page(environ):
    query = parse_qs(environ.get("QUERY_STRING", ""))
    raw_page = query.get("page", ["1"])[0]
    if not raw_page.isdigit():
        raise ValueError(f"Invalid page number '{raw_page}'.")
    return max(int(raw_page), 1)


def handle_exception(e):
    error_map = {
        ProjectNotFoundError: "404 Not Found",
        ValidationError: "422 Unprocessable Entity",
        ValueError: "400 Bad Request",
    }
    status = error_map.get(type(e))
    if status is None:
        logger.exception("Unhandled error while processing request")
        return "500 Internal Server Error", json.dumps({"error": "Internal Server Error"})

    body = {"error": str(e)}
    if isinstance(e, ValidationError):
        body["errors"] = e.errors
    return status, json.dumps(body)

# --------------------------------------------------------------------------
## WSGI 애플리케이션 (의존성 주입 및 라우팅)
# --------------------------------------------------------------------------

def create_app(session_factory=SessionLocal, task_queue_factory=CeleryTaskQueue):
    """
    요청마다 DB 세션, 리포지토리, 서비스를 생성하는 WSGI 애플리케이션을 만듭니다.

    Args:
        session_factory: SQLAlchemy 세션을 생성하는 callable.
        task_queue_factory: ITaskQueue 구현체를 생성하는 callable.
    """
    def application(environ, start_response):
        db_session = session_factory()
        try:
            # 1. 의존성 생성 (Repositories -> Service)
            project_service = ProjectAdminService(
                project_repo=SqlalchemyProjectRepository(db_session),
                group_repo=SqlalchemyProjectGroupRepository(db_session),
                key_repo=SqlalchemyKeyRepository(db_session),
                template_repo=SqlalchemyDeployTemplateRepository(db_session),
                task_queue=task_queue_factory(),
            )
            environ['services'] = {'projects': project_service}

            # 2. 라우팅 및 핸들러 실행
            path = environ.get("PATH_INFO", "")
            method = environ.get("REQUEST_METHOD", "")

            handler, path_args = None, []
            for route_method, pattern, route_handler in ROUTES:
                if method == route_method and (match := re.match(pattern, path)):
                    handler, path_args = route_handler, match.groups()
                    break

            if handler:
                status, response_body = handler(environ, *path_args)
            else:
                status, response_body = '404 Not Found', json.dumps({'error': 'Not Found'})

        except Exception as e:
            status, response_body = handle_exception(e)
        finally:
            db_session.close()

        start_response(status, [("Content-Type", "application/json")])
        return [response_body.encode("utf-8")]

    return application

# --------------------------------------------------------------------------
## 핸들러 함수
# --------------------------------------------------------------------------

def list_projects_handler(environ, *args):
    view = environ['services']['projects'].list(get_page(environ))
    view["is_secure"] = environ.get("wsgi.url_scheme") == "https"
    return '200 OK', json.dumps(view)


def create_form_handler(environ, *args):
    view = environ['services']['projects'].list(get_page(environ), action="create")
    view["is_secure"] = environ.get("wsgi.url_scheme") == "https"
    return '200 OK', json.dumps(view)


def create_project_handler(environ, *args):
    fields = validate_store_project(get_request_data(environ))
    project = environ['services']['projects'].create(fields)
    return '201 Created', json.dumps(project)


def clone_project_handler(environ, skeleton_id):
    fields = validate_clone_project(get_request_data(environ))
    redirect = environ['services']['projects'].clone(int(skeleton_id), fields)
    return '201 Created', json.dumps(redirect)


def update_project_handler(environ, project_id):
    partial = environ.get("REQUEST_METHOD") == "PATCH"
    fields = validate_store_project(get_request_data(environ), partial=partial)
    project = environ['services']['projects'].update(int(project_id), fields)
    return '200 OK', json.dumps(project)


def delete_project_handler(environ, project_id):
    result = environ['services']['projects'].destroy(int(project_id))
    return '200 OK', json.dumps(result)


ROUTES = [
    ('GET', r'^/v1/projects$', list_projects_handler),
    ('GET', r'^/v1/projects/create$', create_form_handler),
    ('POST', r'^/v1/projects$', create_project_handler),
    ('POST', r'^/v1/projects/([0-9]+)/clone$', clone_project_handler),
    ('PUT', r'^/v1/projects/([0-9]+)$', update_project_handler),
    ('PATCH', r'^/v1/projects/([0-9]+)$', update_project_handler),
    ('DELETE', r'^/v1/projects/([0-9]+)$', delete_project_handler),
]

# --------------------------------------------------------------------------
## 서버 실행
# --------------------------------------------------------------------------

if __name__ == "__main__":
    configure_logging()
    try:
        with make_server(settings.host, settings.port, create_app()) as httpd:
            logger.info(f"Serving {settings.app_name} on port {settings.port}...")
            httpd.serve_forever()
    except Exception as e:
        print(f"Error starting server: {e}", file=sys.stderr)

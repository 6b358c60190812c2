import logging
from enum import Enum
from typing import Any, Dict, Optional

from deployhub.config import settings
from deployhub.database import models
from deployhub.repositories.interfaces import (
    IProjectRepository, IProjectGroupRepository, IKeyRepository, IDeployTemplateRepository
)
from deployhub.services.exceptions import ProjectNotFoundError, ValidationError
from deployhub.tasks.interfaces import ITaskQueue, SetupProjectTask

logger = logging.getLogger(__name__)

# 작업별 허용 필드 목록
CREATE_FIELDS = frozenset({
    "name", "repository", "branch", "group_id", "key_id", "builds_to_keep",
    "url", "build_url", "template_id", "allow_other_branch", "need_approve",
})
UPDATE_FIELDS = CREATE_FIELDS - {"template_id"}
CLONE_FIELDS = frozenset({"name", "type"})

# 프로젝트로 복제할 때 원본에서 그대로 가져오는 필드
CLONE_COPIED_FIELDS = ("group_id", "key_id", "repository")

CLONE_NAME_SUFFIX = "_Clone"


class CloneTarget(Enum):
    """복제 결과물의 종류. 각 값은 생성 후 이동할 라우트 이름이기도 합니다."""
    PROJECT = "project"
    TEMPLATE = "template"

    @property
    def route(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any) -> "CloneTarget":
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                f"Unknown clone type '{value}'.",
                {"type": f"The type must be one of: {', '.join(t.value for t in cls)}."},
            ) from None


def _only(fields: Dict[str, Any], allowed) -> Dict[str, Any]:
    return {name: value for name, value in fields.items() if name in allowed}


class ProjectAdminService:
    """관리자 화면에서 프로젝트와 배포 템플릿을 조회, 생성, 복제, 수정, 삭제하는 서비스를 제공합니다."""

    def __init__(
        self,
        project_repo: IProjectRepository,
        group_repo: IProjectGroupRepository,
        key_repo: IKeyRepository,
        template_repo: IDeployTemplateRepository,
        task_queue: ITaskQueue,
        items_per_page: Optional[int] = None,
    ):
        """
        ProjectAdminService를 초기화합니다.

        Args:
            project_repo: 프로젝트 데이터에 접근하기 위한 리포지토리.
            group_repo: 프로젝트 그룹 목록 조회용 리포지토리.
            key_repo: 배포 키 목록 조회용 리포지토리.
            template_repo: 배포 템플릿 데이터에 접근하기 위한 리포지토리.
            task_queue: 프로젝트 셋업 작업을 전달할 작업 큐.
            items_per_page: 목록 한 페이지의 기본 크기. 없으면 설정값을 사용합니다.
        """
        self.project_repo = project_repo
        self.group_repo = group_repo
        self.key_repo = key_repo
        self.template_repo = template_repo
        self.task_queue = task_queue
        self.items_per_page = items_per_page or settings.items_per_page

    def list(self, page: int = 1, page_size: Optional[int] = None, action: Optional[str] = None) -> Dict[str, Any]:
        """
        관리 화면을 구성하는 데이터를 조회합니다.

        프로젝트는 이름순으로 페이지 단위로, 키와 템플릿은 이름순, 그룹은 order 순으로
        전체 목록을 반환합니다.

        Args:
            page: 조회할 페이지 번호 (1부터 시작).
            page_size: 한 페이지의 프로젝트 수.
            action: 화면에서 바로 열어야 할 동작 (예: 'create').

        Returns:
            projects(페이지 정보 포함), keys, groups, templates, action을 담은 딕셔너리.
        """
        projects = self.project_repo.paginate(max(page, 1), page_size or self.items_per_page)
        return {
            "projects": projects.to_dict(lambda p: p.to_dict()),
            "keys": [k.to_dict() for k in self.key_repo.list_all()],
            "groups": [g.to_dict() for g in self.group_repo.list_all()],
            "templates": [t.to_dict() for t in self.template_repo.list_all()],
            "action": action,
        }

    def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        새로운 프로젝트를 생성하고 셋업 작업을 큐에 넣습니다.

        template_id가 가리키는 템플릿이 없어도 오류로 보지 않으며,
        이 경우 skeleton 없이 셋업 작업이 전달됩니다.

        Args:
            fields: 검증된 요청 필드. 허용 목록에 없는 필드는 무시됩니다.

        Returns:
            생성된 프로젝트 정보를 담은 딕셔너리.
        """
        fields = _only(fields, CREATE_FIELDS)
        template_id = fields.pop("template_id", None)

        skeleton = None
        if template_id is not None:
            skeleton = self.template_repo.find_by_id(template_id)
            if skeleton is None:
                logger.info(f"Template '{template_id}' not found, creating project without skeleton.")

        project = self.project_repo.create(models.Project(**fields))
        logger.info(f"Project '{project.name}' ({project.id}) created.")

        self.task_queue.enqueue(SetupProjectTask(target=project, skeleton=skeleton))
        return project.to_dict()

    def clone(self, skeleton_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        기존 프로젝트를 원본으로 새 프로젝트 또는 템플릿을 만듭니다.

        type이 'project'이면 원본의 그룹, 키, 저장소를 복사하여 프로젝트를 만들고,
        'template'이면 전달된 필드만으로 배포 템플릿을 만듭니다.

        Args:
            skeleton_id: 원본 프로젝트의 ID.
            fields: name(선택)과 type을 담은 요청 필드.

        Returns:
            이동할 라우트와 새 레코드의 ID를 담은 딕셔너리 (예: {'route': 'project', 'id': 3}).

        Raises:
            ProjectNotFoundError: 원본 프로젝트를 찾을 수 없을 때.
            ValidationError: type이 'project'나 'template'이 아닐 때.
        """
        skeleton = self.project_repo.find_by_id(skeleton_id)
        if not skeleton:
            raise ProjectNotFoundError(f"Project with id '{skeleton_id}' not found.")

        fields = _only(fields, CLONE_FIELDS)
        target_type = CloneTarget.parse(fields.pop("type", None))

        if not fields.get("name"):
            fields["name"] = skeleton.name + CLONE_NAME_SUFFIX

        if target_type is CloneTarget.PROJECT:
            for name in CLONE_COPIED_FIELDS:
                fields[name] = getattr(skeleton, name)
            target = self.project_repo.create(models.Project(**fields))
        else:
            target = self.template_repo.create(models.DeployTemplate(**fields))

        logger.info(f"Project {skeleton.id} cloned into {target_type.value} '{target.name}' ({target.id}).")

        self.task_queue.enqueue(SetupProjectTask(target=target, skeleton=skeleton))
        return {"route": target_type.route, "id": target.id}

    def update(self, project_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        프로젝트 설정을 변경합니다. template_id는 생성 이후 변경할 수 없습니다.

        Raises:
            ProjectNotFoundError: 해당 ID의 프로젝트를 찾을 수 없을 때.
        """
        project = self.project_repo.find_by_id(project_id)
        if not project:
            raise ProjectNotFoundError(f"Project with id '{project_id}' not found.")

        project = self.project_repo.update(project, _only(fields, UPDATE_FIELDS))
        logger.info(f"Project {project_id} updated.")
        return project.to_dict()

    def destroy(self, project_id: int) -> Dict[str, bool]:
        """
        프로젝트를 삭제합니다.

        Raises:
            ProjectNotFoundError: 해당 ID의 프로젝트를 찾을 수 없을 때.
        """
        project = self.project_repo.find_by_id(project_id)
        if not project:
            raise ProjectNotFoundError(f"Project with id '{project_id}' not found.")

        self.project_repo.delete(project)
        logger.info(f"Project {project_id} deleted.")
        return {"success": True}

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from deployhub.database import models
from deployhub.repositories.pagination import Page


class IProjectRepository(ABC):
    @abstractmethod
    def create(self, project_model: models.Project) -> models.Project:
        """새로운 프로젝트를 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def find_by_id(self, project_id: int) -> Optional[models.Project]:
        """고유 ID로 특정 프로젝트를 조회합니다."""
        pass

    @abstractmethod
    def paginate(self, page: int, per_page: int) -> Page:
        """
        이름순으로 정렬된 프로젝트 목록에서 한 페이지를 조회합니다.

        Args:
            page: 1부터 시작하는 페이지 번호.
            per_page: 한 페이지에 담을 프로젝트 수.

        Returns:
            해당 페이지의 프로젝트와 전체 개수를 담은 Page 객체.
        """
        pass

    @abstractmethod
    def update(self, project: models.Project, values: Dict[str, Any]) -> models.Project:
        """프로젝트의 필드를 주어진 값으로 변경하고 저장합니다."""
        pass

    @abstractmethod
    def delete(self, project: models.Project) -> bool:
        """특정 프로젝트를 데이터베이스에서 삭제합니다."""
        pass

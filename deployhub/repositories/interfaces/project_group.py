from abc import ABC, abstractmethod
from typing import List
from deployhub.database import models


class IProjectGroupRepository(ABC):
    @abstractmethod
    def list_all(self) -> List[models.ProjectGroup]:
        """모든 프로젝트 그룹을 order 값 순서로 조회합니다."""
        pass

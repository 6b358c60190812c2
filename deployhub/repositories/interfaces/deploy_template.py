from abc import ABC, abstractmethod
from typing import List, Optional
from deployhub.database import models


class IDeployTemplateRepository(ABC):
    @abstractmethod
    def create(self, template_model: models.DeployTemplate) -> models.DeployTemplate:
        """새로운 배포 템플릿을 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def find_by_id(self, template_id: int) -> Optional[models.DeployTemplate]:
        """고유 ID로 특정 배포 템플릿을 조회합니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[models.DeployTemplate]:
        """모든 배포 템플릿을 이름순으로 조회합니다."""
        pass

from abc import ABC, abstractmethod
from typing import List
from deployhub.database import models


class IKeyRepository(ABC):
    @abstractmethod
    def list_all(self) -> List[models.Key]:
        """모든 배포 키를 이름순으로 조회합니다."""
        pass

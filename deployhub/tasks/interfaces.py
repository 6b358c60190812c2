from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from deployhub.database import models

SetupTarget = Union[models.Project, models.DeployTemplate]


def describe_record(record: Optional[SetupTarget]) -> Optional[Dict[str, Any]]:
    """프로젝트/템플릿 레코드를 작업 큐로 보낼 수 있는 {type, id} 형태로 변환합니다."""
    if record is None:
        return None
    if isinstance(record, models.Project):
        return {"type": "project", "id": record.id}
    if isinstance(record, models.DeployTemplate):
        return {"type": "template", "id": record.id}
    raise TypeError(f"Unsupported setup record: {type(record).__name__}")


@dataclass
class SetupProjectTask:
    """
    새로 생성되거나 복제된 프로젝트(또는 템플릿)의 셋업 작업 요청입니다.
    skeleton은 설정을 복사해 올 원본이며, 없으면 None입니다.
    """
    target: SetupTarget
    skeleton: Optional[SetupTarget] = None

    def to_payload(self) -> Dict[str, Any]:
        return {
            "target": describe_record(self.target),
            "skeleton": describe_record(self.skeleton),
        }


class ITaskQueue(ABC):
    @abstractmethod
    def enqueue(self, task: SetupProjectTask) -> Optional[str]:
        """
        셋업 작업을 큐에 넣고 바로 반환합니다. 작업 완료를 기다리지 않습니다.

        Returns:
            브로커가 발급한 작업 ID. 발급되지 않으면 None.
        """
        pass

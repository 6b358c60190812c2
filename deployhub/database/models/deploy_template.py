from sqlalchemy import Column, DateTime, Integer, String, func
from ..database import Base


class DeployTemplate(Base):
    """
    새 프로젝트나 템플릿을 만들 때 원본(skeleton)으로 사용하는 배포 설정 패턴입니다.
    Project와 같은 형태이지만 그룹, 키, 승인 플래그 같은 실행 시점 필드는 갖지 않습니다.
    """
    __tablename__ = "deploy_templates"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    repository = Column(String)
    branch = Column(String(255))
    builds_to_keep = Column(Integer)
    url = Column(String)
    build_url = Column(String)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "repository": self.repository,
            "branch": self.branch,
            "builds_to_keep": self.builds_to_keep,
            "url": self.url,
            "build_url": self.build_url,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship
from ..database import Base


class Project(Base):
    """
    배포 가능한 하나의 단위를 나타냅니다.
    저장소, 브랜치, 빌드 보관 개수 등의 배포 설정을 가지며 하나의 ProjectGroup에 속합니다.
    """
    __tablename__ = "projects"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    repository = Column(String, nullable=False)
    branch = Column(String(255), nullable=False, default="master")
    builds_to_keep = Column(Integer, nullable=False, default=10)
    url = Column(String)
    build_url = Column(String)
    allow_other_branch = Column(Boolean, nullable=False, default=True)
    need_approve = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # 템플릿 참조는 외래 키로 강제하지 않습니다. 생성 시 template_id는 셋업 작업의 skeleton으로만
    # 쓰이고 이 컬럼에는 저장되지 않으므로 항상 NULL이며, to_dict에도 포함하지 않습니다.
    template_id = Column(Integer, nullable=True)

    group_id = Column(Integer, ForeignKey("groups.id"), nullable=False)
    group = relationship("ProjectGroup", back_populates="projects")

    key_id = Column(Integer, ForeignKey("keys.id"), nullable=True)
    key = relationship("Key", back_populates="projects")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "repository": self.repository,
            "branch": self.branch,
            "group_id": self.group_id,
            "key_id": self.key_id,
            "builds_to_keep": self.builds_to_keep,
            "url": self.url,
            "build_url": self.build_url,
            "allow_other_branch": self.allow_other_branch,
            "need_approve": self.need_approve,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..database import Base


class ProjectGroup(Base):
    """
    화면에 프로젝트를 묶어서 보여주기 위한 그룹입니다.
    order 값의 오름차순으로 정렬됩니다.
    """
    __tablename__ = "groups"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    order = Column(Integer, nullable=False, default=0)

    projects = relationship("Project", back_populates="group")

    def to_dict(self):
        return {"id": self.id, "name": self.name, "order": self.order}

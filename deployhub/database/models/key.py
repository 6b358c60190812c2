from sqlalchemy import Column, DateTime, Integer, String, Text, func
from sqlalchemy.orm import relationship
from ..database import Base


class Key(Base):
    """
    프로젝트 저장소에 접근할 때 사용하는 배포 키(SSH 키 쌍)를 나타냅니다.
    """
    __tablename__ = "keys"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    private_key = Column(Text)
    public_key = Column(Text)
    created_at = Column(DateTime, server_default=func.now())

    projects = relationship("Project", back_populates="key")

    def to_dict(self):
        # 개인 키는 응답에 포함하지 않습니다.
        return {"id": self.id, "name": self.name, "public_key": self.public_key}

from typing import List
from sqlalchemy.orm import Session
from deployhub.database import models
from deployhub.repositories.interfaces import IProjectGroupRepository


class SqlalchemyProjectGroupRepository(IProjectGroupRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def list_all(self) -> List[models.ProjectGroup]:
        return self.db.query(models.ProjectGroup).order_by(models.ProjectGroup.order.asc()).all()

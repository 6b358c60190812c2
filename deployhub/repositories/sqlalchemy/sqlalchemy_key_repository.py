from typing import List
from sqlalchemy.orm import Session
from deployhub.database import models
from deployhub.repositories.interfaces import IKeyRepository


class SqlalchemyKeyRepository(IKeyRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def list_all(self) -> List[models.Key]:
        return self.db.query(models.Key).order_by(models.Key.name.asc()).all()

from typing import List, Optional
from sqlalchemy.orm import Session
from deployhub.database import models
from deployhub.database.database import fits_integer_column
from deployhub.repositories.interfaces import IDeployTemplateRepository


class SqlalchemyDeployTemplateRepository(IDeployTemplateRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, template_model: models.DeployTemplate) -> models.DeployTemplate:
        self.db.add(template_model)
        self.db.commit()
        self.db.refresh(template_model)
        return template_model

    def find_by_id(self, template_id: int) -> Optional[models.DeployTemplate]:
        if not fits_integer_column(template_id):
            return None
        return self.db.query(models.DeployTemplate).filter(models.DeployTemplate.id == template_id).first()

    def list_all(self) -> List[models.DeployTemplate]:
        return self.db.query(models.DeployTemplate).order_by(models.DeployTemplate.name.asc()).all()

from typing import Any, Dict, Optional
from sqlalchemy.orm import Session
from deployhub.database import models
from deployhub.database.database import MAX_INTEGER, fits_integer_column
from deployhub.repositories.interfaces import IProjectRepository
from deployhub.repositories.pagination import Page


class SqlalchemyProjectRepository(IProjectRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, project_model: models.Project) -> models.Project:
        self.db.add(project_model)
        self.db.commit()
        self.db.refresh(project_model)
        return project_model

    def find_by_id(self, project_id: int) -> Optional[models.Project]:
        # 정수 컬럼 범위를 벗어난 ID는 존재할 수 없음
        if not fits_integer_column(project_id):
            return None
        return self.db.query(models.Project).filter(models.Project.id == project_id).first()

    def paginate(self, page: int, per_page: int) -> Page:
        page = max(page, 1)
        offset = (page - 1) * per_page
        query = self.db.query(models.Project)
        total = query.count()
        if offset > MAX_INTEGER:
            return Page(items=[], total=total, page=page, per_page=per_page)
        items = query.order_by(models.Project.name.asc(), models.Project.id.asc()) \
            .offset(offset).limit(per_page).all()
        return Page(items=items, total=total, page=page, per_page=per_page)

    def update(self, project: models.Project, values: Dict[str, Any]) -> models.Project:
        for field, value in values.items():
            setattr(project, field, value)
        self.db.commit()
        self.db.refresh(project)
        return project

    def delete(self, project: models.Project) -> bool:
        if project:
            self.db.delete(project)
            self.db.commit()
            return True
        return False

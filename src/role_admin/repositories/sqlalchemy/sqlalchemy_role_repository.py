from typing import List, Optional
from sqlalchemy.orm import Session
from role_admin.database import models
from role_admin.repositories.interfaces import IRoleRepository

class SqlalchemyRoleRepository(IRoleRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_by_id(self, role_id: str) -> Optional[models.Role]:
        return self.db.query(models.Role).filter(models.Role.id == role_id).first()

    def list_all(self) -> List[models.Role]:
        return self.db.query(models.Role).order_by(models.Role.name.asc()).all()

    def add(self, role: models.Role) -> models.Role:
        self.db.add(role)
        return role

    def delete(self, role: models.Role) -> None:
        self.db.delete(role)

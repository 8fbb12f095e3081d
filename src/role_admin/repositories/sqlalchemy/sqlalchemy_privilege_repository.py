from typing import List
from sqlalchemy.orm import Session
from role_admin.database import models
from role_admin.repositories.interfaces import IPrivilegeRepository

class SqlalchemyPrivilegeRepository(IPrivilegeRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def list_all(self) -> List[models.Privilege]:
        # 트리 빌더의 "첫 번째 권한" 선택이 매번 같도록 ID 순으로 고정합니다.
        return self.db.query(models.Privilege).order_by(models.Privilege.id.asc()).all()

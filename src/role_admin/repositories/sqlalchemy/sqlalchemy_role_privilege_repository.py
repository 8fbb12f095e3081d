from typing import Iterable, Set
from sqlalchemy.orm import Session
from role_admin.database import models
from role_admin.repositories.interfaces import IRolePrivilegeRepository

class SqlalchemyRolePrivilegeRepository(IRolePrivilegeRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def list_privilege_ids_by_role_id(self, role_id: str) -> Set[str]:
        rows = self.db.query(models.RolePrivilege.privilege_id).filter(
            models.RolePrivilege.role_id == role_id
        ).all()
        return {row[0] for row in rows}

    def add(self, role_privilege: models.RolePrivilege) -> None:
        self.db.add(role_privilege)

    def delete_by_privilege_ids(self, role_id: str, privilege_ids: Iterable[str]) -> None:
        privilege_ids = list(privilege_ids)
        if not privilege_ids:
            return
        grants = self.db.query(models.RolePrivilege).filter(
            models.RolePrivilege.role_id == role_id,
            models.RolePrivilege.privilege_id.in_(privilege_ids)
        ).all()
        # 벌크 DELETE 대신 객체 단위로 삭제해야 Role.role_privileges 컬렉션과 상태가 어긋나지 않습니다.
        for grant in grants:
            self.db.delete(grant)

    def delete_by_role_id(self, role_id: str) -> None:
        grants = self.db.query(models.RolePrivilege).filter(models.RolePrivilege.role_id == role_id).all()
        for grant in grants:
            self.db.delete(grant)

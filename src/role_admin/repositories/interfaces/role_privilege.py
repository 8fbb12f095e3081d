from abc import ABC, abstractmethod
from typing import Iterable, Set
from role_admin.database import models

class IRolePrivilegeRepository(ABC):
    @abstractmethod
    def list_privilege_ids_by_role_id(self, role_id: str) -> Set[str]:
        """특정 역할에 부여된 권한 ID의 집합을 조회합니다."""
        pass

    @abstractmethod
    def add(self, role_privilege: models.RolePrivilege) -> None:
        """권한 부여(grant) 행을 현재 작업 단위에 추가합니다."""
        pass

    @abstractmethod
    def delete_by_privilege_ids(self, role_id: str, privilege_ids: Iterable[str]) -> None:
        """특정 역할에서 주어진 권한 ID들의 부여 행을 삭제 대상으로 표시합니다."""
        pass

    @abstractmethod
    def delete_by_role_id(self, role_id: str) -> None:
        """특정 역할의 모든 부여 행을 삭제 대상으로 표시합니다."""
        pass

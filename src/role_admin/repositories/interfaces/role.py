from abc import ABC, abstractmethod
from typing import List, Optional
from role_admin.database import models

class IRoleRepository(ABC):
    @abstractmethod
    def find_by_id(self, role_id: str) -> Optional[models.Role]:
        """고유 ID로 특정 역할을 조회합니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[models.Role]:
        """모든 역할의 목록을 이름 순으로 조회합니다."""
        pass

    @abstractmethod
    def add(self, role: models.Role) -> models.Role:
        """새로운 역할을 현재 작업 단위(Unit of Work)에 추가합니다. commit은 하지 않습니다."""
        pass

    @abstractmethod
    def delete(self, role: models.Role) -> None:
        """역할을 현재 작업 단위에서 삭제 대상으로 표시합니다."""
        pass

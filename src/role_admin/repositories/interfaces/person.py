from abc import ABC, abstractmethod
from typing import List
from role_admin.database import models

class IPersonRepository(ABC):
    @abstractmethod
    def list_by_role_id(self, role_id: str) -> List[models.Person]:
        """특정 역할을 참조하는 모든 사람을 조회합니다."""
        pass

    @abstractmethod
    def update(self, person: models.Person) -> None:
        """변경된 사람 정보를 현재 작업 단위에 반영합니다."""
        pass

from abc import ABC, abstractmethod
from typing import List
from role_admin.database import models

class IPrivilegeRepository(ABC):
    @abstractmethod
    def list_all(self) -> List[models.Privilege]:
        """권한 카탈로그 전체를 조회합니다."""
        pass

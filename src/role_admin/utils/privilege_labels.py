from abc import ABC, abstractmethod
from typing import Dict, Optional

ALL_PRIVILEGES_TITLE = "All privileges"

DEFAULT_AREA_TITLES = {
    "Administration": "Administration",
}

DEFAULT_CONTROLLER_TITLES = {
    "Accounts": "Accounts",
    "Roles": "Roles",
    "Profile": "Profile",
}

DEFAULT_ACTION_TITLES = {
    "Index": "View",
    "Create": "Create",
    "Details": "Details",
    "Edit": "Edit",
    "Delete": "Delete",
}


class IPrivilegeLabelProvider(ABC):
    """권한 카탈로그의 원본 문자열(Area, Controller, Action)을 화면 표시용 라벨로 바꿉니다."""

    @abstractmethod
    def area_title(self, area: str) -> str:
        pass

    @abstractmethod
    def controller_title(self, controller: str) -> str:
        pass

    @abstractmethod
    def action_title(self, action: str) -> str:
        pass

    @abstractmethod
    def all_title(self) -> str:
        """트리 루트 노드에 표시할 라벨."""
        pass


class DictPrivilegeLabelProvider(IPrivilegeLabelProvider):
    """
    딕셔너리 기반 라벨 제공자입니다. 등록되지 않은 값은 원본 문자열을 그대로 돌려줍니다.

    Args:
        areas, controllers, actions: 원본 값 -> 라벨 매핑. None이면 빈 매핑을 사용합니다.
        all_title: 루트 노드 라벨.
    """

    def __init__(
        self,
        areas: Optional[Dict[str, str]] = None,
        controllers: Optional[Dict[str, str]] = None,
        actions: Optional[Dict[str, str]] = None,
        all_title: str = ALL_PRIVILEGES_TITLE,
    ):
        self.areas = areas or {}
        self.controllers = controllers or {}
        self.actions = actions or {}
        self._all_title = all_title

    def area_title(self, area: str) -> str:
        return self.areas.get(area, area)

    def controller_title(self, controller: str) -> str:
        return self.controllers.get(controller, controller)

    def action_title(self, action: str) -> str:
        return self.actions.get(action, action)

    def all_title(self) -> str:
        return self._all_title


def default_label_provider() -> DictPrivilegeLabelProvider:
    return DictPrivilegeLabelProvider(DEFAULT_AREA_TITLES, DEFAULT_CONTROLLER_TITLES, DEFAULT_ACTION_TITLES)

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from role_admin.services.exceptions import InvalidRoleViewError
from role_admin.services.privilege_tree import Tree


def generate_id() -> str:
    return str(uuid.uuid4())


@dataclass
class RoleView:
    """역할 생성/수정/상세 화면이 주고받는 요청·응답 객체입니다."""
    name: str = ""
    id: str = field(default_factory=generate_id)
    privileges_tree: Tree = field(default_factory=Tree)

    @classmethod
    def from_request(cls, data: Dict[str, Any], role_id: Optional[str] = None) -> "RoleView":
        """
        JSON 요청 본문으로 RoleView를 만듭니다. privilege_ids는 트리의 선택 ID가 됩니다.

        Raises:
            InvalidRoleViewError: 본문이 객체가 아니거나, name이 문자열이 아니거나 privilege_ids가 문자열 목록이 아닐 때.
        """
        if not isinstance(data, dict):
            raise InvalidRoleViewError("Request body must be a JSON object.")

        name = data.get("name") or ""
        if not isinstance(name, str):
            raise InvalidRoleViewError("'name' must be a string.")

        privilege_ids = data.get("privilege_ids") or []
        if not isinstance(privilege_ids, list) or not all(isinstance(p, str) for p in privilege_ids):
            raise InvalidRoleViewError("'privilege_ids' must be a list of strings.")

        view = cls(name=name.strip(), privileges_tree=Tree(selected_ids=frozenset(privilege_ids)))
        if role_id is not None:
            view.id = role_id
        return view

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "privileges_tree": self.privileges_tree.to_dict()}

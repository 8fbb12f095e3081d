"""
권한 카탈로그를 선택 가능한 트리로 변환하고, 역할의 현재 권한으로 선택 상태를 채웁니다.

트리 구조: 루트("All privileges") -> Area -> Controller -> Action(leaf).
Area가 없는 권한의 Controller는 루트 바로 아래에 붙습니다.
leaf 노드만 권한 ID를 가지며, 가지(branch) 노드의 ID는 항상 None 입니다.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple

from role_admin.database import models
from role_admin.utils.privilege_labels import IPrivilegeLabelProvider


@dataclass(frozen=True)
class TreeNode:
    name: Optional[str]
    id: Optional[str] = None
    nodes: Tuple["TreeNode", ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.nodes

    def walk(self) -> Iterator["TreeNode"]:
        """자기 자신을 포함한 모든 하위 노드를 전위 순회합니다."""
        yield self
        for node in self.nodes:
            yield from node.walk()

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "nodes": [n.to_dict() for n in self.nodes]}


@dataclass(frozen=True)
class Tree:
    nodes: Tuple[TreeNode, ...] = ()
    selected_ids: FrozenSet[str] = field(default_factory=frozenset)

    def leaves(self) -> List[TreeNode]:
        return [n for root in self.nodes for n in root.walk() if n.is_leaf and n.id is not None]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "selected_ids": sorted(self.selected_ids),
        }


def _titled(privileges: Iterable[models.Privilege], labels: IPrivilegeLabelProvider) -> List[Tuple[str, Optional[str], str, str]]:
    # 같은 원본 값은 한 번만 라벨 제공자에 질의합니다.
    areas: Dict[str, str] = {}
    controllers: Dict[str, str] = {}
    actions: Dict[str, str] = {}

    titled = []
    for p in privileges:
        area = None
        if p.area is not None:
            if p.area not in areas:
                areas[p.area] = labels.area_title(p.area)
            area = areas[p.area]
        if p.controller not in controllers:
            controllers[p.controller] = labels.controller_title(p.controller)
        if p.action not in actions:
            actions[p.action] = labels.action_title(p.action)
        titled.append((p.id, area, controllers[p.controller], actions[p.action]))
    return titled


def build_tree(privileges: Iterable[models.Privilege], labels: IPrivilegeLabelProvider) -> Tree:
    """
    권한 카탈로그로 선택 트리를 만듭니다. 선택된 ID는 비어 있습니다.

    Area 그룹은 "Area 라벨, 없으면 그룹의 첫 Controller 라벨" 기준 오름차순으로 정렬되므로
    Area 없는 Controller는 Area 이름들 사이에 알파벳 순으로 끼어듭니다.
    Controller와 Action은 각각 라벨 오름차순입니다. 같은 (Area, Controller, Action)이
    여러 번 나오면 처음 나온 권한의 ID 하나만 leaf로 남습니다.

    Args:
        privileges: 권한 카탈로그. 순서가 "첫 번째 권한" 선택에 영향을 줍니다.
        labels: 원본 문자열을 표시용 라벨로 바꿔 줄 제공자.

    Returns:
        루트 노드 하나를 가진 Tree.
    """
    # area -> controller -> action -> privilege id (dict의 삽입 순서 유지 성질을 이용)
    groups: Dict[Optional[str], Dict[str, Dict[str, str]]] = {}
    for privilege_id, area, controller, action in _titled(privileges, labels):
        actions = groups.setdefault(area, {}).setdefault(controller, {})
        actions.setdefault(action, privilege_id)

    def area_sort_key(item):
        area, controllers = item
        return area if area is not None else next(iter(controllers))

    root_nodes: List[TreeNode] = []
    for area, controllers in sorted(groups.items(), key=area_sort_key):
        controller_nodes = [
            TreeNode(
                name=controller,
                nodes=tuple(TreeNode(name=action, id=pid) for action, pid in sorted(actions.items())),
            )
            for controller, actions in sorted(controllers.items())
        ]
        if area is None:
            root_nodes.extend(controller_nodes)
        else:
            root_nodes.append(TreeNode(name=area, nodes=tuple(controller_nodes)))

    root = TreeNode(name=labels.all_title(), nodes=tuple(root_nodes))
    return Tree(nodes=(root,))


def seed_selection(tree: Tree, granted_ids: Iterable[str]) -> Tree:
    """
    트리의 선택 상태를 역할에 부여된 권한 ID로 채운 새 Tree를 반환합니다.

    카탈로그에 없는 ID도 걸러내지 않고 그대로 선택 상태에 남깁니다.
    """
    return replace(tree, selected_ids=frozenset(granted_ids))

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable

from role_admin.database import models
from role_admin.repositories.interfaces import IRolePrivilegeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrantDiff:
    to_insert: FrozenSet[str] = field(default_factory=frozenset)
    to_delete: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.to_insert and not self.to_delete


def compute_grant_diff(current_grants: Iterable[str], submitted_ids: Iterable[str]) -> GrantDiff:
    """현재 부여된 권한과 제출된 선택 사이의 최소 변경분을 계산합니다. 중복 ID는 하나로 취급합니다."""
    current = frozenset(current_grants)
    submitted = frozenset(submitted_ids)
    return GrantDiff(to_insert=submitted - current, to_delete=current - submitted)


class GrantReconciler:
    def __init__(self, role_privilege_repo: IRolePrivilegeRepository):
        self.role_privilege_repo = role_privilege_repo

    def reconcile(self, role_id: str, current_grants: Iterable[str], submitted_ids: Iterable[str]) -> GrantDiff:
        """
        역할의 권한 부여 행을 제출된 선택과 같아지도록 변경 사항을 쌓습니다.

        commit은 하지 않습니다. 역할 저장과 같은 작업 단위에서 호출자가 commit 해야
        역할과 권한 부여가 원자적으로 반영됩니다.

        Args:
            role_id: 대상 역할의 ID.
            current_grants: 현재 DB에 저장된 권한 ID들.
            submitted_ids: 사용자가 트리에서 선택해 제출한 권한 ID들.

        Returns:
            적용한 변경분(GrantDiff). 바뀐 것이 없으면 비어 있습니다.
        """
        diff = compute_grant_diff(current_grants, submitted_ids)
        if diff.is_empty:
            return diff

        logger.debug("Role %s grants: +%s -%s", role_id, sorted(diff.to_insert), sorted(diff.to_delete))
        if diff.to_delete:
            self.role_privilege_repo.delete_by_privilege_ids(role_id, sorted(diff.to_delete))
        for privilege_id in sorted(diff.to_insert):
            self.role_privilege_repo.add(models.RolePrivilege(role_id=role_id, privilege_id=privilege_id))
        return diff

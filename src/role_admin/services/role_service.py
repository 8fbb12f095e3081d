import logging
from typing import Any, Dict, List, Optional

from role_admin.database import models
from role_admin.repositories.interfaces import (
    IRoleRepository, IPrivilegeRepository, IRolePrivilegeRepository, IPersonRepository, IUnitOfWork
)
from role_admin.services.exceptions import RoleNotFoundError
from role_admin.services.grant_reconciler import GrantReconciler
from role_admin.services.privilege_tree import Tree, build_tree, seed_selection
from role_admin.services.role_view import RoleView
from role_admin.services.validation import ValidationResult, ROLE_NAME_TAKEN
from role_admin.utils.privilege_labels import IPrivilegeLabelProvider, default_label_provider

logger = logging.getLogger(__name__)


class RoleService:
    """역할의 생성, 수정, 삭제, 조회와 권한 트리 구성을 담당하는 서비스입니다."""

    def __init__(
        self,
        role_repo: IRoleRepository,
        privilege_repo: IPrivilegeRepository,
        role_privilege_repo: IRolePrivilegeRepository,
        person_repo: IPersonRepository,
        unit_of_work: IUnitOfWork,
        labels: Optional[IPrivilegeLabelProvider] = None,
    ):
        """
        RoleService를 초기화합니다.

        Args:
            role_repo: 역할 데이터에 접근하기 위한 리포지토리.
            privilege_repo: 권한 카탈로그를 읽기 위한 리포지토리.
            role_privilege_repo: 역할별 권한 부여(grant) 행에 접근하기 위한 리포지토리.
            person_repo: 역할 삭제 시 참조를 끊기 위한 사람 리포지토리.
            unit_of_work: 위 리포지토리들이 공유하는 트랜잭션.
            labels: 권한 트리 라벨 제공자. 없으면 기본 라벨을 사용합니다.
        """
        self.role_repo = role_repo
        self.privilege_repo = privilege_repo
        self.role_privilege_repo = role_privilege_repo
        self.person_repo = person_repo
        self.unit_of_work = unit_of_work
        self.labels = labels or default_label_provider()
        self.reconciler = GrantReconciler(role_privilege_repo)

    # --- Validation ---

    def can_create(self, view: RoleView, prior: Optional[ValidationResult] = None) -> ValidationResult:
        """
        새 역할을 만들 수 있는지 검증합니다.

        이전 검증 결과(prior)가 이미 실패했다면 이름 중복 조회 없이 그대로 반환합니다.
        """
        return self._validate_name(view, prior)

    def can_edit(self, view: RoleView, prior: Optional[ValidationResult] = None) -> ValidationResult:
        """역할 수정 가능 여부를 검증합니다. 자기 자신의 현재 이름은 중복으로 보지 않습니다."""
        return self._validate_name(view, prior)

    def _validate_name(self, view: RoleView, prior: Optional[ValidationResult]) -> ValidationResult:
        result = prior if prior is not None else ValidationResult.ok()
        if not result.is_valid:
            return result
        if self._is_name_taken(view.name, exclude_id=view.id):
            return result.with_error("Name", ROLE_NAME_TAKEN)
        return result

    def _is_name_taken(self, name: str, exclude_id: Optional[str]) -> bool:
        lowered = name.lower()
        return any(
            role.name.lower() == lowered and role.id != exclude_id
            for role in self.role_repo.list_all()
        )

    # --- Read ---

    def list_roles(self) -> List[Dict[str, Any]]:
        """모든 역할의 목록을 이름 순으로 조회합니다."""
        return [{"id": r.id, "name": r.name} for r in self.role_repo.list_all()]

    def get_privilege_tree(self) -> Tree:
        """선택 상태가 비어 있는 전체 권한 트리를 만듭니다."""
        return build_tree(self.privilege_repo.list_all(), self.labels)

    def new_view(self, name: str = "") -> RoleView:
        """역할 생성 화면에 쓸 빈 RoleView를 만듭니다."""
        return RoleView(name=name, privileges_tree=self.get_privilege_tree())

    def get_view(self, role_id: str) -> RoleView:
        """
        역할을 조회하고, 현재 부여된 권한으로 선택 상태를 채운 권한 트리와 함께 반환합니다.
        수정 화면과 상세 화면이 모두 이 경로를 사용합니다.

        Raises:
            RoleNotFoundError: 해당 ID의 역할을 찾을 수 없을 때.
        """
        role = self.role_repo.find_by_id(role_id)
        if not role:
            raise RoleNotFoundError(f"Role with id '{role_id}' not found.")

        granted_ids = self.role_privilege_repo.list_privilege_ids_by_role_id(role.id)
        tree = seed_selection(self.get_privilege_tree(), granted_ids)
        return RoleView(name=role.name, id=role.id, privileges_tree=tree)

    # --- Write ---

    def create(self, view: RoleView) -> Dict[str, Any]:
        """
        새 역할을 저장하고, 트리에서 선택된 모든 권한을 부여합니다.
        can_create 검증은 호출자의 책임이며 여기서 다시 하지 않습니다.
        """
        role = models.Role(id=view.id, name=view.name)
        try:
            self.role_repo.add(role)
            self.reconciler.reconcile(role.id, set(), view.privileges_tree.selected_ids)
            self.unit_of_work.commit()
        except Exception:
            self.unit_of_work.rollback()
            raise

        logger.info("Created role %s (%s) with %d privileges", role.id, role.name, len(view.privileges_tree.selected_ids))
        return {"id": role.id, "name": role.name}

    def edit(self, view: RoleView) -> Dict[str, Any]:
        """
        역할 이름을 바꾸고, 권한 부여를 트리의 선택 상태와 같아지도록 맞춥니다.

        Raises:
            RoleNotFoundError: 해당 ID의 역할을 찾을 수 없을 때.
        """
        role = self.role_repo.find_by_id(view.id)
        if not role:
            raise RoleNotFoundError(f"Role with id '{view.id}' not found.")

        try:
            role.name = view.name
            current_grants = self.role_privilege_repo.list_privilege_ids_by_role_id(role.id)
            diff = self.reconciler.reconcile(role.id, current_grants, view.privileges_tree.selected_ids)
            self.unit_of_work.commit()
        except Exception:
            self.unit_of_work.rollback()
            raise

        logger.info("Edited role %s (%s): %d granted, %d revoked", role.id, role.name, len(diff.to_insert), len(diff.to_delete))
        return {"id": role.id, "name": role.name}

    def delete(self, role_id: str) -> bool:
        """
        역할을 삭제합니다. 역할을 참조하던 사람의 role_id는 NULL로 바꾸고,
        역할의 권한 부여 행도 함께 삭제합니다. 없는 역할이면 아무것도 하지 않습니다.

        Returns:
            실제로 삭제했으면 True, 역할이 없었으면 False.
        """
        role = self.role_repo.find_by_id(role_id)
        if not role:
            logger.debug("Role %s not found, nothing to delete", role_id)
            return False

        try:
            for person in self.person_repo.list_by_role_id(role_id):
                person.role_id = None
                self.person_repo.update(person)
            self.role_privilege_repo.delete_by_role_id(role_id)
            self.role_repo.delete(role)
            self.unit_of_work.commit()
        except Exception:
            self.unit_of_work.rollback()
            raise

        logger.info("Deleted role %s", role_id)
        return True

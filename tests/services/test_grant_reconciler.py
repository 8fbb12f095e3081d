# tests/services/test_grant_reconciler.py
import pytest
from unittest.mock import MagicMock

from role_admin.database import models
from role_admin.services.grant_reconciler import GrantReconciler, GrantDiff, compute_grant_diff
from role_admin.repositories.interfaces import IRolePrivilegeRepository

@pytest.fixture
def mock_role_privilege_repo() -> MagicMock:
    """IRolePrivilegeRepository에 대한 모의 객체를 생성합니다."""
    return MagicMock(spec=IRolePrivilegeRepository)

@pytest.fixture
def reconciler(mock_role_privilege_repo: MagicMock) -> GrantReconciler:
    return GrantReconciler(mock_role_privilege_repo)

# ===================================================================
#  compute_grant_diff 테스트
# ===================================================================
class TestComputeGrantDiff:
    def test_inserts_new_and_deletes_removed(self):
        diff = compute_grant_diff({"a", "b"}, {"b", "c"})

        assert diff.to_insert == frozenset({"c"})
        assert diff.to_delete == frozenset({"a"})

    def test_same_selection_is_empty_diff(self):
        diff = compute_grant_diff(["a", "b"], ["b", "a"])

        assert diff.is_empty
        assert diff == GrantDiff()

    def test_empty_submission_deletes_everything(self):
        diff = compute_grant_diff({"a", "b"}, set())

        assert diff.to_insert == frozenset()
        assert diff.to_delete == frozenset({"a", "b"})

    def test_duplicate_submitted_ids_are_deduplicated(self):
        diff = compute_grant_diff(set(), ["a", "a", "b"])

        assert diff.to_insert == frozenset({"a", "b"})

    @pytest.mark.parametrize("current, submitted", [
        (set(), {"a"}),
        ({"a", "b", "c"}, {"c", "d"}),
        ({"a"}, set()),
        ({"x", "y"}, {"x", "y"}),
    ])
    def test_applying_diff_yields_submitted_set(self, current, submitted):
        """current에 diff를 적용한 결과는 항상 제출된 집합과 같습니다."""
        diff = compute_grant_diff(current, submitted)

        assert (set(current) - diff.to_delete) | diff.to_insert == set(submitted)
        assert compute_grant_diff(submitted, submitted).is_empty

# ===================================================================
#  GrantReconciler 테스트
# ===================================================================
class TestGrantReconciler:
    def test_stages_inserts_and_deletes(self, reconciler: GrantReconciler, mock_role_privilege_repo: MagicMock):
        """추가할 권한은 RolePrivilege로 add 되고, 뺄 권한은 한 번에 삭제됩니다."""
        # === Act ===
        diff = reconciler.reconcile("role-1", {"keep", "drop"}, {"keep", "new-2", "new-1"})

        # === Assert ===
        assert diff.to_insert == frozenset({"new-1", "new-2"})
        assert diff.to_delete == frozenset({"drop"})
        mock_role_privilege_repo.delete_by_privilege_ids.assert_called_once_with("role-1", ["drop"])

        added = [c.args[0] for c in mock_role_privilege_repo.add.call_args_list]
        assert all(isinstance(g, models.RolePrivilege) for g in added)
        assert [(g.role_id, g.privilege_id) for g in added] == [("role-1", "new-1"), ("role-1", "new-2")]

    def test_no_writes_when_nothing_changes(self, reconciler: GrantReconciler, mock_role_privilege_repo: MagicMock):
        diff = reconciler.reconcile("role-1", {"a"}, ["a", "a"])

        assert diff.is_empty
        mock_role_privilege_repo.add.assert_not_called()
        mock_role_privilege_repo.delete_by_privilege_ids.assert_not_called()

    def test_only_inserts_for_new_role(self, reconciler: GrantReconciler, mock_role_privilege_repo: MagicMock):
        reconciler.reconcile("role-1", set(), {"a"})

        mock_role_privilege_repo.delete_by_privilege_ids.assert_not_called()
        assert mock_role_privilege_repo.add.call_count == 1

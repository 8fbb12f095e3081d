# src/role_admin/services/exceptions.py

# --- General Exceptions ---
class RoleNotFoundError(Exception):
    """역할을 찾을 수 없을 때"""
    pass

# --- Validation Exceptions ---
class InvalidRoleViewError(ValueError):
    """요청 본문으로 RoleView를 만들 수 없을 때 (필드 타입 오류 등)"""
    pass

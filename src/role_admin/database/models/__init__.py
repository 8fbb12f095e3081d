from .privilege import Privilege
from .role import Role
from .role_privilege import RolePrivilege
from .person import Person

__all__ = ["Privilege", "Role", "RolePrivilege", "Person"]

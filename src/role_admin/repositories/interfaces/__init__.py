from .role import IRoleRepository
from .privilege import IPrivilegeRepository
from .role_privilege import IRolePrivilegeRepository
from .person import IPersonRepository
from .unit_of_work import IUnitOfWork

__all__ = [
    "IRoleRepository",
    "IPrivilegeRepository",
    "IRolePrivilegeRepository",
    "IPersonRepository",
    "IUnitOfWork",
]

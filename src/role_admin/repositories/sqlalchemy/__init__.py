from .sqlalchemy_role_repository import SqlalchemyRoleRepository
from .sqlalchemy_privilege_repository import SqlalchemyPrivilegeRepository
from .sqlalchemy_role_privilege_repository import SqlalchemyRolePrivilegeRepository
from .sqlalchemy_person_repository import SqlalchemyPersonRepository
from .sqlalchemy_unit_of_work import SqlalchemyUnitOfWork

__all__ = [
    "SqlalchemyRoleRepository",
    "SqlalchemyPrivilegeRepository",
    "SqlalchemyRolePrivilegeRepository",
    "SqlalchemyPersonRepository",
    "SqlalchemyUnitOfWork",
]

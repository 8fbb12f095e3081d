# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from role_admin.database.database import Base
from role_admin.database import models
from role_admin.repositories.sqlalchemy import (
    SqlalchemyRoleRepository, SqlalchemyPrivilegeRepository, SqlalchemyRolePrivilegeRepository,
    SqlalchemyPersonRepository, SqlalchemyUnitOfWork
)
from role_admin.services.role_service import RoleService
from role_admin.utils.privilege_labels import DictPrivilegeLabelProvider

TEST_ROLE_ID = "test-role"
TEST_PERSON_ID = "test-person"
CONTROLLERS = ("Users", "Roles")
ACTIONS = ("Index", "Create", "Details", "Edit", "Delete")

# ===================================================================
#  인메모리 SQLite Fixture
# ===================================================================

@pytest.fixture
def engine():
    """테스트마다 새로 만드는 인메모리 SQLite 엔진. 모든 세션이 같은 연결을 공유합니다."""
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()

@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)

@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()

@pytest.fixture
def seeded(session_factory):
    """
    Administration 영역의 Users/Roles 컨트롤러 x 5개 액션 권한을 만들고,
    그 전부를 가진 역할 하나와 그 역할을 참조하는 사람 한 명을 저장합니다.
    """
    session = session_factory()
    privilege_number = 1
    role = models.Role(id=TEST_ROLE_ID, name="Test role")
    for controller in CONTROLLERS:
        for action in ACTIONS:
            privilege_id = f"priv-{privilege_number:02d}"
            privilege_number += 1
            session.add(models.Privilege(id=privilege_id, area="Administration", controller=controller, action=action))
            role.role_privileges.append(models.RolePrivilege(privilege_id=privilege_id))
    session.add(role)
    session.add(models.Person(id=TEST_PERSON_ID, name="Test person", role_id=TEST_ROLE_ID))
    session.commit()
    session.close()
    return {"role_id": TEST_ROLE_ID, "person_id": TEST_PERSON_ID}

@pytest.fixture
def labels() -> DictPrivilegeLabelProvider:
    """원본 문자열을 그대로 라벨로 쓰는 제공자."""
    return DictPrivilegeLabelProvider()

def build_role_service(session, labels) -> RoleService:
    return RoleService(
        role_repo=SqlalchemyRoleRepository(session),
        privilege_repo=SqlalchemyPrivilegeRepository(session),
        role_privilege_repo=SqlalchemyRolePrivilegeRepository(session),
        person_repo=SqlalchemyPersonRepository(session),
        unit_of_work=SqlalchemyUnitOfWork(session),
        labels=labels,
    )

@pytest.fixture
def role_service(db_session, labels) -> RoleService:
    """실제 SQLAlchemy 리포지토리로 조립한 RoleService."""
    return build_role_service(db_session, labels)

import logging
import uuid

from role_admin.config import configure_logging
from .database import engine as default_engine, SessionLocal, Base
from .models import Privilege, Role, RolePrivilege, Person

logger = logging.getLogger(__name__)

ADMIN_ROLE_NAME = "Sys_Admin"

CRUD_ACTIONS = ("Index", "Create", "Details", "Edit", "Delete")

# (area, controller, actions) - area가 None이면 루트 바로 아래에 표시됩니다.
DEFAULT_PRIVILEGES = (
    ("Administration", "Accounts", CRUD_ACTIONS),
    ("Administration", "Roles", CRUD_ACTIONS),
    (None, "Profile", ("Edit", "Delete")),
)


def _new_id() -> str:
    return str(uuid.uuid4())


def initialize_db(engine=default_engine, session_factory=SessionLocal):
    """
    DB와 테이블을 생성하고, 기본 권한 카탈로그와 관리자 역할을 삽입합니다.
    권한이 이미 존재하면 기본 데이터 삽입을 건너뜁니다.
    """
    logger.info("Initializing database...")

    # 모든 테이블을 생성합니다. (이미 존재하면 생성하지 않음)
    Base.metadata.create_all(bind=engine)

    db = session_factory()
    try:
        if db.query(Privilege).first():
            logger.info("Privilege catalog already exists, skipping seed data.")
            return

        privileges = [
            Privilege(id=_new_id(), area=area, controller=controller, action=action)
            for area, controller, actions in DEFAULT_PRIVILEGES
            for action in actions
        ]
        db.add_all(privileges)

        admin_role = Role(id=_new_id(), name=ADMIN_ROLE_NAME)
        admin_role.role_privileges = [RolePrivilege(privilege_id=p.id) for p in privileges]
        db.add(admin_role)

        db.add(Person(id=_new_id(), name="admin", role_id=admin_role.id))

        db.commit()
        logger.info("Seeded %d privileges and role '%s'.", len(privileges), ADMIN_ROLE_NAME)

    except Exception:
        logger.exception("Database initialization failed")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == '__main__':
    configure_logging()
    initialize_db()

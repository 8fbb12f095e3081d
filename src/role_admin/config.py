import logging
import os

# 환경 변수로 덮어쓸 수 있는 기본 설정값
DATABASE_URL = os.getenv("ROLE_ADMIN_DATABASE_URL", "sqlite:///role_admin.db")
LOG_LEVEL = os.getenv("ROLE_ADMIN_LOG_LEVEL", "INFO")
HOST = os.getenv("ROLE_ADMIN_HOST", "")
PORT = int(os.getenv("ROLE_ADMIN_PORT", "8000"))


def configure_logging(level: str = LOG_LEVEL) -> None:
    """진입점(app.py, db_init.py)에서 한 번 호출하여 로깅 포맷과 레벨을 설정합니다."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

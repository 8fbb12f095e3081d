from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from role_admin.config import DATABASE_URL

# SQLite 사용 시에만 check_same_thread 옵션이 필요합니다. (thread-safe 설정)
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)

# autoflush=False로 설정하여, 명시적으로 commit을 호출해야 DB에 반영됩니다.
# 역할과 권한 부여(grant)는 Unit of Work가 한 번에 commit 합니다.
SessionLocal = sessionmaker(autoflush=False, bind=engine)

# 모든 모델 클래스가 상속받을 Base 클래스
Base = declarative_base()

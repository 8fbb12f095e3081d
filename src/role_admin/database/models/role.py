from sqlalchemy import Column, String, Index, func
from sqlalchemy.orm import relationship
from ..database import Base

class Role(Base):
    """
    사람(Person)에게 부여할 수 있는 권한(Privilege)의 묶음을 정의합니다.
    (예: 'Sys_Admin', 'Manager').
    이름은 대소문자를 구분하지 않고 전체 역할 사이에서 유일해야 합니다.
    """
    __tablename__ = "roles"
    id = Column(String, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)

    role_privileges = relationship("RolePrivilege", back_populates="role", cascade="all")

# 서비스 계층의 중복 검사를 동시에 통과한 생성 요청은 이 인덱스가 막습니다.
Index("ix_roles_name_lower", func.lower(Role.name), unique=True)

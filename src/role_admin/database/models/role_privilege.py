from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base

class RolePrivilege(Base):
    """
    역할(Role)과 권한(Privilege) 사이의 부여(grant) 관계를 나타내는 연관 테이블 모델입니다.
    (role_id, privilege_id) 쌍마다 최대 하나의 행만 존재합니다.

    privilege_id에는 외래 키를 두지 않습니다. 카탈로그에서 사라진 권한 ID가
    제출되어도 그대로 저장되어야 하기 때문입니다.
    """
    __tablename__ = 'role_privileges'
    role_id = Column(String, ForeignKey('roles.id'), primary_key=True)
    privilege_id = Column(String, primary_key=True)

    role = relationship("Role", back_populates="role_privileges")

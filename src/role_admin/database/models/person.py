from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base

class Person(Base):
    """
    시스템을 사용하는 사람(계정 소유자)을 나타냅니다.
    하나의 역할(Role)을 참조하거나, 역할이 없을 수 있습니다(role_id = NULL).
    역할이 삭제되면 사람은 삭제되지 않고 role_id만 NULL로 바뀝니다.
    """
    __tablename__ = "people"
    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    role_id = Column(String, ForeignKey("roles.id"), nullable=True, index=True)

    role = relationship("Role")

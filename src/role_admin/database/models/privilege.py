from sqlalchemy import Column, String
from ..database import Base

class Privilege(Base):
    """
    보호 대상 기능 하나를 (Area, Controller, Action) 세 값으로 정의합니다.
    (예: 'Administration' / 'Roles' / 'Edit').
    배포 시점에 고정되는 카탈로그이며, 이 모듈에서는 읽기만 합니다.
    Area가 NULL이면 트리의 루트 바로 아래에 Controller가 붙습니다.
    """
    __tablename__ = "privileges"
    id = Column(String, primary_key=True, index=True)
    area = Column(String, nullable=True)
    controller = Column(String, nullable=False)
    action = Column(String, nullable=False)

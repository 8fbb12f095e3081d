from typing import List
from sqlalchemy.orm import Session
from role_admin.database import models
from role_admin.repositories.interfaces import IPersonRepository

class SqlalchemyPersonRepository(IPersonRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def list_by_role_id(self, role_id: str) -> List[models.Person]:
        return self.db.query(models.Person).filter(models.Person.role_id == role_id).all()

    def update(self, person: models.Person) -> None:
        self.db.add(person)

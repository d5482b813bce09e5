from __future__ import annotations
from typing import Optional

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from fittrack.models import Draft

class DraftRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, owner_email: str, key: str) -> Optional[Draft]:
        stmt = select(Draft).where(Draft.owner_email == owner_email, Draft.key == key)
        return self.db.execute(stmt).scalar_one_or_none()

    def put(self, owner_email: str, key: str, value: str) -> Draft:
        draft = self.get(owner_email, key)
        if draft is None:
            draft = Draft(owner_email=owner_email, key=key, value=value)
            self.db.add(draft)
        else:
            draft.value = value
        self.db.commit()
        return draft

    def delete(self, owner_email: str, key: str) -> None:
        self.db.execute(delete(Draft).where(Draft.owner_email == owner_email, Draft.key == key))
        self.db.commit()

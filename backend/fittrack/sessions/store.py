from __future__ import annotations
from typing import Callable, Protocol

from sqlalchemy.orm import Session

from fittrack.repositories.draft_repo import DraftRepository

class DraftStore(Protocol):
    """Whole-value key/value persistence for session drafts."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...

class MemoryDraftStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)

class SqlDraftStore:
    """
    Drafts stored in the `drafts` table for one owner.
    Every call opens its own short-lived DB session, so the store can outlive a request.
    """

    def __init__(self, session_factory: Callable[[], Session], owner_email: str):
        self.session_factory = session_factory
        self.owner_email = owner_email

    def get(self, key: str) -> str | None:
        with self.session_factory() as db:
            draft = DraftRepository(db).get(self.owner_email, key)
            return draft.value if draft else None

    def set(self, key: str, value: str) -> None:
        with self.session_factory() as db:
            DraftRepository(db).put(self.owner_email, key, value)

    def delete(self, key: str) -> None:
        with self.session_factory() as db:
            DraftRepository(db).delete(self.owner_email, key)

# fittrack/deps/editor.py
from fastapi import Depends

from fittrack.db import SessionLocal
from fittrack.deps.auth import get_current_user
from fittrack.models import User
from fittrack.sessions import EditorRegistry, SessionEditor, SqlDraftStore
from fittrack.settings import get_settings

settings = get_settings()

registry = EditorRegistry(
    lambda owner: SqlDraftStore(SessionLocal, owner),
    key=settings.DRAFT_KEY,
    max_editors=settings.MAX_SESSION_EDITORS,
    default_reps=settings.DEFAULT_SET_REPS,
)

def get_registry() -> EditorRegistry:
    return registry

def get_editor(
    current: User = Depends(get_current_user),
    reg: EditorRegistry = Depends(get_registry),
) -> SessionEditor:
    return reg.for_owner(current.email)

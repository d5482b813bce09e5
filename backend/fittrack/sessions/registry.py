from __future__ import annotations
import threading
from collections import OrderedDict
from typing import Callable

from fittrack.sessions.editor import SessionEditor
from fittrack.sessions.store import DraftStore

DEFAULT_MAX_EDITORS = 1024

class EditorRegistry:
    """
    One live SessionEditor per signed-in identity, restored from its draft on first use.

    An editor is released once its session is cleared (discard or successful
    submit). Past `max_editors` the least recently used idle editors are
    dropped too; their drafts are still in the store, so the next request
    rebuilds them.
    """

    def __init__(
        self,
        store_factory: Callable[[str], DraftStore],
        *,
        max_editors: int = DEFAULT_MAX_EDITORS,
        **editor_options,
    ):
        if max_editors < 1:
            raise ValueError("max_editors must be at least 1")
        self.store_factory = store_factory
        self.max_editors = max_editors
        self.editor_options = editor_options
        self._editors: OrderedDict[str, SessionEditor] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._editors)

    def __contains__(self, owner_email: str) -> bool:
        return owner_email.lower() in self._editors

    def for_owner(self, owner_email: str) -> SessionEditor:
        owner = owner_email.lower()
        with self._lock:
            editor = self._editors.get(owner)
            if editor is None:
                editor = SessionEditor.open(
                    self.store_factory(owner),
                    on_clear=lambda cleared: self._release(owner, cleared),
                    **self.editor_options,
                )
                self._editors[owner] = editor
                self._evict_idle()
            else:
                self._editors.move_to_end(owner)
            return editor

    def forget(self, owner_email: str) -> None:
        with self._lock:
            self._editors.pop(owner_email.lower(), None)

    def _release(self, owner: str, editor: SessionEditor) -> None:
        with self._lock:
            # a newer editor may already sit under this owner
            if self._editors.get(owner) is editor:
                del self._editors[owner]

    def _evict_idle(self) -> None:
        # the newest entry is the editor being handed out; never drop it
        for owner in list(self._editors)[:-1]:
            if len(self._editors) <= self.max_editors:
                return
            if self._editors[owner].state == "idle":
                del self._editors[owner]

"""Page state for the folder/document browser.

The browser lives under one catch-all route, ``/app/[folderId]/[_]/[docId]``,
and has three states: no folder selected, a folder selected, or a folder and
one of its documents selected. :func:`resolve_page_state` turns the path
segments plus the current session into :class:`PageProps`; :func:`select_view`
decides which pane the page shows.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol, Sequence

from known.domains.identity.schemas import Session

logger = logging.getLogger(__name__)


class SelectionState(str, enum.Enum):
    UNSELECTED = "unselected"
    SELECTED = "selected"
    NOT_FOUND = "not_found"


class View(str, enum.Enum):
    SESSION_EXPIRED = "session_expired"
    EMPTY = "empty"
    FOLDER = "folder"
    DOC = "doc"


class WorkspaceStore(Protocol):
    """Read side of the folder/document store; records expose an ``id`` string"""

    async def get_folders(self, user_id: str) -> List[Any]:
        ...

    async def get_docs_by_folder(self, folder_id: str) -> List[Any]:
        ...


@dataclass
class PageProps:
    new_session: Optional[Session] = None
    folders: List[Any] = field(default_factory=list)
    active_folder: Optional[Any] = None
    active_docs: Optional[List[Any]] = None
    active_doc: Optional[Any] = None
    folder_state: SelectionState = SelectionState.UNSELECTED
    doc_state: SelectionState = SelectionState.UNSELECTED

    @property
    def is_authenticated(self) -> bool:
        return self.new_session is not None


def _find_by_id(records: Sequence[Any], record_id: str) -> Optional[Any]:
    return next((r for r in records if r.id == record_id), None)


def _has_identity(session: Optional[Session]) -> bool:
    user = getattr(session, "user", None)
    return bool(user is not None and getattr(user, "id", None))


async def resolve_page_state(
    session: Optional[Session],
    segments: Sequence[str],
    store: WorkspaceStore,
) -> PageProps:
    """Resolve the catch-all path into page props.

    Slot 0 of ``segments`` is a folder id, slot 1 is ignored and slot 2 is a
    document id. Without a signed-in user the result is empty and the store is
    never read.

    ``active_docs`` is attached whenever the folder resolves, even when the
    folder is empty. ``active_doc`` is only looked up inside that set, so it
    can never be present without ``active_folder``.
    """
    if not _has_identity(session):
        return PageProps()

    props = PageProps(new_session=session)
    props.folders = list(await store.get_folders(session.user.id))

    if not segments:
        return props

    folder = _find_by_id(props.folders, segments[0])
    if folder is None:
        logger.debug(f"Folder {segments[0]} not found for user {session.user.id}")
        props.folder_state = SelectionState.NOT_FOUND
        if len(segments) > 2:
            props.doc_state = SelectionState.NOT_FOUND
        return props

    props.active_folder = folder
    props.folder_state = SelectionState.SELECTED
    props.active_docs = list(await store.get_docs_by_folder(folder.id))

    if len(segments) > 2:
        props.active_doc = _find_by_id(props.active_docs, segments[2])
        if props.active_doc is None:
            props.doc_state = SelectionState.NOT_FOUND
        else:
            props.doc_state = SelectionState.SELECTED

    return props


def select_view(props: PageProps) -> View:
    """Document beats folder; nothing selected leaves the pane empty"""
    if not props.is_authenticated:
        return View.SESSION_EXPIRED
    if props.active_doc is not None:
        return View.DOC
    if props.active_folder is not None:
        return View.FOLDER
    return View.EMPTY

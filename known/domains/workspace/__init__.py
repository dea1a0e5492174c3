from known.domains.workspace.resolver import (
    PageProps, SelectionState, View, WorkspaceStore, resolve_page_state, select_view
)

__all__ = [
    "PageProps", "SelectionState", "View", "WorkspaceStore",
    "resolve_page_state", "select_view",
]

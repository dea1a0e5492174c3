from known.client.folders import CreateStatus, FolderClient, FolderClientError, FolderListState

__all__ = ["CreateStatus", "FolderClient", "FolderClientError", "FolderListState"]

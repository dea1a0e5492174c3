"""Client side of the new-folder action.

:class:`FolderClient` talks to ``POST {API_HOST}/api/folder/``.
:class:`FolderListState` keeps the folder list a page has already rendered and
moves through ``PENDING -> SUCCEEDED | FAILED`` for each submission. A success
appends the returned record without refetching the list; a failure keeps the
list as it was and records the error.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_API_HOST = "http://localhost:8000"


class FolderClientError(Exception):
    """The folder endpoint could not be reached or answered with an error"""


class FolderClient:
    def __init__(
        self,
        api_host: str,
        token: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ):
        self.api_host = api_host.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._headers = {"Content-Type": "application/json"}
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    async def create_folder(self, name: str) -> Dict[str, Any]:
        """Create a folder and return the ``data`` record of the response"""
        try:
            res = await self._client.post(
                f"{self.api_host}/api/folder/",
                json={"name": name},
                headers=self._headers,
            )
            res.raise_for_status()
            payload = res.json()
        except httpx.HTTPStatusError as exc:
            raise FolderClientError(f"Folder creation failed with HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise FolderClientError(f"Folder creation request failed: {exc}") from exc
        except ValueError as exc:
            raise FolderClientError("Folder endpoint returned invalid JSON") from exc

        if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
            raise FolderClientError("Folder endpoint response has no data record")

        return payload["data"]

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "FolderClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


class CreateStatus(str, enum.Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class FolderListState:
    folders: List[Dict[str, Any]] = field(default_factory=list)
    status: CreateStatus = CreateStatus.IDLE
    error: Optional[Exception] = None

    def begin(self) -> None:
        self.status = CreateStatus.PENDING
        self.error = None

    def succeed(self, record: Dict[str, Any]) -> None:
        self.folders = [*self.folders, record]
        self.status = CreateStatus.SUCCEEDED

    def fail(self, error: Exception) -> None:
        self.status = CreateStatus.FAILED
        self.error = error

    async def create(self, client: FolderClient, name: str) -> CreateStatus:
        """Submit one new folder; exactly one request per call, no dedup"""
        self.begin()
        try:
            record = await client.create_folder(name)
        except FolderClientError as exc:
            logger.warning(f"Could not create folder {name!r}: {exc}")
            self.fail(exc)
        else:
            self.succeed(record)
        return self.status

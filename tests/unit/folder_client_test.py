"""Tests for the new-folder client and its state transitions."""

from __future__ import annotations

import json

import httpx
import pytest

from known.client.folders import CreateStatus, FolderClient, FolderClientError, FolderListState

API_HOST = "http://api.test"


def _client(handler) -> FolderClient:  # type: ignore[no-untyped-def]
    return FolderClient(API_HOST, token="tok", client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


class TestCreateFolder:
    async def test_appends_returned_record_after_existing(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(201, json={"data": {"id": "f1", "name": "Projects"}})

        existing = {"id": "f0", "name": "Inbox"}
        state = FolderListState(folders=[existing])

        status = await state.create(_client(handler), "Projects")

        assert status is CreateStatus.SUCCEEDED
        assert state.folders == [existing, {"id": "f1", "name": "Projects"}]
        assert state.error is None
        assert len(requests) == 1

    async def test_request_shape(self) -> None:
        seen: dict[str, object] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            seen["auth"] = request.headers.get("Authorization")
            seen["type"] = request.headers.get("Content-Type")
            return httpx.Response(201, json={"data": {"id": "f1", "name": "Projects"}})

        record = await _client(handler).create_folder("Projects")

        assert record == {"id": "f1", "name": "Projects"}
        assert seen == {
            "method": "POST",
            "url": f"{API_HOST}/api/folder/",
            "body": {"name": "Projects"},
            "auth": "Bearer tok",
            "type": "application/json",
        }

    async def test_duplicate_submissions_are_not_deduplicated(self) -> None:
        counter = {"n": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            counter["n"] += 1
            return httpx.Response(201, json={"data": {"id": f"f{counter['n']}", "name": "Projects"}})

        client = _client(handler)
        state = FolderListState()
        await state.create(client, "Projects")
        await state.create(client, "Projects")

        assert counter["n"] == 2
        assert [f["id"] for f in state.folders] == ["f1", "f2"]


class TestFailures:
    async def test_http_error_marks_failed_and_keeps_list(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"detail": "boom"})

        existing = {"id": "f0", "name": "Inbox"}
        state = FolderListState(folders=[existing])

        status = await state.create(_client(handler), "Projects")

        assert status is CreateStatus.FAILED
        assert state.folders == [existing]
        assert isinstance(state.error, FolderClientError)
        assert "500" in str(state.error)

    async def test_network_error_marks_failed(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        state = FolderListState()
        assert await state.create(_client(handler), "Projects") is CreateStatus.FAILED
        assert state.folders == []

    async def test_response_without_data_is_an_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"ok": True})

        with pytest.raises(FolderClientError):
            await _client(handler).create_folder("Projects")

    async def test_invalid_json_is_an_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"not json")

        with pytest.raises(FolderClientError):
            await _client(handler).create_folder("Projects")


class TestTransitions:
    def test_begin_clears_previous_error(self) -> None:
        state = FolderListState()
        state.fail(RuntimeError("x"))
        state.begin()
        assert state.status is CreateStatus.PENDING
        assert state.error is None

    def test_succeed_appends(self) -> None:
        state = FolderListState(folders=[{"id": "a"}])
        state.begin()
        state.succeed({"id": "b"})
        assert state.status is CreateStatus.SUCCEEDED
        assert state.folders == [{"id": "a"}, {"id": "b"}]

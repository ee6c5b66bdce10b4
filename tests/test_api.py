"""HTTP, WebSocket and SSE route tests with external collaborators overridden."""

import json

import pytest
from fastapi import WebSocketDisconnect, status
from fastapi.testclient import TestClient

from nowplaying import main
from nowplaying.api.dependencies import (
    get_audio_resolver,
    get_coordinator,
    get_search_service,
    get_user_repository,
)
from nowplaying.api.event_broadcaster import subscriber_registry
from nowplaying.api.routes.now_playing import now_playing_stream
from nowplaying.core.config import settings
from nowplaying.domain.exceptions import PersistenceUnavailable
from nowplaying.domain.repositories.user_repository import IUserRepository
from nowplaying.main import app

from fakes import SONG_A, RecordingHandle, StubAudioResolver, StubSearchService, make_track, run


class FakeUserRepository(IUserRepository):
    def __init__(self, usernames=(), broken: bool = False) -> None:
        self.usernames = set(usernames)
        self.broken = broken

    def exists_by_username(self, username: str) -> bool:
        if self.broken:
            raise PersistenceUnavailable("User database is unavailable")
        return username in self.usernames


@pytest.fixture
def search():
    return StubSearchService(SONG_A)


@pytest.fixture
def client(coordinator, search):
    app.dependency_overrides[get_coordinator] = lambda: coordinator
    app.dependency_overrides[get_search_service] = lambda: search
    app.dependency_overrides[get_audio_resolver] = lambda: StubAudioResolver("http://audio/abc123")
    app.dependency_overrides[get_user_repository] = lambda: FakeUserRepository(["alice"])
    try:
        # One event loop for HTTP calls and WebSocket sessions
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


EXPECTED = {
    "title": "Song A",
    "embedUrl": "https://www.youtube.com/embed/abc123?autoplay=1",
    "thumbnail": "t.png",
    "owner": "Chan",
    "videoId": "abc123",
    "audioFile": "http://audio/abc123",
}


def test_play_returns_track_and_updates_current(client, coordinator) -> None:
    resp = client.get("/api/v1/tracks/play", params={"songName": "song a"})
    assert resp.status_code == 200
    assert resp.json() == EXPECTED

    current = client.get("/api/v1/tracks/current")
    assert current.status_code == 200
    assert current.json() == EXPECTED


def test_play_json_body(client) -> None:
    resp = client.post("/api/v1/tracks/play", json={"songName": "song a"})
    assert resp.status_code == 200
    assert resp.json()["videoId"] == "abc123"


def test_legacy_play_route(client) -> None:
    resp = client.get("/playSong", params={"songName": "song a"})
    assert resp.status_code == 200
    assert resp.json() == EXPECTED


def test_current_is_empty_before_first_play(client) -> None:
    assert client.get("/api/v1/tracks/current").status_code == 204


def test_blank_query_is_400(client, coordinator) -> None:
    resp = client.get("/api/v1/tracks/play", params={"songName": "   "})
    assert resp.status_code == 400
    assert resp.json()["detail"]["error"] == "invalid_query"
    assert coordinator.store.get() is None


def test_missing_song_name_is_400(client) -> None:
    resp = client.get("/api/v1/tracks/play")
    assert resp.status_code == 400


def test_not_found_is_404(client, search) -> None:
    search.result = None
    resp = client.get("/api/v1/tracks/play", params={"songName": "asdkjasdkjaskjd-nonexistent-xyz"})
    assert resp.status_code == 404
    assert resp.json()["detail"]["error"] == "not_found"


def test_user_exists(client) -> None:
    assert client.get("/api/v1/users/alice/exists").json() == {"exists": True}
    assert client.get("/api/v1/users/bob/exists").json() == {"exists": False}
    assert client.get("/userExists/alice").json() == {"exists": True}


def test_user_lookup_unavailable_is_503(client) -> None:
    app.dependency_overrides[get_user_repository] = lambda: FakeUserRepository(broken=True)
    resp = client.get("/api/v1/users/alice/exists")
    assert resp.status_code == 503
    assert resp.json()["detail"]["error"] == "persistence_unavailable"


def test_websocket_gets_current_track_on_connect(client, coordinator) -> None:
    run(coordinator.accept(make_track()))

    with client.websocket_connect("/api/v1/now-playing/ws") as ws:
        assert json.loads(ws.receive_text()) == EXPECTED


def test_websocket_receives_broadcast_after_play(client, coordinator) -> None:
    run(coordinator.accept(make_track("prev", "Previous")))

    with client.websocket_connect("/ws") as ws:
        # The sync push proves the socket is registered
        assert json.loads(ws.receive_text())["videoId"] == "prev"
        resp = client.get("/api/v1/tracks/play", params={"songName": "song a"})
        assert resp.status_code == 200
        assert json.loads(ws.receive_text()) == resp.json()
        assert coordinator.registry.count() == 1


def test_websocket_closed_when_push_fails(client, coordinator) -> None:
    run(coordinator.accept(make_track("prev", "Previous")))

    with client.websocket_connect("/ws") as ws:
        assert json.loads(ws.receive_text())["videoId"] == "prev"
        # Every push now times out, so the next broadcast drops this subscriber
        coordinator.send_timeout = 0
        resp = client.get("/api/v1/tracks/play", params={"songName": "song a"})
        assert resp.status_code == 200

        with pytest.raises(WebSocketDisconnect) as exc_info:
            ws.receive_text()
        assert exc_info.value.code == status.WS_1011_INTERNAL_ERROR
    assert coordinator.registry.count() == 0


def test_sse_stream_sends_current_then_broadcasts(coordinator) -> None:
    async def scenario():
        await coordinator.accept(make_track("prev", "Previous"))
        response = await now_playing_stream(coordinator)
        # Nothing is registered until the stream is consumed
        assert coordinator.registry.count() == 0

        events = response.body_iterator
        first = await events.__anext__()
        assert coordinator.registry.count() == 1

        await coordinator.accept(make_track())
        second = await events.__anext__()

        await events.aclose()
        return first, second

    first, second = run(scenario())

    assert first["event"] == "track"
    assert json.loads(first["data"])["videoId"] == "prev"
    assert second == {"event": "track", "data": json.dumps(make_track().to_dict())}
    assert coordinator.registry.count() == 0


def test_sse_stream_dropped_when_queue_overflows(coordinator, monkeypatch) -> None:
    monkeypatch.setattr(settings, "SSE_QUEUE_SIZE", 1)

    async def scenario():
        await coordinator.accept(make_track("prev", "Previous"))
        response = await now_playing_stream(coordinator)
        events = response.body_iterator
        await events.__anext__()

        # The client stops reading: the second queued push overflows
        await coordinator.accept(make_track("one", "One"))
        await coordinator.accept(make_track("two", "Two"))
        assert coordinator.registry.count() == 0

        with pytest.raises(StopAsyncIteration):
            await events.__anext__()

    run(scenario())


def test_shutdown_drops_subscribers_and_releases_resources(monkeypatch) -> None:
    closed = []
    monkeypatch.setattr(main, "close_engine", lambda: closed.append("engine"))

    async def close_search() -> None:
        closed.append("search")

    monkeypatch.setattr(main, "close_search_service", close_search)
    drops = []

    with TestClient(app):
        subscriber_registry.register(RecordingHandle(), on_drop=lambda: drops.append(True))
        assert subscriber_registry.count() == 1

    assert subscriber_registry.count() == 0
    assert drops == [True]
    assert closed == ["search", "engine"]

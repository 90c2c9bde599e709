"""Tests for the Hackatime client and endpoint."""
import httpx
import pytest
import respx

from conftest import bearer, make_session_token, make_user
from shipwrecked.api.deps import get_hackatime_client
from shipwrecked.services.hackatime import HackatimeClient, HackatimeProject
from shipwrecked.utils.exceptions import HackatimeError

BASE_URL = "https://hackatime.test/api/v1"

STATS = {
    "data": {
        "projects": [
            {"name": "raft-game", "total_seconds": 5400},
            {"name": "raft-site", "total_seconds": 1800},
            {"name": "", "total_seconds": 60},
        ]
    }
}


@pytest.fixture
def hackatime():
    return HackatimeClient(base_url=BASE_URL, api_token="secret", timeout=5)


@pytest.mark.asyncio
async def test_fetch_projects(hackatime):
    async with respx.mock(base_url=BASE_URL) as respx_mock:
        route = respx_mock.get("/users/U123/stats").mock(return_value=httpx.Response(200, json=STATS))

        projects = await hackatime.fetch_projects("U123")

    assert projects == [HackatimeProject("raft-game", 1.5), HackatimeProject("raft-site", 0.5)]
    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer secret"
    assert request.url.params["features"] == "projects"


@pytest.mark.asyncio
async def test_fetch_projects_error_status(hackatime):
    async with respx.mock(base_url=BASE_URL) as respx_mock:
        respx_mock.get("/users/U123/stats").mock(return_value=httpx.Response(503, text="down"))

        with pytest.raises(HackatimeError):
            await hackatime.fetch_projects("U123")


@pytest.mark.asyncio
async def test_fetch_projects_transport_error(hackatime):
    async with respx.mock(base_url=BASE_URL) as respx_mock:
        respx_mock.get("/users/U123/stats").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(HackatimeError):
            await hackatime.fetch_projects("U123")


class TestEndpoint:

    @pytest.fixture(autouse=True)
    def use_test_client(self, app, hackatime):
        app.dependency_overrides[get_hackatime_client] = lambda: hackatime

    def test_requires_session(self, client):
        assert client.get("/api/hackatime/projects").status_code == 401

    def test_user_without_hackatime(self, client, user_headers):
        response = client.get("/api/hackatime/projects", headers=user_headers)

        assert response.status_code == 200
        assert response.json() == {"projects": []}

    def test_lists_projects(self, client, db):
        user = make_user(db, hackatime_id="U123")
        headers = bearer(make_session_token(db, user.id))

        with respx.mock(base_url=BASE_URL) as respx_mock:
            respx_mock.get("/users/U123/stats").mock(return_value=httpx.Response(200, json=STATS))
            response = client.get("/api/hackatime/projects", headers=headers)

        assert response.status_code == 200
        assert response.json()["projects"] == [
            {"name": "raft-game", "hours": 1.5},
            {"name": "raft-site", "hours": 0.5},
        ]

    def test_upstream_failure(self, client, db):
        user = make_user(db, hackatime_id="U123")
        headers = bearer(make_session_token(db, user.id))

        with respx.mock(base_url=BASE_URL) as respx_mock:
            respx_mock.get("/users/U123/stats").mock(return_value=httpx.Response(500))
            response = client.get("/api/hackatime/projects", headers=headers)

        assert response.status_code == 502

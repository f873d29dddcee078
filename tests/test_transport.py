from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import aiohttp
import pytest

from pydragonball._transport import HttpTransport
from pydragonball.config import DragonBallConfig
from pydragonball.exceptions import DragonBallNotFoundError, DragonBallTransportError


@dataclass
class FakeResponse:
    status: int
    body: str

    async def text(self) -> str:
        return self.body

    async def __aenter__(self) -> FakeResponse:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None


@dataclass
class FakeSession:
    response: FakeResponse | None = None
    error: Exception | None = None
    requests: list[tuple[str, dict[str, str], dict[str, str]]] = field(default_factory=list)

    def get(self, url: str, *, params: dict[str, str], headers: dict[str, str], timeout: Any) -> FakeResponse:
        self.requests.append((url, params, headers))
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


def _transport(session: FakeSession) -> HttpTransport:
    config = DragonBallConfig(base_url="http://dragonball.test/api/", user_agent="tests/1.0")
    return HttpTransport(config, session)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_get_json_builds_request_and_decodes_body() -> None:
    session = FakeSession(response=FakeResponse(200, '{"items": [], "meta": {"totalItems": 0}}'))

    body = await _transport(session).get_json("/planets", {"page": 2, "limit": 12})

    assert body == {"items": [], "meta": {"totalItems": 0}}
    url, params, headers = session.requests[0]
    assert url == "http://dragonball.test/api/planets"
    assert params == {"page": "2", "limit": "12"}
    assert headers["user-agent"] == "tests/1.0"


@pytest.mark.asyncio
async def test_404_is_not_found() -> None:
    session = FakeSession(response=FakeResponse(404, '{"message": "Not Found"}'))

    with pytest.raises(DragonBallNotFoundError) as excinfo:
        await _transport(session).get_json("/characters/999")

    assert excinfo.value.status_code == 404
    assert excinfo.value.endpoint == "/characters/999"


@pytest.mark.asyncio
async def test_other_status_is_transport_error() -> None:
    session = FakeSession(response=FakeResponse(500, "Internal Server Error"))

    with pytest.raises(DragonBallTransportError) as excinfo:
        await _transport(session).get_json("/characters")

    assert not isinstance(excinfo.value, DragonBallNotFoundError)
    assert excinfo.value.status_code == 500


@pytest.mark.asyncio
async def test_invalid_json_is_transport_error() -> None:
    session = FakeSession(response=FakeResponse(200, "<html>"))

    with pytest.raises(DragonBallTransportError, match="Invalid JSON"):
        await _transport(session).get_json("/transformations")


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [aiohttp.ClientConnectionError("boom"), TimeoutError()])
async def test_network_failures_are_wrapped(error: Exception) -> None:
    session = FakeSession(error=error)

    with pytest.raises(DragonBallTransportError) as excinfo:
        await _transport(session).get_json("/planets")

    assert excinfo.value.__cause__ is error

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import aiohttp
import pytest

from pyviewport._cache import TimedCache
from pyviewport._transport import JsonTransport
from pyviewport.client import CoverageClient
from pyviewport.config import ViewportConfig
from pyviewport.exceptions import (
    InvalidArgumentError,
    RecordNotFoundError,
    ViewportApiError,
    ViewportError,
    ViewportTransportError,
)

# ------------------------------------------------------------------
# Transport
# ------------------------------------------------------------------


@dataclass
class _FakeResponse:
    status: int
    body: str

    async def text(self) -> str:
        return self.body

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None


@dataclass
class _FakeSession:
    response: _FakeResponse | None = None
    error: Exception | None = None
    urls: list[str] = field(default_factory=list)

    def get(self, url: str, **_kwargs: Any) -> _FakeResponse:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


def _transport(session: _FakeSession) -> JsonTransport:
    config = ViewportConfig(base_url="https://api.example.test/v1/")
    return JsonTransport(config, session)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_transport_decodes_json() -> None:
    session = _FakeSession(response=_FakeResponse(200, '{"data": {"address": "a"}}'))

    body = await _transport(session).get_json("/hotspots/a")

    assert body == {"data": {"address": "a"}}
    assert session.urls == ["https://api.example.test/v1/hotspots/a"]


@pytest.mark.asyncio
async def test_transport_maps_404_to_not_found() -> None:
    session = _FakeSession(response=_FakeResponse(404, "not found"))

    with pytest.raises(RecordNotFoundError):
        await _transport(session).get_json("/hotspots/missing")


@pytest.mark.asyncio
async def test_transport_maps_http_errors() -> None:
    session = _FakeSession(response=_FakeResponse(503, "unavailable"))

    with pytest.raises(ViewportTransportError) as excinfo:
        await _transport(session).get_json("/validators")

    assert excinfo.value.status_code == 503
    assert excinfo.value.endpoint == "/validators"


@pytest.mark.asyncio
async def test_transport_maps_network_errors() -> None:
    session = _FakeSession(error=aiohttp.ClientConnectionError("boom"))

    with pytest.raises(ViewportTransportError):
        await _transport(session).get_json("/validators")


@pytest.mark.asyncio
async def test_transport_rejects_invalid_json() -> None:
    session = _FakeSession(response=_FakeResponse(200, "<html>"))

    with pytest.raises(ViewportTransportError, match="Invalid JSON"):
        await _transport(session).get_json("/validators")


# ------------------------------------------------------------------
# Client
# ------------------------------------------------------------------


@dataclass
class FakeCoverageBackend:
    calls: dict[str, int] = field(default_factory=dict)
    validators: list[dict[str, Any]] = field(
        default_factory=lambda: [{"address": "v1", "status": {"online": "online"}, "stake": 10000}]
    )

    def _record_call(self, endpoint: str) -> None:
        self.calls[endpoint] = self.calls.get(endpoint, 0) + 1

    async def get_json(self, endpoint: str, _params: Any = None) -> Any:
        self._record_call(endpoint)
        if endpoint == "/hotspots/h1":
            return {"data": {"address": "h1", "name": "brave-red-fox", "lat": 10.0, "lng": 20.0}}
        if endpoint == "/hotspots/h1/witnesses":
            return {
                "data": [
                    {"address": "w1", "lat": 11.0, "lng": 21.0},
                    {"address": "w2", "lat": 9.0, "lng": 19.0},
                    {"name": "no-address"},
                ]
            }
        if endpoint == "/hotspots/bad":
            return {"items": []}
        if endpoint == "/validators":
            return {"data": self.validators}
        raise RecordNotFoundError(f"Not found: {endpoint}", endpoint=endpoint)


@pytest.fixture
def backend(monkeypatch: pytest.MonkeyPatch) -> FakeCoverageBackend:
    fake_backend = FakeCoverageBackend()

    async def fake_get_json(_self: Any, endpoint: str, params: Any = None) -> Any:
        return await fake_backend.get_json(endpoint, params)

    monkeypatch.setattr("pyviewport._transport.JsonTransport.get_json", fake_get_json)
    return fake_backend


@pytest.mark.asyncio
async def test_client_requires_context_manager() -> None:
    client = CoverageClient()

    with pytest.raises(ViewportError, match="not initialized"):
        await client.get_hotspot("h1")


@pytest.mark.asyncio
async def test_get_hotspot(backend: FakeCoverageBackend) -> None:
    async with CoverageClient() as client:
        hotspot = await client.get_hotspot("h1")

    assert hotspot.name == "brave-red-fox"
    assert backend.calls == {"/hotspots/h1": 1}


@pytest.mark.asyncio
async def test_get_hotspot_with_witnesses_skips_unparseable(backend: FakeCoverageBackend) -> None:
    async with CoverageClient() as client:
        hotspot = await client.get_hotspot_with_witnesses("h1")

    assert [w.address for w in hotspot.witnesses] == ["w1", "w2"]
    assert len(hotspot.witness_points()) == 2


@pytest.mark.asyncio
async def test_missing_envelope_is_api_error(backend: FakeCoverageBackend) -> None:
    async with CoverageClient() as client:
        with pytest.raises(ViewportApiError):
            await client.get_hotspot("bad")


@pytest.mark.asyncio
async def test_unknown_hotspot_is_not_found(backend: FakeCoverageBackend) -> None:
    async with CoverageClient() as client:
        with pytest.raises(RecordNotFoundError):
            await client.get_hotspot("nope")


@pytest.mark.asyncio
async def test_blank_address_is_rejected_before_any_request(backend: FakeCoverageBackend) -> None:
    async with CoverageClient() as client:
        with pytest.raises(InvalidArgumentError):
            await client.get_hotspot("   ")
        with pytest.raises(ViewportError):
            await client.get_hotspot_with_witnesses("\t")

    assert backend.calls == {}


@pytest.mark.asyncio
async def test_validators_are_cached(backend: FakeCoverageBackend) -> None:
    async with CoverageClient(ViewportConfig(validators_ttl=300)) as client:
        first = await client.get_validators()
        second = await client.get_validators()
        third = await client.get_validators(force_refresh=True)

    assert first == second == third
    assert first[0].is_online
    assert backend.calls["/validators"] == 2


@pytest.mark.asyncio
async def test_zero_ttl_disables_validator_cache(backend: FakeCoverageBackend) -> None:
    async with CoverageClient(ViewportConfig(validators_ttl=0)) as client:
        await client.get_validators()
        await client.get_validators()

    assert backend.calls["/validators"] == 2


# ------------------------------------------------------------------
# TimedCache
# ------------------------------------------------------------------


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_cache_expires_after_ttl() -> None:
    clock = _Clock()
    cache: TimedCache[list[int]] = TimedCache(10.0, clock=clock)
    cache.put([1, 2])

    clock.now = 9.9
    assert cache.get() == [1, 2]
    clock.now = 10.0
    assert cache.get() is None
    assert cache.age_seconds() == 10.0


def test_cache_returns_copies() -> None:
    cache: TimedCache[list[int]] = TimedCache(10.0, clock=_Clock())
    cache.put([1])

    value = cache.get()
    assert value is not None
    value.append(2)

    assert cache.get() == [1]


@pytest.mark.asyncio
async def test_concurrent_fetches_are_shared() -> None:
    cache: TimedCache[int] = TimedCache(60.0)
    calls = 0

    async def fetch() -> int:
        nonlocal calls
        calls += 1
        await asyncio.sleep(0.01)
        return 42

    results = await asyncio.gather(*(cache.get_or_fetch(fetch) for _ in range(5)))

    assert results == [42] * 5
    assert calls == 1


@pytest.mark.asyncio
async def test_fetch_error_keeps_previous_entry() -> None:
    clock = _Clock()
    cache: TimedCache[int] = TimedCache(10.0, clock=clock)
    cache.put(1)

    async def failing() -> int:
        raise ViewportTransportError("down", endpoint="/validators")

    with pytest.raises(ViewportTransportError):
        await cache.get_or_fetch(failing, force_refresh=True)

    assert cache.get() == 1

import pytest

from certifica.core.exceptions import DuplicateSubmissionError
from certifica.core.inflight import InFlightRegistry, inflight_registry


async def test_registry_rejects_held_key():
    registry = InFlightRegistry()

    async with registry.hold("a"):
        assert registry.is_held("a")
        with pytest.raises(DuplicateSubmissionError):
            registry.acquire("a")
        # Unrelated keys are independent
        async with registry.hold("b"):
            assert registry.is_held("b")

    assert not registry.is_held("a")


async def test_registry_releases_on_error():
    registry = InFlightRegistry()

    with pytest.raises(RuntimeError):
        async with registry.hold("a"):
            raise RuntimeError("boom")

    assert not registry.is_held("a")


async def test_duplicate_mutation_is_rejected(client, auth_headers):
    me = (await client.get("/api/v1/auth/me", headers=auth_headers)).json()
    inflight_registry.acquire(f"{me['id']}:POST:/api/v1/courses/")

    resp = await client.post("/api/v1/courses/", headers=auth_headers,
                             json={"name": "Duplicado", "duration": "8 horas"})

    assert resp.status_code == 409
    assert resp.json()["error_type"] == "DUPLICATE_SUBMISSION"
    courses = (await client.get("/api/v1/courses/", headers=auth_headers)).json()
    assert courses == []


async def test_unrelated_mutation_is_not_blocked(client, auth_headers):
    me = (await client.get("/api/v1/auth/me", headers=auth_headers)).json()
    inflight_registry.acquire(f"{me['id']}:PUT:/api/v1/settings/")

    resp = await client.post("/api/v1/courses/", headers=auth_headers,
                             json={"name": "Livre", "duration": "8 horas"})

    assert resp.status_code == 201


async def test_guard_is_released_after_request(client, auth_headers):
    for name in ("Um", "Dois"):
        resp = await client.post("/api/v1/courses/", headers=auth_headers,
                                 json={"name": name, "duration": "8 horas"})
        assert resp.status_code == 201

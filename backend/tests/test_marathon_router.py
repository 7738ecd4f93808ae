import pytest
from httpx import AsyncClient

BASE = "/api/tools/marathon"


@pytest.mark.asyncio
async def test_bucket_endpoints(client: AsyncClient, auth_headers):
    headers = auth_headers("alice")

    response = await client.get(f"{BASE}/bucket", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"userId": "alice", "movies": []}

    response = await client.post(f"{BASE}/bucket", json={"movieId": 603}, headers=headers)
    assert response.status_code == 200
    await client.post(f"{BASE}/bucket", json={"movieId": 27205}, headers=headers)

    response = await client.get(f"{BASE}/bucket/runtime", headers=headers)
    assert response.json() == {"totalMinutes": 284, "formatted": "4h 44m", "movieCount": 2}

    response = await client.delete(f"{BASE}/bucket/603", headers=headers)
    assert response.status_code == 200
    assert [m["id"] for m in response.json()["movies"]] == [27205]


@pytest.mark.asyncio
async def test_duplicate_add_is_bad_request(client: AsyncClient, auth_headers):
    headers = auth_headers("alice")
    await client.post(f"{BASE}/bucket", json={"movieId": 603}, headers=headers)

    response = await client.post(f"{BASE}/bucket", json={"movieId": 603}, headers=headers)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_provider_failure_is_server_error(client: AsyncClient, auth_headers):
    response = await client.post(f"{BASE}/bucket", json={"movieId": 1}, headers=auth_headers("alice"))

    assert response.status_code == 500


@pytest.mark.asyncio
async def test_remove_from_empty_bucket(client: AsyncClient, auth_headers):
    response = await client.delete(f"{BASE}/bucket/603", headers=auth_headers("alice"))

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_bucket_requires_token(client: AsyncClient):
    response = await client.get(f"{BASE}/bucket")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_remove_from_emptied_bucket_returns_empty_bucket(client: AsyncClient, auth_headers):
    headers = auth_headers("alice")
    await client.post(f"{BASE}/bucket", json={"movieId": 603}, headers=headers)
    await client.delete(f"{BASE}/bucket/603", headers=headers)

    response = await client.delete(f"{BASE}/bucket/603", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"userId": "alice", "movies": []}

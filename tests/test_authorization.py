import pytest

SERVICE = {"title": "AI Strategy", "description": "Roadmaps", "content": "<p>Long form</p>"}

# (method, path, body) of admin-only endpoints
ADMIN_ENDPOINTS = [
    ("post", "/api/services", SERVICE),
    ("post", "/api/solutions", SERVICE),
    ("post", "/api/resources", {"type": "blog", **SERVICE}),
    ("put", "/api/company-info/about", {"content": "About us"}),
    ("get", "/api/messages", None),
    ("get", "/api/analytics", None),
    ("get", "/api/users", None),
]


def _call(client, method, path, body):
    if body is None:
        return getattr(client, method)(path)
    return getattr(client, method)(path, json=body)


@pytest.mark.parametrize("method,path,body", ADMIN_ENDPOINTS)
def test_admin_endpoint_without_session(client, method, path, body):
    resp = _call(client, method, path, body)
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Unauthorized"


@pytest.mark.parametrize("method,path,body", ADMIN_ENDPOINTS)
def test_admin_endpoint_as_regular_user(user_client, method, path, body):
    resp = _call(user_client, method, path, body)
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Forbidden - Admin access required"


@pytest.mark.parametrize("method,path,body", ADMIN_ENDPOINTS)
def test_admin_endpoint_as_admin(admin_client, method, path, body):
    resp = _call(admin_client, method, path, body)
    assert resp.status_code in (200, 201)


def test_unauthenticated_checked_before_validation(client):
    # An invalid body still yields 401 for an anonymous caller
    assert client.post("/api/services", json={}).status_code == 401


@pytest.mark.parametrize("path", ["/api/services", "/api/solutions", "/api/resources", "/api/resources/featured", "/api/company-info/contact"])
def test_public_reads_need_no_session(client, path):
    assert client.get(path).status_code == 200

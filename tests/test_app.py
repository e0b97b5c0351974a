"""App wiring — root catalogue, health, error handlers, shared store."""

from threading import Thread

from fastapi.testclient import TestClient

from app.core.store import DataStore
from app.main import create_app


def test_root_lists_endpoints(client):
    res = client.get("/")
    assert res.status_code == 200
    data = res.json()
    assert data["success"] is True
    assert data["version"] == "1.0.0"
    assert data["endpoints"]["auth"]["login"] == "POST /login"


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_unknown_route_returns_json_404(client):
    res = client.get("/nope")
    assert res.status_code == 404
    assert res.json() == {"detail": "Route not found", "path": "/nope"}


def test_non_integer_event_id_is_rejected(client):
    res = client.get("/events/abc")
    assert res.status_code == 422


def test_unhandled_error_returns_500(store):
    app = create_app(store)

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    with TestClient(app, raise_server_exceptions=False) as c:
        res = c.get("/boom")

    assert res.status_code == 500
    assert res.json()["detail"] == "Internal Server Error"
    # ENV=test: no internals leaked
    assert "error" not in res.json()


def test_apps_do_not_share_stores():
    first = create_app()
    second = create_app()
    first.state.store.add_user({"email": "a@x.com"})
    assert second.state.store.get_all_users() == []


def test_concurrent_user_ids_are_unique():
    store = DataStore()

    def worker(n):
        for i in range(50):
            store.add_user({"email": f"{n}-{i}@x.com"})

    threads = [Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [u.id for u in store.get_all_users()]
    assert sorted(ids) == list(range(1, 401))

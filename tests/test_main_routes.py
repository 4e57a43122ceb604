import pytest

import vahub.main as main_mod
import vahub.routers.auth as auth_mod
from vahub.config import PLACEHOLDER_SECRET_KEY


class _ConnOK:
    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def execute(self, _query):
        return 1


class _EngineOK:
    def connect(self):
        return _ConnOK()


class _EngineFail:
    def connect(self):
        raise RuntimeError("db down")


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "/api/jobs" in resp.json()["message"]


def test_health_live(client):
    resp = client.get("/health/live")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_health_ready_ok(monkeypatch, client):
    monkeypatch.setattr(main_mod, "engine", _EngineOK())
    resp = client.get("/health/ready")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ready"


def test_health_ready_not_ready(monkeypatch, client):
    monkeypatch.setattr(main_mod, "engine", _EngineFail())
    resp = client.get("/health/ready")
    assert resp.status_code == 503
    assert resp.json()["status"] == "not_ready"


def test_validation_errors_are_400_with_field(client):
    resp = client.post("/api/auth/login", json={"email": "user@example.com"})
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("password")


def test_auth_rate_limit(monkeypatch, client):
    monkeypatch.setattr(main_mod.settings, "rate_limit_auth_per_min", 2)
    monkeypatch.setattr(auth_mod, "get_by_email", lambda db, email: None)
    body = {"email": "user@example.com", "password": "password123"}
    codes = [client.post("/api/auth/login", json=body).status_code for _ in range(3)]
    assert codes == [401, 401, 429]
    resp = client.post("/api/auth/login", json=body)
    assert "Retry-After" in resp.headers


def test_reads_are_not_rate_limited(monkeypatch, client):
    monkeypatch.setattr(main_mod.settings, "rate_limit_write_per_min", 1)
    monkeypatch.setattr("vahub.routers.jobs.list_approved_jobs", lambda db: [])
    codes = {client.get("/api/jobs").status_code for _ in range(3)}
    assert codes == {200}


def test_check_settings_production_rejects_placeholders(monkeypatch):
    monkeypatch.setattr(main_mod.settings, "app_env", "production")
    monkeypatch.setattr(main_mod.settings, "secret_key", PLACEHOLDER_SECRET_KEY)
    with pytest.raises(RuntimeError):
        main_mod.check_settings()

    monkeypatch.setattr(main_mod.settings, "secret_key", "x" * 40)
    monkeypatch.setattr(main_mod.settings, "database_url", "postgresql://username:password@db/vahub")
    with pytest.raises(RuntimeError):
        main_mod.check_settings()


def test_check_settings_development_only_warns(monkeypatch):
    monkeypatch.setattr(main_mod.settings, "app_env", "development")
    monkeypatch.setattr(main_mod.settings, "secret_key", PLACEHOLDER_SECRET_KEY)
    main_mod.check_settings()


def test_run_bootstrap_closes_session(monkeypatch):
    closed = []
    db = type("DB", (), {"close": lambda self: closed.append(True)})()
    monkeypatch.setattr(main_mod, "SessionLocal", lambda: db)
    monkeypatch.setattr(main_mod, "seed_all", lambda session, settings: {"plans": 0})
    assert main_mod.run_bootstrap() == {"plans": 0}
    assert closed == [True]

import pytest

import vahub.scripts.create_admin as create_admin
import vahub.scripts.ensure_tables as ensure_tables
import vahub.scripts.seed as seed
from vahub.core.errors import DuplicateEmail


def _db():
    return type("DB", (), {"close": lambda self: None})()


def test_ensure_tables_reports_created(monkeypatch, capsys):
    monkeypatch.setattr(ensure_tables, "ensure_tables_exist", lambda: ["jobs", "users"])
    ensure_tables.main()
    assert "jobs, users" in capsys.readouterr().out


def test_ensure_tables_nothing_to_do(monkeypatch, capsys):
    monkeypatch.setattr(ensure_tables, "ensure_tables_exist", lambda: [])
    ensure_tables.main()
    assert "nothing to create" in capsys.readouterr().out


def test_seed_prints_summary(monkeypatch, capsys):
    monkeypatch.setattr(seed, "ensure_tables_exist", lambda: [])
    monkeypatch.setattr(seed, "SessionLocal", _db)
    monkeypatch.setattr(seed, "seed_all", lambda db, settings: {"plans": 2, "admin": True})
    seed.main()
    out = capsys.readouterr().out
    assert "plans: 2" in out
    assert "admin: True" in out


def test_create_admin_usage(monkeypatch):
    monkeypatch.setattr(create_admin.sys, "argv", ["prog", "a@b.com"])
    with pytest.raises(SystemExit):
        create_admin.main()


def test_create_admin_short_password(monkeypatch):
    monkeypatch.setattr(create_admin.sys, "argv", ["prog", "a@b.com", "Ops", "short"])
    with pytest.raises(SystemExit):
        create_admin.main()


def test_create_admin_duplicate(monkeypatch):
    def _dup(*args, **kwargs):
        raise DuplicateEmail("a@b.com")

    monkeypatch.setattr(create_admin, "ensure_tables_exist", lambda: [])
    monkeypatch.setattr(create_admin, "SessionLocal", _db)
    monkeypatch.setattr(create_admin, "create", _dup)
    monkeypatch.setattr(create_admin.sys, "argv", ["prog", "a@b.com", "Ops", "password123"])
    with pytest.raises(SystemExit):
        create_admin.main()


def test_create_admin_success(monkeypatch, capsys):
    seen = {}

    def _create(db, name, email, password, role, **kwargs):
        seen.update(name=name, role=role, status=kwargs.get("status"))
        return type("U", (), {"id": "u1", "email": email})()

    monkeypatch.setattr(create_admin, "ensure_tables_exist", lambda: [])
    monkeypatch.setattr(create_admin, "SessionLocal", _db)
    monkeypatch.setattr(create_admin, "create", _create)
    monkeypatch.setattr(create_admin.sys, "argv", ["prog", "ops@b.com", "Ops", "password123"])
    create_admin.main()
    assert seen == {"name": "Ops", "role": "ADMIN", "status": "ACTIVE"}
    assert "ops@b.com" in capsys.readouterr().out

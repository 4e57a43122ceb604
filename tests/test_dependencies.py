import pytest
from fastapi import HTTPException

import vahub.dependencies as deps
from vahub.models.enums import UserRole


class _Creds:
    def __init__(self, token: str):
        self.credentials = token


class _User:
    def __init__(self, user_id="u1", role="JOB_SEEKER", status="ACTIVE"):
        self.id = user_id
        self.role = role
        self.status = status


def test_get_current_user_missing_credentials():
    with pytest.raises(HTTPException) as ex:
        deps.get_current_user(db=object(), credentials=None)
    assert ex.value.status_code == 401


def test_get_current_user_invalid_token(monkeypatch):
    monkeypatch.setattr(deps, "decode_access_token", lambda token: None)
    with pytest.raises(HTTPException) as ex:
        deps.get_current_user(db=object(), credentials=_Creds("bad"))
    assert ex.value.status_code == 401


def test_get_current_user_user_not_found(monkeypatch):
    monkeypatch.setattr(deps, "decode_access_token", lambda token: "u1")
    monkeypatch.setattr(deps, "get_by_id", lambda db, uid: None)
    with pytest.raises(HTTPException) as ex:
        deps.get_current_user(db=object(), credentials=_Creds("tok"))
    assert ex.value.status_code == 401


def test_get_current_user_success(monkeypatch):
    user = _User(user_id="u1")
    monkeypatch.setattr(deps, "decode_access_token", lambda token: "u1")
    monkeypatch.setattr(deps, "get_by_id", lambda db, uid: user)
    assert deps.get_current_user(db=object(), credentials=_Creds("tok")) is user


@pytest.mark.parametrize("status", ["SUSPENDED", "BANNED"])
def test_get_current_active_user_blocks_disabled(status):
    with pytest.raises(HTTPException) as ex:
        deps.get_current_active_user(user=_User(status=status))
    assert ex.value.status_code == 403


def test_get_current_active_user_allows_pending():
    user = _User(status="PENDING")
    assert deps.get_current_active_user(user=user) is user


def test_require_role():
    dep = deps.require_role(UserRole.EMPLOYER)
    employer = _User(role="EMPLOYER")
    assert dep(user=employer) is employer
    with pytest.raises(HTTPException) as ex:
        dep(user=_User(role="JOB_SEEKER"))
    assert ex.value.status_code == 403


def test_get_current_admin_requires_active_admin():
    with pytest.raises(HTTPException):
        deps.get_current_admin(user=_User(role="EMPLOYER"))
    with pytest.raises(HTTPException):
        deps.get_current_admin(user=_User(role="MODERATOR"))
    with pytest.raises(HTTPException):
        deps.get_current_admin(user=_User(role="ADMIN", status="PENDING"))
    admin = _User(role="ADMIN")
    assert deps.get_current_admin(user=admin) is admin

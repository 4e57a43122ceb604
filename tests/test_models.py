import pytest

from vahub.models.enums import UserRole, UserStatus
from vahub.models.user import User


def test_role_is_write_once():
    user = User(id="u1", name="N", email="n@example.com", password_hash="x", role=UserRole.EMPLOYER)
    assert user.role == "EMPLOYER"
    user.role = "EMPLOYER"  # same value is a no-op
    with pytest.raises(ValueError):
        user.role = UserRole.ADMIN


def test_unknown_role_and_status_rejected():
    with pytest.raises(ValueError):
        User(id="u1", name="N", email="n@example.com", password_hash="x", role="OWNER")
    user = User(id="u2", name="N", email="m@example.com", password_hash="x", role="JOB_SEEKER")
    with pytest.raises(ValueError):
        user.status = "DELETED"
    user.status = UserStatus.BANNED
    assert user.status == "BANNED"


def test_role_cannot_change_after_persisting(db, make_user):
    user = make_user(UserRole.JOB_SEEKER)
    db.expire_all()
    loaded = db.get(User, user.id)
    with pytest.raises(ValueError):
        loaded.role = UserRole.ADMIN
    db.rollback()
    assert db.get(User, user.id).role == "JOB_SEEKER"

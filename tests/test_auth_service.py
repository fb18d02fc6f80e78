# tests/test_auth_service.py
"""Service-level tests for the user directory and account deletion."""

import pytest
from sqlalchemy.exc import OperationalError

from meetback.core.errors import Conflict, InternalError
from meetback.models import Follow, Rating, User
from meetback.services import auth_service


def test_register_returns_no_restricted_fields(db_session) -> None:
    user = auth_service.register_user(
        db_session,
        email="fresh@test.com",
        password="long-enough",
        handle="Fresh",
        display_name="Fresh",
    )
    dumped = user.model_dump(by_alias=True)
    for field in ("passwordHash", "emailVerificationToken", "accountStatus", "trustScore"):
        assert field not in dumped
    assert dumped["handle"] == "fresh"


def test_register_twice_never_duplicates(db_session) -> None:
    kwargs = dict(email="dup@test.com", password="long-enough", handle="dup", display_name="Dup")
    auth_service.register_user(db_session, **kwargs)
    with pytest.raises(Conflict) as excinfo:
        auth_service.register_user(db_session, **{**kwargs, "handle": "dup2"})
    assert excinfo.value.code == "ALREADY_USER"
    assert db_session.query(User).filter(User.email == "dup@test.com").count() == 1


def test_delete_account_rolls_back_on_failure(
    db_session, test_user, other_user, monkeypatch
) -> None:
    db_session.add(Follow(follower_id=test_user.id, following_id=other_user.id))
    db_session.add(Rating(from_user_id=other_user.id, to_user_id=test_user.id, ratings={"kindness": 4}))
    db_session.commit()
    user_id = test_user.id

    original_execute = db_session.execute
    calls = {"n": 0}

    def flaky_execute(statement, *args, **kwargs):
        calls["n"] += 1
        if calls["n"] == 3:
            raise OperationalError("DELETE FROM user_account", {}, Exception("locked"))
        return original_execute(statement, *args, **kwargs)

    monkeypatch.setattr(db_session, "execute", flaky_execute)
    with pytest.raises(InternalError) as excinfo:
        auth_service.delete_account(db_session, test_user)
    monkeypatch.setattr(db_session, "execute", original_execute)

    assert excinfo.value.code == "DELETE_USER_ERROR"
    db_session.expire_all()
    assert db_session.get(User, user_id) is not None
    assert db_session.query(Follow).count() == 1
    assert db_session.query(Rating).one().visibility is True

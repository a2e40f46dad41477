from datetime import timedelta

from mintodo.db.models.base import utcnow
from mintodo.db.repositories.refresh_tokens import RefreshTokenRepository
from mintodo.db.repositories.users import UserRepository


def test_user_timestamps_are_stored_as_naive_utc(session):
    user = UserRepository(session).create(username="alice", hashed_password="x")
    assert user.id is not None
    assert user.created_at.tzinfo is None
    assert user.updated_at.tzinfo is None


def test_refresh_token_expiry_roundtrip_and_revocation(session):
    user = UserRepository(session).create(username="alice", hashed_password="x")
    repo = RefreshTokenRepository(session)
    expires_at = utcnow() + timedelta(days=1)
    repo.create(jti="j1", user_id=user.id, expires_at=expires_at)

    session.expire_all()
    rec = repo.get_by_jti("j1")
    assert rec.expires_at.tzinfo is None
    assert rec.expires_at > utcnow()
    assert [t.jti for t in repo.list_active_for_user(user.id)] == ["j1"]

    repo.revoke("j1")
    assert repo.get_by_jti("j1").revoked_at is not None
    assert repo.list_active_for_user(user.id) == []


def test_expired_refresh_token_is_not_active(session):
    user = UserRepository(session).create(username="alice", hashed_password="x")
    repo = RefreshTokenRepository(session)
    repo.create(jti="old", user_id=user.id, expires_at=utcnow() - timedelta(minutes=1))
    assert repo.list_active_for_user(user.id) == []

from typing import Optional, Sequence
from sqlmodel import select

from mintodo.db.models.base import utcnow
from mintodo.db.repositories.base import BaseRepository
from mintodo.db.models.refresh_tokens import RefreshToken

class RefreshTokenRepository(BaseRepository[RefreshToken]):
    model = RefreshToken

    def get_by_jti(self, jti: str) -> Optional[RefreshToken]:
        return self.session.exec(
            select(self.model).where(self.model.jti == jti)
        ).first()

    def list_active_for_user(self, user_id: int) -> Sequence[RefreshToken]:
        now = utcnow()
        return self.session.exec(
            select(self.model)
            .where(self.model.user_id == user_id)
            .where(self.model.revoked_at.is_(None))
            .where(self.model.expires_at > now)
            .order_by(self.model.expires_at.desc())
        ).all()

    def revoke(self, jti: str, *, commit: bool = True) -> None:
        token = self.get_by_jti(jti)
        if not token or token.revoked_at:
            return
        self.update(token, commit=commit, revoked_at=utcnow())

    def revoke_all_for_user(self, user_id: int, *, commit: bool = True) -> int:
        tokens = self.list_active_for_user(user_id)
        now = utcnow()
        for token in tokens:
            token.revoked_at = now
            self.session.add(token)
        if commit:
            self.session.commit()
        return len(tokens)

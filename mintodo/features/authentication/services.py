import logging
from datetime import datetime
from typing import Callable, NoReturn, Optional

from fastapi import HTTPException, status
from jose import JWTError

from mintodo.db.models.base import utcnow
from mintodo.db.models.users import User
from mintodo.db.repositories.users import UserRepository
from mintodo.db.repositories.refresh_tokens import RefreshTokenRepository
from mintodo.security.password import verify_password, hash_password, new_security_stamp
from mintodo.security.tokens import (
    JWTSettings,
    DecodedToken,
    create_access_token,
    create_refresh_token,
    decode_token,
    new_jti,
)
from mintodo.features.authentication.schemas import (
    SignUpIn,
    SignInIn,
    TokenPairOut,
    RefreshIn,
    LogoutIn,
    ChangePasswordIn,
)

logger = logging.getLogger(__name__)


def _unauthorized(detail: str) -> NoReturn:
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


class AuthService:
    """
    Service d'authentification : orchestre les repositories + tokens.
    Ne contient pas d'accès SQL direct et lève des HTTPException propres.
    """

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        refresh_repo: RefreshTokenRepository,
        jwt_settings: JWTSettings,
        now_fn: Callable[[], datetime] = utcnow,
    ):
        self.user_repo = user_repo
        self.refresh_repo = refresh_repo
        self.jwt = jwt_settings
        self.now_fn = now_fn

    # ---------- Sign up ----------
    def sign_up(self, payload: SignUpIn) -> User:
        if self.user_repo.get_by_username(payload.username):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Username already exists",
            )
        user = self.user_repo.create(
            username=payload.username,
            hashed_password=hash_password(payload.password),
        )
        logger.info("User %s registered (id=%s)", user.username, user.id)
        return user

    # ---------- Sign in ----------
    def sign_in(self, payload: SignInIn, *, ip: Optional[str] = None, user_agent: Optional[str] = None) -> TokenPairOut:
        user = self.user_repo.get_by_username(payload.username)
        if not user or not verify_password(payload.password, user.hashed_password):
            # Ne pas révéler si l'utilisateur existe
            logger.warning("Failed sign-in for %r from %s", payload.username, ip or "?")
            _unauthorized("Invalid credentials")
        return self._issue_pair(user, ip=ip, user_agent=user_agent)

    # ---------- Refresh (rotation) ----------
    def refresh(self, payload: RefreshIn, *, ip: Optional[str] = None, user_agent: Optional[str] = None) -> TokenPairOut:
        decoded = self._decode(payload.refresh_token, expected_typ="refresh")

        jti = decoded.get("jti")
        if not jti:
            _unauthorized("Invalid token")

        # Vérifier en base (existe, non révoqué, non expiré)
        rec = self.refresh_repo.get_by_jti(jti)
        if not rec or rec.revoked_at is not None or rec.expires_at <= self.now_fn():
            logger.warning("Rejected refresh token %s", jti)
            _unauthorized("Refresh token invalid")

        user = self._user_for(decoded)

        # Rotation : révoquer l'ancien et émettre un nouveau couple dans la même transaction
        self.refresh_repo.revoke(jti, commit=False)
        return self._issue_pair(user, ip=ip, user_agent=user_agent)

    # ---------- Logout ----------
    def log_out(self, payload: LogoutIn) -> None:
        try:
            decoded = decode_token(payload.refresh_token, self.jwt)
        except JWTError:
            # Logout idempotent : silencieux si token illisible
            return

        if decoded.get("typ") != "refresh" or not decoded.get("jti"):
            return

        self.refresh_repo.revoke(decoded["jti"])

    # ---------- Current user depuis access token ----------
    def get_current_user(self, *, access_token: str) -> User:
        decoded = self._decode(access_token, expected_typ="access")
        return self._user_for(decoded)

    # ---------- Changement de mot de passe ----------
    def change_password(self, *, user: User, payload: ChangePasswordIn) -> None:
        if not verify_password(payload.old_password, user.hashed_password):
            _unauthorized("Invalid credentials")

        # Nouveau stamp : tous les tokens émis jusqu'ici deviennent invalides
        self.refresh_repo.revoke_all_for_user(user.id, commit=False)
        self.user_repo.update(
            user,
            hashed_password=hash_password(payload.new_password),
            security_stamp=new_security_stamp(),
            updated_at=self.now_fn(),
        )
        logger.info("Password changed for user %s", user.id)

    # ---------- Helpers ----------
    def _issue_pair(self, user: User, *, ip: Optional[str], user_agent: Optional[str]) -> TokenPairOut:
        access = create_access_token(
            user_id=user.id, username=user.username, stamp=user.security_stamp, settings=self.jwt,
        )
        jti = new_jti()
        refresh = create_refresh_token(
            user_id=user.id, username=user.username, jti=jti, stamp=user.security_stamp, settings=self.jwt,
        )

        # Persist refresh (révocable)
        self.refresh_repo.create(
            jti=jti,
            user_id=user.id,
            expires_at=self.now_fn() + self.jwt.refresh_ttl,
            user_agent=user_agent,
            ip=ip,
        )

        return TokenPairOut(
            access_token=access,
            refresh_token=refresh,
            token_type="bearer",
            expires_in=int(self.jwt.access_ttl.total_seconds()),
        )

    def _decode(self, token: str, *, expected_typ: str) -> DecodedToken:
        try:
            decoded = decode_token(token, self.jwt)
        except JWTError:
            logger.warning("Rejected %s token: bad signature or expired", expected_typ)
            _unauthorized("Invalid token")

        if decoded.get("typ") != expected_typ:
            _unauthorized("Invalid token type")
        return decoded

    def _user_for(self, decoded: DecodedToken) -> User:
        try:
            user_id = int(decoded["sub"])
        except (KeyError, ValueError):
            _unauthorized("Invalid token")

        user = self.user_repo.get(user_id)
        if not user or user.security_stamp != decoded.get("stamp"):
            logger.warning("Rejected token for user %s: unknown user or stale security stamp", user_id)
            _unauthorized("Invalid token")
        return user

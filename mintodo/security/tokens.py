import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TypedDict

from jose import jwt

# ==========================================================
# 🔧 Configuration : paramètres de génération/validation JWT
# ==========================================================

@dataclass(frozen=True)
class JWTSettings:
    """
    Configuration des tokens JWT.

    - `secret` : clé secrète pour signer/valider les tokens
    - `issuer` : émetteur (vérifié au décodage)
    - `algorithm` : algo de signature (HS256 recommandé)
    - `access_ttl` : durée de vie d’un access token
    - `refresh_ttl` : durée de vie d’un refresh token
    """
    secret: str
    issuer: str = "mintodo"
    algorithm: str = "HS256"
    access_ttl: timedelta = timedelta(minutes=60)
    refresh_ttl: timedelta = timedelta(days=14)


# ==========================================================
# 🧱 Types
# ==========================================================

class DecodedToken(TypedDict, total=False):
    iss: str
    sub: str            # identifiant utilisateur
    username: str
    typ: str            # "access" | "refresh"
    jti: str
    stamp: str          # security stamp de l'utilisateur au moment de l'émission
    iat: int
    exp: int


# ==========================================================
# 🧩 Fonctions utilitaires
# ==========================================================

def _now() -> datetime:
    """Renvoie l'heure UTC actuelle."""
    return datetime.now(timezone.utc)

def new_jti() -> str:
    """Crée un identifiant unique pour un token."""
    return str(uuid.uuid4())


def _encode(*, user_id: int, username: str, typ: str, jti: str, stamp: str,
            ttl: timedelta, settings: JWTSettings) -> str:
    now = _now()
    payload: DecodedToken = {
        "iss": settings.issuer,
        "sub": str(user_id),
        "username": username,
        "typ": typ,
        "jti": jti,
        "stamp": stamp,
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


# ==========================================================
# 🎟️ Génération des tokens
# ==========================================================

def create_access_token(*, user_id: int, username: str, stamp: str, settings: JWTSettings) -> str:
    """
    Crée un access token JWT court (par défaut 60 min).
    """
    return _encode(
        user_id=user_id,
        username=username,
        typ="access",
        jti=new_jti(),
        stamp=stamp,
        ttl=settings.access_ttl,
        settings=settings,
    )


def create_refresh_token(*, user_id: int, username: str, jti: str, stamp: str, settings: JWTSettings) -> str:
    """
    Crée un refresh token JWT long (par défaut 14 jours).
    Le JTI est fourni pour être stocké côté serveur.
    """
    return _encode(
        user_id=user_id,
        username=username,
        typ="refresh",
        jti=jti,
        stamp=stamp,
        ttl=settings.refresh_ttl,
        settings=settings,
    )


# ==========================================================
# 🔍 Décodage / Validation
# ==========================================================

def decode_token(token: str, settings: JWTSettings) -> DecodedToken:
    """
    Décode et valide un token JWT (signature, émetteur + expiration).
    Lève JWTError en cas de signature invalide ou expirée.
    """
    decoded = jwt.decode(
        token,
        settings.secret,
        algorithms=[settings.algorithm],
        issuer=settings.issuer,
        options={"verify_aud": False},
    )
    return decoded  # type: ignore[return-value]

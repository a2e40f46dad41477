"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_todo_service() : crée un TodoService à partir de la session DB de la requête.

get_current_user() : le "gate" d'autorisation des routes protégées (401 sinon).

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).
"""

from typing import Optional
from dataclasses import dataclass

from fastapi import Depends, Header, HTTPException, status, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from mintodo.db.session import get_session
from mintodo.db.models.users import User

from mintodo.db.repositories.todos import TodoRepository
from mintodo.features.todos.services import TodoService

from mintodo.db.repositories.users import UserRepository
from mintodo.db.repositories.refresh_tokens import RefreshTokenRepository
from mintodo.features.authentication.services import AuthService

from mintodo.core.config import jwt_settings


# -----------------------------
# Todos
# -----------------------------
def get_todo_service(session: Session = Depends(get_session)) -> TodoService:
    return TodoService(TodoRepository(session))


# -----------------------------
# Auth
# -----------------------------
def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(
        user_repo=UserRepository(session),
        refresh_repo=RefreshTokenRepository(session),
        jwt_settings=jwt_settings,
    )


# -----------------------------
# Authentication data
# -----------------------------
# auto_error=False : on renvoie nous-mêmes un 401 (HTTPBearer renverrait un 403)
bearer_scheme = HTTPBearer(auto_error=False)

def get_access_token_from_bearer(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> str:
    if not credentials or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials


def get_current_user(
    access_token: str = Depends(get_access_token_from_bearer),
    svc: AuthService = Depends(get_auth_service),
) -> User:
    return svc.get_current_user(access_token=access_token)


@dataclass
class ClientContext:
    ip: Optional[str]
    user_agent: Optional[str]

def get_client_ip_and_ua(
    x_forwarded_for: Optional[str] = Header(default=None, alias="X-Forwarded-For"),
    x_real_ip: Optional[str] = Header(default=None, alias="X-Real-IP"),
    user_agent: Optional[str] = Header(default=None, alias="User-Agent"),
) -> ClientContext:
    """
    Récupère l'IP depuis X-Forwarded-For > X-Real-IP (si derrière un proxy),
    et le User-Agent (utile pour audit des refresh tokens).
    """
    ip = None
    if x_forwarded_for:
        ip = x_forwarded_for.split(",")[0].strip()
    elif x_real_ip:
        ip = x_real_ip
    return ClientContext(ip=ip, user_agent=user_agent)

from fastapi import APIRouter, Depends, status

from mintodo.api.v1.dependencies import (
    get_auth_service,
    get_client_ip_and_ua,
    get_current_user,
)
from mintodo.db.models.users import User
from mintodo.features.authentication.services import AuthService
from mintodo.features.authentication.schemas import (
    SignUpIn,
    SignInIn,
    TokenPairOut,
    RefreshIn,
    LogoutIn,
    ChangePasswordIn,
)
from mintodo.features.users.schemas import UserOut

router = APIRouter(
    prefix="/identity",
    tags=["identity"],
)

UNAUTHORIZED = {401: {"description": "Token absent, invalide ou expiré"}}

# -----------------------------
# Register
# -----------------------------
@router.post(
    "/register",
    summary="Créer un compte",
    status_code=status.HTTP_201_CREATED,
    response_model=UserOut,
    responses={409: {"description": "Nom d'utilisateur déjà pris"}},
)
def register(payload: SignUpIn, svc: AuthService = Depends(get_auth_service)):
    return svc.sign_up(payload)

# -----------------------------
# Login
# -----------------------------
@router.post(
    "/login",
    summary="Se connecter",
    description="Retourne un couple access/refresh. L'access token se présente en `Authorization: Bearer`.",
    response_model=TokenPairOut,
    responses={401: {"description": "Identifiants invalides"}},
)
def login(
    payload: SignInIn,
    svc: AuthService = Depends(get_auth_service),
    client_ctx=Depends(get_client_ip_and_ua),
):
    return svc.sign_in(payload, ip=client_ctx.ip, user_agent=client_ctx.user_agent)

# -----------------------------
# Refresh (rotation)
# -----------------------------
@router.post(
    "/refresh",
    summary="Renouveler les tokens (rotation)",
    description="L'ancien refresh token est révoqué et ne peut plus être réutilisé.",
    response_model=TokenPairOut,
    responses=UNAUTHORIZED,
)
def refresh(
    payload: RefreshIn,
    svc: AuthService = Depends(get_auth_service),
    client_ctx=Depends(get_client_ip_and_ua),
):
    return svc.refresh(payload, ip=client_ctx.ip, user_agent=client_ctx.user_agent)

# -----------------------------
# Logout
# -----------------------------
@router.post(
    "/logout",
    summary="Se déconnecter (révocation du refresh)",
    status_code=status.HTTP_204_NO_CONTENT,
)
def logout(payload: LogoutIn, svc: AuthService = Depends(get_auth_service)):
    svc.log_out(payload)
    return None

# -----------------------------
# Manage : profil courant
# -----------------------------
@router.get(
    "/manage/info",
    summary="Récupérer l'utilisateur courant",
    response_model=UserOut,
    responses=UNAUTHORIZED,
)
def info(user: User = Depends(get_current_user)):
    return user

# -----------------------------
# Manage : changer le mot de passe
# -----------------------------
@router.post(
    "/manage/password",
    summary="Changer le mot de passe",
    description="Révoque tous les tokens existants de l'utilisateur.",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=UNAUTHORIZED,
)
def change_password(
    payload: ChangePasswordIn,
    user: User = Depends(get_current_user),
    svc: AuthService = Depends(get_auth_service),
):
    svc.change_password(user=user, payload=payload)
    return None

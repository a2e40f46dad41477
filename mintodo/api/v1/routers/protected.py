from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from mintodo.api.v1.dependencies import get_current_user
from mintodo.db.models.users import User

router = APIRouter(tags=["identity"])

@router.get(
    "/requires-auth",
    summary="Route protégée de démonstration",
    response_class=PlainTextResponse,
    responses={401: {"description": "Token absent ou invalide"}},
)
def requires_auth(user: User = Depends(get_current_user)):
    return f"Hello, {user.username}!"

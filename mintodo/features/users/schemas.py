"""
➡️ But : Format de sortie d'un utilisateur.

N'expose jamais le hash du mot de passe ni le security stamp.
"""

from pydantic import BaseModel

class UserOut(BaseModel):
    id: int
    username: str

    model_config = {"from_attributes": True}

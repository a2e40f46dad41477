"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

TodoIn → corps de requête POST et PUT (description absente = "")

TodoOut → réponse de l’API
"""

from pydantic import BaseModel, Field

class TodoIn(BaseModel):
    description: str = Field("", examples=["Acheter du lait"])

class TodoOut(BaseModel):
    id: int
    description: str

    model_config = {"from_attributes": True}

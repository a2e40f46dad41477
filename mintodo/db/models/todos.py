"""
➡️ But : Définir la table Todo.

id attribué par la base à la création, jamais modifié ensuite.
description jamais nulle : chaîne vide par défaut.
"""

from typing import Optional
from sqlmodel import SQLModel, Field

class Todo(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    description: str = Field(default="", nullable=False)

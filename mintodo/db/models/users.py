"""
➡️ But : Définir la structure des tables de la base (ORM).

Représente les comptes gérés par le sous-système d'identité.

Le security_stamp change à chaque modification des identifiants : les tokens
émis avec l'ancien stamp ne sont plus acceptés.
"""

from sqlmodel import Field

from mintodo.security.password import new_security_stamp
from .base import BaseModelDB

class User(BaseModelDB, table=True):
    username: str = Field(index=True, unique=True)
    hashed_password: str
    security_stamp: str = Field(default_factory=new_security_stamp)

"""
➡️ But : Définir la structure des tables de la base (ORM).

Contient les classes héritant de SQLModel (ou Base de SQLAlchemy).

Représente les objets persistés. Ici on représente les propriétés communes des tables d'identité.

Chaque champ = une colonne SQL (avec type, index, clé primaire...).

🔹 Avantages :

Tu manipules des objets Python, pas du SQL brut.

Facile à migrer vers PostgreSQL ou MySQL plus tard.
"""

from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime
from pydantic import NaiveDatetime
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    # SQLite ne conserve pas le fuseau : on stocke de l'UTC naïf partout
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: NaiveDatetime = Field(default_factory=utcnow, sa_type=DateTime)
    updated_at: NaiveDatetime = Field(default_factory=utcnow, sa_type=DateTime)

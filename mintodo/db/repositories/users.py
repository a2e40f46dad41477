"""
➡️ But : Encapsuler toutes les opérations de base de données.

UserRepository : CRUD sur la table User + recherche par nom d'utilisateur.

Ne contient aucune logique métier, juste de la persistance.
"""

from __future__ import annotations

from typing import Optional
from sqlmodel import select

from mintodo.db.repositories.base import BaseRepository
from mintodo.db.models.users import User

class UserRepository(BaseRepository[User]):
    """
    Repository pour la table User.
    Hérite du CRUD générique de BaseRepository.
    """
    model = User

    def get_by_username(self, username: str) -> Optional[User]:
        """Retourne un utilisateur par son nom d'utilisateur."""
        return self.session.exec(
            select(self.model).where(self.model.username == username)
        ).first()

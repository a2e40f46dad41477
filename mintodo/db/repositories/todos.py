"""
➡️ But : Encapsuler toutes les opérations de base de données.

TodoRepository : CRUD (create, read, update, delete) sur la table Todo.

Ne contient aucune logique métier, juste de la persistance.
Chaque écriture est commitée avant de rendre la main.
"""

from mintodo.db.repositories.base import BaseRepository
from mintodo.db.models.todos import Todo

class TodoRepository(BaseRepository[Todo]):
    model = Todo

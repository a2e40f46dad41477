"""
➡️ But : Contenir la logique métier des todos : orchestrer le repository et traduire les absences.

TodoService ne lève pas d'HTTPException : il renvoie des résultats typés
(Ok / Created / NoContent / NotFound) que la couche API sérialise.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
from typing import Sequence

from mintodo.db.models.todos import Todo
from mintodo.db.repositories.todos import TodoRepository
from mintodo.features.todos.results import Created, NoContent, NotFound, Ok, Result

logger = logging.getLogger(__name__)

# nom de la route de détail, utilisé pour construire l'en-tête Location
DETAIL_ROUTE = "TodoDetails"


class TodoService:
    def __init__(self, repo: TodoRepository):
        self.repo = repo

    def list(self) -> Ok[Sequence[Todo]]:
        return Ok(self.repo.list())

    def get(self, todo_id: int) -> Result:
        todo = self.repo.get(todo_id)
        if todo is None:
            return NotFound()
        return Ok(todo)

    def create(self, description: str) -> Created[Todo]:
        todo = self.repo.create(description=description)
        logger.info("Todo %s created", todo.id)
        return Created(todo, route_name=DETAIL_ROUTE, path_params={"todo_id": todo.id})

    def update(self, todo_id: int, *, description: str) -> Result:
        todo = self.repo.get(todo_id)
        if todo is None:
            return NotFound()
        todo = self.repo.update(todo, description=description)
        logger.info("Todo %s updated", todo_id)
        return Ok(todo)

    def delete(self, todo_id: int) -> Result:
        todo = self.repo.get(todo_id)
        if todo is None:
            return NotFound()
        self.repo.delete(todo)
        logger.info("Todo %s deleted", todo_id)
        return NoContent()

"""
➡️ But : Définir les endpoints de l’API Todo.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, DELETE)

Appelle le TodoService

Convertit le résultat typé en réponse (mintodo.api.v1.responses.to_response)

Les routes ne demandent aucune authentification ; les tags Public/Private sont documentaires.
L'id est contraint par le convertisseur {todo_id:int} : /todos/abc ne matche aucune route (404).
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status
from mintodo.api.v1.dependencies import get_todo_service
from mintodo.api.v1.responses import to_response
from mintodo.features.todos.schemas import TodoIn, TodoOut
from mintodo.features.todos.services import TodoService, DETAIL_ROUTE

router = APIRouter(
    prefix="/todos",
    tags=["Todo"],
)

NOT_FOUND = {404: {"description": "Todo introuvable (corps vide)"}}

@router.get(
    "",
    name="TodoList",
    summary="Lister les todos",
    description="Retourne toutes les tâches, sans pagination.",
    response_model=List[TodoOut],
)
def list_todos(request: Request, svc: TodoService = Depends(get_todo_service)):
    return to_response(svc.list(), request, schema=TodoOut)

@router.post(
    "",
    name="TodoCreate",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoOut,
)
def create_todo(payload: TodoIn, request: Request, svc: TodoService = Depends(get_todo_service)):
    return to_response(svc.create(payload.description), request, schema=TodoOut)

@router.get(
    "/{todo_id:int}",
    name=DETAIL_ROUTE,
    summary="Récupérer un todo",
    response_model=TodoOut,
    responses=NOT_FOUND,
    tags=["Private"],
)
def get_todo(todo_id: int, request: Request, svc: TodoService = Depends(get_todo_service)):
    return to_response(svc.get(todo_id), request, schema=TodoOut)

@router.put(
    "/{todo_id:int}",
    name="TodoUpdate",
    summary="Mettre à jour un todo",
    response_model=TodoOut,
    responses=NOT_FOUND,
    tags=["Private"],
)
def update_todo(todo_id: int, payload: TodoIn, request: Request, svc: TodoService = Depends(get_todo_service)):
    return to_response(svc.update(todo_id, description=payload.description), request, schema=TodoOut)

@router.delete(
    "/{todo_id:int}",
    name="TodoDelete",
    summary="Supprimer un todo",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
    tags=["Public"],
)
def delete_todo(todo_id: int, request: Request, svc: TodoService = Depends(get_todo_service)):
    return to_response(svc.delete(todo_id), request, schema=TodoOut)

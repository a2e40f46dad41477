"""
➡️ But : Sérialiser les résultats typés des services en réponses HTTP.

Seul endroit où Ok / Created / NoContent / NotFound deviennent des codes HTTP.
"""

from typing import Any, Type

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from mintodo.features.todos.results import Created, NoContent, NotFound, Ok, Result


def _dump(value: Any, schema: Type[BaseModel]) -> Any:
    if isinstance(value, (list, tuple)):
        return [schema.model_validate(v).model_dump(mode="json") for v in value]
    return schema.model_validate(value).model_dump(mode="json")


def to_response(result: Result, request: Request, *, schema: Type[BaseModel]) -> Response:
    if isinstance(result, Ok):
        return JSONResponse(_dump(result.value, schema))
    if isinstance(result, Created):
        # chemin relatif résolu depuis la table de routage, ex: /todos/1
        location = request.app.url_path_for(result.route_name, **result.path_params)
        return JSONResponse(
            _dump(result.entity, schema),
            status_code=status.HTTP_201_CREATED,
            headers={"Location": str(location)},
        )
    if isinstance(result, NoContent):
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    if isinstance(result, NotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    raise TypeError(f"Unsupported result: {result!r}")

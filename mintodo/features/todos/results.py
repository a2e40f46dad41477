"""
➡️ But : Résultats typés renvoyés par les services.

Un service ne construit jamais de réponse HTTP : il renvoie une de ces variantes,
et la couche API les convertit toutes au même endroit (mintodo.api.v1.responses).

Ok(value)            → 200 + corps
Created(entity, ...) → 201 + Location vers la route nommée
NoContent()          → 204 sans corps
NotFound()           → 404 sans corps
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Created(Generic[T]):
    entity: T
    # route nommée + paramètres de chemin : l'URL est résolue par la table de routage
    route_name: str
    path_params: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class NoContent:
    pass


@dataclass(frozen=True)
class NotFound:
    pass


Result = Union[Ok, Created, NoContent, NotFound]

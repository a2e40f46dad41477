"""
➡️ But : Configurer la base et gérer les sessions de base de données.

engine : connexion à la base (sqlite:///mintodo.db par défaut, ou DATABASE_URL).

init_db() : supprime puis recrée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Réutilisable par injection (Depends(get_session)).
"""

import logging
from typing import Dict, Any, Iterator
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine

# Import all models for creating all tables
from mintodo.db.models.users import User  # noqa: F401
from mintodo.db.models.refresh_tokens import RefreshToken  # noqa: F401
from mintodo.db.models.todos import Todo  # noqa: F401

from mintodo.core.config import settings

logger = logging.getLogger(__name__)

def _build_engine() -> Engine:
    url = settings.DATABASE_URL

    is_sqlite = url.startswith("sqlite:")

    connect_args: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False

    engine = create_engine(
        url,
        echo=bool(settings.SQL_ECHO),
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
    )
    return engine

engine: Engine = _build_engine()

def init_db(*, reset: bool = True) -> None:
    """
    Crée les tables. Avec reset=True, supprime d'abord tout le schéma.
    ⚠️ Destructif : toutes les données sont perdues à chaque appel.
    """
    if reset:
        logger.warning("Dropping all tables on %s", engine.url.render_as_string(hide_password=True))
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)


def get_session() -> Iterator[Session]:
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session

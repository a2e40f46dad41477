"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

les logs (LOG_LEVEL)

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

schéma OpenAPI personnalisé

Inclut les routers (/todos, /identity, /requires-auth).

Réinitialise la base au démarrage (lifespan) : ⚠️ destructif.

Point unique d’exécution : uvicorn mintodo.main:app --reload.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mintodo.core.config import settings
from mintodo.core.openapi import custom_openapi
from mintodo.db.session import init_db

from mintodo.api.v1.routers import todos, authentication, protected

import uvicorn

logger = logging.getLogger("mintodo")


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_db(reset=settings.RESET_DB_ON_STARTUP)
    logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    openapi_tags=[
        {"name": "Todo", "description": "CRUD des tâches (sans authentification)"},
        {"name": "Public", "description": "Routes marquées publiques (documentaire)"},
        {"name": "Private", "description": "Routes marquées privées (documentaire, aucune restriction)"},
        {"name": "identity", "description": "Inscription, connexion et tokens Bearer"},
    ],
    lifespan=lifespan,
)

# CORS (ajustez selon vos besoins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

# Routers
app.include_router(todos.router)
app.include_router(authentication.router)
app.include_router(protected.router)

# Génération du schéma OpenAPI custom
app.openapi = lambda: custom_openapi(app)

if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8080)  # http://localhost:8080

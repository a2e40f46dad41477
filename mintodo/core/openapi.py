"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée,

documenter le schéma d'authentification Bearer et le reset de la base.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API minimale de todos (FastAPI + SQLModel).\n\n"
            "### Conventions\n"
            "- Les routes `/todos` ne demandent pas d'authentification.\n"
            "- `/requires-auth` et `/identity/manage/*` attendent `Authorization: Bearer <access_token>` "
            "(obtenu via `/identity/login`).\n"
            "- ⚠️ La base est supprimée puis recréée à chaque démarrage (`RESET_DB_ON_STARTUP`).\n"
        ),
        tags=app.openapi_tags,
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

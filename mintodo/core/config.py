"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, URL DB, secrets JWT, logs).

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from mintodo.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from datetime import timedelta
from typing import Optional

from pydantic_settings import BaseSettings
from mintodo.security.tokens import JWTSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "MinTodo"
    ENV: str = "dev"  # dev | prod | test
    LOG_LEVEL: str = "INFO"

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "mintodo.db"  # fichier SQLite
    # Si tu veux forcer une URL différente (ex: Postgres), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None
    # ⚠️ destructif : le schéma est supprimé puis recréé à chaque démarrage
    RESET_DB_ON_STARTUP: bool = True
    SQL_ECHO: Optional[bool] = None  # auto selon ENV si None

    # -----------------------------
    # JWT / Auth
    # -----------------------------
    JWT_SECRET_KEY: str = "CHANGE_ME"     # ⚠️ change en prod
    JWT_ISSUER: str = "mintodo"
    JWT_ALGORITHM: str = "HS256"

    ACCESS_TTL_MINUTES: int = 60
    REFRESH_TTL_DAYS: int = 14

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context):  # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")

        # echo SQL seulement en dev si non spécifié
        if self.SQL_ECHO is None:
            object.__setattr__(self, "SQL_ECHO", self.ENV == "dev")


# Instance globale importable partout
settings = Settings()

# Objet JWT prêt à l'emploi pour les services
jwt_settings = JWTSettings(
    secret=settings.JWT_SECRET_KEY,
    issuer=settings.JWT_ISSUER,
    algorithm=settings.JWT_ALGORITHM,
    access_ttl=timedelta(minutes=settings.ACCESS_TTL_MINUTES),
    refresh_ttl=timedelta(days=settings.REFRESH_TTL_DAYS),
)
